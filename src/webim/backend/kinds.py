"""Wire kind to public message type mapping."""

from __future__ import annotations

import logging

from webim.backend.items import MessageKind
from webim.types import MessageType

logger = logging.getLogger(__name__)

# Internal-only kinds, dropped before type conversion
CONTROL_KINDS = frozenset({MessageKind.CONTACT_INFORMATION, MessageKind.FOR_OPERATOR})

_KIND_TO_TYPE: dict[MessageKind, MessageType] = {
    MessageKind.ACTION_REQUEST: MessageType.ACTION_REQUEST,
    MessageKind.CONTACT_INFORMATION_REQUEST: MessageType.CONTACT_INFORMATION_REQUEST,
    MessageKind.FILE_FROM_OPERATOR: MessageType.FILE_FROM_OPERATOR,
    MessageKind.FILE_FROM_VISITOR: MessageType.FILE_FROM_VISITOR,
    MessageKind.INFO: MessageType.INFO,
    MessageKind.KEYBOARD: MessageType.KEYBOARD,
    MessageKind.KEYBOARD_RESPONSE: MessageType.KEYBOARD_RESPONSE,
    MessageKind.OPERATOR_MESSAGE: MessageType.OPERATOR_MESSAGE,
    MessageKind.OPERATOR_BUSY: MessageType.OPERATOR_BUSY,
    MessageKind.VISITOR_MESSAGE: MessageType.VISITOR_MESSAGE,
}


def get_message_type(raw_kind: str) -> MessageType | None:
    """Look up the public type for a raw kind, None if unknown or hidden."""
    kind = MessageKind.parse(raw_kind)
    return _KIND_TO_TYPE.get(kind) if kind is not None else None


def convert_message_kind(raw_kind: str) -> MessageType | None:
    """
    Map a raw wire kind to the public message type.

    Logs a warning with the raw value when the kind is unknown or not
    visible to application code.
    """
    message_type = get_message_type(raw_kind)
    if message_type is None:
        logger.warning(f"Invalid message type received: {raw_kind}")
    return message_type
