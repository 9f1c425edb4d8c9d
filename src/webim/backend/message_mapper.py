"""
Message mapper - converts raw message items into public messages.

This is the single place where:
- Control records (contacts, for_operator) are filtered out
- Wire kinds are mapped to public message types
- File message bodies are resolved into attachments
- Keyboards and quotes are attached
- Required fields are enforced

Conversion never raises. A record that cannot become a Message is rejected:
the caller gets None and a warning is logged naming the failed check.
Batch mapping drops rejected records and keeps the order of the rest.
"""

from __future__ import annotations

import copy
import logging
import weakref
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable

from webim.backend.file_info import ATTACHMENT_URL_EXPIRES_PERIOD, get_attachment
from webim.backend.items import MessageItem, MessageKind
from webim.backend.keyboard import get_keyboard, get_keyboard_request
from webim.backend.kinds import CONTROL_KINDS, convert_message_kind
from webim.backend.protocols import SessionContext
from webim.backend.quote import get_quote
from webim.types import (
    AttachmentState,
    FileInfo,
    Keyboard,
    KeyboardRequest,
    Message,
    MessageAttachment,
    MessageData,
)

logger = logging.getLogger(__name__)


class RejectionReason(str, Enum):
    MISSING_FIELD = "missing_field"
    UNSUPPORTED_KIND = "unsupported_kind"
    CONTROL_RECORD = "control_record"
    ATTACHMENT_RESOLUTION_FAILURE = "attachment_resolution_failure"


@dataclass(frozen=True)
class Rejection:
    """Why a message item did not become a Message."""

    reason: RejectionReason
    field: str | None = None
    detail: str = ""
    index: int | None = None
    internal_id: str | None = None


@dataclass
class MappingResult:
    """
    Outcome of a batch conversion.

    `messages` holds only the converted items, in input order. Fewer
    messages than inputs is expected: see `rejections` for the rest.
    """

    messages: list[Message] = field(default_factory=list)
    rejections: list[Rejection] = field(default_factory=list)


@dataclass
class MapperConfig:
    """Configuration for MessageMapper."""

    attachment_url_expires_seconds: int = ATTACHMENT_URL_EXPIRES_PERIOD


class MessageMapper:
    """
    Converts message items of one chat source into public messages.

    A mapper is bound to either the current chat (`history_message=False`)
    or to history (`history_message=True`); the flag is copied into every
    message it produces.

    The session client is held by weak reference: the mapper never keeps
    it alive, and a collected client simply means file messages can't be
    resolved.

    Example:
        mapper = MessageMapper.for_history("https://demo.webim.ru")
        mapper.set_client(client)
        messages = mapper.map_all(items)
    """

    def __init__(
        self,
        server_url_string: str,
        history_message: bool = False,
        config: MapperConfig | None = None,
    ):
        self.server_url_string = server_url_string
        self.history_message = history_message
        self.config = config or MapperConfig()
        self._client_ref: weakref.ref[SessionContext] | None = None

    @classmethod
    def for_current_chat(
        cls, server_url_string: str, config: MapperConfig | None = None
    ) -> MessageMapper:
        return cls(server_url_string, history_message=False, config=config)

    @classmethod
    def for_history(
        cls, server_url_string: str, config: MapperConfig | None = None
    ) -> MessageMapper:
        return cls(server_url_string, history_message=True, config=config)

    @property
    def client(self) -> SessionContext | None:
        """The session client, or None if unset or already collected."""
        return self._client_ref() if self._client_ref is not None else None

    def set_client(self, client: SessionContext) -> None:
        self._client_ref = weakref.ref(client)

    # --- Mapping ---

    def map(self, message_item: MessageItem) -> Message | None:
        return self.convert(message_item, self.history_message)

    def map_all(self, message_items: Iterable[MessageItem]) -> list[Message]:
        """Convert items in order, dropping the ones that are rejected."""
        return self.map_all_with_rejections(message_items).messages

    def map_all_with_rejections(
        self, message_items: Iterable[MessageItem]
    ) -> MappingResult:
        result = MappingResult()
        for index, item in enumerate(message_items):
            converted = self._convert(item, self.history_message)
            if isinstance(converted, Rejection):
                result.rejections.append(
                    Rejection(
                        reason=converted.reason,
                        field=converted.field,
                        detail=converted.detail,
                        index=index,
                        internal_id=item.id,
                    )
                )
            else:
                result.messages.append(converted)

        if result.rejections:
            logger.debug(
                f"Mapped {len(result.messages)} messages, "
                f"rejected {len(result.rejections)}"
            )
        return result

    def convert(
        self, message_item: MessageItem, history_message: bool
    ) -> Message | None:
        """
        Convert one message item.

        Returns:
            Message, or None if the item was rejected
        """
        converted = self._convert(message_item, history_message)
        return None if isinstance(converted, Rejection) else converted

    # --- Pipeline ---

    def _convert(
        self, message_item: MessageItem, history_message: bool
    ) -> Message | Rejection:
        raw_kind = message_item.kind
        if raw_kind is None:
            return _missing("kind", "Message item has no kind")

        kind = MessageKind.parse(raw_kind)
        if kind in CONTROL_KINDS:
            return Rejection(RejectionReason.CONTROL_RECORD, detail=raw_kind)

        message_type = convert_message_kind(raw_kind)
        if kind is None or message_type is None:
            return Rejection(RejectionReason.UNSUPPORTED_KIND, detail=raw_kind)

        message_item_text = message_item.text
        if message_item_text is None:
            return _missing("text", "Message item has no text")

        client = self.client
        data: MessageData | None = None
        raw_text: str | None = None
        if kind.is_file:
            attachment = self._get_attachment(message_item_text, client)
            if attachment is None:
                return _attachment_failure(client, message_item)

            text = attachment.file_name
            raw_text = message_item_text
            data = MessageData(
                attachment=MessageAttachment(
                    file_info=attachment, state=AttachmentState.READY
                )
            )
        else:
            text = message_item_text

        keyboard: Keyboard | None = None
        keyboard_request: KeyboardRequest | None = None
        if kind == MessageKind.KEYBOARD and message_item.data is not None:
            keyboard = get_keyboard(message_item.data)
        if kind == MessageKind.KEYBOARD_RESPONSE and message_item.data is not None:
            keyboard_request = get_keyboard_request(message_item.data)

        # A quoted file needs its own attachment. Without quoted text the
        # quote is unrepresentable and the whole message goes; a failed
        # lookup only leaves the quote without attachment.
        quote_item = message_item.quote
        quote_attachment: FileInfo | None = None
        quote_kind = quote_item.get_message_kind() if quote_item else None
        if quote_kind is not None and quote_kind.is_file and client is not None:
            quote_text = quote_item.get_text()
            if quote_text is None:
                return _missing("quote.text", "Quote of a file message has no text")
            quote_attachment = self._get_attachment(quote_text, client)

        client_side_id = message_item.client_side_id
        if client_side_id is None:
            return _missing("client_side_id", "Message item has no client side ID")
        sender_name = message_item.sender_name
        if sender_name is None:
            return _missing("sender_name", "Message item has no sender name")
        time_in_microsecond = message_item.get_time_in_microsecond()
        if time_in_microsecond is None:
            return _missing("timestamp", "Message item has no time in microsecond")

        return Message(
            server_url_string=self.server_url_string,
            id=client_side_id,
            keyboard=keyboard,
            keyboard_request=keyboard_request,
            operator_id=message_item.sender_id,
            quote=get_quote(quote_item, quote_attachment),
            sender_avatar_url_string=message_item.sender_avatar_url_string,
            sender_name=sender_name,
            type=message_type,
            raw_data=copy.deepcopy(message_item.data),
            data=data,
            text=text,
            time_in_microsecond=time_in_microsecond,
            history_message=history_message,
            internal_id=message_item.id,
            raw_text=raw_text,
            read=message_item.read if message_item.read is not None else True,
            can_be_edited=message_item.can_be_edited,
            can_be_replied=message_item.can_be_replied,
        )

    def _get_attachment(
        self, text: str, client: SessionContext | None
    ) -> FileInfo | None:
        if client is None:
            return None
        return get_attachment(
            self.server_url_string,
            text,
            client,
            expires_in=self.config.attachment_url_expires_seconds,
        )


def _missing(field_name: str, message: str) -> Rejection:
    logger.warning(f"{message}, skipping ({field_name})")
    return Rejection(RejectionReason.MISSING_FIELD, field=field_name, detail=message)


def _attachment_failure(
    client: SessionContext | None, message_item: MessageItem
) -> Rejection:
    if client is None:
        detail = "No client to resolve file message"
    else:
        detail = "Could not resolve file message attachment"
    logger.warning(f"{detail}, skipping (id={message_item.id})")
    return Rejection(
        RejectionReason.ATTACHMENT_RESOLUTION_FAILURE, field="text", detail=detail
    )
