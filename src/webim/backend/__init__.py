"""
Backend mapping layer: raw server records in, public messages out.

The main entry point is `MessageMapper`, which converts raw `MessageItem`
records into `Message` values. `SendingFactory` builds the visitor's own
messages before they are sent.

Example:
    from webim.backend import MessageItem, MessageMapper

    mapper = MessageMapper.for_current_chat("https://demo.webim.ru")
    mapper.set_client(client)
    messages = mapper.map_all(
        [MessageItem.model_validate(raw) for raw in delta["messages"]]
    )
"""

from .file_info import FileParameters, get_attachment
from .items import MessageItem, MessageKind, QuotedMessageItem, QuoteItem
from .keyboard import get_keyboard, get_keyboard_request
from .kinds import convert_message_kind
from .message_mapper import (
    MapperConfig,
    MappingResult,
    MessageMapper,
    Rejection,
    RejectionReason,
)
from .protocols import AuthorizationData, SessionContext
from .quote import get_quote
from .sending_factory import SendingFactory

__all__ = [
    "MessageMapper",
    "MapperConfig",
    "MappingResult",
    "Rejection",
    "RejectionReason",
    "SendingFactory",
    "MessageItem",
    "MessageKind",
    "QuoteItem",
    "QuotedMessageItem",
    "AuthorizationData",
    "SessionContext",
    "FileParameters",
    "get_attachment",
    "get_keyboard",
    "get_keyboard_request",
    "get_quote",
    "convert_message_kind",
]
