"""
Webim client SDK - message model and mapping layer.

Backend Layer:
    MessageMapper: Raw server records -> Message (current chat or history)
    SendingFactory: Visitor input -> MessageToSend
    MessageItem: Raw message record as received from the server

Public Types:
    Message, MessageToSend, MessageType, Quote, FileInfo, Keyboard, ...

Configuration:
    load_client_config: Account settings from webim_config.yaml

Example:
    from webim import MessageItem, MessageMapper
    from webim.config import load_client_config

    config = load_client_config("demo")
    mapper = MessageMapper.for_history(config.server_url_string)
    mapper.set_client(client)
    messages = mapper.map_all([MessageItem.model_validate(m) for m in raw])
"""

from .backend import (
    AuthorizationData,
    MapperConfig,
    MappingResult,
    MessageItem,
    MessageKind,
    MessageMapper,
    QuoteItem,
    Rejection,
    RejectionReason,
    SendingFactory,
    SessionContext,
)
from .types import (
    AttachmentState,
    FileInfo,
    ImageInfo,
    Keyboard,
    KeyboardButton,
    KeyboardRequest,
    KeyboardResponse,
    KeyboardState,
    Message,
    MessageAttachment,
    MessageData,
    MessageToSend,
    MessageType,
    Quote,
    QuoteState,
    SendStatus,
)

__all__ = [
    # Backend
    "MessageMapper",
    "MapperConfig",
    "MappingResult",
    "Rejection",
    "RejectionReason",
    "SendingFactory",
    "MessageItem",
    "MessageKind",
    "QuoteItem",
    "AuthorizationData",
    "SessionContext",
    # Types
    "Message",
    "MessageToSend",
    "MessageType",
    "SendStatus",
    "Quote",
    "QuoteState",
    "FileInfo",
    "ImageInfo",
    "MessageAttachment",
    "MessageData",
    "AttachmentState",
    "Keyboard",
    "KeyboardButton",
    "KeyboardRequest",
    "KeyboardResponse",
    "KeyboardState",
]

__version__ = "0.0.1"
