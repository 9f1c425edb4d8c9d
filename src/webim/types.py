"""
Public message types for the Webim client SDK.

Every message the SDK hands to application code is a `Message`. Messages
received from the server are produced by `MessageMapper`; messages typed by
the visitor but not yet acknowledged are `MessageToSend` values produced by
`SendingFactory`.

All values are frozen: they are built once and never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class MessageType(str, Enum):
    """Message types visible to application code."""

    ACTION_REQUEST = "action_request"
    CONTACT_INFORMATION_REQUEST = "contacts_request"
    FILE_FROM_OPERATOR = "file_operator"
    FILE_FROM_VISITOR = "file_visitor"
    INFO = "info"
    KEYBOARD = "keyboard"
    KEYBOARD_RESPONSE = "keyboard_response"
    OPERATOR_MESSAGE = "operator"
    OPERATOR_BUSY = "operator_busy"
    VISITOR_MESSAGE = "visitor"


class SendStatus(str, Enum):
    SENDING = "sending"
    SENT = "sent"


class AttachmentState(str, Enum):
    ERROR = "error"
    READY = "ready"
    UPLOAD = "upload"


class QuoteState(str, Enum):
    """
    Quote resolution state.

    PENDING: the server has not resolved the quoted message yet.
    FILLED: the quoted message was found and its fields are populated.
    NOT_FOUND: the quoted message is unknown to the server.
    """

    PENDING = "pending"
    FILLED = "filled"
    NOT_FOUND = "not-found"


class KeyboardState(str, Enum):
    PENDING = "pending"
    CANCELED = "canceled"
    COMPLETED = "completed"


@dataclass(frozen=True)
class ImageInfo:
    """Image-specific part of a file attachment."""

    thumb_url: str | None
    width: int | None
    height: int | None


@dataclass(frozen=True)
class FileInfo:
    """File attachment descriptor resolved against a server URL."""

    file_name: str
    guid: str
    content_type: str | None = None
    size: int | None = None
    url: str | None = None
    image_info: ImageInfo | None = None


@dataclass(frozen=True)
class MessageAttachment:
    file_info: FileInfo
    state: AttachmentState = AttachmentState.READY


@dataclass(frozen=True)
class MessageData:
    attachment: MessageAttachment | None = None


@dataclass(frozen=True)
class Quote:
    """
    Reference from a message to an earlier message it replies to.

    `message_attachment` is set only when the quoted message was a file.
    `timestamp` is passed through from the server record unchanged; quotes
    built locally by SendingFactory carry the replied message's time in
    microseconds.
    """

    state: QuoteState
    author_id: str | None = None
    message_attachment: FileInfo | None = None
    message_id: str | None = None
    message_type: MessageType | None = None
    sender_name: str | None = None
    text: str | None = None
    timestamp: int | None = None


@dataclass(frozen=True)
class KeyboardButton:
    id: str
    text: str


@dataclass(frozen=True)
class KeyboardResponse:
    """Which button of a keyboard the visitor pressed."""

    button_id: str
    message_id: str


@dataclass(frozen=True)
class Keyboard:
    """Interactive keyboard attached to a `keyboard` message."""

    state: KeyboardState
    buttons: list[list[KeyboardButton]] = field(default_factory=list)
    response: KeyboardResponse | None = None


@dataclass(frozen=True)
class KeyboardRequest:
    """Acknowledgement carried by a `keyboard_response` message."""

    button: KeyboardButton
    message_id: str


@dataclass(frozen=True)
class Message:
    """
    Canonical chat message.

    `text` is what should be displayed: for file messages it is the file
    name, and the original body is kept in `raw_text`.
    """

    server_url_string: str
    id: str
    sender_name: str
    type: MessageType
    text: str
    time_in_microsecond: int
    keyboard: Keyboard | None = None
    keyboard_request: KeyboardRequest | None = None
    operator_id: str | None = None
    quote: Quote | None = None
    sender_avatar_url_string: str | None = None
    raw_data: dict[str, Any] | None = None
    data: MessageData | None = None
    history_message: bool = False
    internal_id: str | None = None
    raw_text: str | None = None
    read: bool = True
    can_be_edited: bool | None = None
    can_be_replied: bool | None = None
    send_status: SendStatus = SendStatus.SENT

    @property
    def sender_avatar_full_url(self) -> str | None:
        """Absolute avatar URL, or None if the sender has no avatar."""
        if self.sender_avatar_url_string is None:
            return None
        return self.server_url_string + self.sender_avatar_url_string

    @property
    def time(self) -> datetime:
        return datetime.fromtimestamp(
            self.time_in_microsecond / 1_000_000, tz=timezone.utc
        )

    @property
    def attachment(self) -> MessageAttachment | None:
        return self.data.attachment if self.data else None

    @property
    def is_file(self) -> bool:
        return self.type in (MessageType.FILE_FROM_OPERATOR, MessageType.FILE_FROM_VISITOR)


@dataclass(frozen=True)
class MessageToSend(Message):
    """Visitor message that has not been acknowledged by the server yet."""

    send_status: SendStatus = SendStatus.SENDING
