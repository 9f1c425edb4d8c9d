"""
Raw message records as received from the Webim server.

These models mirror the JSON objects found in delta updates and in history
responses. Every field is optional: which fields are present depends on the
message kind, and validating them is the job of `MessageMapper`.

Using Pydantic for runtime validation of the wire shape only.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class MessageKind(str, Enum):
    """Message kind discriminator as sent over the wire."""

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

    # Control records, never shown to the visitor
    CONTACT_INFORMATION = "contacts"
    FOR_OPERATOR = "for_operator"

    @classmethod
    def parse(cls, value: str | None) -> MessageKind | None:
        """Return the member for a raw wire value, or None if unknown."""
        if value is None:
            return None
        try:
            return cls(value)
        except ValueError:
            return None

    @property
    def is_file(self) -> bool:
        return self in (MessageKind.FILE_FROM_OPERATOR, MessageKind.FILE_FROM_VISITOR)


class QuotedMessageItem(BaseModel):
    """The message a quote points to."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    author_id: Optional[str] = Field(default=None, alias="authorId")
    id: Optional[str] = None
    kind: Optional[str] = None
    sender_name: Optional[str] = Field(default=None, alias="name")
    text: Optional[str] = None
    timestamp: Optional[int] = Field(default=None, alias="ts")

    def get_kind(self) -> MessageKind | None:
        return MessageKind.parse(self.kind)


class QuoteItem(BaseModel):
    """Quote reference embedded in a message item."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    state: Optional[str] = None
    message: Optional[QuotedMessageItem] = None

    def get_message_kind(self) -> MessageKind | None:
        return self.message.get_kind() if self.message else None

    def get_text(self) -> str | None:
        return self.message.text if self.message else None


class MessageItem(BaseModel):
    """Raw message record (observed in delta and history payloads)."""

    model_config = ConfigDict(
        extra="allow", populate_by_name=True
    )  # Allow extra fields backend might add later

    kind: Optional[str] = None
    client_side_id: Optional[str] = Field(default=None, alias="clientSideId")
    id: Optional[str] = None
    sender_id: Optional[str] = Field(default=None, alias="authorId")
    sender_name: Optional[str] = Field(default=None, alias="name")
    sender_avatar_url_string: Optional[str] = Field(default=None, alias="avatar")
    text: Optional[str] = None
    data: Optional[dict[str, Any]] = None
    quote: Optional[QuoteItem] = None
    timestamp: Optional[float] = Field(default=None, alias="ts")
    timestamp_in_microsecond: Optional[int] = Field(default=None, alias="ts_m")
    read: Optional[bool] = None
    can_be_edited: Optional[bool] = Field(default=None, alias="canBeEdited")
    can_be_replied: Optional[bool] = Field(default=None, alias="canBeReplied")

    def get_time_in_microsecond(self) -> int | None:
        """
        Message time in microseconds.

        Prefers the exact `ts_m` field; falls back to the `ts` seconds value.
        """
        if self.timestamp_in_microsecond is not None:
            return self.timestamp_in_microsecond
        if self.timestamp is not None:
            return int(self.timestamp * 1_000_000)
        return None
