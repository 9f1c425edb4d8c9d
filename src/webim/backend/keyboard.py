"""
Keyboard parsing for `keyboard` and `keyboard_response` messages.

Both are carried in the message `data` blob. Parsing is best-effort: a
malformed blob yields None and never invalidates the message.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from webim.types import (
    Keyboard,
    KeyboardButton,
    KeyboardRequest,
    KeyboardResponse,
    KeyboardState,
)

logger = logging.getLogger(__name__)


class KeyboardButtonItem(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str
    text: str

    def to_button(self) -> KeyboardButton:
        return KeyboardButton(id=self.id, text=self.text)


class KeyboardResponseItem(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    button_id: str = Field(alias="buttonId")
    message_id: str = Field(alias="messageId")


class KeyboardItem(BaseModel):
    """`data` of a keyboard message."""

    model_config = ConfigDict(extra="allow")

    state: KeyboardState
    buttons: list[list[KeyboardButtonItem]] = Field(default_factory=list)
    response: Optional[KeyboardResponseItem] = None


class KeyboardRequestMessageItem(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    message_id: str = Field(alias="messageId")


class KeyboardRequestItem(BaseModel):
    """`data` of a keyboard_response message."""

    model_config = ConfigDict(extra="allow")

    button: KeyboardButtonItem
    request: KeyboardRequestMessageItem


def get_keyboard(data: dict[str, Any]) -> Keyboard | None:
    """Parse a Keyboard from a message data blob, or None if malformed."""
    try:
        item = KeyboardItem.model_validate(data)
    except ValidationError as e:
        logger.warning(f"Failed to parse keyboard: {e.error_count()} errors in {data}")
        return None

    response = None
    if item.response is not None:
        response = KeyboardResponse(
            button_id=item.response.button_id,
            message_id=item.response.message_id,
        )

    return Keyboard(
        state=item.state,
        buttons=[[button.to_button() for button in row] for row in item.buttons],
        response=response,
    )


def get_keyboard_request(data: dict[str, Any]) -> KeyboardRequest | None:
    """Parse a KeyboardRequest from a message data blob, or None if malformed."""
    try:
        item = KeyboardRequestItem.model_validate(data)
    except ValidationError as e:
        logger.warning(
            f"Failed to parse keyboard request: {e.error_count()} errors in {data}"
        )
        return None

    return KeyboardRequest(
        button=item.button.to_button(),
        message_id=item.request.message_id,
    )
