"""Tests for keyboard and keyboard request parsing."""

import logging

from webim.backend.keyboard import get_keyboard, get_keyboard_request
from webim.types import KeyboardButton, KeyboardState


class TestGetKeyboard:
    def test_parses_buttons_by_row(self):
        keyboard = get_keyboard(
            {
                "state": "completed",
                "buttons": [
                    [{"id": "1", "text": "One"}],
                    [{"id": "2", "text": "Two"}, {"id": "3", "text": "Three"}],
                ],
                "response": {"buttonId": "2", "messageId": "kb-1"},
            }
        )

        assert keyboard.state == KeyboardState.COMPLETED
        assert keyboard.buttons == [
            [KeyboardButton(id="1", text="One")],
            [KeyboardButton(id="2", text="Two"), KeyboardButton(id="3", text="Three")],
        ]
        assert keyboard.response.button_id == "2"
        assert keyboard.response.message_id == "kb-1"

    def test_buttons_default_to_empty(self):
        keyboard = get_keyboard({"state": "canceled"})

        assert keyboard.state == KeyboardState.CANCELED
        assert keyboard.buttons == []
        assert keyboard.response is None

    def test_unknown_state_returns_none(self, caplog):
        with caplog.at_level(logging.WARNING):
            assert get_keyboard({"state": "exploded"}) is None

        assert "Failed to parse keyboard" in caplog.text

    def test_malformed_button_returns_none(self):
        assert get_keyboard({"state": "pending", "buttons": [[{"id": "1"}]]}) is None


class TestGetKeyboardRequest:
    def test_parses_request(self):
        request = get_keyboard_request(
            {
                "button": {"id": "b1", "text": "Yes"},
                "request": {"messageId": "kb-1"},
            }
        )

        assert request.button == KeyboardButton(id="b1", text="Yes")
        assert request.message_id == "kb-1"

    def test_missing_request_returns_none(self):
        assert get_keyboard_request({"button": {"id": "b1", "text": "Yes"}}) is None

    def test_empty_data_returns_none(self):
        assert get_keyboard_request({}) is None
