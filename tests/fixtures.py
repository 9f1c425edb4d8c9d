"""Raw record factories for unit tests.

Builds MessageItem objects from wire-shaped dicts, the same way the
transport layer does, so tests exercise the aliases too.

Defaults describe a minimally valid operator message.
"""

import json
from typing import Any, Optional

from webim.backend.items import MessageItem, QuoteItem

SERVER_URL = "https://demo.webim.ru"

# 2017-08-10T12:00:00Z
DEFAULT_TS_M = 1502366400000000


def file_text(
    guid: str = "010203",
    filename: str = "photo.jpg",
    content_type: str = "image/jpeg",
    size: int = 1024,
    image: Optional[dict[str, Any]] = None,
) -> str:
    """JSON body of a file message."""
    params: dict[str, Any] = {
        "guid": guid,
        "filename": filename,
        "content_type": content_type,
        "size": size,
    }
    if image is not None:
        params["image"] = image
    return json.dumps(params)


class MessageItemFactory:
    """Factory for creating raw message records."""

    @staticmethod
    def raw(**overrides: Any) -> dict[str, Any]:
        """Wire dict for a message item. Pass a key with None to drop it."""
        raw: dict[str, Any] = {
            "kind": "operator",
            "clientSideId": "csid-1",
            "id": "internal-1",
            "authorId": "operator-1",
            "name": "Operator",
            "avatar": "/webim/images/avatar/1.png",
            "text": "Hello!",
            "ts_m": DEFAULT_TS_M,
        }
        raw.update(overrides)
        return {k: v for k, v in raw.items() if v is not None}

    @classmethod
    def message_item(cls, **overrides: Any) -> MessageItem:
        return MessageItem.model_validate(cls.raw(**overrides))

    @classmethod
    def file_item(cls, kind: str = "file_operator", **overrides: Any) -> MessageItem:
        overrides.setdefault("text", file_text())
        return cls.message_item(kind=kind, **overrides)

    @staticmethod
    def quote(
        state: Optional[str] = "filled",
        kind: Optional[str] = "operator",
        text: Optional[str] = "Quoted text",
        **message_overrides: Any,
    ) -> dict[str, Any]:
        """Wire dict for a quote reference."""
        message: dict[str, Any] = {
            "authorId": "operator-2",
            "id": "quoted-1",
            "kind": kind,
            "name": "Quoted Operator",
            "text": text,
            "ts": DEFAULT_TS_M - 1_000_000,
        }
        message.update(message_overrides)
        quote: dict[str, Any] = {
            "message": {k: v for k, v in message.items() if v is not None}
        }
        if state is not None:
            quote["state"] = state
        return quote

    @classmethod
    def quote_item(cls, **kwargs: Any) -> QuoteItem:
        return QuoteItem.model_validate(cls.quote(**kwargs))


factory = MessageItemFactory()
