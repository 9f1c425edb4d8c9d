"""Quote conversion from raw quote references."""

from __future__ import annotations

from webim.backend.items import QuoteItem
from webim.backend.kinds import get_message_type
from webim.types import FileInfo, Quote, QuoteState

_STATES = {
    "pending": QuoteState.PENDING,
    "filled": QuoteState.FILLED,
}


def get_quote(
    quote_item: QuoteItem | None,
    message_attachment: FileInfo | None = None,
) -> Quote | None:
    """
    Build a Quote from a raw quote reference.

    Args:
        quote_item: Quote reference of a message item, if any
        message_attachment: Already resolved attachment of the quoted
            message (only for quoted file messages)

    Returns:
        Quote, or None when the message quotes nothing
    """
    if quote_item is None:
        return None

    state = _STATES.get(quote_item.state or "", QuoteState.NOT_FOUND)

    quoted = quote_item.message
    if quoted is None:
        return Quote(state=state, message_attachment=message_attachment)

    return Quote(
        state=state,
        author_id=quoted.author_id,
        message_attachment=message_attachment,
        message_id=quoted.id,
        message_type=get_message_type(quoted.kind) if quoted.kind else None,
        sender_name=quoted.sender_name,
        text=quoted.text,
        timestamp=quoted.timestamp,
    )
