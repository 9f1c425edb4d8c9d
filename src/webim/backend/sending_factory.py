"""Builds messages the visitor is about to send. Pure value construction."""

from __future__ import annotations

from webim.types import Message, MessageToSend, MessageType, Quote, QuoteState
from webim.utils import get_current_time_in_microsecond


class SendingFactory:
    """
    Creates MessageToSend values shown locally until the server acknowledges them.

    Sender name is left empty: it is only known once the server echoes the
    message back.
    """

    def __init__(self, server_url_string: str):
        self.server_url_string = server_url_string

    def create_text_message_to_send_with(self, id: str, text: str) -> MessageToSend:
        return MessageToSend(
            server_url_string=self.server_url_string,
            id=id,
            sender_name="",
            type=MessageType.VISITOR_MESSAGE,
            text=text,
            time_in_microsecond=get_current_time_in_microsecond(),
        )

    def create_text_message_to_send_with_quote_with(
        self, id: str, text: str, replied_message: Message
    ) -> MessageToSend:
        """
        Create a text message replying to `replied_message`.

        The quote starts in PENDING state; the server fills it in when it
        acknowledges the message.
        """
        attachment = replied_message.attachment
        quote = Quote(
            state=QuoteState.PENDING,
            author_id=None,
            message_attachment=attachment.file_info if attachment else None,
            message_id=replied_message.id,
            message_type=replied_message.type,
            sender_name=replied_message.sender_name,
            text=replied_message.text,
            timestamp=replied_message.time_in_microsecond,
        )
        return MessageToSend(
            server_url_string=self.server_url_string,
            id=id,
            sender_name="",
            type=MessageType.VISITOR_MESSAGE,
            text=text,
            time_in_microsecond=get_current_time_in_microsecond(),
            quote=quote,
        )

    def create_file_message_to_send_with(self, id: str) -> MessageToSend:
        return MessageToSend(
            server_url_string=self.server_url_string,
            id=id,
            sender_name="",
            type=MessageType.FILE_FROM_VISITOR,
            text="",
            time_in_microsecond=get_current_time_in_microsecond(),
        )
