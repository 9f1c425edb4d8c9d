"""Tests for SendingFactory."""

from tests.fixtures import SERVER_URL
from webim.types import (
    AttachmentState,
    FileInfo,
    Message,
    MessageAttachment,
    MessageData,
    MessageToSend,
    MessageType,
    QuoteState,
    SendStatus,
)
from webim.utils import get_current_time_in_microsecond


def _replied_message(**overrides) -> Message:
    fields = dict(
        server_url_string=SERVER_URL,
        id="m0",
        sender_name="Operator",
        type=MessageType.OPERATOR_MESSAGE,
        text="hey",
        time_in_microsecond=1502366400000000,
    )
    fields.update(overrides)
    return Message(**fields)


class TestCreateTextMessage:
    def test_text_message(self, sending_factory):
        before = get_current_time_in_microsecond()
        message = sending_factory.create_text_message_to_send_with(id="m1", text="hi")
        after = get_current_time_in_microsecond()

        assert isinstance(message, MessageToSend)
        assert message.id == "m1"
        assert message.text == "hi"
        assert message.type == MessageType.VISITOR_MESSAGE
        assert message.sender_name == ""
        assert message.server_url_string == SERVER_URL
        assert before <= message.time_in_microsecond <= after
        assert message.send_status == SendStatus.SENDING
        assert message.quote is None


class TestCreateQuotedMessage:
    def test_quote_copies_replied_message(self, sending_factory):
        replied = _replied_message()

        message = sending_factory.create_text_message_to_send_with_quote_with(
            id="m1", text="answer", replied_message=replied
        )

        assert message.text == "answer"
        assert message.type == MessageType.VISITOR_MESSAGE
        quote = message.quote
        assert quote.state == QuoteState.PENDING
        assert quote.author_id is None
        assert quote.message_id == "m0"
        assert quote.message_type == MessageType.OPERATOR_MESSAGE
        assert quote.sender_name == "Operator"
        assert quote.text == "hey"
        assert quote.timestamp == 1502366400000000
        assert quote.message_attachment is None

    def test_quote_copies_attachment(self, sending_factory):
        file_info = FileInfo(file_name="a.png", guid="g1")
        replied = _replied_message(
            type=MessageType.FILE_FROM_OPERATOR,
            text="a.png",
            data=MessageData(
                attachment=MessageAttachment(file_info=file_info, state=AttachmentState.READY)
            ),
        )

        message = sending_factory.create_text_message_to_send_with_quote_with(
            id="m1", text="nice", replied_message=replied
        )

        assert message.quote.message_attachment is file_info
        assert message.quote.message_type == MessageType.FILE_FROM_OPERATOR


class TestCreateFileMessage:
    def test_file_placeholder(self, sending_factory):
        message = sending_factory.create_file_message_to_send_with(id="f1")

        assert message.id == "f1"
        assert message.type == MessageType.FILE_FROM_VISITOR
        assert message.text == ""
        assert message.sender_name == ""
        assert message.data is None
