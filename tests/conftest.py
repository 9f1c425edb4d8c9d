"""
Pytest fixtures for webim SDK tests.

Mappers are built against a fixed server URL. The `client` fixture is a
FakeWebimClient; tests that need "no session" simply don't call set_client().
"""

import pytest

from tests.fixtures import SERVER_URL
from webim.backend.message_mapper import MessageMapper
from webim.backend.sending_factory import SendingFactory
from webim.testing import FakeWebimClient


@pytest.fixture
def client() -> FakeWebimClient:
    return FakeWebimClient()


@pytest.fixture
def mapper(client: FakeWebimClient) -> MessageMapper:
    """Current chat mapper bound to the fake client."""
    mapper = MessageMapper.for_current_chat(SERVER_URL)
    mapper.set_client(client)
    return mapper


@pytest.fixture
def history_mapper(client: FakeWebimClient) -> MessageMapper:
    mapper = MessageMapper.for_history(SERVER_URL)
    mapper.set_client(client)
    return mapper


@pytest.fixture
def unbound_mapper() -> MessageMapper:
    """Mapper without a session client."""
    return MessageMapper.for_current_chat(SERVER_URL)


@pytest.fixture
def sending_factory() -> SendingFactory:
    return SendingFactory(SERVER_URL)
