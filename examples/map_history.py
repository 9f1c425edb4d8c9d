"""
History mapping example.

Reads a history response saved as JSON, converts it to public messages and
prints them. Records the mapper can't use are reported, not fatal.

File download URLs are signed with the visitor session credentials taken
from the environment, so they are only valid for that session.

Run with:
    WEBIM_PAGE_ID=xxx WEBIM_AUTH_TOKEN=yyy python map_history.py history.json
"""

import json
import logging
import os
import sys

from setup_logging import setup_logging
from webim import AuthorizationData, MessageItem, MessageMapper, SessionContext
from webim.config import load_client_config

setup_logging(show_rejection_counts=True)
logger = logging.getLogger(__name__)


class EnvironmentSession:
    """Session context backed by credentials from an existing visitor session."""

    def __init__(self, page_id: str, authorization_token: str):
        self._authorization_data = AuthorizationData(
            page_id=page_id, authorization_token=authorization_token
        )

    def get_authorization_data(self) -> AuthorizationData | None:
        return self._authorization_data


def main(path: str, client: SessionContext) -> None:
    config = load_client_config("demo")

    with open(path, "r") as f:
        raw_messages = json.load(f).get("messages", [])

    mapper = MessageMapper.for_history(config.server_url_string)
    mapper.set_client(client)

    result = mapper.map_all_with_rejections(
        MessageItem.model_validate(raw) for raw in raw_messages
    )

    for message in result.messages:
        print(f"[{message.time:%Y-%m-%d %H:%M}] {message.sender_name}: {message.text}")

    for rejection in result.rejections:
        logger.info(
            f"Skipped record #{rejection.index}: {rejection.reason.value} {rejection.detail}"
        )


if __name__ == "__main__":
    if len(sys.argv) != 2:
        raise SystemExit("usage: python map_history.py <history.json>")

    page_id = os.getenv("WEBIM_PAGE_ID")
    auth_token = os.getenv("WEBIM_AUTH_TOKEN")
    if not page_id or not auth_token:
        raise ValueError("WEBIM_PAGE_ID and WEBIM_AUTH_TOKEN environment variables are required")

    session = EnvironmentSession(page_id, auth_token)
    main(sys.argv[1], session)
