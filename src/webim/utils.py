"""Small helpers shared across the SDK. No I/O."""

from __future__ import annotations

import time


def get_current_time_in_microsecond() -> int:
    return int(time.time() * 1_000_000)


def create_server_url_string_by(account_name: str) -> str:
    """
    Build the server URL for an account.

    Args:
        account_name: Webim account name, or a full server URL

    Returns:
        Server URL without a trailing slash
    """
    server_url_string = account_name
    if "://" not in server_url_string:
        return f"https://{server_url_string}.webim.ru"
    return server_url_string.rstrip("/")
