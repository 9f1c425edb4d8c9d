"""
Client configuration management utilities.

This module loads Webim account settings from a YAML configuration file at
the project root. Each top-level key names one account configuration.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

import yaml

from webim.utils import create_server_url_string_by

logger = logging.getLogger(__name__)

DEFAULT_LOCATION = "mobile"


@dataclass(frozen=True)
class ClientConfig:
    """Account settings for one Webim client."""

    account_name: str
    location: str = DEFAULT_LOCATION

    @property
    def server_url_string(self) -> str:
        return create_server_url_string_by(self.account_name)


def get_config_path() -> Path:
    """
    Get the path to the client configuration file.

    Looks for webim_config.yaml in the current working directory (project root).
    """
    return Path(os.getcwd()) / "webim_config.yaml"


def load_client_config(account_key: str) -> ClientConfig:
    """
    Load account settings from YAML file at project root.

    Args:
        account_key: The key identifying the account in the config file

    Returns:
        ClientConfig for the account

    Raises:
        FileNotFoundError: If webim_config.yaml doesn't exist
        ValueError: If the account is missing or has no account_name
    """
    config_path = get_config_path()
    logger.debug(f"Loading config from: {config_path}")

    if not config_path.exists():
        raise FileNotFoundError(
            f"webim_config.yaml not found at {config_path}. "
            "Copy webim_config.yaml.example to webim_config.yaml and configure your accounts."
        )

    try:
        with open(config_path, "r") as f:
            config = yaml.safe_load(f) or {}

        account_config = config.get(account_key, {})

        if not account_config:
            raise ValueError(
                f"Account '{account_key}' not found in {config_path}. "
                f"Please add the account configuration."
            )

        account_name = account_config.get("account_name")
        if not account_name:
            raise ValueError(
                f"Missing required field for account '{account_key}': account_name. "
                f"Please add it to {config_path}"
            )

        return ClientConfig(
            account_name=account_name,
            location=account_config.get("location") or DEFAULT_LOCATION,
        )
    except ValueError:
        raise
    except Exception as e:
        raise RuntimeError(f"Error loading client config: {e}")
