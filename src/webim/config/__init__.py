"""
Client configuration utilities.

Usage:
    from webim.config import load_client_config

    config = load_client_config("demo")
    mapper = MessageMapper.for_current_chat(config.server_url_string)
"""

from webim.config.loader import ClientConfig, get_config_path, load_client_config

__all__ = ["ClientConfig", "load_client_config", "get_config_path"]
