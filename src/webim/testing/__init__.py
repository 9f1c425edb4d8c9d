"""Test helpers for code built on the Webim SDK."""

from webim.testing.fake_client import FakeWebimClient

__all__ = ["FakeWebimClient"]
