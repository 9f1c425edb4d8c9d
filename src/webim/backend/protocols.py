"""Protocols for the collaborators the mapping core depends on."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class AuthorizationData:
    """Visitor session credentials used to sign file download URLs."""

    page_id: str
    authorization_token: str


@runtime_checkable
class SessionContext(Protocol):
    """
    Live binding to a Webim server session.

    The mapper only reads from it, and only to resolve file attachments.
    Its presence is the evidence that a client is connected.

    Implementations: the transport client (out of this package),
    FakeWebimClient (testing)
    """

    def get_authorization_data(self) -> AuthorizationData | None:
        """Return current session credentials, or None before authorization."""
        ...
