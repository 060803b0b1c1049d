from __future__ import annotations

import hmac
from typing import Mapping, Optional, Protocol

from ..core.exceptions import AuthenticationError


class IdentityProvider(Protocol):
    def verify(self, token: str) -> str:
        """Return the subject id for a bearer token or raise AuthenticationError."""
        raise NotImplementedError


def parse_token_list(value: Optional[str]) -> dict[str, str]:
    """Parse ``"tok1:alice,tok2:bob"`` into {token: subject}."""
    tokens: dict[str, str] = {}
    for item in (value or "").split(","):
        item = item.strip()
        if not item:
            continue
        token, sep, subject = item.partition(":")
        if not sep or not token.strip() or not subject.strip():
            raise ValueError(f"Invalid API token entry: {item!r} (expected token:subject)")
        tokens[token.strip()] = subject.strip()
    return tokens


class StaticTokenIdentityProvider(IdentityProvider):
    """Service tokens configured through API_TOKENS."""

    def __init__(self, tokens: Mapping[str, str]):
        self._tokens = dict(tokens)

    def verify(self, token: str) -> str:
        if not token:
            raise AuthenticationError("Missing authorization header")
        for known, subject in self._tokens.items():
            if hmac.compare_digest(known.encode("utf-8"), token.encode("utf-8")):
                return subject
        raise AuthenticationError("Invalid or expired token")


def bearer_token(header_value: Optional[str]) -> str:
    if not header_value:
        raise AuthenticationError("Missing authorization header")
    scheme, _, token = header_value.strip().partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise AuthenticationError("Authorization header must use the Bearer scheme")
    return token.strip()
