import secrets
from typing import Protocol

BEARER_PREFIX = "Bearer "


class TokenVerifier(Protocol):
    """Protocol for bearer token verification"""

    def verify(self, token: str) -> bool:
        """Return True when the token grants access"""
        ...


class StaticTokenVerifier:
    """Accepts a single shared secret.

    Placeholder for real credential validation: there is no expiry,
    revocation or per-user identity.
    """

    def __init__(self, secret: str):
        if not secret:
            raise ValueError("Shared secret must be a non-empty string")
        self._secret = secret

    def verify(self, token: str) -> bool:
        return secrets.compare_digest(token.encode("utf-8"), self._secret.encode("utf-8"))


def extract_bearer_token(header: str | None) -> str | None:
    """Return the trimmed token after a case-sensitive 'Bearer ' prefix, or None"""
    if header is None or not header.startswith(BEARER_PREFIX):
        return None
    return header[len(BEARER_PREFIX):].strip()
