"""
Session token generation and digesting.

The raw token is the bearer credential and only ever lives in the client's
cookie. The store keys sessions by an HMAC-SHA256 digest of it, keyed with a
server-side pepper that is never written next to the sessions.
"""

import hashlib
import hmac
import secrets

SESSION_TOKEN_BYTES = 32  # 256 bits


def generate_session_token() -> str:
    """Fresh URL-safe token from the OS CSPRNG (43 chars, no padding)"""
    return secrets.token_urlsafe(SESSION_TOKEN_BYTES)


def digest_session_token(raw_token: str, pepper: str) -> str:
    """Hex HMAC-SHA256 of the token; deterministic for a given pepper"""
    return hmac.new(
        pepper.encode("utf-8"), raw_token.encode("utf-8"), hashlib.sha256
    ).hexdigest()


class SessionTokenService:
    """Token generator and digest bound to one pepper"""

    def __init__(self, pepper: str):
        if not pepper:
            raise ValueError("Session pepper must not be empty")
        self._pepper = pepper

    def generate(self) -> str:
        return generate_session_token()

    def digest(self, raw_token: str) -> str:
        return digest_session_token(raw_token, self._pepper)
