"""
JWT-style token signing and verification.

Tokens are base64url-encoded JSON payloads signed with HMAC-SHA256.
No expiry claim is added: a token stays valid until the secret changes.
"""

from __future__ import annotations

import hashlib
import hmac
import json
from base64 import urlsafe_b64decode, urlsafe_b64encode
from typing import Any, Dict


class InvalidToken(Exception):
    """Raised by ``TokenIssuer.verify`` for malformed or forged tokens."""


class TokenIssuer:
    def __init__(self, secret_key: str):
        if not secret_key:
            raise ValueError("secret_key must not be empty")
        self._secret = secret_key.encode()

    def _signature(self, raw: bytes) -> str:
        return hmac.new(self._secret, raw, hashlib.sha256).hexdigest()

    def sign(self, payload: Dict[str, Any]) -> str:
        """Create a signed token; ``payload`` must carry ``username``."""
        if "username" not in payload:
            raise ValueError("token payload requires 'username'")
        raw = json.dumps(payload, separators=(",", ":"), sort_keys=True).encode()
        return urlsafe_b64encode(raw).decode().rstrip("=") + "." + self._signature(raw)

    def verify(self, token: str) -> Dict[str, Any]:
        """
        Verify token and return its payload.

        Raises ``InvalidToken`` on a bad format, signature or payload.
        """
        parts = token.split(".", 1)
        if len(parts) != 2:
            raise InvalidToken("bad format")
        encoded, sig = parts
        try:
            raw = urlsafe_b64decode(encoded + "=" * (-len(encoded) % 4))
        except ValueError as exc:
            raise InvalidToken("bad encoding") from exc
        if not hmac.compare_digest(sig.encode(), self._signature(raw).encode()):
            raise InvalidToken("bad signature")
        try:
            payload = json.loads(raw)
        except ValueError as exc:
            raise InvalidToken("bad payload") from exc
        if not isinstance(payload, dict) or "username" not in payload:
            raise InvalidToken("bad payload")
        return payload
