"""Security – HMAC-SHA256 request signing."""
from __future__ import annotations

import hashlib
import hmac

from flagsync.kernel.errors import AuthenticationError

SIGNATURE_HEADER = "X-Signature"


class SignatureAuthority:
    """Signs and verifies raw request bodies using HMAC-SHA256.

    Callers must pass the untouched raw body: a parsed and re-serialised object
    is not byte-for-byte the same and will legitimately fail verification.
    """

    ALG = "sha256"

    def __init__(self, secret: str | bytes | None) -> None:
        if isinstance(secret, str):
            secret = secret.encode()
        self._secret: bytes | None = secret or None

    @property
    def configured(self) -> bool:
        return self._secret is not None

    @staticmethod
    def _as_bytes(raw: bytes | str) -> bytes:
        return raw.encode("utf-8") if isinstance(raw, str) else bytes(raw)

    def sign(self, raw: bytes | str) -> str:
        """Return the lowercase hex HMAC-SHA256 of *raw*."""
        if self._secret is None:
            raise AuthenticationError("signing secret is not configured")
        return hmac.new(self._secret, self._as_bytes(raw), hashlib.sha256).hexdigest()

    def verify(self, raw: bytes | str, signature: str | None) -> bool:
        """Verify *signature* using constant-time comparison.

        A missing secret or a missing, empty or non-ASCII signature fails closed.
        An optional ``sha256=`` prefix is accepted.
        """
        if self._secret is None or not signature:
            return False
        prefix = f"{self.ALG}="
        if signature.startswith(prefix):
            signature = signature[len(prefix):]
        try:
            provided = signature.encode("ascii")
        except UnicodeEncodeError:
            return False
        expected = self.sign(raw).encode("ascii")
        return hmac.compare_digest(expected, provided)

    def require(self, raw: bytes | str, signature: str | None) -> None:
        """Raise :class:`AuthenticationError` unless *signature* is valid for *raw*."""
        if not self.verify(raw, signature):
            raise AuthenticationError("invalid signature")


__all__ = ["SIGNATURE_HEADER", "SignatureAuthority"]
