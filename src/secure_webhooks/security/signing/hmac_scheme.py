"""Signing – HMAC-SHA256 over a shared secret."""
from __future__ import annotations

import hashlib
import hmac

from secure_webhooks.codec import hex_encode, to_bytes
from secure_webhooks.kernel.errors import KeyImportError
from secure_webhooks.kernel.security import timing_safe_equal
from secure_webhooks.observability.logging import get_logger
from secure_webhooks.security.signing.scheme import Message, VerifyOptions

__all__ = ["SymmetricScheme", "hmac_sign", "hmac_verify", "symmetric"]

SCHEME = "hmac-sha256"

_log = get_logger(__name__)


def _import_key(secret: str) -> bytes:
    if not isinstance(secret, str):
        raise KeyImportError(
            f"Shared secret must be text, got {type(secret).__name__}", scheme=SCHEME
        )
    if not secret:
        raise KeyImportError("Shared secret must not be empty", scheme=SCHEME)
    try:
        return secret.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise KeyImportError("Shared secret is not valid UTF-8 text", scheme=SCHEME, cause=exc) from exc


def hmac_sign(message: Message, secret: str) -> str:
    """Return the lowercase hex HMAC-SHA256 of *message* keyed by *secret*."""
    mac = hmac.new(_import_key(secret), to_bytes(message), hashlib.sha256)
    return hex_encode(mac.digest())


def hmac_verify(
    message: Message,
    secret: str,
    digest: str,
    opts: VerifyOptions | None = None,  # noqa: ARG001
) -> bool:
    """Verify *digest* against a freshly computed signature in constant time.

    A malformed *digest* (wrong length, not hex, not text) is a mismatch.
    """
    expected = hmac_sign(message, secret)
    if not isinstance(digest, (str, bytes)):
        return False
    if timing_safe_equal(expected, digest):
        return True
    _log.debug("webhook.signature_mismatch", scheme=SCHEME, message_length=len(to_bytes(message)))
    return False


class SymmetricScheme:
    """:class:`SignatureScheme` backed by :func:`hmac_sign` / :func:`hmac_verify`."""

    name = SCHEME

    def sign(self, message: Message, key: str) -> str:
        return hmac_sign(message, key)

    def verify(
        self,
        message: Message,
        key: str,
        signature: str,
        opts: VerifyOptions | None = None,
    ) -> bool:
        return hmac_verify(message, key, signature, opts)


symmetric = SymmetricScheme()
