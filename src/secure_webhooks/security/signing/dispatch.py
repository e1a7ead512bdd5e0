"""Signing – scheme dispatch by key shape.

Private-key PEM text signs with RSA and public-key PEM text verifies with
RSA; any other key is a shared secret for HMAC.  The same key text
always resolves to the same scheme.
"""
from __future__ import annotations

from typing import assert_never

from secure_webhooks.observability.logging import get_logger
from secure_webhooks.security.signing.hmac_scheme import symmetric
from secure_webhooks.security.signing.keys import (
    PrivateKeyPem,
    PublicKeyPem,
    SharedSecret,
    signing_key_material,
    verification_key_material,
)
from secure_webhooks.security.signing.rsa_scheme import asymmetric
from secure_webhooks.security.signing.scheme import Message, SignatureScheme, VerifyOptions

__all__ = [
    "CombinedScheme",
    "combined",
    "dispatch_sign",
    "dispatch_verify",
    "scheme_for_signing",
    "scheme_for_verification",
]

_log = get_logger(__name__)


def scheme_for_signing(key: str) -> SignatureScheme:
    material = signing_key_material(key)
    match material:
        case PrivateKeyPem():
            return asymmetric
        case SharedSecret():
            return symmetric
        case _:
            assert_never(material)


def scheme_for_verification(key: str) -> SignatureScheme:
    material = verification_key_material(key)
    match material:
        case PublicKeyPem():
            return asymmetric
        case SharedSecret():
            return symmetric
        case _:
            assert_never(material)


def dispatch_sign(message: Message, key: str) -> str:
    """Sign with RSA when *key* is private-key PEM, otherwise with HMAC."""
    scheme = scheme_for_signing(key)
    _log.debug("webhook.scheme_selected", operation="sign", scheme=scheme.name)
    return scheme.sign(message, key)


def dispatch_verify(
    message: Message,
    key: str,
    signature: str,
    opts: VerifyOptions | None = None,
) -> bool:
    """Verify with RSA when *key* is public-key PEM, otherwise with HMAC."""
    scheme = scheme_for_verification(key)
    _log.debug("webhook.scheme_selected", operation="verify", scheme=scheme.name)
    return scheme.verify(message, key, signature, opts)


class CombinedScheme:
    """:class:`SignatureScheme` that routes each call by key shape."""

    name = "combined"

    def sign(self, message: Message, key: str) -> str:
        return dispatch_sign(message, key)

    def verify(
        self,
        message: Message,
        key: str,
        signature: str,
        opts: VerifyOptions | None = None,
    ) -> bool:
        return dispatch_verify(message, key, signature, opts)


combined = CombinedScheme()
