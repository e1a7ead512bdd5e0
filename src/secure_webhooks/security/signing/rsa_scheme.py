"""Signing – RSA-PKCS1v1.5 with SHA-256.

Private keys must be PKCS#8 (``BEGIN PRIVATE KEY``) and public keys SPKI
(``BEGIN PUBLIC KEY``).  PKCS#1 ``BEGIN RSA PRIVATE KEY`` text is
rejected rather than converted.
"""
from __future__ import annotations

from cryptography.exceptions import InvalidSignature, UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import padding, rsa

from secure_webhooks.codec import (
    PRIVATE_KEY_LABEL,
    PUBLIC_KEY_LABEL,
    b64_decode,
    b64_encode,
    pem_decode,
    to_bytes,
)
from secure_webhooks.kernel.errors import CodecError, KeyFormatError, KeyImportError
from secure_webhooks.observability.logging import get_logger
from secure_webhooks.security.signing.scheme import Message, VerifyOptions

__all__ = ["AsymmetricScheme", "asymmetric", "rsa_sign", "rsa_verify"]

SCHEME = "rsa-pkcs1v15-sha256"

_log = get_logger(__name__)


def _decode_pem(text: str, label: str, form: str) -> bytes:
    if not isinstance(text, str):
        raise KeyFormatError(f"{form} key must be PEM text", scheme=SCHEME)
    try:
        return pem_decode(text, label)
    except CodecError as exc:
        _log.warning("webhook.key_rejected", scheme=SCHEME, reason="pem", form=form)
        raise KeyFormatError(f"Key is not a PEM-encoded {form} key", scheme=SCHEME, cause=exc) from exc


def _load_private_key(pem: str) -> rsa.RSAPrivateKey:
    der = _decode_pem(pem, PRIVATE_KEY_LABEL, "PKCS#8")
    try:
        key = serialization.load_der_private_key(der, password=None)
    except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
        _log.warning("webhook.key_rejected", scheme=SCHEME, reason="import", form="PKCS#8")
        raise KeyImportError("PKCS#8 private key could not be imported", scheme=SCHEME, cause=exc) from exc
    if not isinstance(key, rsa.RSAPrivateKey):
        raise KeyImportError(f"Expected an RSA private key, got {type(key).__name__}", scheme=SCHEME)
    return key


def _load_public_key(pem: str) -> rsa.RSAPublicKey:
    der = _decode_pem(pem, PUBLIC_KEY_LABEL, "SPKI")
    try:
        key = serialization.load_der_public_key(der)
    except (ValueError, UnsupportedAlgorithm) as exc:
        _log.warning("webhook.key_rejected", scheme=SCHEME, reason="import", form="SPKI")
        raise KeyImportError("SPKI public key could not be imported", scheme=SCHEME, cause=exc) from exc
    if not isinstance(key, rsa.RSAPublicKey):
        raise KeyImportError(f"Expected an RSA public key, got {type(key).__name__}", scheme=SCHEME)
    return key


def rsa_sign(message: Message, private_key_pem: str) -> str:
    """Sign *message* with a PKCS#8 RSA key; return the signature as base64."""
    key = _load_private_key(private_key_pem)
    signature = key.sign(to_bytes(message), padding.PKCS1v15(), hashes.SHA256())
    return b64_encode(signature)


def rsa_verify(
    message: Message,
    public_key_pem: str,
    signature: str,
    opts: VerifyOptions | None = None,  # noqa: ARG001
) -> bool:
    """Verify a base64 *signature* with an SPKI RSA public key.

    Key problems raise; a signature that is not base64 or does not match
    returns False.
    """
    key = _load_public_key(public_key_pem)
    try:
        raw = b64_decode(signature)
    except (CodecError, TypeError):
        _log.debug("webhook.signature_malformed", scheme=SCHEME)
        return False
    try:
        key.verify(raw, to_bytes(message), padding.PKCS1v15(), hashes.SHA256())
    except InvalidSignature:
        _log.debug("webhook.signature_mismatch", scheme=SCHEME, message_length=len(to_bytes(message)))
        return False
    return True


class AsymmetricScheme:
    """:class:`SignatureScheme` backed by :func:`rsa_sign` / :func:`rsa_verify`."""

    name = SCHEME

    def sign(self, message: Message, key: str) -> str:
        return rsa_sign(message, key)

    def verify(
        self,
        message: Message,
        key: str,
        signature: str,
        opts: VerifyOptions | None = None,
    ) -> bool:
        return rsa_verify(message, key, signature, opts)


asymmetric = AsymmetricScheme()
