"""Signing – KeyMaterial tagged union.

Key text is classified once, at the boundary, by looking for the PEM
marker substrings anywhere in it.  A shared secret that happens to
contain ``PRIVATE KEY`` (or ``PUBLIC KEY`` on the verify path) is
classified as PEM; callers must not use such secrets.
"""
from __future__ import annotations

from dataclasses import dataclass

from secure_webhooks.codec import PRIVATE_KEY_MARKER, PUBLIC_KEY_MARKER

__all__ = [
    "KeyMaterial",
    "PrivateKeyPem",
    "PublicKeyPem",
    "SharedSecret",
    "signing_key_material",
    "verification_key_material",
]


@dataclass(frozen=True)
class SharedSecret:
    """Opaque secret for the symmetric scheme."""

    value: str

    def __repr__(self) -> str:
        return "SharedSecret(value='***')"


@dataclass(frozen=True)
class PrivateKeyPem:
    """PEM text of a PKCS#8 RSA private key; signs only."""

    pem: str

    def __repr__(self) -> str:
        return "PrivateKeyPem(pem='***')"


@dataclass(frozen=True)
class PublicKeyPem:
    """PEM text of an SPKI RSA public key; verifies only."""

    pem: str


KeyMaterial = SharedSecret | PrivateKeyPem | PublicKeyPem


def signing_key_material(key: str) -> SharedSecret | PrivateKeyPem:
    if PRIVATE_KEY_MARKER in key:
        return PrivateKeyPem(key)
    return SharedSecret(key)


def verification_key_material(key: str) -> SharedSecret | PublicKeyPem:
    if PUBLIC_KEY_MARKER in key:
        return PublicKeyPem(key)
    return SharedSecret(key)
