"""Codec – text/binary helpers for signatures and PEM key material."""
from secure_webhooks.codec.pem import (
    PRIVATE_KEY_LABEL,
    PRIVATE_KEY_MARKER,
    PUBLIC_KEY_LABEL,
    PUBLIC_KEY_MARKER,
    pem_decode,
    pem_encode,
    pem_label,
    strip_pem,
)
from secure_webhooks.codec.text import b64_decode, b64_encode, hex_decode, hex_encode, to_bytes

__all__ = [
    "PRIVATE_KEY_LABEL",
    "PRIVATE_KEY_MARKER",
    "PUBLIC_KEY_LABEL",
    "PUBLIC_KEY_MARKER",
    "b64_decode",
    "b64_encode",
    "hex_decode",
    "hex_encode",
    "pem_decode",
    "pem_encode",
    "pem_label",
    "strip_pem",
    "to_bytes",
]
