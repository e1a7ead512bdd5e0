"""Codec – conversions between text, raw bytes, hex and base64."""
from __future__ import annotations

import base64
import binascii
import re

from secure_webhooks.kernel.errors import CodecError

__all__ = ["b64_decode", "b64_encode", "hex_decode", "hex_encode", "to_bytes"]

_WHITESPACE = re.compile(r"\s+")


def to_bytes(value: str | bytes) -> bytes:
    """Return *value* as bytes; text is encoded as UTF-8.

    Lone surrogates are passed through rather than rejected, so any ``str``
    (e.g. decoded from an untrusted JSON body) has a byte form.
    """
    if isinstance(value, bytes):
        return value
    return value.encode("utf-8", "surrogatepass")


def hex_encode(data: bytes) -> str:
    """Lowercase hex, two zero-padded characters per byte."""
    return data.hex()


def hex_decode(text: str) -> bytes:
    try:
        return bytes.fromhex(text)
    except ValueError as exc:
        raise CodecError("Value is not valid hexadecimal", encoding="hex", cause=exc) from exc


def b64_encode(data: bytes) -> str:
    """Standard (padded) base64 as ASCII text."""
    return base64.b64encode(data).decode("ascii")


def b64_decode(text: str | bytes) -> bytes:
    """Strictly decode standard base64, ignoring embedded whitespace.

    Raises :class:`CodecError` for characters outside the base64 alphabet
    or incorrect padding.
    """
    raw = text.decode("ascii", "replace") if isinstance(text, bytes) else text
    try:
        return base64.b64decode(_WHITESPACE.sub("", raw), validate=True)
    except (binascii.Error, ValueError) as exc:
        raise CodecError("Value is not valid base64", encoding="base64", cause=exc) from exc
