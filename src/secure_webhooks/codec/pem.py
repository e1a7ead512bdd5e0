"""Codec – PEM framing of key material.

Only the textual envelope is handled here::

    -----BEGIN <LABEL>-----
    <base64 body, usually wrapped at 64 columns>
    -----END <LABEL>-----

Parsing the DER body is left to ``cryptography``.
"""
from __future__ import annotations

import re

from secure_webhooks.codec.text import b64_decode, b64_encode
from secure_webhooks.kernel.errors import CodecError

__all__ = [
    "PRIVATE_KEY_LABEL",
    "PRIVATE_KEY_MARKER",
    "PUBLIC_KEY_LABEL",
    "PUBLIC_KEY_MARKER",
    "pem_decode",
    "pem_encode",
    "pem_label",
    "strip_pem",
]

PRIVATE_KEY_LABEL = "PRIVATE KEY"
PUBLIC_KEY_LABEL = "PUBLIC KEY"

# Substrings that mark key text as a PEM key half; matched anywhere in the text.
PRIVATE_KEY_MARKER = PRIVATE_KEY_LABEL
PUBLIC_KEY_MARKER = PUBLIC_KEY_LABEL

_BEGIN = re.compile(r"-----BEGIN ([A-Z0-9 ]+)-----")
_LINE_WIDTH = 64


def pem_label(text: str) -> str | None:
    """Return the label of the first ``BEGIN`` line, or None if there is none."""
    match = _BEGIN.search(text)
    return match.group(1) if match else None


def strip_pem(text: str, label: str) -> str:
    """Remove the *label* header and footer and all line breaks from *text*."""
    body = text.replace(f"-----BEGIN {label}-----", "")
    body = body.replace(f"-----END {label}-----", "")
    return "".join(body.split())


def pem_decode(text: str, label: str) -> bytes:
    """Return the DER bytes framed by *label* in *text*.

    Raises :class:`CodecError` when the framing is absent or the body is
    not valid base64.
    """
    found = pem_label(text)
    if found != label:
        raise CodecError(
            f"Expected PEM block '{label}', found {found!r}",
            encoding="pem",
            detail={"expected": label, "found": found},
        )
    body = strip_pem(text, label)
    if not body:
        raise CodecError(f"PEM block '{label}' is empty", encoding="pem")
    return b64_decode(body)


def pem_encode(der: bytes, label: str) -> str:
    body = b64_encode(der)
    lines = [body[i : i + _LINE_WIDTH] for i in range(0, len(body), _LINE_WIDTH)]
    return "\n".join([f"-----BEGIN {label}-----", *lines, f"-----END {label}-----", ""])
