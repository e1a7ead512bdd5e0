"""Signing errors – malformed or unusable key material.

These are configuration failures, not authentication failures: a
signature that simply does not match is reported as ``False`` by the
verify operations and never raises.
"""

from __future__ import annotations

from typing import Any

from secure_webhooks.kernel.errors.base import BaseError


class SigningError(BaseError):
    """Key material or encoded input could not be used for signing."""

    default_code = "signing_error"


class CodecError(SigningError):
    """Text could not be decoded (base64, hex, PEM framing)."""

    default_code = "codec_error"

    def __init__(
        self,
        message: str,
        *,
        encoding: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.encoding = encoding


class InvalidKeyError(SigningError):
    """Key material is unusable for the requested scheme."""

    default_code = "invalid_key"

    def __init__(
        self,
        message: str,
        *,
        scheme: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.scheme = scheme
        if scheme is not None:
            self.detail.setdefault("scheme", scheme)


class KeyFormatError(InvalidKeyError):
    """Key text is not in the required encoding (e.g. PKCS#1 instead of PKCS#8)."""

    default_code = "key_format_error"


class KeyImportError(InvalidKeyError):
    """The cryptographic backend rejected the decoded key."""

    default_code = "key_import_error"


__all__ = [
    "CodecError",
    "InvalidKeyError",
    "KeyFormatError",
    "KeyImportError",
    "SigningError",
]
