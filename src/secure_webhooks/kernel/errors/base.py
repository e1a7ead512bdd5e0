"""Root of the secure-webhooks error hierarchy.

Errors raised while handling key material must be safe to log and to
return to a caller. ``BaseError.to_dict`` therefore never renders the
value of a detail entry named after key material, and reports a wrapped
backend exception by type name only, since ``cryptography`` and codec
errors may quote the offending input.
"""

from __future__ import annotations

import json
from typing import Any

KEY_MATERIAL_FIELDS: frozenset[str] = frozenset(
    {
        "digest",
        "key",
        "private_key",
        "public_key",
        "secret",
        "signature",
        "signing_key",
        "verification_key",
    }
)
WITHHELD = "[REDACTED]"


class BaseError(Exception):
    """Base class for every error raised by this package.

    Args:
        message: Human-readable description. Must not contain key material.
        code: Machine-readable slug (defaults to ``default_code``).
        detail: Extra context; entries named in ``KEY_MATERIAL_FIELDS``
            are withheld on serialisation.
        cause: Backend exception that triggered this error.
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail or {})
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def safe_detail(self) -> dict[str, Any]:
        """Return ``detail`` with key-material entries withheld."""
        return {k: (WITHHELD if k.lower() in KEY_MATERIAL_FIELDS else v) for k, v in self.detail.items()}

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"code": self.code, "message": self.message, "detail": self.safe_detail()}
        if self.cause is not None:
            payload["cause"] = type(self.cause).__name__
        return payload

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


__all__ = ["KEY_MATERIAL_FIELDS", "WITHHELD", "BaseError"]
