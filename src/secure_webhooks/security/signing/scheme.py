"""Signing – SignatureScheme protocol."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

__all__ = ["Message", "SignatureScheme", "VerifyOptions"]

Message = str | bytes

# Passed through untouched to the scheme that verifies; the built-in
# schemes accept and ignore it.
VerifyOptions = Mapping[str, Any]


@runtime_checkable
class SignatureScheme(Protocol):
    """A pair of pure functions: sign and verify.

    ``verify`` must return ``False`` for a signature that does not match
    and raise only when the key itself is unusable.
    """

    name: str

    def sign(self, message: Message, key: str) -> str: ...

    def verify(
        self,
        message: Message,
        key: str,
        signature: str,
        opts: VerifyOptions | None = None,
    ) -> bool: ...
