"""Kernel security – timing-safe equality."""
from __future__ import annotations

import hmac

__all__ = ["timing_safe_equal"]


def _as_bytes(value: str | bytes) -> bytes:
    if isinstance(value, bytes):
        return value
    return value.encode("utf-8", "surrogatepass")


def timing_safe_equal(a: str | bytes, b: str | bytes) -> bool:
    """Return True iff *a* and *b* hold identical bytes.

    Text is compared by its UTF-8 encoding so non-ASCII input is simply
    unequal rather than an error.  ``hmac.compare_digest`` scans the whole
    buffer whether or not, and wherever, the inputs differ; on a length
    mismatch it still walks the second operand before reporting a miss.
    """
    return hmac.compare_digest(_as_bytes(a), _as_bytes(b))
