"""Kernel security – timing-safe primitives."""
from secure_webhooks.kernel.security.timing import timing_safe_equal

__all__ = ["timing_safe_equal"]
