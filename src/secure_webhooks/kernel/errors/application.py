"""Application-layer errors – misuse of the library by its caller."""

from __future__ import annotations

from secure_webhooks.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


__all__ = ["ApplicationError"]
