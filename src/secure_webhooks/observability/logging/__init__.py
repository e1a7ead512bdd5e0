"""Observability – structured logging helpers."""
from secure_webhooks.observability.logging.factory import JsonLoggerFactory
from secure_webhooks.observability.logging.filters import DEFAULT_SENSITIVE_FIELDS, SensitiveFieldsFilter
from secure_webhooks.observability.logging.processors import get_logger

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "JsonLoggerFactory",
    "SensitiveFieldsFilter",
    "get_logger",
]
