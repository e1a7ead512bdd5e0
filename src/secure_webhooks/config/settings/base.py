"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from typing import Any, ClassVar

_REDACTED = "[REDACTED]"


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings.

    Fields named in ``_secret_fields`` hold key material and are masked by
    :meth:`as_log_dict`.
    """

    _prefix: ClassVar[str] = ""
    _secret_fields: ClassVar[frozenset[str]] = frozenset()

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""

    def as_log_dict(self) -> dict[str, Any]:
        """Field values safe to log: secrets become ``[REDACTED]``, or ``""`` when unset."""
        out: dict[str, Any] = {}
        for field in dataclasses.fields(self):
            value = getattr(self, field.name)
            if field.name in self._secret_fields:
                value = _REDACTED if value else ""
            out[field.name] = value
        return out


__all__ = ["Settings"]
