"""Config settings – webhook signing keys."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from secure_webhooks.codec import PRIVATE_KEY_MARKER, PUBLIC_KEY_MARKER
from secure_webhooks.config.settings.base import Settings
from secure_webhooks.config.validation import InvalidSettingValueError

_LOG_LEVELS = frozenset(logging.getLevelNamesMapping())


@dataclasses.dataclass
class WebhookSigningSettings(Settings):
    """Keys used to sign outgoing and verify incoming webhooks.

    Read from ``WEBHOOK_SIGNING_KEY``, ``WEBHOOK_VERIFICATION_KEY`` and
    ``WEBHOOK_LOG_LEVEL``.  Either key may be a shared secret or PEM text;
    empty means the operation is not configured.
    """

    _prefix: ClassVar[str] = "WEBHOOK"
    _secret_fields: ClassVar[frozenset[str]] = frozenset({"signing_key", "verification_key"})

    signing_key: str = ""
    verification_key: str = ""
    log_level: str = "INFO"

    def _validate(self) -> None:
        if PUBLIC_KEY_MARKER in self.signing_key:
            raise InvalidSettingValueError("signing_key", "a public key cannot sign")
        if PRIVATE_KEY_MARKER in self.verification_key:
            raise InvalidSettingValueError(
                "verification_key", "a private key must not be distributed to verifiers"
            )
        if self.log_level.upper() not in _LOG_LEVELS:
            raise InvalidSettingValueError("log_level", f"unknown level {self.log_level!r}")


__all__ = ["WebhookSigningSettings"]
