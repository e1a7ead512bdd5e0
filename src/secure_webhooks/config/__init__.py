"""Config – 12-factor settings and validation errors."""

from secure_webhooks.config.settings import (
    EnvSettingsLoader,
    Settings,
    SettingsLoader,
    WebhookSigningSettings,
)
from secure_webhooks.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
    "WebhookSigningSettings",
]
