"""Config settings – 12-factor env-based configuration."""
from secure_webhooks.config.settings.base import Settings
from secure_webhooks.config.settings.loaders import EnvSettingsLoader, SettingsLoader
from secure_webhooks.config.settings.webhook import WebhookSigningSettings

__all__ = ["EnvSettingsLoader", "Settings", "SettingsLoader", "WebhookSigningSettings"]
