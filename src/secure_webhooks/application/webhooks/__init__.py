"""Application webhooks – key-bound signing facade."""
from secure_webhooks.application.webhooks.signature import WebhookSigner

__all__ = ["WebhookSigner"]
