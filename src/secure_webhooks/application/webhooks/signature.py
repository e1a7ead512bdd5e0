"""Application webhooks – WebhookSigner bound to configured keys."""
from __future__ import annotations

import asyncio

from secure_webhooks.config import ConfigError, WebhookSigningSettings
from secure_webhooks.observability.logging import get_logger
from secure_webhooks.security.signing import Message, SignatureScheme, VerifyOptions, combined

__all__ = ["WebhookSigner"]

_log = get_logger(__name__)


class WebhookSigner:
    """Signs outgoing and verifies incoming webhook payloads.

    Holds a signing key, a verification key, or both, and delegates to a
    :class:`SignatureScheme` (by default the key-shape dispatcher).  The
    ``*_async`` variants run the cryptographic call in a worker thread.
    """

    def __init__(
        self,
        signing_key: str | None = None,
        verification_key: str | None = None,
        *,
        scheme: SignatureScheme = combined,
    ) -> None:
        self._signing_key = signing_key or None
        self._verification_key = verification_key or None
        self._scheme = scheme

    @classmethod
    def from_settings(
        cls, settings: WebhookSigningSettings, *, scheme: SignatureScheme = combined
    ) -> WebhookSigner:
        _log.info("webhook.signer_configured", scheme=scheme.name, settings=settings.as_log_dict())
        return cls(settings.signing_key, settings.verification_key, scheme=scheme)

    @property
    def can_sign(self) -> bool:
        return self._signing_key is not None

    @property
    def can_verify(self) -> bool:
        return self._verification_key is not None

    def sign(self, payload: Message) -> str:
        if self._signing_key is None:
            raise ConfigError("WebhookSigner has no signing key configured")
        signature = self._scheme.sign(payload, self._signing_key)
        _log.info("webhook.signed", scheme=self._scheme.name, payload_length=len(payload))
        return signature

    def verify(self, payload: Message, signature: str, opts: VerifyOptions | None = None) -> bool:
        if self._verification_key is None:
            raise ConfigError("WebhookSigner has no verification key configured")
        ok = self._scheme.verify(payload, self._verification_key, signature, opts)
        if not ok:
            _log.info("webhook.verification_failed", scheme=self._scheme.name)
        return ok

    async def sign_async(self, payload: Message) -> str:
        return await asyncio.to_thread(self.sign, payload)

    async def verify_async(
        self, payload: Message, signature: str, opts: VerifyOptions | None = None
    ) -> bool:
        return await asyncio.to_thread(self.verify, payload, signature, opts)

    def __repr__(self) -> str:
        return (
            f"WebhookSigner(scheme={self._scheme.name!r}, "
            f"can_sign={self.can_sign}, can_verify={self.can_verify})"
        )
