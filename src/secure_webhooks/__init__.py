"""
secure_webhooks – sign and verify webhook payloads.

Two schemes share one API; the key decides which is used::

    from secure_webhooks import combined

    sig = combined.sign(body, "whsec_...")             # HMAC-SHA256, hex
    combined.verify(body, "whsec_...", sig)            # True

    sig = combined.sign(body, private_key_pem)         # RSA PKCS#1 v1.5, base64
    combined.verify(body, public_key_pem, sig)         # True

``sign`` / ``verify`` at package level are the HMAC scheme.
"""

from secure_webhooks.application.webhooks import WebhookSigner
from secure_webhooks.security.signing import (
    AsymmetricScheme,
    CombinedScheme,
    SignatureScheme,
    SymmetricScheme,
    asymmetric,
    combined,
    dispatch_sign,
    dispatch_verify,
    hmac_sign,
    hmac_verify,
    rsa_sign,
    rsa_verify,
    symmetric,
)

__version__ = "0.1.0"

sign = symmetric.sign
verify = symmetric.verify

__all__ = [
    "AsymmetricScheme",
    "CombinedScheme",
    "SignatureScheme",
    "SymmetricScheme",
    "WebhookSigner",
    "__version__",
    "asymmetric",
    "combined",
    "dispatch_sign",
    "dispatch_verify",
    "hmac_sign",
    "hmac_verify",
    "rsa_sign",
    "rsa_verify",
    "sign",
    "verify",
    "symmetric",
]
