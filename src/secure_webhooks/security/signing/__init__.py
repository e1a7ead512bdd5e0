"""Signing – HMAC and RSA webhook signature schemes."""
from secure_webhooks.security.signing.dispatch import (
    CombinedScheme,
    combined,
    dispatch_sign,
    dispatch_verify,
    scheme_for_signing,
    scheme_for_verification,
)
from secure_webhooks.security.signing.hmac_scheme import (
    SymmetricScheme,
    hmac_sign,
    hmac_verify,
    symmetric,
)
from secure_webhooks.security.signing.keys import (
    KeyMaterial,
    PrivateKeyPem,
    PublicKeyPem,
    SharedSecret,
    signing_key_material,
    verification_key_material,
)
from secure_webhooks.security.signing.rsa_scheme import (
    AsymmetricScheme,
    asymmetric,
    rsa_sign,
    rsa_verify,
)
from secure_webhooks.security.signing.scheme import Message, SignatureScheme, VerifyOptions

__all__ = [
    "AsymmetricScheme",
    "CombinedScheme",
    "KeyMaterial",
    "Message",
    "PrivateKeyPem",
    "PublicKeyPem",
    "SharedSecret",
    "SignatureScheme",
    "SymmetricScheme",
    "VerifyOptions",
    "asymmetric",
    "combined",
    "dispatch_sign",
    "dispatch_verify",
    "hmac_sign",
    "hmac_verify",
    "rsa_sign",
    "rsa_verify",
    "scheme_for_signing",
    "scheme_for_verification",
    "signing_key_material",
    "verification_key_material",
]
