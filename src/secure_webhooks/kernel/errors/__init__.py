"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── ApplicationError     (application.py)
    │   └── ConfigError      (secure_webhooks.config.validation)
    └── SigningError         (signing.py)
        ├── CodecError
        └── InvalidKeyError
            ├── KeyFormatError
            └── KeyImportError
"""

from secure_webhooks.kernel.errors.application import ApplicationError
from secure_webhooks.kernel.errors.base import BaseError
from secure_webhooks.kernel.errors.signing import (
    CodecError,
    InvalidKeyError,
    KeyFormatError,
    KeyImportError,
    SigningError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "CodecError",
    "InvalidKeyError",
    "KeyFormatError",
    "KeyImportError",
    "SigningError",
]
