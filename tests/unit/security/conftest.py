"""Fixtures for signing tests: a pinned RSA key pair and fresh ones."""
from __future__ import annotations

from pathlib import Path

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

DATA = Path(__file__).parent / "data"


@pytest.fixture(scope="session")
def private_pem() -> str:
    """PKCS#8 RSA-2048 private key, 64-column PEM."""
    return (DATA / "rsa_private_pkcs8.pem").read_text()


@pytest.fixture(scope="session")
def public_pem() -> str:
    return (DATA / "rsa_public_spki.pem").read_text()


@pytest.fixture(scope="session")
def pkcs1_private_pem() -> str:
    return (DATA / "rsa_private_pkcs1.pem").read_text()


@pytest.fixture(scope="session")
def hello_signature() -> str:
    """RSA-PKCS1v1.5-SHA256 signature of b"hello" under the pinned key."""
    return (DATA / "hello.sig").read_text().strip()


@pytest.fixture(scope="session")
def other_key_pair() -> tuple[str, str]:
    key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
    priv = key.private_bytes(
        serialization.Encoding.PEM,
        serialization.PrivateFormat.PKCS8,
        serialization.NoEncryption(),
    ).decode()
    pub = key.public_key().public_bytes(
        serialization.Encoding.PEM,
        serialization.PublicFormat.SubjectPublicKeyInfo,
    ).decode()
    return priv, pub
