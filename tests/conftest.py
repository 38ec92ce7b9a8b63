"""Shared test fixtures for tokenforge."""

from datetime import UTC, datetime

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey

from tokenforge.crypto.claims import build_claims
from tokenforge.crypto.types import ClaimSet

RSA_KEY_SIZE = 2048
RSA_PUBLIC_EXPONENT = 65537


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host TOKENFORGE_* variables out of settings."""
    for name in (
        "ISSUER",
        "AUDIENCE",
        "ALGORITHM",
        "TOKEN_TTL",
        "NOT_BEFORE_SKEW",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(f"TOKENFORGE_{name}", raising=False)


def _generate_key() -> RSAPrivateKey:
    return rsa.generate_private_key(
        public_exponent=RSA_PUBLIC_EXPONENT,
        key_size=RSA_KEY_SIZE,
    )


def _private_pem(key: RSAPrivateKey, fmt: serialization.PrivateFormat) -> str:
    return key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=fmt,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode()


def _public_pem(key: RSAPrivateKey) -> str:
    return (
        key.public_key()
        .public_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        )
        .decode()
    )


@pytest.fixture(scope="session")
def rsa_key() -> RSAPrivateKey:
    """One RSA-2048 key shared by the whole session."""
    return _generate_key()


@pytest.fixture(scope="session")
def pkcs1_pem(rsa_key: RSAPrivateKey) -> str:
    return _private_pem(rsa_key, serialization.PrivateFormat.TraditionalOpenSSL)


@pytest.fixture(scope="session")
def pkcs8_pem(rsa_key: RSAPrivateKey) -> str:
    return _private_pem(rsa_key, serialization.PrivateFormat.PKCS8)


@pytest.fixture(scope="session")
def public_pem(rsa_key: RSAPrivateKey) -> str:
    return _public_pem(rsa_key)


@pytest.fixture(scope="session")
def other_public_pem() -> str:
    """Public key of an unrelated keypair."""
    return _public_pem(_generate_key())


@pytest.fixture
def claims() -> ClaimSet:
    """Claims for alice issued now, with one extra claim."""
    return build_claims(
        "alice",
        "issuer1",
        "aud1",
        3600,
        {"role": "admin"},
        issued_at=datetime.now(UTC),
    )
