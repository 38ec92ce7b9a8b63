"""Type definitions for claim sets and signing algorithms."""

from collections.abc import Mapping
from datetime import datetime
from enum import StrEnum
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, field_validator

from tokenforge.crypto.errors import UnsupportedAlgorithm

RESERVED_CLAIMS = frozenset({"sub", "iss", "aud", "exp", "nbf", "iat"})


class PrivateKeyEncoding(StrEnum):
    """PEM encodings accepted for RSA private keys."""

    PKCS1 = "PKCS#1"
    PKCS8 = "PKCS#8"


class SigningAlgorithm(StrEnum):
    """Supported signing choices."""

    HS256 = "HS256"
    RS256_PKCS1 = "RS256-PKCS#1"
    RS256_PKCS8 = "RS256-PKCS#8"

    @property
    def jws_name(self) -> str:
        """Value written to the header ``alg`` field."""
        if self is SigningAlgorithm.HS256:
            return "HS256"
        return "RS256"

    @property
    def key_encoding(self) -> PrivateKeyEncoding | None:
        """PEM encoding expected for the key, or None for HMAC."""
        if self is SigningAlgorithm.RS256_PKCS1:
            return PrivateKeyEncoding.PKCS1
        if self is SigningAlgorithm.RS256_PKCS8:
            return PrivateKeyEncoding.PKCS8
        return None

    @classmethod
    def parse(cls, choice: "str | SigningAlgorithm") -> "SigningAlgorithm":
        """Resolve a caller-supplied choice, raising UnsupportedAlgorithm."""
        if isinstance(choice, SigningAlgorithm):
            return choice
        if choice in _ALIASES:
            return _ALIASES[choice]
        try:
            return cls(choice)
        except ValueError:
            raise UnsupportedAlgorithm(str(choice)) from None


# PKCS#1 v1.5 names the signature padding, the key itself is read as PKCS#8
_ALIASES = {"RS256-PKCS#1.5": SigningAlgorithm.RS256_PKCS8}


class ClaimSet(BaseModel):
    """Payload of a token. Built once per issuance and never mutated."""

    model_config = ConfigDict(frozen=True)

    subject: str
    issuer: str
    audience: str
    expiration_seconds: int
    issued_at: datetime
    not_before: datetime
    extra_claims: Mapping[str, str] = Field(
        default_factory=dict, validate_default=True
    )

    @field_validator("extra_claims")
    @classmethod
    def freeze_extra_claims(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        """Store extras read-only so the claim set cannot change after build."""
        return MappingProxyType(dict(value))

    @property
    def expires_at(self) -> int:
        """Absolute expiry as seconds since the epoch."""
        return int(self.issued_at.timestamp()) + self.expiration_seconds

    def to_payload(self) -> dict[str, str | int]:
        """Flatten standard and extra claims into one JSON object."""
        payload: dict[str, str | int] = dict(self.extra_claims)
        payload.update(
            {
                "sub": self.subject,
                "iss": self.issuer,
                "aud": self.audience,
                "exp": self.expires_at,
                "nbf": int(self.not_before.timestamp()),
                "iat": int(self.issued_at.timestamp()),
            }
        )
        return payload
