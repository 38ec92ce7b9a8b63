"""Issuer defaults loaded from environment variables."""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

from tokenforge.crypto.claims import NOT_BEFORE_SKEW_DEFAULT

TOKEN_TTL_DEFAULT = 3600


class IssuerSettings(BaseSettings):
    """Defaults for the command-line issuer."""

    model_config = SettingsConfigDict(env_prefix="TOKENFORGE_")

    issuer: str = "tokenforge"
    audience: str = ""
    algorithm: str = "HS256"
    token_ttl: int = TOKEN_TTL_DEFAULT
    not_before_skew: int = NOT_BEFORE_SKEW_DEFAULT
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
