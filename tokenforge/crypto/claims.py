"""Claim set construction."""

import logging
from collections.abc import Mapping
from datetime import UTC, datetime, timedelta

from tokenforge.crypto.types import RESERVED_CLAIMS, ClaimSet

logger = logging.getLogger(__name__)

NOT_BEFORE_SKEW_DEFAULT = 3600


def build_claims(
    subject: str,
    issuer: str,
    audience: str,
    expiration_seconds: int,
    extra_claims: Mapping[str, str] | None = None,
    *,
    issued_at: datetime | None = None,
    not_before_skew_seconds: int = NOT_BEFORE_SKEW_DEFAULT,
) -> ClaimSet:
    """Assemble a claim set issued now (or at ``issued_at``).

    ``not_before`` is placed ``not_before_skew_seconds`` before issuance to
    tolerate verifier clocks running behind. Extra claims that reuse a
    standard claim name are dropped so the standard value always wins.
    """
    now = issued_at or datetime.now(UTC)
    if now.tzinfo is None:
        now = now.replace(tzinfo=UTC)

    extras: dict[str, str] = {}
    for name, value in (extra_claims or {}).items():
        if name in RESERVED_CLAIMS:
            logger.warning("Dropping extra claim %r: reserved claim name", name)
            continue
        extras[name] = value

    return ClaimSet(
        subject=subject,
        issuer=issuer,
        audience=audience,
        expiration_seconds=expiration_seconds,
        issued_at=now,
        not_before=now - timedelta(seconds=not_before_skew_seconds),
        extra_claims=extras,
    )
