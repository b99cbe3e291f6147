"""Opaque refresh tokens and the record persisted for each one."""
from __future__ import annotations

import secrets
import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta

from auth.exceptions import EntropyFailure

REFRESH_TOKEN_BYTES = 32
REFRESH_TOKEN_TTL = timedelta(days=60)


@dataclass(frozen=True)
class RefreshTokenRecord:
    """
    A stored refresh token.

    :ivar token: 64-char hex string, unique.
    :ivar owner: User id the token mints access tokens for.
    :ivar created_at: Issuance time (UTC).
    :ivar expires_at: Absolute expiration (UTC).
    :ivar revoked_at: Set once, by revocation.
    """

    token: str
    owner: uuid.UUID
    created_at: datetime
    expires_at: datetime
    revoked_at: datetime | None = None

    def is_usable(self, now: datetime) -> bool:
        return self.revoked_at is None and now < self.expires_at


def generate_refresh_token() -> str:
    """Return 32 random bytes from the OS CSPRNG, hex-encoded."""
    try:
        return secrets.token_hex(REFRESH_TOKEN_BYTES)
    except (OSError, NotImplementedError) as exc:
        raise EntropyFailure("random source unavailable") from exc


def new_refresh_token_record(
    token: str,
    owner: uuid.UUID,
    now: datetime,
    ttl: timedelta = REFRESH_TOKEN_TTL,
) -> RefreshTokenRecord:
    return RefreshTokenRecord(
        token=token,
        owner=owner,
        created_at=now,
        expires_at=now + ttl,
    )
