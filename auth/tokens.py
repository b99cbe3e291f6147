"""
Access tokens: HS256-signed JWTs via PyJWT.

Claims are exactly {iss, sub, iat, exp}. Validation is local and
stateless: signature, expiry and subject format, no store lookup.
"""
from __future__ import annotations

import uuid
from datetime import datetime, timedelta, timezone

import jwt

from auth.exceptions import (
    ConfigurationFault,
    Expired,
    InvalidSignature,
    InvalidSubject,
    MalformedToken,
)

ISSUER = "Chirpy"
ALGORITHM = "HS256"
DEFAULT_ACCESS_TOKEN_TTL = timedelta(hours=1)

_REQUIRED_CLAIMS = ["iss", "sub", "iat", "exp"]


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _require_secret(secret: str) -> None:
    if not secret:
        raise ConfigurationFault("token signing secret is not configured")


def issue_access_token(
    identity: uuid.UUID,
    secret: str,
    ttl: timedelta = DEFAULT_ACCESS_TOKEN_TTL,
    now: datetime | None = None,
) -> str:
    """
    Sign an access token for identity, valid for ttl from now.
    Timestamps are truncated to whole seconds.
    """
    _require_secret(secret)
    issued_at = int((now or _now()).timestamp())
    payload = {
        "iss": ISSUER,
        "sub": str(identity),
        "iat": issued_at,
        "exp": issued_at + int(ttl.total_seconds()),
    }
    return jwt.encode(payload, secret, algorithm=ALGORITHM)


def _numeric(claims: dict, name: str) -> int:
    value = claims[name]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MalformedToken(f"{name} claim is not a timestamp")
    return int(value)


def validate_access_token(token: str, secret: str, now: datetime | None = None) -> uuid.UUID:
    """
    Decode and validate an access token, returning the subject identity.

    Raises InvalidSignature, Expired, MalformedToken or InvalidSubject.
    Expiry is checked against now (UTC) rather than inside PyJWT so a
    single clock drives issuance and validation.
    """
    _require_secret(secret)
    try:
        claims = jwt.decode(
            token,
            secret,
            algorithms=[ALGORITHM],
            issuer=ISSUER,
            options={
                "require": _REQUIRED_CLAIMS,
                "verify_exp": False,
                "verify_iat": False,
            },
        )
    except jwt.InvalidSignatureError as exc:
        raise InvalidSignature("token signature does not match") from exc
    except jwt.InvalidTokenError as exc:
        raise MalformedToken(f"invalid token: {exc}") from exc

    current = int((now or _now()).timestamp())
    if _numeric(claims, "exp") <= current:
        raise Expired("token expired")
    if _numeric(claims, "iat") > current:
        raise MalformedToken("token issued in the future")

    subject = claims["sub"]
    try:
        return uuid.UUID(subject)
    except (TypeError, ValueError, AttributeError) as exc:
        raise InvalidSubject("token subject is not a user id") from exc
