"""
Session orchestration: login, refresh, revoke and per-request authentication.

Access tokens are stateless and checked locally. Refresh tokens are opaque,
stored, and revocable; a refresh mints a new access token without rotating
the refresh token itself.
"""
from __future__ import annotations

import hmac
import logging
import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Callable, Mapping

from auth.exceptions import ConfigurationFault, InvalidCredentials, Unauthenticated
from auth.headers import extract_api_key, extract_bearer
from auth.passwords import hash_password, verify_password
from auth.refresh import (
    REFRESH_TOKEN_TTL,
    RefreshTokenRecord,
    generate_refresh_token,
    new_refresh_token_record,
)
from auth.store import RefreshTokenStore
from auth.tokens import DEFAULT_ACCESS_TOKEN_TTL, issue_access_token, validate_access_token

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@lru_cache(maxsize=1)
def _dummy_hash() -> str:
    # verified against when the account does not exist, so both paths pay for one argon2 verify
    return hash_password(uuid.uuid4().hex)


@dataclass(frozen=True)
class TokenPair:
    access_token: str
    refresh_token: str


class AuthSessionService:
    """
    Issue and check credentials for one signing secret.

    :param store: Refresh-token persistence.
    :param signing_secret: HMAC key for access tokens. Required.
    :param api_key: Shared key accepted by ``authenticate_api_key``.
    :param access_token_ttl: Lifetime of issued access tokens.
    :param refresh_token_ttl: Lifetime of issued refresh tokens.
    :param clock: Returns the current aware UTC time.
    """

    def __init__(
        self,
        store: RefreshTokenStore,
        signing_secret: str,
        api_key: str | None = None,
        access_token_ttl: timedelta = DEFAULT_ACCESS_TOKEN_TTL,
        refresh_token_ttl: timedelta = REFRESH_TOKEN_TTL,
        clock: Clock = utc_now,
    ):
        if not signing_secret:
            raise ConfigurationFault("JWT_SECRET must be set")
        self.store = store
        self._secret = signing_secret
        self._api_key = api_key
        self.access_token_ttl = access_token_ttl
        self.refresh_token_ttl = refresh_token_ttl
        self._clock = clock

    # ------------------------- primitives -------------------------

    def hash_password(self, password: str) -> str:
        return hash_password(password)

    def verify_password(self, password: str, password_hash: str) -> bool:
        return verify_password(password, password_hash)

    def issue_access_token(self, identity: uuid.UUID, ttl: timedelta | None = None) -> str:
        return issue_access_token(
            identity,
            self._secret,
            self.access_token_ttl if ttl is None else ttl,
            now=self._clock(),
        )

    def validate_access_token(self, token: str) -> uuid.UUID:
        return validate_access_token(token, self._secret, now=self._clock())

    def issue_refresh_token(self, identity: uuid.UUID) -> tuple[str, RefreshTokenRecord]:
        token = generate_refresh_token()
        record = new_refresh_token_record(token, identity, self._clock(), self.refresh_token_ttl)
        return token, record

    # -------------------------- flows ----------------------------

    def login(
        self,
        identity: uuid.UUID | None,
        password: str,
        password_hash: str | None,
    ) -> TokenPair:
        """
        Verify password and issue an access/refresh pair.

        identity and password_hash are None when no account matched; that
        case fails exactly like a wrong password. The refresh record is
        persisted before anything is returned, so a store failure aborts
        the login.
        """
        if identity is None or password_hash is None:
            verify_password(password, _dummy_hash())
            logger.info("login rejected: invalid credentials")
            raise InvalidCredentials("Incorrect email or password")
        if not verify_password(password, password_hash):
            logger.info("login rejected for user %s: invalid credentials", identity)
            raise InvalidCredentials("Incorrect email or password")

        access_token = self.issue_access_token(identity)
        refresh_token, record = self.issue_refresh_token(identity)
        self.store.create_refresh_token(record)
        logger.info("login succeeded for user %s", identity)
        return TokenPair(access_token=access_token, refresh_token=refresh_token)

    def refresh(self, headers: Mapping[str, str]) -> str:
        """Exchange the bearer refresh token for a new access token."""
        token = extract_bearer(headers)
        record = self.store.get_refresh_token(token)
        now = self._clock()
        if record is None:
            logger.debug("refresh rejected: unknown token")
            raise Unauthenticated("Unauthorized")
        if record.revoked_at is not None:
            logger.debug("refresh rejected for user %s: revoked", record.owner)
            raise Unauthenticated("Unauthorized")
        if not record.is_usable(now):
            logger.debug("refresh rejected for user %s: expired", record.owner)
            raise Unauthenticated("Unauthorized")
        return self.issue_access_token(record.owner)

    def revoke(self, headers: Mapping[str, str]) -> None:
        """Revoke the bearer refresh token. Unknown and already-revoked tokens succeed silently."""
        token = extract_bearer(headers)
        self.store.revoke_refresh_token(token, self._clock())

    def authenticate(self, headers: Mapping[str, str]) -> uuid.UUID:
        """Return the identity carried by the request's bearer access token."""
        token = extract_bearer(headers)
        return self.validate_access_token(token)

    def authenticate_api_key(self, headers: Mapping[str, str]) -> None:
        key = extract_api_key(headers)
        if not self._api_key or not hmac.compare_digest(key.encode(), self._api_key.encode()):
            raise InvalidCredentials("Unauthorized")
