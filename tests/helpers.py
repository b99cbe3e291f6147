"""Test doubles shared across the suite."""

from __future__ import annotations

import threading
from dataclasses import replace
from datetime import datetime, timedelta, timezone

from auth.exceptions import StoreFailure
from auth.refresh import RefreshTokenRecord

SECRET = "unit-test-secret-0123456789abcdef0123456789"
PASSWORD = "hello pass"


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


class FakeClock:
    """Callable returning a fixed aware UTC time that tests can move forward."""

    def __init__(self, start: datetime | None = None):
        self.now = start or datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now = self.now + delta


class InMemoryRefreshTokenStore:
    """Dict-backed RefreshTokenStore; setting ``fail`` makes every call raise StoreFailure."""

    def __init__(self) -> None:
        self.records: dict[str, RefreshTokenRecord] = {}
        self.fail = False
        self._lock = threading.Lock()

    def _check(self) -> None:
        if self.fail:
            raise StoreFailure("store unavailable")

    def create_refresh_token(self, record: RefreshTokenRecord) -> None:
        self._check()
        with self._lock:
            self.records[record.token] = record

    def get_refresh_token(self, token: str) -> RefreshTokenRecord | None:
        self._check()
        return self.records.get(token)

    def revoke_refresh_token(self, token: str, revoked_at: datetime) -> None:
        self._check()
        with self._lock:
            record = self.records.get(token)
            if record and record.revoked_at is None:
                self.records[token] = replace(record, revoked_at=revoked_at)

    def delete_all_credentials(self) -> None:
        self._check()
        with self._lock:
            self.records.clear()
