import re
import uuid
from datetime import datetime, timedelta, timezone

import pytest

from auth import refresh
from auth.exceptions import EntropyFailure
from auth.refresh import REFRESH_TOKEN_TTL, generate_refresh_token, new_refresh_token_record

HEX64 = re.compile(r"^[0-9a-f]{64}$")
NOW = datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)


def test_tokens_are_64_hex_chars_and_distinct():
    tokens = {generate_refresh_token() for _ in range(50)}
    assert len(tokens) == 50
    assert all(HEX64.match(t) for t in tokens)


def test_entropy_failure_is_reported(monkeypatch):
    def broken(nbytes):
        raise OSError("no randomness")

    monkeypatch.setattr(refresh.secrets, "token_hex", broken)
    with pytest.raises(EntropyFailure):
        generate_refresh_token()


def test_new_record_expires_in_60_days():
    owner = uuid.uuid4()
    record = new_refresh_token_record("ab" * 32, owner, NOW)

    assert REFRESH_TOKEN_TTL == timedelta(days=60)
    assert record.owner == owner
    assert record.created_at == NOW
    assert record.expires_at == NOW + timedelta(days=60)
    assert record.revoked_at is None


def test_record_usable_until_expiry_or_revocation():
    record = new_refresh_token_record("ab" * 32, uuid.uuid4(), NOW)

    assert record.is_usable(NOW)
    assert record.is_usable(record.expires_at - timedelta(seconds=1))
    assert not record.is_usable(record.expires_at)

    revoked = refresh.RefreshTokenRecord(
        token=record.token,
        owner=record.owner,
        created_at=record.created_at,
        expires_at=record.expires_at,
        revoked_at=NOW,
    )
    assert not revoked.is_usable(NOW)
