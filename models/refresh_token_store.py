"""SQLAlchemy-backed RefreshTokenStore."""
from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import update
from sqlalchemy.exc import SQLAlchemyError

from auth.exceptions import StoreFailure
from auth.refresh import RefreshTokenRecord
from models.db_storage import DBStorage
from models.refresh_token import RefreshToken


def _as_utc(value: datetime | None) -> datetime | None:
    # SQLite hands back naive datetimes; everything stored is UTC
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=timezone.utc)


class SQLRefreshTokenStore:
    """RefreshTokenStore on top of DBStorage; one statement per call."""

    def __init__(self, storage: DBStorage):
        self.storage = storage

    def create_refresh_token(self, record: RefreshTokenRecord) -> None:
        row = RefreshToken(
            token=record.token,
            user_id=str(record.owner),
            created_at=record.created_at,
            updated_at=record.created_at,
            expires_at=record.expires_at,
            revoked_at=record.revoked_at,
        )
        try:
            self.storage.new(row)
            self.storage.save()
        except SQLAlchemyError as exc:
            raise StoreFailure("could not persist refresh token") from exc

    def get_refresh_token(self, token: str) -> RefreshTokenRecord | None:
        session = self.storage.get_session()
        try:
            row = session.query(RefreshToken).filter(RefreshToken.token == token).first()
        except SQLAlchemyError as exc:
            self.storage.rollback()
            raise StoreFailure("could not look up refresh token") from exc
        if row is None:
            return None
        return RefreshTokenRecord(
            token=row.token,
            owner=uuid.UUID(row.user_id),
            created_at=_as_utc(row.created_at),
            expires_at=_as_utc(row.expires_at),
            revoked_at=_as_utc(row.revoked_at),
        )

    def revoke_refresh_token(self, token: str, revoked_at: datetime) -> None:
        session = self.storage.get_session()
        stmt = (
            update(RefreshToken)
            .where(RefreshToken.token == token, RefreshToken.revoked_at.is_(None))
            .values(revoked_at=revoked_at, updated_at=revoked_at)
        )
        try:
            session.execute(stmt)
            self.storage.save()
        except SQLAlchemyError as exc:
            self.storage.rollback()
            raise StoreFailure("could not revoke refresh token") from exc

    def delete_all_credentials(self) -> None:
        session = self.storage.get_session()
        try:
            session.query(RefreshToken).delete(synchronize_session=False)
            self.storage.save()
        except SQLAlchemyError as exc:
            self.storage.rollback()
            raise StoreFailure("could not delete refresh tokens") from exc
