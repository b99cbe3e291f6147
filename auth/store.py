"""Refresh-token store interface."""

from __future__ import annotations

from datetime import datetime
from typing import Protocol

from auth.refresh import RefreshTokenRecord


class RefreshTokenStore(Protocol):
    """
    Persistence for refresh-token records.

    Implementations raise StoreFailure when the backend fails. A revoke
    that has committed must be visible to any lookup started afterwards.
    """

    def create_refresh_token(self, record: RefreshTokenRecord) -> None:
        ...

    def get_refresh_token(self, token: str) -> RefreshTokenRecord | None:
        """Return owner and status for token, or None when unknown."""
        ...

    def revoke_refresh_token(self, token: str, revoked_at: datetime) -> None:
        """Set revoked_at; a no-op for revoked or unknown tokens."""
        ...

    def delete_all_credentials(self) -> None:
        ...
