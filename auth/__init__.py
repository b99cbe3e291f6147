"""Authentication and session-credential management."""
from auth.headers import extract_api_key, extract_bearer
from auth.passwords import hash_password, verify_password
from auth.refresh import RefreshTokenRecord, generate_refresh_token, new_refresh_token_record
from auth.service import AuthSessionService, TokenPair
from auth.store import RefreshTokenStore
from auth.tokens import issue_access_token, validate_access_token

__all__ = [
    "AuthSessionService",
    "RefreshTokenRecord",
    "RefreshTokenStore",
    "TokenPair",
    "extract_api_key",
    "extract_bearer",
    "generate_refresh_token",
    "hash_password",
    "issue_access_token",
    "new_refresh_token_record",
    "validate_access_token",
    "verify_password",
]
