"""
Password hashing via argon2-cffi.

Digests embed their own salt and cost parameters, so verification only
needs the plaintext and the stored digest.
"""
from __future__ import annotations

from argon2 import PasswordHasher
from argon2.exceptions import HashingError, InvalidHashError, VerificationError

from auth.exceptions import HashingFailure

ph = PasswordHasher()


def hash_password(password: str) -> str:
    """Hash a plaintext password using Argon2
    """
    try:
        return ph.hash(password)
    except HashingError as exc:
        raise HashingFailure("could not hash password") from exc


def verify_password(password: str, password_hash: str) -> bool:
    """Verify a plaintext password against an argon2 digest.

    A digest that cannot be decoded (including non-ASCII text) and a digest that does not match
    both return False.
    """
    try:
        return ph.verify(password_hash, password)
    except (VerificationError, InvalidHashError, UnicodeEncodeError):
        return False
