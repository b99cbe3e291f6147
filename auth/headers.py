"""
Credential extraction from the Authorization header.

Accepted shapes are exactly "Bearer <token>" and "ApiKey <key>". Only the
shape is checked here; the extracted value is validated by its consumer.
"""
from __future__ import annotations

from typing import Mapping

from auth.exceptions import MalformedHeader, MissingHeader, WrongScheme

AUTHORIZATION = "Authorization"
BEARER = "Bearer"
API_KEY = "ApiKey"


def _authorization_values(headers: Mapping[str, str]) -> list[str]:
    # werkzeug Headers (and similar multidicts) keep repeated headers
    getlist = getattr(headers, "getlist", None)
    if getlist is not None:
        return list(getlist(AUTHORIZATION))
    return [v for k, v in headers.items() if k.lower() == AUTHORIZATION.lower()]


def _extract(headers: Mapping[str, str], scheme: str) -> str:
    values = [v for v in _authorization_values(headers) if v]
    if not values:
        raise MissingHeader("no authorization header found", scheme)
    if len(values) > 1:
        raise MalformedHeader("multiple authorization headers", scheme)

    parts = values[0].split(" ")
    if len(parts) != 2 or not parts[1]:
        raise MalformedHeader("authorization header value is invalid", scheme)
    if parts[0] != scheme:
        raise WrongScheme(f"only {scheme} credentials are supported", scheme)
    return parts[1]


def extract_bearer(headers: Mapping[str, str]) -> str:
    return _extract(headers, BEARER)


def extract_api_key(headers: Mapping[str, str]) -> str:
    return _extract(headers, API_KEY)
