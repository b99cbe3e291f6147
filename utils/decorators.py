from __future__ import annotations
from functools import wraps
from flask import current_app, g, request


def auth_session():
    return current_app.extensions["auth_session"]


def jwt_required():
    """Require a valid bearer access token; sets g.current_user_id (uuid.UUID).

    Failures raise auth errors, answered with 401 by the app error handlers.
    """
    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            g.current_user_id = auth_session().authenticate(request.headers)
            return fn(*args, **kwargs)

        return wrapper

    return decorator


def api_key_required():
    """Require ``Authorization: ApiKey <key>`` matching the configured key."""
    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            auth_session().authenticate_api_key(request.headers)
            return fn(*args, **kwargs)

        return wrapper

    return decorator


def count_hits(fn):
    @wraps(fn)
    def wrapper(*args, **kwargs):
        current_app.extensions["hit_counter"].increment()
        return fn(*args, **kwargs)

    return wrapper
