"""
Session endpoints:
- POST /login   -> access token + refresh token
- POST /refresh -> new access token for a bearer refresh token
- POST /revoke  -> revoke a bearer refresh token

Token issuance and checks live in auth.AuthSessionService; these handlers
only decode JSON, look up the user and shape responses.
"""
from __future__ import annotations

import uuid
from flask import Blueprint, request, jsonify

from models import storage
from models.user import User
from models.schemas.user import UserLoginSchema, LoginOutSchema
from utils.decorators import auth_session

bp = Blueprint("auth", __name__)

user_login_schema = UserLoginSchema()
login_out_schema = LoginOutSchema()


@bp.post("/login")
def login():
    """
    Login: return token (access) and refresh_token
    ---
    tags:
      - Auth
    consumes:
      - application/json
    parameters:
      -  in: body
         name: body
         schema:
           type: object
           properties:
             email: { type: string }
             password: { type: string }
    responses:
      200:
        description: OK (returns user and tokens)
      401:
        description: Unauthorized
    """
    payload = user_login_schema.load(request.get_json(silent=True) or {})

    session = storage.get_session()
    user: User | None = session.query(User).filter(User.email == payload["email"]).first()

    tokens = auth_session().login(
        uuid.UUID(user.id) if user else None,
        payload["password"],
        user.password_hash if user else None,
    )

    return jsonify(
        login_out_schema.dump(
            {
                "id": user.id,
                "created_at": user.created_at,
                "updated_at": user.updated_at,
                "email": user.email,
                "is_chirpy_red": user.is_chirpy_red,
                "token": tokens.access_token,
                "refresh_token": tokens.refresh_token,
            }
        )
    ), 200


@bp.post("/refresh")
def refresh():
    """
    Use a refresh token to obtain a new access token (no rotation)
    ---
    tags:
      - Auth
    security:
      - Bearer: []
    responses:
      200:
        description: OK (returns token)
      401:
        description: Unauthorized
    """
    token = auth_session().refresh(request.headers)
    return jsonify({"token": token}), 200


@bp.post("/revoke")
def revoke():
    """
    Revoke a refresh token
    ---
    tags:
      - Auth
    security:
      - Bearer: []
    responses:
      204:
        description: Revoked (also when the token was unknown or already revoked)
      401:
        description: Missing or malformed Authorization header
    """
    auth_session().revoke(request.headers)
    return ("", 204)
