from __future__ import annotations

from flask import Blueprint, request, jsonify, g, abort

from models import storage
from models.user import User
from models.schemas.user import UserCreateSchema, UserUpdateSchema, UserOutSchema
from utils.decorators import auth_session, jwt_required

bp = Blueprint("users", __name__)

user_create_schema = UserCreateSchema()
user_update_schema = UserUpdateSchema()
user_out_schema = UserOutSchema()


def _email_taken(email: str, exclude_id: str | None = None) -> bool:
    session = storage.get_session()
    query = session.query(User).filter(User.email == email)
    if exclude_id:
        query = query.filter(User.id != exclude_id)
    return query.first() is not None


@bp.post("/users")
def create_user():
    """
    Register a new user
    ---
    tags:
      - Users
    consumes:
      - application/json
    parameters:
      - in: body
        name: body
        schema:
          type: object
          properties:
            email: { type: string }
            password: { type: string }
    responses:
      201:
        description: Created
      409:
        description: Email already registered
      422:
        description: Validation error
    """
    data = user_create_schema.load(request.get_json(silent=True) or {})
    if _email_taken(data["email"]):
        abort(409, description="Email already registered")

    user = User(
        email=data["email"],
        password_hash=auth_session().hash_password(data["password"]),
    )
    storage.new(user)
    storage.save()
    return jsonify(user_out_schema.dump(user)), 201


@bp.put("/users")
@jwt_required()
def update_user():
    """
    Update email and password of the authenticated user
    ---
    tags:
      - Users
    security:
      - Bearer: []
    consumes:
      - application/json
    parameters:
      - in: body
        name: body
        schema:
          type: object
          properties:
            email: { type: string }
            password: { type: string }
    responses:
      200:
        description: OK
      401:
        description: Unauthorized
    """
    data = user_update_schema.load(request.get_json(silent=True) or {})
    user = storage.get(User, str(g.current_user_id))
    if not user:
        abort(401, description="Unauthorized")
    if _email_taken(data["email"], exclude_id=user.id):
        abort(409, description="Email already registered")

    user.email = data["email"]
    user.password_hash = auth_session().hash_password(data["password"])
    storage.new(user)
    storage.save()
    return jsonify(user_out_schema.dump(user)), 200
