from __future__ import annotations

import uuid

from flask import Blueprint, request, jsonify, g, abort

from models import storage
from models.chirp import Chirp, MAX_CHIRP_LENGTH
from models.schemas.chirp import ChirpCreateSchema, ChirpOutSchema
from utils.decorators import jwt_required
from utils.profanity import clean_body

bp = Blueprint("chirps", __name__)

create_schema = ChirpCreateSchema()
out_schema = ChirpOutSchema()
out_list_schema = ChirpOutSchema(many=True)


def _parse_uuid(raw: str | None) -> uuid.UUID | None:
    try:
        return uuid.UUID(raw)
    except (TypeError, ValueError):
        return None


def parse_sort():
    # anything but "desc" sorts oldest first
    desc = request.args.get("sort", "asc").lower() == "desc"
    return (Chirp.created_at.desc() if desc else Chirp.created_at.asc(), Chirp.id.asc())


@bp.post("/chirps")
@jwt_required()
def create_chirp():
    """
    Post a chirp
    ---
    tags: [Chirps]
    security:
      - Bearer: []
    consumes:
      - application/json
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          properties:
            body: { type: string, maxLength: 140 }
    responses:
      201: { description: Created }
      400: { description: Chirp is too long }
      401: { description: Unauthorized }
    """
    data = create_schema.load(request.get_json(silent=True) or {})
    if len(data["body"]) > MAX_CHIRP_LENGTH:
        abort(400, description="Chirp is too long")

    chirp = Chirp(body=clean_body(data["body"]), user_id=str(g.current_user_id))
    storage.new(chirp)
    storage.save()
    return jsonify(out_schema.dump(chirp)), 201


@bp.get("/chirps")
def list_chirps():
    """
    List chirps
    ---
    tags: [Chirps]
    parameters:
      - in: query
        name: author_id
        type: string
        description: Only chirps by this user; ignored unless a UUID
      - in: query
        name: sort
        type: string
        default: asc
        description: "Allowed: asc or desc (by created_at)"
    responses:
      200: { description: OK }
    """
    session = storage.get_session()
    query = session.query(Chirp)
    author_id = _parse_uuid(request.args.get("author_id"))
    if author_id:
        query = query.filter(Chirp.user_id == str(author_id))
    rows = query.order_by(*parse_sort()).all()
    return jsonify(out_list_schema.dump(rows)), 200


@bp.get("/chirps/<chirp_id>")
def get_chirp(chirp_id: str):
    """
    Get a chirp by id
    ---
    tags: [Chirps]
    parameters:
      - in: path
        name: chirp_id
        type: string
        required: true
    responses:
      200: { description: OK }
      400: { description: Not a UUID }
      404: { description: Not found }
    """
    parsed = _parse_uuid(chirp_id)
    if not parsed:
        abort(400, description="Please make sure the chirp ID is of type UUID")
    chirp = storage.get(Chirp, str(parsed))
    if not chirp:
        abort(404)
    return jsonify(out_schema.dump(chirp)), 200


@bp.delete("/chirps/<chirp_id>")
@jwt_required()
def delete_chirp(chirp_id: str):
    """
    Delete one of your own chirps
    ---
    tags: [Chirps]
    security:
      - Bearer: []
    parameters:
      - in: path
        name: chirp_id
        type: string
        required: true
    responses:
      204: { description: Deleted }
      401: { description: Unauthorized }
      403: { description: Not the author, or not a chirp id }
      404: { description: Not found }
    """
    parsed = _parse_uuid(chirp_id)
    if not parsed:
        abort(403, description="Forbidden")
    chirp = storage.get(Chirp, str(parsed))
    if not chirp:
        abort(404)
    if chirp.user_id != str(g.current_user_id):
        abort(403, description="Forbidden")
    storage.delete(chirp)
    storage.save()
    return ("", 204)
