from __future__ import annotations

import logging

from flask import Blueprint, request, abort

from models import storage
from models.user import User
from models.schemas.webhook import WebhookSchema
from utils.decorators import api_key_required

logger = logging.getLogger(__name__)

bp = Blueprint("webhooks", __name__)

webhook_schema = WebhookSchema()

USER_UPGRADED = "user.upgraded"


@bp.post("/polka/webhooks")
@api_key_required()
def polka_webhook():
    """
    Payment provider webhook
    ---
    tags: [Webhooks]
    security:
      - ApiKey: []
    consumes:
      - application/json
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          properties:
            event: { type: string }
            data:
              type: object
              properties:
                user_id: { type: string }
    responses:
      204: { description: Processed or ignored }
      401: { description: Unauthorized }
      404: { description: Unknown user }
    """
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        abort(400, description="Bad request")
    data = webhook_schema.load(payload)

    if data["event"] != USER_UPGRADED:
        return ("", 204)
    user_id = data.get("data", {}).get("user_id")
    if user_id is None:
        abort(400, description="Bad request")

    user = storage.get(User, str(user_id))
    if not user:
        abort(404)
    user.is_chirpy_red = True
    storage.new(user)
    storage.save()
    logger.info("user %s upgraded", user.id)
    return ("", 204)
