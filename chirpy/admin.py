from __future__ import annotations

import logging

from flask import Blueprint, current_app, abort

from models import storage
from models.chirp import Chirp
from models.user import User
from utils.decorators import auth_session

logger = logging.getLogger(__name__)

bp = Blueprint("admin", __name__)

METRICS_TEMPLATE = """<html>
  <body>
    <h1>Welcome, Chirpy Admin</h1>
    <p>Chirpy has been visited {hits} times!</p>
  </body>
</html>"""


@bp.get("/metrics")
def metrics():
    """
    File server hit count
    ---
    tags: [Admin]
    produces:
      - text/html
    responses:
      200: { description: HTML page }
    """
    hits = current_app.extensions["hit_counter"].value
    return METRICS_TEMPLATE.format(hits=hits), 200, {"Content-Type": "text/html; charset=utf-8"}


@bp.post("/reset")
def reset():
    """
    Dev only: reset the hit counter and delete every user, chirp and refresh token
    ---
    tags: [Admin]
    responses:
      200: { description: Reset }
      403: { description: Not a dev platform }
    """
    if current_app.config.get("PLATFORM") != "dev":
        abort(403, description="Forbidden")

    current_app.extensions["hit_counter"].reset()
    auth_session().store.delete_all_credentials()

    session = storage.get_session()
    session.query(Chirp).delete(synchronize_session=False)
    session.query(User).delete(synchronize_session=False)
    storage.save()
    logger.warning("admin reset: all users, chirps and credentials deleted")
    return "Reset", 200, {"Content-Type": "text/plain; charset=utf-8"}
