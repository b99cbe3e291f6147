from flask import Blueprint, current_app, send_from_directory

from utils.decorators import count_hits

bp = Blueprint("fileserver", __name__)


@bp.get("/", defaults={"filename": "index.html"})
@bp.get("/<path:filename>")
@count_hits
def serve(filename: str):
    """
    Static files; every request counts as a hit
    ---
    tags: [App]
    responses:
      200: { description: File }
      404: { description: Not found }
    """
    return send_from_directory(current_app.config["FILESERVER_ROOT"], filename)
