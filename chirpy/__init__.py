from flask import Flask
from flasgger import Swagger
from flask_cors import CORS

from auth import AuthSessionService
from auth.exceptions import ConfigurationFault
from models import storage
from models.refresh_token_store import SQLRefreshTokenStore
from utils.metrics import HitCounter

from .config import get_config
from .errors import register_error_handlers

# Minimal Swagger config: exposes /swagger.json and UI at /apidocs
SWAGGER_TEMPLATE = {
    "swagger": "2.0",
    "info": {
        "title": "Chirpy API",
        "version": "1.0.0",
        "description": "REST API for users, short text posts (chirps) and session tokens.",
    },
    "basePath": "/",
    "schemes": ["http"],
    "securityDefinitions": {
        "Bearer": {
            "type": "apiKey",
            "name": "Authorization",
            "in": "header",
            "description": "Enter the token with the `Bearer ` prefix, e.g. \"Bearer abcde12345\"."
        },
        "ApiKey": {
            "type": "apiKey",
            "name": "Authorization",
            "in": "header",
            "description": "Webhook key with the `ApiKey ` prefix."
        }
    }
}

SWAGGER_CONFIG = {
    "headers": [],
    "specs": [
        {
            "endpoint": "apispec_1",
            "route": "/swagger.json",
            "rule_filter": lambda rule: True,   # include all endpoints
            "model_filter": lambda tag: True,   # include all models
        }
    ],
    "static_url_path": "/flasgger_static",
    "swagger_ui": True,
    "specs_route": "/apidocs/",
}


def create_app(config_name: str | None = None, overrides: dict | None = None) -> Flask:
    """
    Application factory: creates and configures the Flask app.

    Raises ConfigurationFault when JWT_SECRET is missing; the app is
    never built with an empty signing secret.
    """
    app = Flask(__name__)

    # Load configuration (reads .env via get_config)
    app.config.from_object(get_config(config_name))
    app.config.update(overrides or {})

    if not app.config.get("JWT_SECRET"):
        raise ConfigurationFault("JWT_SECRET must be set")

    # Cross-Origin Resource Sharing: enable for dev, configurable for prod
    CORS(app, resources={r"/*": {"origins": app.config.get("CORS_ORIGINS", "*")}})

    # Swagger UI and JSON
    Swagger(app, template=SWAGGER_TEMPLATE, config=SWAGGER_CONFIG)

    # Register global error handlers that return the uniform error envelope
    register_error_handlers(app)

    storage.reload(
        app.config["DATABASE_URL"],
        echo=app.config.get("DB_ECHO", False),
        pool_timeout=app.config.get("DB_POOL_TIMEOUT", 10),
    )

    app.extensions["auth_session"] = AuthSessionService(
        SQLRefreshTokenStore(storage),
        signing_secret=app.config["JWT_SECRET"],
        api_key=app.config.get("POLKA_KEY"),
        access_token_ttl=app.config["ACCESS_TOKEN_TTL"],
    )
    app.extensions["hit_counter"] = HitCounter()

    from .health import bp as health_bp
    from .auth import bp as auth_bp
    from .users import bp as users_bp
    from .chirps import bp as chirps_bp
    from .webhooks import bp as webhooks_bp
    from .admin import bp as admin_bp
    from .fileserver import bp as fileserver_bp

    app.register_blueprint(health_bp, url_prefix="/api")
    app.register_blueprint(auth_bp, url_prefix="/api")
    app.register_blueprint(users_bp, url_prefix="/api")
    app.register_blueprint(chirps_bp, url_prefix="/api")
    app.register_blueprint(webhooks_bp, url_prefix="/api")
    app.register_blueprint(admin_bp, url_prefix="/admin")
    app.register_blueprint(fileserver_bp, url_prefix="/app")

    # Ensure the DB session is removed at the end of each request/app context
    @app.teardown_appcontext
    def remove_session(exception=None):
        storage.close()

    return app
