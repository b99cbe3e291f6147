"""
Environment-aware configuration.
JWT_SECRET has no default: the app refuses to start without it.
"""
import os
from dotenv import load_dotenv
from datetime import timedelta

load_dotenv()  # Read .env if present


class BaseConfig:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")  # Flask session key, unrelated to tokens
    DEBUG = False
    TESTING = False
    # CORS: in dev we usually allow '*', in prod supply a comma-separated list in env
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")
    APP_ENV = os.getenv("APP_ENV", "dev")
    # "dev" enables POST /admin/reset
    PLATFORM = os.getenv("PLATFORM", "")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///chirpy.db")
    DB_ECHO = False
    # seconds to wait for a pooled connection before the request fails
    DB_POOL_TIMEOUT = int(os.getenv("DB_POOL_TIMEOUT_SECONDS", "10"))

    JWT_SECRET = os.getenv("JWT_SECRET")
    ACCESS_TOKEN_TTL = timedelta(seconds=int(os.getenv("ACCESS_TOKEN_TTL_SECONDS", "3600")))
    # webhook API key
    POLKA_KEY = os.getenv("POLKA_KEY")

    # relative paths resolve against the chirpy package
    FILESERVER_ROOT = os.getenv("FILESERVER_ROOT", "assets")


class DevelopmentConfig(BaseConfig):
    DEBUG = True
    # In dev, propagate exceptions so our error handler has full context
    PROPAGATE_EXCEPTIONS = True


class ProductionConfig(BaseConfig):
    DEBUG = False


class TestingConfig(BaseConfig):
    TESTING = True
    DATABASE_URL = "sqlite://"
    JWT_SECRET = "testing-secret-0123456789abcdef0123456789"
    POLKA_KEY = "testing-polka-key"
    PLATFORM = "dev"
    FILESERVER_ROOT = "assets"


def get_config(name: str | None):
    """
    Select config class.
    - If name is provided, choose by name.
    - Else choose based on APP_ENV (dev/prod).
    """
    if name:
        name = name.lower()
    env = (name or os.getenv("APP_ENV", "dev")).lower()
    if env in ["prod", "production"]:
        return ProductionConfig
    if env in ["test", "testing"]:
        return TestingConfig
    return DevelopmentConfig
