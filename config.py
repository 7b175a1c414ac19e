import os
from datetime import timedelta

from sqlalchemy.engine import URL


def session_lifetime():
    return timedelta(seconds=int(os.getenv("SESSION_TTL_SECONDS", "3600")))


def database_uri(default):
    # PG_* variables win; DATABASE_URI is the escape hatch for anything else.
    host = os.getenv("PG_HOST")
    if host:
        url = URL.create(
            "postgresql+psycopg",
            username=os.getenv("PG_USER"),
            password=os.getenv("PG_PASSWORD"),
            host=host,
            port=int(os.getenv("PG_PORT") or 5432),
            database=os.getenv("PG_DATABASE"),
        )
        return url.render_as_string(hide_password=False)
    return os.getenv("DATABASE_URI", default)


class Config:
    SECRET_KEY = os.getenv("SESSION_SECRET")
    DEBUG = False
    TEMPLATES_AUTO_RELOAD = False
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_DATABASE_URI = database_uri("sqlite:///secrets.db")

    PERMANENT_SESSION_LIFETIME = session_lifetime()
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = "Lax"

    BCRYPT_ROUNDS = 10

    GOOGLE_CLIENT_ID = os.getenv("CLIENT_ID")
    GOOGLE_CLIENT_SECRET = os.getenv("CLIENT_SECRET")
    GOOGLE_CALLBACK_URL = os.getenv("GOOGLE_CALLBACK_URL", "http://localhost:3000/auth/google/secrets")
    GOOGLE_AUTHORIZE_URL = "https://accounts.google.com/o/oauth2/v2/auth"
    GOOGLE_TOKEN_URL = "https://oauth2.googleapis.com/token"
    GOOGLE_USERINFO_URL = "https://www.googleapis.com/oauth2/v3/userinfo"
    GOOGLE_HTTP_TIMEOUT = 10

    PORT = 3000


class DevelopmentConfig(Config):
    DEBUG = True
    TEMPLATES_AUTO_RELOAD = True
    SECRET_KEY = os.getenv("SESSION_SECRET", "dev-secret-key-change-me")


class ProductionConfig(Config):
    SESSION_COOKIE_SECURE = True


class TestingConfig(Config):
    TESTING = True
    SECRET_KEY = "test-secret-key"
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    WTF_CSRF_ENABLED = False
    BCRYPT_ROUNDS = 4
    GOOGLE_CLIENT_ID = "test-client-id"
    GOOGLE_CLIENT_SECRET = "test-client-secret"
    GOOGLE_CALLBACK_URL = "http://localhost/auth/google/secrets"
