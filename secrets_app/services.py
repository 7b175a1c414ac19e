from dataclasses import dataclass

from flask import current_app

from .repository import UserRepository
from .strategies import GoogleStrategy, LocalStrategy
from .utils.google import GoogleOAuthClient

EXTENSION_KEY = "secrets_app"


@dataclass
class Services:
    users: UserRepository
    local: LocalStrategy
    google: GoogleStrategy
    oauth: GoogleOAuthClient


def init_services(app):
    """Build the per-application services and attach them to ``app.extensions``."""
    from . import db

    users = UserRepository(db.session)
    services = Services(
        users=users,
        local=LocalStrategy(users, rounds=app.config["BCRYPT_ROUNDS"]),
        google=GoogleStrategy(users),
        oauth=GoogleOAuthClient.from_config(app.config),
    )
    app.extensions[EXTENSION_KEY] = services
    if not services.oauth.enabled:
        app.logger.info("[OAuth] CLIENT_ID/CLIENT_SECRET not set; Google sign-in disabled")
    return services


def get_services() -> Services:
    return current_app.extensions[EXTENSION_KEY]
