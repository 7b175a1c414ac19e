import os
from flask import Flask, flash, redirect, url_for
from flask_login import LoginManager
from flask_sqlalchemy import SQLAlchemy
from dotenv import load_dotenv
from sqlalchemy.exc import SQLAlchemyError

# Load environment variables from .env before config classes read them
load_dotenv()

from config import Config, DevelopmentConfig, ProductionConfig, TestingConfig  # noqa: E402

# Initialize extensions without app
login_manager = LoginManager()

db = SQLAlchemy()


def create_app(config_type=None, overrides=None):
    app = Flask(__name__)

    # Pick config based on FLASK_ENV
    config_type = (config_type or os.getenv("FLASK_ENV", "development")).lower()
    config_map = {
        "development": DevelopmentConfig,
        "production": ProductionConfig,
        "testing": TestingConfig,
        "default": Config
    }
    app.config.from_object(config_map.get(config_type, DevelopmentConfig))
    if overrides:
        app.config.update(overrides)

    if not app.config.get("SECRET_KEY"):
        raise RuntimeError("SESSION_SECRET must be set to sign session cookies")

    # Initialize extensions
    login_manager.init_app(app)
    db.init_app(app)

    from .services import get_services, init_services
    init_services(app)

    # Only the user id lives in the session; the row is re-read on every request.
    @login_manager.user_loader
    def load_user(user_id):
        try:
            return get_services().users.get(int(user_id))
        except ValueError:
            return None

    @login_manager.unauthorized_handler
    def unauthorized():
        return redirect(url_for('auth.login'))

    @app.errorhandler(SQLAlchemyError)
    def handle_db_error(error):
        db.session.rollback()
        app.logger.error("[DB] Request failed: %s", error, exc_info=error)
        flash("Something went wrong. Please try again.", "danger")
        return redirect(url_for('main.index'))

    # Import and register blueprints
    from .routes import main
    from .routes.auth import auth_bp
    app.register_blueprint(main)
    app.register_blueprint(auth_bp)

    # Initialize database tables
    with app.app_context():
        db.create_all()

    return app
