"""
Profile Hub - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

import logging
import os

from flask import Flask, redirect, render_template, url_for
from flask_login import current_user
from werkzeug.exceptions import HTTPException

from profilehub.config import Config, DEFAULT_SECRET_KEY
from profilehub.errors import Unauthenticated
from profilehub.extensions import db, login_manager, session_manager
from profilehub.services import CredentialStore, ProfileStore
from profilehub.session import SessionUser

logger = logging.getLogger(__name__)


def create_app(config_class=Config):
    """Build the application with its shared services.

    The profile and credential stores and the session manager are created
    once here and registered in ``app.extensions``; the error handlers turn
    Unauthenticated into a login redirect and render every HTTP error page.
    The tables are created if missing.

    Args:
        config_class: Configuration class to use (default: Config)
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    if app.config.get('SECRET_KEY') == DEFAULT_SECRET_KEY:
        logger.warning('SECRET_KEY is not set; using the development key')

    # Initialize extensions
    db.init_app(app)
    login_manager.init_app(app)
    session_manager.init_app(app)

    # Stores are built once and shared by every request
    app.extensions['profile_store'] = ProfileStore(db)
    app.extensions['credential_store'] = CredentialStore(db, app.config['PASSWORD_HASH_METHOD'])

    # Register blueprints
    from profilehub.auth import auth_bp
    from profilehub.profiles import profiles_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(profiles_bp)

    _register_error_handlers(app)

    @login_manager.request_loader
    def load_user_from_session(request):
        payload = session_manager.load()
        if session_manager.is_authenticated(payload):
            return SessionUser(payload.username)
        return None

    # Context processor for the auth flag every template needs
    @app.context_processor
    def inject_auth_flag():
        return dict(is_authenticated=current_user.is_authenticated)

    # Create database tables
    with app.app_context():
        _ensure_sqlite_dir(app.config['SQLALCHEMY_DATABASE_URI'])
        db.create_all()
        logger.info('Connected to the database at %s',
                    db.engine.url.render_as_string(hide_password=True))

    return app


def _register_error_handlers(app):
    @app.errorhandler(Unauthenticated)
    def _redirect_to_login(e):
        logger.info('Not authenticated, redirecting to login')
        return redirect(url_for('auth.login'), code=303)

    @app.errorhandler(HTTPException)
    def _render_http_error(e):
        # Keep the exception's own headers, e.g. Allow on a 405
        response = e.get_response()
        response.set_data(render_template('error.html', error=e))
        response.content_type = 'text/html; charset=utf-8'
        return response


def _ensure_sqlite_dir(uri):
    """Create the parent directory of a file-backed SQLite database."""
    prefix = 'sqlite:///'
    if not uri.startswith(prefix) or uri.endswith(':memory:'):
        return
    path = uri[len(prefix):]
    if os.path.dirname(path):
        os.makedirs(os.path.dirname(path), exist_ok=True)
