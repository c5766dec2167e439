"""
Flask Extensions

Extension objects are created here unbound and attached to an application
in ``create_app``. Per-application services live in ``app.extensions`` and
are reached through the accessors below.
"""

from flask import current_app
from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager

from profilehub.session import SessionManager

# Database instance
db = SQLAlchemy()

# Exposes the signed-in user to templates as ``current_user``.
# Session identity belongs to the SessionManager, so Flask-Login's own
# session protection stays off.
login_manager = LoginManager()
login_manager.session_protection = None

session_manager = SessionManager()


def get_session_manager():
    return current_app.extensions['session_manager']


def get_profile_store():
    return current_app.extensions['profile_store']


def get_credential_store():
    return current_app.extensions['credential_store']
