"""
Session Manager

The login state lives in Flask's signed cookie session. A cookie that is
missing, malformed or signed with another key is opened by Flask as an
empty session, so every request starts either anonymous or with a payload
this application wrote itself.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from flask import current_app, session
from flask_login import UserMixin

from profilehub.errors import EncodingError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionPayload:
    """Typed view of the values kept in the session cookie."""
    authenticated: bool = False
    username: Optional[str] = None

    def to_session(self):
        return {'authenticated': self.authenticated, 'username': self.username}


ANONYMOUS = SessionPayload()


class SessionUser(UserMixin):
    """What Flask-Login exposes as ``current_user`` for a signed-in session."""

    def __init__(self, username):
        self.id = username
        self.username = username

    def __repr__(self):
        return f'<SessionUser {self.username}>'


class SessionManager:
    """Reads, establishes and clears the login state of the current request."""

    def __init__(self, app=None):
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        if not app.config.get('SECRET_KEY'):
            raise RuntimeError('SECRET_KEY must be set to sign session cookies')
        app.extensions['session_manager'] = self

    def load(self) -> SessionPayload:
        """Return the payload of the current session, or ANONYMOUS.

        Never raises: a payload with unexpected value types is logged and
        treated as anonymous.
        """
        authenticated = session.get('authenticated', False)
        username = session.get('username')

        if not isinstance(authenticated, bool) or not isinstance(username, (str, type(None))):
            logger.warning('Ignoring session with malformed values (authenticated of type %s)', type(authenticated).__name__)
            return ANONYMOUS
        if authenticated and not username:
            logger.warning('Ignoring authenticated session without a username')
            return ANONYMOUS
        if not authenticated:
            return ANONYMOUS
        return SessionPayload(authenticated=True, username=username)

    def establish(self, username):
        """Mark the session as signed in for ``username``.

        Callers must have verified the user's password first.
        """
        payload = SessionPayload(authenticated=True, username=username)
        self._ensure_encodable(payload.to_session())
        session.clear()
        session.update(payload.to_session())

    def clear(self):
        """Drop every session value; Flask then expires the cookie."""
        self._ensure_encodable({})
        session.clear()

    @staticmethod
    def is_authenticated(payload: SessionPayload) -> bool:
        return payload.authenticated is True

    def _ensure_encodable(self, values):
        # Flask signs the cookie after the view returns, too late to turn a
        # failure into a response, so sign once up front.
        serializer = current_app.session_interface.get_signing_serializer(current_app)
        if serializer is None:
            raise EncodingError('No signing key is configured for sessions.')
        try:
            serializer.dumps(values)
        except (TypeError, ValueError) as e:
            logger.error('Could not encode session values: %s', e)
            raise EncodingError() from e
