"""
Authorization Gate

Every profile view is wrapped with ``login_required``. The check reads the
session through the SessionManager only; a request that is not signed in
never reaches the view, so it never touches the profile store.
"""

from functools import wraps

from profilehub.errors import Unauthenticated
from profilehub.extensions import get_session_manager


def require_authenticated(payload):
    """Raise Unauthenticated unless the session payload is signed in."""
    if not get_session_manager().is_authenticated(payload):
        raise Unauthenticated()


def login_required(f):
    """Decorator to ensure the request comes from a signed-in session.

    A failed check raises Unauthenticated, which the application answers
    with a redirect to the login page.
    """
    @wraps(f)
    def wrapper(*args, **kwargs):
        require_authenticated(get_session_manager().load())
        return f(*args, **kwargs)
    return wrapper
