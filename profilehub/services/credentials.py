"""
Credential Store

Keeps usernames and salted password hashes. Callers only ever learn
whether a username/password pair is valid, never the stored hash and
never whether the username exists.
"""

import logging
from functools import cached_property

from sqlalchemy.exc import IntegrityError
from werkzeug.security import generate_password_hash, check_password_hash

from profilehub.errors import Conflict, InvalidCredentials, ValidationError
from profilehub.models import User
from profilehub.services.storage import storage_guard

logger = logging.getLogger(__name__)


class CredentialStore:

    def __init__(self, db, hash_method):
        self.db = db
        self.hash_method = hash_method

    @cached_property
    def _dummy_hash(self):
        # Unknown users still pay for one hash check
        return generate_password_hash('profilehub-unknown-user', method=self.hash_method)

    def register(self, username, password):
        """Create a user account.

        Raises:
            ValidationError: username or password is empty
            Conflict: the username is already registered
            StorageError: the database rejected the insert for another reason
        """
        if not username or not password:
            raise ValidationError('Username and password are required.')

        user = User(username=username,
                    password_hash=generate_password_hash(password, method=self.hash_method))
        with storage_guard(self.db, 'register user'):
            try:
                self.db.session.add(user)
                self.db.session.commit()
            except IntegrityError as e:
                self.db.session.rollback()
                logger.info('Registration refused, username %r already exists', username)
                raise Conflict() from e
        logger.info('Registered user %s', username)
        return user

    def verify(self, username, password) -> bool:
        with storage_guard(self.db, 'look up credentials'):
            user = User.query.filter_by(username=username).first()

        if user is None:
            check_password_hash(self._dummy_hash, password or '')
            return False
        return check_password_hash(user.password_hash, password or '')

    def authenticate(self, username, password):
        """Like ``verify`` but raises InvalidCredentials on a mismatch."""
        if not self.verify(username, password):
            raise InvalidCredentials()
