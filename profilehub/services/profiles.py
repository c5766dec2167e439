"""
Profile Store

CRUD over the ``profiles`` table. Each operation is a single round trip;
concurrent writes to the same row are settled by the database, last write
wins.
"""

import logging

from profilehub.errors import NotFound
from profilehub.models import Profile
from profilehub.services.storage import storage_guard
from profilehub.utils import fits_db_integer, parse_db_int

logger = logging.getLogger(__name__)


class ProfileStore:

    def __init__(self, db):
        self.db = db

    def list_all(self):
        """Return every profile in the order the database hands them back."""
        with storage_guard(self.db, 'list profiles'):
            return Profile.query.all()

    def get_by_id(self, profile_id):
        # No row can hold an id outside the column's range
        if not fits_db_integer(profile_id):
            raise NotFound('Profile not found')
        with storage_guard(self.db, f'load profile {profile_id}'):
            profile = self.db.session.get(Profile, profile_id)
        if profile is None:
            raise NotFound('Profile not found')
        return profile

    def create(self, name, age, occupation):
        """Insert a profile and return it with its assigned id.

        ``age`` may be the raw form text; it is parsed before touching the
        database.
        """
        profile = Profile(name=name, age=parse_db_int(age, 'Age'), occupation=occupation)
        with storage_guard(self.db, 'create profile'):
            self.db.session.add(profile)
            self.db.session.commit()
        logger.info('Created profile %s', profile.id)
        return profile

    def update(self, profile_id, name, age, occupation):
        """Overwrite every field of a profile.

        An id that matches nothing is not an error; no row is created.
        """
        values = {'name': name, 'age': parse_db_int(age, 'Age'), 'occupation': occupation}
        if not fits_db_integer(profile_id):
            logger.info('Update matched no profile with id %s', profile_id)
            return
        with storage_guard(self.db, f'update profile {profile_id}'):
            matched = Profile.query.filter_by(id=profile_id).update(values)
            self.db.session.commit()
        if not matched:
            logger.info('Update matched no profile with id %s', profile_id)

    def delete(self, profile_id):
        """Remove a profile; an unknown id is a no-op."""
        if not fits_db_integer(profile_id):
            logger.info('Delete matched no profile with id %s', profile_id)
            return
        with storage_guard(self.db, f'delete profile {profile_id}'):
            matched = Profile.query.filter_by(id=profile_id).delete()
            self.db.session.commit()
        if not matched:
            logger.info('Delete matched no profile with id %s', profile_id)
