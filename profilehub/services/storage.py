"""Translation of database failures into application errors."""

import logging
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError

from profilehub.errors import StorageError

logger = logging.getLogger(__name__)


@contextmanager
def storage_guard(db, action):
    """Roll back and re-raise any SQLAlchemy error as StorageError."""
    try:
        yield
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.exception('Database error while trying to %s', action)
        raise StorageError() from e
