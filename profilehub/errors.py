"""
Application Errors

Errors that map onto an HTTP status subclass the matching Werkzeug
exception, so raising one from anywhere under a request is enough for
Flask to answer with the right status code.
"""

from werkzeug import exceptions


class ValidationError(exceptions.BadRequest):
    """Missing or unparseable request input."""
    description = 'The request is missing a required value or contains an invalid one.'


class NotFound(exceptions.NotFound):
    description = 'The requested record does not exist.'


class InvalidCredentials(exceptions.Unauthorized):
    """Unknown username or wrong password; the two are never told apart."""
    description = 'Invalid username or password.'


class Conflict(exceptions.Conflict):
    description = 'That username is already taken.'


class StorageError(exceptions.InternalServerError):
    description = 'The database could not complete the request.'


class EncodingError(exceptions.InternalServerError):
    description = 'The session could not be saved.'


class Unauthenticated(Exception):
    """Raised by the authorization gate; answered with a redirect to the login page."""
