"""
Configuration settings for the Profile Hub application.

Values are read from the environment once, when this module is imported.
A local ``.env`` file is honoured so development setups match production.
"""
import os

from dotenv import load_dotenv
from sqlalchemy.engine import URL

load_dotenv()

basedir = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))

DEFAULT_SECRET_KEY = 'dev-secret-key-change-in-production-12345'


def _database_uri():
    """Resolve the database URI.

    DATABASE_URL wins; otherwise the discrete DB_* variables describe a
    PostgreSQL server; otherwise a local SQLite file is used.
    """
    if os.environ.get('DATABASE_URL'):
        return os.environ['DATABASE_URL']

    host = os.environ.get('DB_HOST')
    if host:
        port = os.environ.get('DB_PORT')
        url = URL.create(
            'postgresql+psycopg2',
            username=os.environ.get('DB_USER'),
            password=os.environ.get('DB_PASSWORD'),
            host=host,
            port=int(port) if port else None,
            database=os.environ.get('DB_NAME'),
            query={'sslmode': os.environ.get('DB_SSLMODE', 'disable')},
        )
        return url.render_as_string(hide_password=False)

    return 'sqlite:///' + os.path.join(basedir, 'instance', 'profilehub.db')


class Config:
    """Flask application configuration"""

    # Signs the session cookie
    SECRET_KEY = os.environ.get('SECRET_KEY') or DEFAULT_SECRET_KEY

    SESSION_COOKIE_NAME = 'session'
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'

    # Database configuration
    SQLALCHEMY_DATABASE_URI = _database_uri()
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Werkzeug hash method; the trailing number is the PBKDF2 iteration count
    PASSWORD_HASH_METHOD = os.environ.get('PASSWORD_HASH_METHOD') or 'pbkdf2:sha256:600000'

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()


class TestConfig(Config):
    """Testing configuration"""
    TESTING = True
    SECRET_KEY = 'test-secret-key'
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    PASSWORD_HASH_METHOD = 'pbkdf2:sha256:1000'
