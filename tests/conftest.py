from unittest.mock import create_autospec

import pytest

from profilehub import create_app
from profilehub.config import TestConfig
from profilehub.extensions import db
from profilehub.services import ProfileStore


@pytest.fixture()
def app(tmp_path):
    class _Config(TestConfig):
        SQLALCHEMY_DATABASE_URI = f"sqlite:///{tmp_path / 'test.db'}"

    app = create_app(_Config)
    yield app
    with app.app_context():
        db.session.remove()
        db.engine.dispose()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def app_ctx(app):
    with app.app_context():
        yield


@pytest.fixture()
def profile_store(app, app_ctx):
    return app.extensions['profile_store']


@pytest.fixture()
def credential_store(app, app_ctx):
    return app.extensions['credential_store']


@pytest.fixture()
def auth_client(app, client):
    """A test client already signed in as alice."""
    with app.app_context():
        app.extensions['credential_store'].register('alice', 'secret123')
    r = client.post('/login', data={'username': 'alice', 'password': 'secret123'})
    assert r.status_code == 303
    return client


@pytest.fixture()
def store_spy(app):
    # Replaces the profile store so tests can assert it was never called
    spy = create_autospec(ProfileStore, instance=True)
    app.extensions['profile_store'] = spy
    return spy
