import pytest

from profilehub.errors import Conflict, InvalidCredentials, ValidationError
from profilehub.extensions import db
from profilehub.models import User


def test_registered_password_verifies(credential_store):
    credential_store.register('alice', 'secret123')

    assert credential_store.verify('alice', 'secret123') is True
    assert credential_store.verify('alice', 'secret124') is False
    assert credential_store.verify('alice', '') is False


def test_unknown_user_is_just_false(credential_store):
    assert credential_store.verify('nobody', 'secret123') is False


def test_password_is_stored_hashed(credential_store):
    credential_store.register('alice', 'secret123')

    user = User.query.filter_by(username='alice').one()
    assert user.password_hash != 'secret123'
    assert user.password_hash.startswith('pbkdf2:sha256:1000$')


def test_hashes_are_salted(credential_store):
    credential_store.register('alice', 'same-password')
    credential_store.register('bob', 'same-password')

    hashes = {u.password_hash for u in User.query.all()}
    assert len(hashes) == 2


def test_duplicate_username_conflicts_and_keeps_original(credential_store):
    credential_store.register('alice', 'secret123')
    original_hash = User.query.filter_by(username='alice').one().password_hash

    with pytest.raises(Conflict):
        credential_store.register('alice', 'another-password')

    db.session.expire_all()
    users = User.query.filter_by(username='alice').all()
    assert len(users) == 1
    assert users[0].password_hash == original_hash
    assert credential_store.verify('alice', 'secret123') is True
    assert credential_store.verify('alice', 'another-password') is False


@pytest.mark.parametrize('username, password', [('', 'secret123'), ('alice', '')])
def test_register_requires_username_and_password(credential_store, username, password):
    with pytest.raises(ValidationError):
        credential_store.register(username, password)
    assert User.query.count() == 0


def test_authenticate_does_not_say_which_part_was_wrong(credential_store):
    credential_store.register('alice', 'secret123')

    with pytest.raises(InvalidCredentials) as wrong_password:
        credential_store.authenticate('alice', 'nope')
    with pytest.raises(InvalidCredentials) as unknown_user:
        credential_store.authenticate('mallory', 'secret123')

    assert wrong_password.value.description == unknown_user.value.description
    credential_store.authenticate('alice', 'secret123')
