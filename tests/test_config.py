import importlib

import dotenv

import profilehub.config as config_module


def test_dotenv_values_reach_config(monkeypatch):
    def fake_load_dotenv(*args, **kwargs):
        monkeypatch.setenv('SECRET_KEY', 'from-dotenv')
        monkeypatch.setenv('DB_HOST', 'db.internal')
        monkeypatch.setenv('DB_NAME', 'profiles')
        return True

    monkeypatch.delenv('SECRET_KEY', raising=False)
    monkeypatch.delenv('DATABASE_URL', raising=False)
    monkeypatch.setattr(dotenv, 'load_dotenv', fake_load_dotenv)

    try:
        reloaded = importlib.reload(config_module)
        assert reloaded.Config.SECRET_KEY == 'from-dotenv'
        assert reloaded.Config.SQLALCHEMY_DATABASE_URI.startswith('postgresql+psycopg2://')
        assert 'db.internal' in reloaded.Config.SQLALCHEMY_DATABASE_URI
    finally:
        monkeypatch.undo()
        importlib.reload(config_module)


def test_database_url_wins(monkeypatch):
    monkeypatch.setenv('DATABASE_URL', 'sqlite:///elsewhere.db')
    monkeypatch.setenv('DB_HOST', 'db.internal')

    assert config_module._database_uri() == 'sqlite:///elsewhere.db'
