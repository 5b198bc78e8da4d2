"""
Tests for database settings selection.
"""
import importlib

import config.settings.test as test_settings
from config.settings.database import postgresql_database


def test_postgresql_database_from_env():
    database = postgresql_database({
        'DB_NAME': 'shop',
        'DB_HOST': 'db.internal',
        'DB_STATEMENT_TIMEOUT_MS': '2500',
    })

    assert database['ENGINE'] == 'django.db.backends.postgresql'
    assert database['NAME'] == 'shop'
    assert database['HOST'] == 'db.internal'
    assert database['PORT'] == '5432'
    assert database['OPTIONS']['options'] == '-c statement_timeout=2500'


def test_test_settings_switch_to_postgresql(monkeypatch):
    try:
        with monkeypatch.context() as m:
            m.setenv('TEST_DB_ENGINE', 'PostgreSQL')
            m.setenv('DB_NAME', 'shop_test')
            module = importlib.reload(test_settings)

            assert module.DATABASES['default']['ENGINE'] == 'django.db.backends.postgresql'
            assert module.DATABASES['default']['NAME'] == 'shop_test'
            assert module.DATABASES['default']['CONN_MAX_AGE'] == 0
    finally:
        importlib.reload(test_settings)


def test_test_settings_default_to_sqlite(monkeypatch):
    monkeypatch.delenv('TEST_DB_ENGINE', raising=False)
    try:
        module = importlib.reload(test_settings)
        assert module.DATABASES['default']['ENGINE'] == 'django.db.backends.sqlite3'
    finally:
        importlib.reload(test_settings)
