"""
Test settings.

SQLite in memory by default. Set TEST_DB_ENGINE=postgresql (with the DB_*
variables) to run against PostgreSQL, which the row-lock tests need.
"""
import os

from .base import *  # noqa: F401,F403
from .database import postgresql_database

SECRET_KEY = 'test-secret-key'

DEBUG = False

TEST_DB_ENGINE = os.environ.get('TEST_DB_ENGINE', 'sqlite').strip().lower()

if TEST_DB_ENGINE == 'postgresql':
    DATABASES = {
        'default': {**postgresql_database(), 'CONN_MAX_AGE': 0},
    }
else:
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.sqlite3',
            'NAME': ':memory:',
        }
    }

PASSWORD_HASHERS = [
    'django.contrib.auth.hashers.MD5PasswordHasher',
]

LOGGING['root']['level'] = 'WARNING'  # noqa: F405
