"""
Local / deployment settings backed by PostgreSQL.
"""
from .base import *  # noqa: F401,F403
from .database import postgresql_database

DATABASES = {
    'default': postgresql_database(),
}
