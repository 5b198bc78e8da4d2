"""
PostgreSQL connection settings read from DB_* environment variables.
"""
import os


def postgresql_database(environ=None) -> dict:
    """Build the DATABASES entry for PostgreSQL."""
    env = os.environ if environ is None else environ
    return {
        'ENGINE': 'django.db.backends.postgresql',
        'NAME': env.get('DB_NAME', 'coffee_shop'),
        'USER': env.get('DB_USER', 'postgres'),
        'PASSWORD': env.get('DB_PASSWORD', ''),
        'HOST': env.get('DB_HOST', 'localhost'),
        'PORT': env.get('DB_PORT', '5432'),
        'CONN_MAX_AGE': int(env.get('DB_CONN_MAX_AGE', '60')),
        'OPTIONS': {
            'sslmode': env.get('DB_SSLMODE', 'disable'),
            # Checkout holds row locks; a stuck statement must abort the transaction.
            'options': f"-c statement_timeout={env.get('DB_STATEMENT_TIMEOUT_MS', '5000')}",
        },
    }
