"""
Configuration classes for the academy application.
Values come from environment variables (a .env file is loaded by app.py).
"""

import os


def _env_flag(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    """Settings shared by every environment."""

    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production'

    # SQLite file holding the key-value storage table
    DATABASE_PATH = os.environ.get('DATABASE_PATH') or 'instance/academy.db'
    DATABASE_TIMEOUT = float(os.environ.get('DATABASE_TIMEOUT', 5.0))

    # CSRF: JSON clients fetch a token from /csrf-token and send it in X-CSRFToken
    WTF_CSRF_ENABLED = True
    WTF_CSRF_TIME_LIMIT = 3600
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'
    SESSION_COOKIE_SECURE = False

    # Material uploads are read for their size only; the files are not kept
    MAX_CONTENT_LENGTH = int(os.environ.get('MAX_CONTENT_LENGTH', 2 * 1024 * 1024))

    JSON_SORT_KEYS = False

    # "Today" for age checks, and the offset of stored timestamps
    TIMEZONE = os.environ.get('TIMEZONE', 'America/New_York')

    APP_NAME = 'PSP Academy'
    APP_VERSION = '1.0.0'


class DevelopmentConfig(Config):
    """Local development."""

    DEBUG = True
    TESTING = False
    WTF_CSRF_SSL_STRICT = False


class ProductionConfig(Config):
    """Production behind gunicorn."""

    DEBUG = False
    TESTING = False
    SESSION_COOKIE_SECURE = _env_flag('SESSION_COOKIE_SECURE', True)
    WTF_CSRF_SSL_STRICT = SESSION_COOKIE_SECURE
    PREFERRED_URL_SCHEME = 'https' if SESSION_COOKIE_SECURE else 'http'

    @classmethod
    def validate(cls) -> None:
        """
        Check the environment a production deployment needs.

        Raises:
            ValueError: A required variable is missing or too weak
        """
        secret_key = os.environ.get('SECRET_KEY')
        if not secret_key:
            raise ValueError('SECRET_KEY environment variable must be set in production')
        if len(secret_key) < 32:
            raise ValueError('SECRET_KEY must be at least 32 characters in production')
        if not os.environ.get('DATABASE_PATH'):
            raise ValueError('DATABASE_PATH environment variable must be set in production')


class TestConfig(Config):
    """Test suite settings; tests point DATABASE_PATH at a temporary file."""

    TESTING = True
    DEBUG = True
    WTF_CSRF_ENABLED = False
    DATABASE_PATH = os.environ.get('DATABASE_PATH', ':memory:')
    SECRET_KEY = 'test-secret-key'


config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'test': TestConfig,
    'default': DevelopmentConfig
}
