"""Configuration module for Flask application."""
import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Config:
    """Base configuration class."""

    # Flask
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    DEBUG = os.getenv('FLASK_DEBUG', '1') == '1'
    ENV = os.getenv('FLASK_ENV', 'development')

    # Session Configuration (Production-safe defaults)
    SESSION_COOKIE_SECURE = os.getenv('SESSION_COOKIE_SECURE', 'false').lower() == 'true'
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = os.getenv('SESSION_COOKIE_SAMESITE', 'Lax')

    # Error tracking (production only)
    SENTRY_DSN = os.getenv('SENTRY_DSN')

    # Catalog defaults
    PLACEHOLDER_IMAGE = os.getenv('PLACEHOLDER_IMAGE', 'images/no-picture-Square210.png')
    DEFAULT_DESCRIPTION = os.getenv('DEFAULT_DESCRIPTION', 'No description provided.')
    MIN_RELEASE_YEAR = int(os.getenv('MIN_RELEASE_YEAR', '1900'))

    # Image URL reachability check
    IMAGE_CHECK_ENABLED = os.getenv('IMAGE_CHECK_ENABLED', 'true').lower() == 'true'
    IMAGE_CHECK_TIMEOUT = float(os.getenv('IMAGE_CHECK_TIMEOUT', '5'))


class TestConfig(Config):
    """Configuration used by the test suite."""

    TESTING = True
    DEBUG = False
    WTF_CSRF_ENABLED = False
    IMAGE_CHECK_ENABLED = False
