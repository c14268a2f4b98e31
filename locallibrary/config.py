import os

from dotenv import load_dotenv

load_dotenv()

BASE_DIR = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))


def env_flag(name, default="false"):
    return os.environ.get(name, default).strip().lower() in ("1", "true", "yes")


class Config:
    SECRET_KEY = os.environ.get('CATALOG_SECRET') or "dev-secret-change-me"
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        f"sqlite:///{os.path.join(BASE_DIR, 'locallibrary.db')}"
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # "development" exposes error details on the 500 page
    CATALOG_ENV = os.environ.get('CATALOG_ENV', 'production')
    LOG_LEVEL = os.environ.get('CATALOG_LOG_LEVEL', 'INFO')

    WTF_CSRF_ENABLED = True
    FORCE_HTTPS = env_flag('CATALOG_FORCE_HTTPS')

    # Scripts allowed by the security headers (jQuery + Bootstrap CDNs)
    CONTENT_SECURITY_POLICY = {
        'default-src': ["'self'"],
        'script-src': ["'self'", "code.jquery.com", "cdn.jsdelivr.net"],
        'style-src': ["'self'", "cdn.jsdelivr.net", "'unsafe-inline'"],
    }


class DevelopmentConfig(Config):
    CATALOG_ENV = 'development'
    LOG_LEVEL = 'DEBUG'


class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    WTF_CSRF_ENABLED = False
    FORCE_HTTPS = False
    SECRET_KEY = "testing"
