# fizzylogic/settings.py - Django settings for the FizzyLogic website
import os
import secrets
from pathlib import Path

from dotenv import load_dotenv
from django.core.exceptions import ImproperlyConfigured

from .database import parse_connection_string

BASE_DIR = Path(__file__).resolve().parent.parent

# Values from .env never override variables that are already set in the environment
load_dotenv(BASE_DIR / ".env")


def env_bool(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def env_list(name, default=""):
    return [item.strip() for item in os.environ.get(name, default).split(",") if item.strip()]


DEBUG = env_bool("DEBUG")

SECRET_KEY = os.environ.get("SECRET_KEY")
if not SECRET_KEY:
    if DEBUG:
        SECRET_KEY = secrets.token_hex(32)
    else:
        raise ImproperlyConfigured("No SECRET_KEY set. Please set it in the environment or the .env file.")

ALLOWED_HOSTS = env_list("ALLOWED_HOSTS", "localhost,127.0.0.1,[::1]")
CSRF_TRUSTED_ORIGINS = env_list("CSRF_TRUSTED_ORIGINS")


INSTALLED_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    "rest_framework",
    "user",
    "content",
    "images",
]

# Request pipeline. The order is significant:
#   HTTPS redirect -> forwarded headers -> static files -> session/auth -> views
# The technical 500 page is Django's own handler and is only active with DEBUG.
MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "fizzylogic.middleware.ForwardedHeadersMiddleware",
    "fizzylogic.middleware.StaticFilesMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "fizzylogic.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [BASE_DIR / "templates"],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

WSGI_APPLICATION = "fizzylogic.wsgi.application"


# Database

CONNECTION_STRINGS = {
    "DefaultDatabase": os.environ.get("DEFAULT_DATABASE", f"Data Source={BASE_DIR / 'db.sqlite3'}"),
}

DATABASES = {
    "default": parse_connection_string(CONNECTION_STRINGS["DefaultDatabase"]),
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"


# Identity

AUTH_PASSWORD_VALIDATORS = [
    {"NAME": "django.contrib.auth.password_validation.UserAttributeSimilarityValidator"},
    {"NAME": "django.contrib.auth.password_validation.MinimumLengthValidator"},
    {"NAME": "django.contrib.auth.password_validation.CommonPasswordValidator"},
    {"NAME": "django.contrib.auth.password_validation.NumericPasswordValidator"},
]

LOGIN_URL = "user:login"
LOGIN_REDIRECT_URL = "content:manage"
LOGOUT_REDIRECT_URL = "content:index"

# Account created at startup when none exists yet
INITIAL_USER_NAME = os.environ.get("INITIAL_USER_NAME", "")
INITIAL_USER_EMAIL = os.environ.get("INITIAL_USER_EMAIL", "")
INITIAL_USER_PASSWORD = os.environ.get("INITIAL_USER_PASSWORD", "")


# API

REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [
        "rest_framework.authentication.SessionAuthentication",
    ],
    "DEFAULT_PERMISSION_CLASSES": [
        "rest_framework.permissions.IsAuthenticated",
    ],
    "DEFAULT_RENDERER_CLASSES": [
        "rest_framework.renderers.JSONRenderer",
    ],
    "DEFAULT_PARSER_CLASSES": [
        "rest_framework.parsers.MultiPartParser",
        "rest_framework.parsers.FormParser",
        "rest_framework.parsers.JSONParser",
    ],
}


# HTTPS and reverse proxy
#
# Production runs behind nginx which terminates TLS, so the redirect is only on
# for development unless HTTPS_REDIRECT says otherwise.
SECURE_SSL_REDIRECT = env_bool("HTTPS_REDIRECT", DEBUG)
# The redirect runs ahead of ForwardedHeadersMiddleware and only sees the
# connection scheme. Later stages see the scheme the middleware accepted.
SECURE_PROXY_SSL_HEADER = ("FORWARDED_PROTO", "https")
FORWARDED_HEADERS_KNOWN_PROXIES = env_list("FORWARDED_HEADERS_KNOWN_PROXIES", "127.0.0.1,::1")


# Internationalization

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True


# Static and uploaded files

STATIC_URL = "/static/"
STATIC_ROOT = Path(os.environ.get("STATIC_ROOT", BASE_DIR / "staticfiles"))
STATICFILES_DIRS = [BASE_DIR / "static"]

MEDIA_URL = "/media/"
MEDIA_ROOT = Path(os.environ.get("MEDIA_ROOT", BASE_DIR / "media"))

IMAGE_MAX_UPLOAD_SIZE = int(os.environ.get("IMAGE_MAX_UPLOAD_SIZE", 10 * 1024 * 1024))
FILE_UPLOAD_MAX_MEMORY_SIZE = IMAGE_MAX_UPLOAD_SIZE

ARTICLES_PER_PAGE = int(os.environ.get("ARTICLES_PER_PAGE", 10))


# Logging

LOG_LEVEL = os.environ.get("LOG_LEVEL", "DEBUG" if DEBUG else "INFO").upper()

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {
            "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "default",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": LOG_LEVEL,
    },
    "loggers": {
        "django": {
            "handlers": ["console"],
            "level": "INFO",
            "propagate": False,
        },
    },
}
