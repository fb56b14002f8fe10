"""Django settings for the studio booking API.

Values that differ between environments are read from environment variables.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "insecure-development-key")
DEBUG = os.environ.get("DJANGO_DEBUG", "false").lower() == "true"
ALLOWED_HOSTS = os.environ.get("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1").split(",")

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "rest_framework",
    "studios.apps.StudiosConfig",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "studio_site.urls"

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": BASE_DIR / "db.sqlite3",
    }
}

LANGUAGE_CODE = "en-gb"
TIME_ZONE = os.environ.get("STUDIO_TIME_ZONE", "Europe/London")
USE_I18N = False
USE_TZ = True

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

REST_FRAMEWORK = {
    "DEFAULT_RENDERER_CLASSES": ["rest_framework.renderers.JSONRenderer"],
    "DEFAULT_PARSER_CLASSES": ["rest_framework.parsers.JSONParser"],
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": [],
    "UNAUTHENTICATED_USER": None,
}

# Booking engine rules. Operating hours map weekday (0=Sunday) to (open, close).
STUDIO_ENGINE = {
    "OPERATING_HOURS": {
        0: (16, 22),
        1: (10, 22),
        2: (10, 22),
        3: (10, 22),
        4: (10, 22),
        5: (10, 22),
        6: (10, 22),
    },
    "COOLDOWN_MINUTES": int(os.environ.get("STUDIO_COOLDOWN_MINUTES", "60")),
    "SURCHARGE_RATE": os.environ.get("STUDIO_SURCHARGE_RATE", "0.15"),
    "EVENING_START_HOUR": 18,
    "WEEKEND_DAYS": [0, 6],
    "TIME_ZONE": TIME_ZONE,
    "SLOT_INTERVAL_MINUTES": 30,
    "CONTENT_STORE": {
        "FACTORY": "studios.stores.memory_store.content_store_from_records",
        "OPTIONS": {},
    },
    "CALENDAR_STORE": {
        "FACTORY": "studios.stores.memory_store.calendar_store_from_records",
        "OPTIONS": {"busy": []},
    },
}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {
            "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "standard",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": "WARNING",
    },
    "loggers": {
        "studios": {
            "handlers": ["console"],
            "level": os.environ.get("STUDIO_LOG_LEVEL", "INFO"),
            "propagate": False,
        },
    },
}
