"""Django settings for the streaming catalog.

There is no database or HTTP layer; settings cover the app registry,
logging and the app's own STREAMING namespace.
"""

import os

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "streaming-demo-insecure-key")

DEBUG = os.environ.get("DJANGO_DEBUG", "0") == "1"

INSTALLED_APPS = [
    "rest_framework",
    "streaming.apps.StreamingConfig",
]

DATABASES: dict = {}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

USE_TZ = True

REST_FRAMEWORK = {
    # No requests are served; keep DRF off django.contrib.auth.
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": [],
    "UNAUTHENTICATED_USER": None,
    "COERCE_DECIMAL_TO_STRING": True,
    "UNICODE_JSON": True,
}

STREAMING = {
    "RECOMMENDATION_LIMIT": int(os.environ.get("STREAMING_RECOMMENDATION_LIMIT", "3")),
    "CURRENCY_SYMBOL": "$",
}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "plain": {"format": "%(message)s"},
        "verbose": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "verbose" if DEBUG else "plain",
        },
    },
    "loggers": {
        "streaming": {
            "handlers": ["console"],
            "level": os.environ.get("STREAMING_LOG_LEVEL", "INFO"),
            "propagate": True,
        },
    },
}
