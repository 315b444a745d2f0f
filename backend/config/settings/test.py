from .base import *  # noqa: F401,F403

DEBUG = False
SECURE_SSL_REDIRECT = False
SECURE_HSTS_SECONDS = 0
SECURE_HSTS_INCLUDE_SUBDOMAINS = False
SECURE_HSTS_PRELOAD = False

# Keep request throttling out of the way of API tests.
REST_FRAMEWORK = {
    **REST_FRAMEWORK,  # noqa: F405
    'DEFAULT_THROTTLE_RATES': {
        'evaluate': '10000/minute',
        'lookup': '10000/minute',
        'default': '10000/minute',
    },
}

# Silence per-evaluation INFO lines during test runs.
LOGGING = {
    **LOGGING,  # noqa: F405
    'root': {
        'handlers': ['console'],
        'level': 'WARNING',
    },
}
