from .base import *  # noqa: F401,F403

DEBUG = False

if SECRET_KEY == 'django-insecure-change-me':  # noqa: F405
    raise RuntimeError('DJANGO_SECRET_KEY must be set in production.')
if CORS_ALLOW_ALL_ORIGINS:  # noqa: F405
    raise RuntimeError('CORS_ALLOW_ALL_ORIGINS must be False in production.')

SECURE_SSL_REDIRECT = env.bool('SECURE_SSL_REDIRECT', default=True)  # noqa: F405
SECURE_HSTS_SECONDS = env.int('SECURE_HSTS_SECONDS', default=31536000)  # noqa: F405
SECURE_HSTS_INCLUDE_SUBDOMAINS = True
SECURE_HSTS_PRELOAD = True
