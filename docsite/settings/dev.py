# docsite/settings/dev.py
# export DJANGO_SETTINGS_MODULE=docsite.settings.dev

from .base import *  # noqa: F401,F403

DEBUG = True

ALLOWED_HOSTS = ['127.0.0.1', 'localhost', 'testserver']

# Dev: pas de redirection SSL forcée
SECURE_SSL_REDIRECT = False
SECURE_HSTS_SECONDS = 0

LOGGING['loggers'].update({
    'mermaid.tags': {
        'handlers': ['console'],
        'level': 'DEBUG',
        'propagate': False,
    },
})
