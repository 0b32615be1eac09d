# docsite/settings/test_cli.py
from .dev import *  # noqa: F401,F403

# Pas de manifest en tests (collectstatic jamais lancé)
STORAGES["staticfiles"] = {
    "BACKEND": "django.contrib.staticfiles.storage.StaticFilesStorage",
}
WHITENOISE_AUTOREFRESH = True
WHITENOISE_USE_FINDERS = False

# Valeurs fixes, indépendantes du .env local
MERMAID = {
    "enabled": True,
    "src": "https://cdn.jsdelivr.net/npm/mermaid@10/dist/mermaid.min.js",
    "theme": "default",
    "start_on_load": True,
    "options": {},
}
