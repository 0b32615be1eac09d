# docsite/settings/prod.py
from .base import *  # noqa: F401,F403

DEBUG = False

# Domaine(s) à fournir via env
SITE_DOMAIN = os.getenv('SITE_DOMAIN')  # ex: "docs.example.com"
SITE_ALIASES = os.getenv("SITE_ALIASES", "")  # ex: "www.docs.example.com"
if not SITE_DOMAIN:
    raise RuntimeError("SITE_DOMAIN n'est pas défini en production.")

ALIASES = [h.strip() for h in SITE_ALIASES.split(",") if h.strip()]
ALLOWED_HOSTS = [SITE_DOMAIN] + ALIASES
CSRF_TRUSTED_ORIGINS = [f"https://{SITE_DOMAIN}"] + [f"https://{h}" for h in ALIASES]

SECURE_REFERRER_POLICY = "strict-origin-when-cross-origin"

LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
LOGGING['root']['level'] = LOG_LEVEL
LOGGING['loggers']['django.request']['level'] = 'ERROR'
