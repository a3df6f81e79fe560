"""
Settings used by the test-suite.
"""

import tempfile

from .settings import *  # noqa: F401,F403

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]

MEDIA_ROOT = tempfile.mkdtemp(prefix="portfolio-media-")
MEDIA_URL = "/media/"

SITE_URL = "https://example.com"
RESEND_API_KEY = ""
JWT_SECRET = "test-jwt-secret"
