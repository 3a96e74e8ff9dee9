import os
from typing import Optional

DEFAULT_SETTINGS = "config.development"

SETTINGS_MODULES = {
    "dev": "config.development",
    "development": "config.development",
    "test": "config.testing",
    "testing": "config.testing",
    "prod": "config.production",
    "production": "config.production",
}


def get_settings_module(env: Optional[str] = None) -> str:
    """Dotted settings module for ``env`` (APP_ENV when omitted).

    Unknown names fall back to development settings.
    """
    if env is None:
        env = os.getenv("APP_ENV", "development")
    return SETTINGS_MODULES.get(env.strip().lower(), DEFAULT_SETTINGS)
