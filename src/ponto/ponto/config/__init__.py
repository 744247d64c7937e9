import os


def get_settings_module() -> str:
    # APP_ENV selects the settings module; anything unknown is development.
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "ponto.config.production"

    if env in {"test", "testing"}:
        return "ponto.config.testing"

    return "ponto.config.development"
