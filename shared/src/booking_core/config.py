"""Environment-driven configuration.

Values are read on every call so tests can override them with
``monkeypatch.setenv`` without reloading modules.
"""

import os

DEFAULT_CORS_ORIGINS = "http://localhost:5173,http://localhost:3000"


def get_environment() -> str:
    """Deployment environment name (dev/prod)."""
    return os.getenv("ENVIRONMENT", "dev")


def get_table_prefix() -> str:
    """Prefix for DynamoDB table names.

    DYNAMODB_TABLE_PREFIX overrides the environment-derived default.
    """
    return os.getenv("DYNAMODB_TABLE_PREFIX", f"booking-{get_environment()}")


def get_base_currency() -> str:
    """Currency every price and total is stored in."""
    return os.getenv("BASE_CURRENCY", "USD").upper()


def get_max_guests() -> int:
    """Largest guest/traveller count accepted for one booking."""
    return int(os.getenv("MAX_GUESTS", "8"))


def get_cors_origins() -> list[str]:
    """Allowed browser origins for the REST API."""
    raw = os.getenv("CORS_ALLOWED_ORIGINS", DEFAULT_CORS_ORIGINS)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def get_log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()
