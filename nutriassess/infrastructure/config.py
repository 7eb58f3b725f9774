"""Configuration utilities read from the environment."""

import os


def get_log_level() -> str:
    """Logging level name from LOG_LEVEL, defaults to INFO."""
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_app_version() -> str:
    """Version string from APP_VERSION (set at image build time)."""
    return os.getenv("APP_VERSION", "0.0.0-dev")


def get_server_host() -> str:
    return os.getenv("APP_HOST", "0.0.0.0")


def get_server_port() -> int:
    """Listening port from APP_PORT, defaults to 8080."""
    raw = os.getenv("APP_PORT", "8080")
    try:
        return int(raw)
    except ValueError:
        return 8080
