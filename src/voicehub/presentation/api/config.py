"""API configuration adapter.

Bridges the centralized voicehub_config settings with the API layer.
"""

from voicehub_config.settings import Settings, get_settings


def get_api_settings() -> Settings:
    """Get settings from centralized configuration."""
    return get_settings()
