"""Infrastructure configuration module - public API.

This module provides centralized configuration management for the
application using Pydantic BaseSettings with domain-based organization.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    IntlSettings: Locale and message cache settings class
    ServerSettings: HTTP server settings class

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    default_locale = settings.intl.DEFAULT_LOCALE
    accept_language = settings.intl.ACCEPT_LANGUAGE

    if settings.is_production:
        # Production-specific logic...
    ```
"""

from infrastructure.configuration.settings import Settings, settings
from infrastructure.configuration.infrastructure import IntlSettings, ServerSettings

__all__ = ["Settings", "settings", "IntlSettings", "ServerSettings"]
