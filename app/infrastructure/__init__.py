"""Infrastructure modules for the application.

Centralized infrastructure components:
- configuration: Settings management (settings, Settings, IntlSettings)
- logging: Structured logging (configure_logging, get_module_logger)
- i18n: Locale resolution, message store and formatter cache (IntlService)
- services: Dependency injection providers (get_settings, get_intl_service)
"""

from infrastructure.configuration import settings
from infrastructure.logging import get_module_logger

__all__ = [
    "settings",
    "get_module_logger",
]
