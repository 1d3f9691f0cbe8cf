"""
Dependency injection services.

Provides type aliases and provider functions for FastAPI dependency injection.
"""

from infrastructure.services.dependencies import (
    SettingsDep,
    IntlServiceDep,
    LocaleDep,
    FormatterContextDep,
)
from infrastructure.services.providers import (
    get_settings,
    get_intl_service,
)

__all__ = [
    "SettingsDep",
    "IntlServiceDep",
    "LocaleDep",
    "FormatterContextDep",
    "get_settings",
    "get_intl_service",
]
