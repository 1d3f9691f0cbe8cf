"""
Type aliases for FastAPI dependency injection.

Provides annotated type hints for common infrastructure dependencies.
"""

from typing import Annotated

from fastapi import Depends, Request

from infrastructure.configuration import Settings
from infrastructure.i18n import FormatterContext, IntlService
from infrastructure.services.providers import get_intl_service, get_settings


def get_request_locale(request: Request) -> str:
    """Locale resolved by IntlMiddleware for the current request."""
    return request.state.locale


def get_formatter_context(request: Request) -> FormatterContext:
    """Formatter context published by IntlMiddleware for the current request."""
    return request.state.intl_context


# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]

# Intl service handle; apps built with a custom service override get_intl_service
IntlServiceDep = Annotated[IntlService, Depends(get_intl_service)]

# Per-request values set by IntlMiddleware
LocaleDep = Annotated[str, Depends(get_request_locale)]
FormatterContextDep = Annotated[FormatterContext, Depends(get_formatter_context)]

__all__ = [
    "SettingsDep",
    "IntlServiceDep",
    "LocaleDep",
    "FormatterContextDep",
    "get_request_locale",
    "get_formatter_context",
]
