"""Factory functions for creating intl components.

Provides a convenience function for building an IntlService from
environment-backed settings plus the options that can only be supplied in
code (static default messages, a remote loader, registered modules).
"""

from pathlib import Path
from typing import Any, Mapping, Optional, Union

from infrastructure.configuration import IntlSettings
from infrastructure.i18n.models import IntlOptions, LocaleMessages, RequestMessages
from infrastructure.i18n.service import IntlService
from infrastructure.logging import get_module_logger

logger = get_module_logger()

# This file is at .../app/infrastructure/i18n/factory.py
DEFAULT_MESSAGES_DIR = Path(__file__).resolve().parents[2] / "locales"


def create_intl_service(
    intl_settings: Optional[IntlSettings] = None,
    default_messages: Optional[LocaleMessages] = None,
    request_messages: Optional[Union[RequestMessages, Any]] = None,
    modules: Optional[Mapping[str, LocaleMessages]] = None,
    messages_dir: Optional[Union[str, Path]] = None,
) -> IntlService:
    """Create and configure an IntlService.

    Args:
        intl_settings: Intl settings (default: loaded from the environment).
        default_messages: Static messages keyed by locale, stored under the
            default module.
        request_messages: Optional remote loader (callable or MessageLoader).
        modules: Per-module messages, ``{module: {locale: messages}}``.
        messages_dir: Directory of YAML message files; overrides
            ``INTL_MESSAGES_DIR``.

    Returns:
        IntlService: Configured service.

    Raises:
        ConfigurationError: If the resulting options are invalid.

    Usage:
        # Environment defaults only
        intl = create_intl_service()

        # With static messages and a remote fallback
        intl = create_intl_service(
            default_messages={"en-US": {"hello": "Hello"}},
            request_messages=fetch_messages,
        )
    """
    intl_settings = intl_settings or IntlSettings()
    options = IntlOptions.from_settings(
        intl_settings,
        default_messages=default_messages,
        request_messages=request_messages,
        messages_dir=messages_dir,
    )
    service = IntlService(options=options, modules=modules)

    logger.info(
        "intl_service_created",
        name=options.name,
        messages_dir=str(options.messages_dir) if options.messages_dir else None,
        module_count=len(modules or {}),
    )
    return service
