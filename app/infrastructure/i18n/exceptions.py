"""Exceptions for the intl system.

Only configuration problems are raised to callers. Remote loading failures
are wrapped in RemoteLoadError so the formatter cache can log them and
degrade to an empty message map.
"""

from typing import Optional


class IntlError(Exception):
    """Base exception for all intl-related errors.

    Example:
        try:
            service = create_intl_service(intl_settings)
        except IntlError as e:
            logger.error("intl_error", error=str(e))
    """

    pass


class ConfigurationError(IntlError):
    """Raised when intl options are invalid.

    Detected while the options are validated, so a misconfigured service
    fails at startup rather than while serving a request.

    Example:
        >>> IntlOptions(cache_size=0)
        Traceback (most recent call last):
        ...
        ConfigurationError: cache_size must be a positive integer, got 0
    """

    pass


class RemoteLoadError(IntlError):
    """Raised when a remote message loader fails for a (locale, module) pair.

    Attributes:
        locale: Locale that was being loaded.
        module: Module that was being loaded.
    """

    def __init__(self, locale: str, module: str, reason: Optional[str] = None):
        self.locale = locale
        self.module = module
        message = f"Failed to load messages for {locale}:{module}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
