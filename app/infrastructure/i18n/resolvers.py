"""Locale resolution for incoming requests.

The locale of a request is the first non-empty signal, in this order:

1. query parameter ``lang``
2. query parameter ``language``
3. cookie ``x-user-locale``
4. cookie ``x-client-language``
5. header ``x-user-locale``
6. header ``x-client-language``
7. header ``accept-language`` (only the part before the first comma)
8. the default locale

The candidate must then pass the accept-list, otherwise the default locale
is used. Matching is exact string equality; "en" does not match "en-US".
"""

from typing import TYPE_CHECKING, FrozenSet, Optional

from infrastructure.i18n.models import ACCEPT_ANY, LocaleSignals
from infrastructure.logging import get_module_logger

if TYPE_CHECKING:
    from starlette.requests import Request

logger = get_module_logger()

# Attribute on request.state holding the memoized locale
REQUEST_STATE_KEY = "intl_locale"


class LocaleResolver:
    """Resolves the effective locale of a request.

    Attributes:
        default_locale: Locale used when no signal is present or accepted.
        accept_language: Comma-separated allow-list, or "*".
    """

    def __init__(self, default_locale: str = "en-US", accept_language: str = ACCEPT_ANY):
        self.default_locale = default_locale
        self.accept_language = accept_language
        self._accepted: Optional[FrozenSet[str]] = (
            None if accept_language == ACCEPT_ANY else frozenset(accept_language.split(","))
        )

    def is_accepted(self, locale: str) -> bool:
        """Check a locale against the accept-list."""
        return self._accepted is None or locale in self._accepted

    def resolve(self, signals: LocaleSignals) -> str:
        """Resolve a locale from request signals.

        Args:
            signals: Locale hints of one request.

        Returns:
            The first non-empty candidate if accepted, else the default locale.
        """
        candidate = next(
            (value for value in signals.candidates() if value),
            self.default_locale,
        )
        if self.is_accepted(candidate):
            return candidate

        logger.debug(
            "locale_not_accepted",
            candidate=candidate,
            default_locale=self.default_locale,
        )
        return self.default_locale

    def resolve_request(self, request: "Request") -> str:
        """Resolve and memoize the locale of a request.

        The result is stored on ``request.state`` so it lives exactly as long
        as the request; later calls during the same request return it
        without re-reading the signals.

        Args:
            request: Incoming Starlette request.

        Returns:
            Resolved locale.
        """
        cached = getattr(request.state, REQUEST_STATE_KEY, None)
        if cached is not None:
            return cached

        locale = self.resolve(LocaleSignals.from_request(request))
        setattr(request.state, REQUEST_STATE_KEY, locale)
        return locale
