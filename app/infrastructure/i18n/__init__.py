"""Intl system - per-request locale resolution and message formatting.

Resolves the locale of each request, keeps message maps for every
(locale, module) pair and serves cached formatters built from them.

Main components:
- models: IntlOptions, LocaleSignals, MessageRequest, FormatterContext
- store: MessageStore (deep-merged locale -> module -> messages)
- resolvers: LocaleResolver (priority chain + accept-list)
- formatter: MessageFormatter (interpolation and fallbacks)
- cache: FormatterCache (LRU, single-flight construction)
- loader: MessageLoader, CallableMessageLoader, YAMLMessageLoader
- service: IntlService (the handle used by the application)
- middleware: IntlMiddleware (publishes locale/formatter on request.state)
"""

from infrastructure.i18n.cache import FormatterCache
from infrastructure.i18n.exceptions import (
    ConfigurationError,
    IntlError,
    RemoteLoadError,
)
from infrastructure.i18n.factory import create_intl_service
from infrastructure.i18n.formatter import MessageFormatter
from infrastructure.i18n.loader import (
    CallableMessageLoader,
    MessageLoader,
    YAMLMessageLoader,
)
from infrastructure.i18n.middleware import IntlMiddleware
from infrastructure.i18n.models import (
    FormatterContext,
    IntlOptions,
    LocaleSignals,
    MessageRequest,
    make_cache_key,
)
from infrastructure.i18n.resolvers import LocaleResolver
from infrastructure.i18n.service import IntlService
from infrastructure.i18n.store import MessageStore

__all__ = [
    "FormatterCache",
    "ConfigurationError",
    "IntlError",
    "RemoteLoadError",
    "create_intl_service",
    "MessageFormatter",
    "CallableMessageLoader",
    "MessageLoader",
    "YAMLMessageLoader",
    "IntlMiddleware",
    "FormatterContext",
    "IntlOptions",
    "LocaleSignals",
    "MessageRequest",
    "make_cache_key",
    "LocaleResolver",
    "IntlService",
    "MessageStore",
]
