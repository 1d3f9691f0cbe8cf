"""Intl models.

Defines the message map types, the options a service is built from, the
request signals used for locale resolution and the per-request formatter
context handed to route handlers.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Dict,
    FrozenSet,
    Mapping,
    Optional,
    Tuple,
    Union,
)

from infrastructure.i18n.exceptions import ConfigurationError

if TYPE_CHECKING:
    from starlette.requests import Request

    from infrastructure.configuration import IntlSettings
    from infrastructure.i18n.formatter import MessageFormatter
    from infrastructure.i18n.loader import MessageLoader

# message id -> template; nested mappings are addressed with dotted ids
MessageMap = Mapping[str, Any]

# locale -> MessageMap
LocaleMessages = Mapping[str, MessageMap]

ACCEPT_ANY = "*"


def make_cache_key(locale: str, module: str) -> str:
    """Build the formatter cache key for a (locale, module) pair.

    Returns:
        Key in the form "<locale>:<module>" (e.g., "en-US:global").
    """
    return f"{locale}:{module}"


@dataclass(frozen=True)
class MessageRequest:
    """Arguments passed to a remote message loader.

    Attributes:
        locale: Locale whose messages are missing (e.g., "fr-FR").
        module: Module whose messages are missing (e.g., "global").
    """

    locale: str
    module: str


@dataclass(frozen=True)
class LocaleSignals:
    """Locale hints carried by one request, in resolution priority order.

    Attributes:
        query_lang: Query parameter ``lang``.
        query_language: Query parameter ``language``.
        cookie_user_locale: Cookie ``x-user-locale``.
        cookie_client_language: Cookie ``x-client-language``.
        header_user_locale: Header ``x-user-locale``.
        header_client_language: Header ``x-client-language``.
        accept_language: Raw ``accept-language`` header.
    """

    query_lang: Optional[str] = None
    query_language: Optional[str] = None
    cookie_user_locale: Optional[str] = None
    cookie_client_language: Optional[str] = None
    header_user_locale: Optional[str] = None
    header_client_language: Optional[str] = None
    accept_language: Optional[str] = None

    def candidates(self) -> Tuple[Optional[str], ...]:
        """Return the locale candidates in priority order.

        Only the part of ``accept-language`` before the first comma is used.
        """
        accept_language = None
        if self.accept_language:
            accept_language = self.accept_language.split(",")[0].strip()
        return (
            self.query_lang,
            self.query_language,
            self.cookie_user_locale,
            self.cookie_client_language,
            self.header_user_locale,
            self.header_client_language,
            accept_language,
        )

    @classmethod
    def from_request(cls, request: "Request") -> "LocaleSignals":
        """Collect the locale signals of a Starlette request."""
        query = request.query_params
        cookies = request.cookies
        headers = request.headers
        return cls(
            query_lang=query.get("lang"),
            query_language=query.get("language"),
            cookie_user_locale=cookies.get("x-user-locale"),
            cookie_client_language=cookies.get("x-client-language"),
            header_user_locale=headers.get("x-user-locale"),
            header_client_language=headers.get("x-client-language"),
            accept_language=headers.get("accept-language"),
        )


RequestMessages = Callable[[MessageRequest], Any]


@dataclass
class IntlOptions:
    """Options an IntlService is built from.

    Attributes:
        name: Name the service is published under on ``app.state``.
        accept_language: Comma-separated allow-list, or "*" to accept any locale.
        default_locale: Fallback locale for resolution and formatting.
        default_module_name: Module that default_messages are stored under.
        default_messages: Static messages keyed by locale.
        request_messages: Optional remote loader, called with a MessageRequest
            when a (locale, module) pair has no messages. Either a callable
            (sync or async) or a MessageLoader.
        cache_size: Maximum number of cached formatters.
        messages_dir: Optional directory of ``<module>.<locale>.yml`` files.

    Raises:
        ConfigurationError: If any option is invalid.
    """

    name: str = "intl"
    accept_language: str = ACCEPT_ANY
    default_locale: str = "en-US"
    default_module_name: str = "global"
    default_messages: LocaleMessages = field(default_factory=dict)
    request_messages: Optional[Union[RequestMessages, "MessageLoader"]] = None
    cache_size: int = 100
    messages_dir: Optional[Union[str, Path]] = None

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name:
            raise ConfigurationError(f"name must be a non-empty string, got {self.name!r}")
        if not isinstance(self.accept_language, str):
            raise ConfigurationError(
                f"accept_language must be a string, got {type(self.accept_language).__name__}"
            )
        if not isinstance(self.default_locale, str) or not self.default_locale:
            raise ConfigurationError(
                f"default_locale must be a non-empty string, got {self.default_locale!r}"
            )
        if not isinstance(self.default_module_name, str) or not self.default_module_name:
            raise ConfigurationError(
                "default_module_name must be a non-empty string, "
                f"got {self.default_module_name!r}"
            )
        # bool is an int subclass
        if (
            isinstance(self.cache_size, bool)
            or not isinstance(self.cache_size, int)
            or self.cache_size <= 0
        ):
            raise ConfigurationError(
                f"cache_size must be a positive integer, got {self.cache_size!r}"
            )
        if self.default_messages is None:
            self.default_messages = {}
        if not isinstance(self.default_messages, Mapping):
            raise ConfigurationError(
                "default_messages must be a mapping of locale to messages"
            )
        if self.request_messages is not None:
            from infrastructure.i18n.loader import MessageLoader

            if not (
                callable(self.request_messages)
                or isinstance(self.request_messages, MessageLoader)
            ):
                raise ConfigurationError(
                    "request_messages must be callable or a MessageLoader"
                )
        if self.messages_dir is not None:
            self.messages_dir = Path(self.messages_dir)
            if not self.messages_dir.is_dir():
                raise ConfigurationError(
                    f"Messages directory not found: {self.messages_dir}"
                )

    @property
    def accepts_any(self) -> bool:
        """True when every locale is accepted."""
        return self.accept_language == ACCEPT_ANY

    @property
    def accepted_locales(self) -> FrozenSet[str]:
        """Allow-list entries (empty when every locale is accepted)."""
        if self.accepts_any:
            return frozenset()
        return frozenset(self.accept_language.split(","))

    @classmethod
    def from_settings(cls, intl_settings: "IntlSettings", **overrides: Any) -> "IntlOptions":
        """Build options from IntlSettings, with code-only values as overrides.

        Args:
            intl_settings: Environment-backed intl settings.
            **overrides: Options not representable as environment values
                (default_messages, request_messages) or explicit overrides.

        Returns:
            Validated IntlOptions.
        """
        values: Dict[str, Any] = {
            "name": intl_settings.DECORATOR_NAME,
            "accept_language": intl_settings.ACCEPT_LANGUAGE,
            "default_locale": intl_settings.DEFAULT_LOCALE,
            "default_module_name": intl_settings.DEFAULT_MODULE_NAME,
            "cache_size": intl_settings.CACHE_SIZE,
            "messages_dir": intl_settings.MESSAGES_DIR,
        }
        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**values)


@dataclass(frozen=True)
class FormatterContext:
    """Formatter bound to a resolved locale and module.

    Handed to route handlers through ``request.state``; ``t`` is a shortcut
    for ``translate``.

    Attributes:
        locale: Locale the formatter was built for.
        module: Module whose messages the formatter holds.
        formatter: Shared, immutable MessageFormatter.
    """

    locale: str
    module: str
    formatter: "MessageFormatter"

    def translate(
        self,
        message_id: str,
        values: Optional[Mapping[str, Any]] = None,
        default_message: Optional[str] = None,
    ) -> str:
        """Format a message of this context's module."""
        return self.formatter.format_message(
            message_id, values, default_message=default_message
        )

    def t(
        self,
        message_id: str,
        values: Optional[Mapping[str, Any]] = None,
        default_message: Optional[str] = None,
    ) -> str:
        """Shortcut for translate()."""
        return self.translate(message_id, values, default_message=default_message)
