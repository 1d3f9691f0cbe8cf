"""Intl service.

IntlService is the single handle the rest of the application uses: it owns
the MessageStore, the LocaleResolver and the FormatterCache of one
configuration, and exposes the per-request operations.

Usage:
    # Via dependency injection
    from infrastructure.services import IntlServiceDep

    @router.get("/greeting")
    async def greeting(intl: IntlServiceDep, request: Request):
        context = await intl.create_formatter_context(intl.resolve_locale(request))
        return {"message": context.t("hello")}

    # Direct instantiation
    service = IntlService(IntlOptions(default_messages={"en-US": {"hello": "Hello"}}))
    await service.startup()
    service.translate("hello")
"""

from typing import TYPE_CHECKING, Any, Awaitable, Callable, Mapping, Optional

from infrastructure.i18n.cache import FormatterCache
from infrastructure.i18n.formatter import MessageFormatter
from infrastructure.i18n.loader import YAMLMessageLoader, as_message_loader
from infrastructure.i18n.models import FormatterContext, IntlOptions, LocaleMessages
from infrastructure.i18n.resolvers import LocaleResolver
from infrastructure.i18n.store import MessageStore
from infrastructure.logging import get_module_logger

if TYPE_CHECKING:
    from starlette.requests import Request

logger = get_module_logger()


class IntlService:
    """Locale resolution and formatter access for one configuration.

    Messages are ingested at construction: default messages first (under the
    default module), then YAML files from ``messages_dir``, then the
    registered modules in the order given.

    Attributes:
        options: Validated IntlOptions.
        store: MessageStore holding every known message.
        resolver: LocaleResolver for incoming requests.
        cache: FormatterCache keyed by (locale, module).
    """

    def __init__(
        self,
        options: Optional[IntlOptions] = None,
        modules: Optional[Mapping[str, LocaleMessages]] = None,
        store: Optional[MessageStore] = None,
    ):
        """Initialize the service and ingest startup messages.

        Args:
            options: Intl options (defaults when omitted).
            modules: Per-module messages, ``{module: {locale: messages}}``.
            store: Optional pre-built MessageStore.

        Raises:
            ConfigurationError: If options are invalid.
        """
        self.options = options or IntlOptions()
        self.store = store if store is not None else MessageStore()
        self.resolver = LocaleResolver(
            default_locale=self.options.default_locale,
            accept_language=self.options.accept_language,
        )
        self.cache = FormatterCache(
            store=self.store,
            default_locale=self.options.default_locale,
            loader=as_message_loader(self.options.request_messages),
            maxsize=self.options.cache_size,
        )
        self._default_context: Optional[FormatterContext] = None

        self._ingest(modules)

        logger.info(
            "initialized_intl_service",
            name=self.options.name,
            default_locale=self.options.default_locale,
            default_module=self.options.default_module_name,
            accept_language=self.options.accept_language,
            cache_size=self.options.cache_size,
            remote_loader=self.cache.loader is not None,
            locales=self.store.locales(),
        )

    def _ingest(self, modules: Optional[Mapping[str, LocaleMessages]]) -> None:
        self.store.load(self.options.default_messages, self.options.default_module_name)

        if self.options.messages_dir is not None:
            yaml_loader = YAMLMessageLoader(self.options.messages_dir)
            for locale, locale_modules in yaml_loader.load_all().items():
                for module, messages in locale_modules.items():
                    self.store.merge(locale, module, messages)

        for name, locale_messages in (modules or {}).items():
            self.store.load(locale_messages, name)

    @property
    def name(self) -> str:
        return self.options.name

    @property
    def default_locale(self) -> str:
        return self.options.default_locale

    @property
    def default_module_name(self) -> str:
        return self.options.default_module_name

    @property
    def default_context(self) -> Optional[FormatterContext]:
        """Process-wide context for the default locale and module, once built."""
        return self._default_context

    async def startup(self) -> FormatterContext:
        """Build the default formatter context.

        Returns:
            The default FormatterContext.
        """
        self._default_context = await self.create_formatter_context(
            self.options.default_locale, self.options.default_module_name
        )
        logger.info(
            "default_intl_context_ready",
            locale=self._default_context.locale,
            module=self._default_context.module,
        )
        return self._default_context

    async def create_formatter_context(
        self, locale: str, module: Optional[str] = None
    ) -> FormatterContext:
        """Get a formatter context for a locale and module.

        Args:
            locale: Resolved locale.
            module: Module name (defaults to the default module).

        Returns:
            FormatterContext with the shared formatter for the pair.
        """
        module = module or self.options.default_module_name
        formatter = await self.cache.get_or_create(locale, module)
        return FormatterContext(locale=locale, module=module, formatter=formatter)

    def resolve_locale(self, request: "Request") -> str:
        """Resolve the locale of a request, memoized for that request."""
        return self.resolver.resolve_request(request)

    def with_locale(
        self, request: "Request"
    ) -> Callable[[Optional[str]], Awaitable[FormatterContext]]:
        """Bind a request so handlers can fetch contexts for other modules.

        Example:
            get_context = intl.with_locale(request)
            billing = await get_context("billing")
            billing.t("invoice.title")
        """

        async def _with_locale(module: Optional[str] = None) -> FormatterContext:
            return await self.create_formatter_context(self.resolve_locale(request), module)

        return _with_locale

    def translate(
        self,
        message_id: str,
        values: Optional[Mapping[str, Any]] = None,
        default_message: Optional[str] = None,
    ) -> str:
        """Translate with the default locale and module.

        Used where no request context exists. Before startup() has run, a
        formatter is built directly from the store, without remote loading.
        """
        if self._default_context is None:
            logger.debug("default_intl_context_not_ready")
            self._default_context = FormatterContext(
                locale=self.options.default_locale,
                module=self.options.default_module_name,
                formatter=MessageFormatter(
                    locale=self.options.default_locale,
                    default_locale=self.options.default_locale,
                    messages=self.store.get(
                        self.options.default_locale, self.options.default_module_name
                    ),
                ),
            )
        return self._default_context.translate(
            message_id, values, default_message=default_message
        )

    def register_module(self, name: str, locale_messages: Optional[LocaleMessages]) -> None:
        """Merge the messages of a module registered after startup.

        Cached formatters of the touched (locale, module) pairs are dropped
        so the next request sees the merged messages. Registering the
        default module also resets the default context.

        Args:
            name: Module name.
            locale_messages: Messages keyed by locale.
        """
        if not locale_messages:
            return
        self.store.load(locale_messages, name)
        for locale in locale_messages:
            self.cache.invalidate(locale, name)
        if name == self.options.default_module_name:
            self._default_context = None
        logger.info(
            "intl_module_registered",
            module=name,
            locales=list(locale_messages.keys()),
        )
