"""Request middleware for the intl system.

For every request the middleware resolves the locale, fetches the formatter
context of the default module and publishes it on ``request.state``:

- ``request.state.request_id``: stable per-request identifier
- ``request.state.locale``: resolved locale
- ``request.state.formatter``: shared MessageFormatter
- ``request.state.t``: translate shortcut of the default module
- ``request.state.intl_context``: the FormatterContext itself
- ``request.state.with_locale``: coroutine function returning contexts of
  other modules for the same locale
"""

import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from infrastructure.i18n.formatter import MessageFormatter
from infrastructure.i18n.models import FormatterContext
from infrastructure.i18n.service import IntlService
from infrastructure.logging import bind_request_context, get_module_logger

logger = get_module_logger()


class IntlMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, intl: IntlService, request_id_header: str = "x-request-id"):
        super().__init__(app)
        self.intl = intl
        self.request_id_header = request_id_header

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get(self.request_id_header) or str(uuid.uuid4())
        request.state.request_id = request_id
        locale = self.intl.resolve_locale(request)

        with bind_request_context(
            correlation_id=request_id,
            request_path=request.url.path,
            request_method=request.method,
            locale=locale,
        ):
            context = await self._get_context(locale)
            request.state.locale = context.locale
            request.state.formatter = context.formatter
            request.state.t = context.t
            request.state.intl_context = context
            request.state.with_locale = self.intl.with_locale(request)

            response = await call_next(request)

        response.headers.setdefault("content-language", locale)
        response.headers.setdefault(self.request_id_header, request_id)
        return response

    async def _get_context(self, locale: str) -> FormatterContext:
        try:
            return await self.intl.create_formatter_context(locale)
        except Exception as e:
            # Serve raw message ids rather than failing the request
            logger.error(
                "formatter_context_failed",
                locale=locale,
                error=str(e),
                exc_info=True,
            )
            return FormatterContext(
                locale=locale,
                module=self.intl.default_module_name,
                formatter=MessageFormatter(locale, self.intl.default_locale, {}),
            )
