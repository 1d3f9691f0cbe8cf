"""Intl routes.

Expose the locale resolved for the calling request and single message
lookups, so clients can check which locale and messages they are served.
"""

from typing import Optional

from fastapi import APIRouter, Request

from infrastructure.logging import get_module_logger
from infrastructure.services import FormatterContextDep, IntlServiceDep, LocaleDep

logger = get_module_logger()

router = APIRouter(prefix="/intl", tags=["Intl"])

# Query parameters that select the locale or module, not interpolation values
RESERVED_QUERY_PARAMS = frozenset({"lang", "language", "module"})


@router.get("/locale")
def get_locale(request: Request, locale: LocaleDep):
    """Get the locale resolved for this request."""
    return {"locale": locale, "request_id": request.state.request_id}


@router.get("/messages/{message_id}")
async def get_message(
    message_id: str,
    request: Request,
    context: FormatterContextDep,
    module: Optional[str] = None,
):
    """Translate one message for this request's locale.

    Query parameters other than lang/language/module are used as
    interpolation values.
    """
    if module and module != context.module:
        context = await request.state.with_locale(module)

    values = {
        key: value
        for key, value in request.query_params.items()
        if key not in RESERVED_QUERY_PARAMS
    }
    logger.debug(
        "message_requested",
        message_id=message_id,
        module=context.module,
        value_names=list(values.keys()),
    )
    return {
        "locale": context.locale,
        "module": context.module,
        "id": message_id,
        "message": context.t(message_id, values),
    }


@router.get("/cache")
def get_cache_stats(intl: IntlServiceDep):
    """Formatter cache statistics and the locales known to the store."""
    return {
        "cache": intl.cache.get_stats(),
        "locales": intl.store.locales(),
    }
