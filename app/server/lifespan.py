from contextlib import asynccontextmanager
from typing import AsyncContextManager, AsyncIterator, Callable

from fastapi import FastAPI

from infrastructure.i18n import IntlService
from infrastructure.logging import get_module_logger

logger = get_module_logger()


def build_lifespan(intl: IntlService) -> Callable[[FastAPI], AsyncContextManager[None]]:
    """Create the application lifespan for an intl service.

    Startup builds the default formatter context so ``intl.translate`` is
    served from the cache for the whole process lifetime.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info("application_startup", intl=intl.name)
        await intl.startup()
        yield
        logger.info(
            "application_shutdown",
            formatter_cache=intl.cache.get_stats(),
        )

    return lifespan
