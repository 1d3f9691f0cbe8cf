from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.router import api_router
from infrastructure.configuration import Settings
from infrastructure.i18n import IntlMiddleware, IntlService
from infrastructure.logging import get_module_logger
from infrastructure.services.providers import get_intl_service, get_settings
from server.lifespan import build_lifespan

logger = get_module_logger()


def create_app(
    settings: Optional[Settings] = None,
    intl: Optional[IntlService] = None,
) -> FastAPI:
    """Build the FastAPI application.

    Args:
        settings: Application settings (default: the cached provider). Custom
            settings also replace ``get_settings`` for dependency injection.
        intl: Intl service handle (default: the cached provider). A custom
            handle also replaces ``get_intl_service`` for dependency injection.

    Returns:
        Configured FastAPI application.
    """
    custom_settings = settings is not None
    settings = settings or get_settings()
    custom_intl = intl is not None
    intl = intl or get_intl_service()

    handler = FastAPI(lifespan=build_lifespan(intl))
    setattr(handler.state, intl.name, intl)

    if custom_settings:
        handler.dependency_overrides[get_settings] = lambda: settings
    if custom_intl:
        handler.dependency_overrides[get_intl_service] = lambda: intl

    handler.add_middleware(
        IntlMiddleware,
        intl=intl,
        request_id_header=settings.server.REQUEST_ID_HEADER,
    )

    allow_origins = ["*"] if settings.is_production else settings.server.allow_origins
    handler.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    handler.include_router(api_router)

    logger.info(
        "application_created",
        is_production=settings.is_production,
        intl=intl.name,
        default_locale=intl.default_locale,
    )
    return handler
