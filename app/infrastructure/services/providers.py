"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for core infrastructure services.
"""

from functools import lru_cache

from infrastructure.configuration import Settings
from infrastructure.i18n import IntlService, create_intl_service
from infrastructure.i18n.factory import DEFAULT_MESSAGES_DIR


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process.

    Application code should use the DI type alias for testability:
        from infrastructure.services import SettingsDep
        @router.get("/version")
        def get_version(settings: SettingsDep):
            return {"version": settings.GIT_SHA}

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_intl_service() -> IntlService:
    """
    Get application-scoped intl service singleton.

    Messages are read from ``INTL_MESSAGES_DIR`` when set, otherwise from the
    bundled ``locales`` directory if it exists.

    Returns:
        IntlService: Cached service configured from application settings.

    Usage:
        @router.get("/greeting")
        def greeting(intl: IntlServiceDep):
            return {"message": intl.translate("greeting")}
    """
    settings = get_settings()
    messages_dir = settings.intl.MESSAGES_DIR
    if messages_dir is None and DEFAULT_MESSAGES_DIR.is_dir():
        messages_dir = DEFAULT_MESSAGES_DIR
    return create_intl_service(settings.intl, messages_dir=messages_dir)
