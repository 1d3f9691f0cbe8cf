"""Internationalization (intl) infrastructure settings."""

from typing import Optional

from pydantic import Field, field_validator

from infrastructure.configuration.base import InfrastructureSettings


class IntlSettings(InfrastructureSettings):
    """Locale resolution and message cache configuration.

    Environment Variables:
        INTL_DECORATOR_NAME: Name the intl handle is published under on
            ``app.state`` (default: intl)
        INTL_ACCEPT_LANGUAGE: Comma-separated allow-list of locales, or "*"
            to accept any locale (default: *)
        INTL_DEFAULT_LOCALE: Fallback locale (default: en-US)
        INTL_DEFAULT_MODULE_NAME: Module that default messages belong to
            (default: global)
        INTL_CACHE_SIZE: Maximum number of cached formatters (default: 100)
        INTL_MESSAGES_DIR: Optional directory of ``<module>.<locale>.yml``
            message files loaded at startup

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()
        default_locale = settings.intl.DEFAULT_LOCALE
        allowed = settings.intl.ACCEPT_LANGUAGE
        ```
    """

    DECORATOR_NAME: str = Field(default="intl", alias="INTL_DECORATOR_NAME")
    ACCEPT_LANGUAGE: str = Field(default="*", alias="INTL_ACCEPT_LANGUAGE")
    DEFAULT_LOCALE: str = Field(default="en-US", alias="INTL_DEFAULT_LOCALE")
    DEFAULT_MODULE_NAME: str = Field(
        default="global", alias="INTL_DEFAULT_MODULE_NAME"
    )
    CACHE_SIZE: int = Field(default=100, gt=0, alias="INTL_CACHE_SIZE")
    MESSAGES_DIR: Optional[str] = Field(default=None, alias="INTL_MESSAGES_DIR")

    @field_validator("ACCEPT_LANGUAGE")
    @classmethod
    def validate_accept_language(cls, v: str) -> str:
        """Strip whitespace around each allow-list entry."""
        if v.strip() == "*":
            return "*"
        return ",".join(part.strip() for part in v.split(",") if part.strip())

    @field_validator("MESSAGES_DIR", mode="before")
    @classmethod
    def validate_messages_dir(cls, v: Optional[str]) -> Optional[str]:
        """Treat an empty value as unset."""
        if v is None or not str(v).strip():
            return None
        return str(v)
