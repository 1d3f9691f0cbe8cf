"""Infrastructure settings __init__ - exports all infrastructure settings."""

from infrastructure.configuration.infrastructure.intl import IntlSettings
from infrastructure.configuration.infrastructure.server import ServerSettings

__all__ = [
    "IntlSettings",
    "ServerSettings",
]
