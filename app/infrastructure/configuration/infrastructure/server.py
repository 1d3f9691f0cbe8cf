"""Server infrastructure settings."""

from typing import List

from pydantic import Field

from infrastructure.configuration.base import InfrastructureSettings


class ServerSettings(InfrastructureSettings):
    """Server and application runtime configuration.

    Environment Variables:
        BACKEND_URL: Backend API base URL (default: http://127.0.0.1:8000)
        CORS_ALLOW_ORIGINS: Comma-separated list of allowed origins used
            outside production (default: local development origins)
        REQUEST_ID_HEADER: Header carrying the per-request identifier
            (default: x-request-id)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()
        backend_url = settings.server.BACKEND_URL
        origins = settings.server.allow_origins
        ```
    """

    BACKEND_URL: str = Field(default="http://127.0.0.1:8000", alias="BACKEND_URL")
    CORS_ALLOW_ORIGINS: str = Field(
        default="http://localhost:8000,http://127.0.0.1:8000",
        alias="CORS_ALLOW_ORIGINS",
    )
    REQUEST_ID_HEADER: str = Field(default="x-request-id", alias="REQUEST_ID_HEADER")

    @property
    def allow_origins(self) -> List[str]:
        """Development CORS origins as a list."""
        return [
            origin.strip()
            for origin in self.CORS_ALLOW_ORIGINS.split(",")
            if origin.strip()
        ]
