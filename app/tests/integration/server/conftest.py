"""Fixtures for server integration tests."""

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from infrastructure.configuration import Settings
from infrastructure.i18n import IntlService
from infrastructure.i18n.factory import DEFAULT_MESSAGES_DIR
from server.server import create_app
from tests.factories.i18n import make_intl_options


@pytest.fixture
def remote_loader():
    """Remote loader answering for the "billing" module only."""

    async def load(request):
        if request.module == "billing":
            return {"invoice": f"Invoice ({request.locale})"}
        return {}

    return AsyncMock(side_effect=load)


@pytest.fixture
def intl(default_messages, remote_loader):
    """IntlService with default messages, bundled YAML files and a remote loader."""
    return IntlService(
        make_intl_options(
            default_messages=default_messages,
            request_messages=remote_loader,
            messages_dir=DEFAULT_MESSAGES_DIR,
        )
    )


@pytest.fixture
def app_settings():
    """Non-production settings."""
    return Settings(PREFIX="dev-")


@pytest.fixture
def client(app_settings, intl):
    """TestClient with the application lifespan running."""
    with TestClient(create_app(settings=app_settings, intl=intl)) as test_client:
        yield test_client
