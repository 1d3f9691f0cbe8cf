import sys
from pathlib import Path

# Ensure the application package root is on sys.path so importing application
# modules (e.g. `infrastructure.i18n`) works during pytest collection
# regardless of the directory pytest is invoked from.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pytest  # noqa: E402

from infrastructure.services.providers import get_intl_service, get_settings  # noqa: E402
from tests.factories.i18n import (  # noqa: E402
    make_default_messages,
    make_intl_options,
    make_request,
)


@pytest.fixture(autouse=True)
def reset_providers():
    """Clear cached providers so each test sees a fresh environment."""
    get_settings.cache_clear()
    get_intl_service.cache_clear()
    yield
    get_settings.cache_clear()
    get_intl_service.cache_clear()


@pytest.fixture
def default_messages():
    """Default messages for en-US and zh-CN."""
    return make_default_messages()


@pytest.fixture
def intl_options(default_messages):
    """IntlOptions with default messages and no remote loader."""
    return make_intl_options(default_messages=default_messages)


@pytest.fixture
def request_factory():
    """Build Starlette requests from query, cookie and header dicts."""
    return make_request
