"""Feature-level fixtures for intl system tests.

Provides message stores, YAML message directories and remote loader mocks.
"""

from unittest.mock import AsyncMock

import pytest
import yaml

from infrastructure.i18n import FormatterCache, IntlService, MessageStore


@pytest.fixture
def store(default_messages):
    """MessageStore pre-filled with default messages under "global"."""
    message_store = MessageStore()
    message_store.load(default_messages, "global")
    return message_store


@pytest.fixture
def remote_messages():
    """AsyncMock remote loader returning a fr-FR style message map."""
    return AsyncMock(return_value={"hello": "Bonjour le monde"})


@pytest.fixture
def formatter_cache(store):
    """FormatterCache without a remote loader."""
    return FormatterCache(store=store, default_locale="en-US", maxsize=100)


@pytest.fixture
def intl_service(intl_options):
    """IntlService built from the default test options."""
    return IntlService(intl_options)


@pytest.fixture
def temp_messages_dir(tmp_path):
    """Create a temporary directory with sample YAML message files.

    Returns a directory structure like:
    - global.en-US.yml
    - global.fr-FR.yml
    - billing.en-US.yml
    """
    files = {
        "global.en-US.yml": {
            "hello": "Hello from YAML",
            "farewell": "Goodbye",
        },
        "global.fr-FR.yml": {
            "hello": "Bonjour depuis YAML",
            "farewell": "Au revoir",
        },
        "billing.en-US.yml": {
            "invoice": {"title": "Invoice {number}"},
        },
    }
    for name, data in files.items():
        with open(tmp_path / name, "w", encoding="utf-8") as f:
            yaml.dump(data, f, allow_unicode=True)

    return tmp_path
