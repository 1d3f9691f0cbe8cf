"""Unit tests for infrastructure.logging.setup module.

Tests cover:
- Test environment detection
- configure_logging() behavior under pytest
- get_module_logger() context binding
"""

import logging
import sys
from unittest.mock import patch

import pytest
import structlog

from infrastructure.logging.setup import (
    _is_test_environment,
    configure_logging,
    get_module_logger,
)


@pytest.mark.unit
class TestIsTestEnvironment:
    """Test suite for _is_test_environment."""

    def test_returns_true_during_test_run(self):
        assert _is_test_environment() is True

    def test_returns_false_without_pytest(self):
        with patch.dict(sys.modules):
            sys.modules.pop("pytest", None)
            assert _is_test_environment() is False


@pytest.mark.unit
class TestConfigureLogging:
    """Test suite for configure_logging."""

    def test_configure_logging_returns_bound_logger(self):
        logger = configure_logging()

        assert hasattr(logger, "info")
        assert hasattr(logger, "bind")

    def test_configure_logging_suppresses_in_test_env(self):
        """Logging is silenced while running under pytest."""
        configure_logging(log_level="DEBUG", is_production=False)

        assert logging.root.level > logging.CRITICAL

    def test_configure_logging_idempotent(self):
        configure_logging()
        configure_logging()

        assert structlog.is_configured()


@pytest.mark.unit
class TestGetModuleLogger:
    """Test suite for get_module_logger."""

    def test_get_module_logger_binds_module_context(self):
        logger = get_module_logger()

        context = structlog.get_context(logger)
        assert context["module_path"] == __name__
        assert context["component"] == __name__.split(".")[-1]

    def test_get_module_logger_methods_dont_raise(self):
        logger = get_module_logger()

        logger.debug("formatter_cache_miss", cache_key="en-US:global")
        logger.info("remote_messages_loaded", locale="fr-FR", key_count=3)
        logger.warning("message_format_failed", missing_variables=["name"])
        logger.error("remote_messages_load_failed", error="boom")
