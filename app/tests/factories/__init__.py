"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_default_messages,
    make_intl_options,
    make_locale_signals,
    make_request,
)

__all__ = [
    "make_default_messages",
    "make_intl_options",
    "make_locale_signals",
    "make_request",
]
