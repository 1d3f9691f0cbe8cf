"""Test data factories for intl system testing.

Provides deterministic test data builders for:
- Default message maps
- IntlOptions
- LocaleSignals
- Starlette requests carrying query, cookie and header signals
"""

from typing import Any, Dict, Optional
from urllib.parse import urlencode

from starlette.requests import Request

from infrastructure.i18n import IntlOptions, LocaleSignals


def make_default_messages() -> Dict[str, Dict[str, Any]]:
    """Create default messages for en-US and zh-CN.

    Returns:
        Messages keyed by locale.
    """
    return {
        "en-US": {
            "hello": "Hello World",
            "greeting": "Hello, {name}!",
            "errors": {"not_found": "Not found"},
        },
        "zh-CN": {
            "hello": "你好世界",
            "greeting": "你好，{name}！",
        },
    }


def make_intl_options(**overrides: Any) -> IntlOptions:
    """Create an IntlOptions instance.

    Args:
        **overrides: Option values replacing the defaults.

    Returns:
        Validated IntlOptions.
    """
    values: Dict[str, Any] = {
        "name": "intl",
        "accept_language": "*",
        "default_locale": "en-US",
        "default_module_name": "global",
        "default_messages": make_default_messages(),
        "cache_size": 100,
    }
    values.update(overrides)
    return IntlOptions(**values)


def make_locale_signals(**signals: Optional[str]) -> LocaleSignals:
    """Create a LocaleSignals instance with only the given signals set."""
    return LocaleSignals(**signals)


def make_request(
    query: Optional[Dict[str, str]] = None,
    cookies: Optional[Dict[str, str]] = None,
    headers: Optional[Dict[str, str]] = None,
    path: str = "/",
) -> Request:
    """Create a Starlette request from plain dicts.

    Args:
        query: Query parameters.
        cookies: Cookies, sent as a single Cookie header.
        headers: Request headers.
        path: Request path.

    Returns:
        Request bound to a fresh ASGI scope.
    """
    raw_headers = [
        (name.lower().encode("latin-1"), value.encode("latin-1"))
        for name, value in (headers or {}).items()
    ]
    if cookies:
        cookie_header = "; ".join(f"{name}={value}" for name, value in cookies.items())
        raw_headers.append((b"cookie", cookie_header.encode("latin-1")))

    scope = {
        "type": "http",
        "method": "GET",
        "path": path,
        "query_string": urlencode(query or {}).encode("latin-1"),
        "headers": raw_headers,
    }
    return Request(scope)
