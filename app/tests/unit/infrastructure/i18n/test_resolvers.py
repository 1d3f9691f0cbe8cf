"""Tests for infrastructure.i18n.resolvers module."""

import pytest

from infrastructure.i18n import LocaleResolver, LocaleSignals
from infrastructure.i18n.resolvers import REQUEST_STATE_KEY
from tests.factories import make_locale_signals


class TestLocaleResolver:
    """Tests for LocaleResolver.resolve()."""

    def test_no_signals_returns_default(self):
        resolver = LocaleResolver(default_locale="en-US")
        assert resolver.resolve(LocaleSignals()) == "en-US"

    @pytest.mark.parametrize(
        "signals,expected",
        [
            (
                {"query_lang": "a-A", "query_language": "b-B", "accept_language": "g-G"},
                "a-A",
            ),
            ({"query_language": "b-B", "cookie_user_locale": "c-C"}, "b-B"),
            ({"cookie_user_locale": "c-C", "cookie_client_language": "d-D"}, "c-C"),
            ({"cookie_client_language": "d-D", "header_user_locale": "e-E"}, "d-D"),
            ({"header_user_locale": "e-E", "header_client_language": "f-F"}, "e-E"),
            ({"header_client_language": "f-F", "accept_language": "g-G"}, "f-F"),
            ({"accept_language": "g-G,h-H;q=0.8"}, "g-G"),
        ],
    )
    def test_priority_chain(self, signals, expected):
        """The first non-empty signal in priority order wins."""
        resolver = LocaleResolver()
        assert resolver.resolve(make_locale_signals(**signals)) == expected

    def test_empty_signal_is_skipped(self):
        resolver = LocaleResolver()
        signals = LocaleSignals(query_lang="", cookie_user_locale="fr-FR")
        assert resolver.resolve(signals) == "fr-FR"

    def test_any_locale_accepted_with_wildcard(self):
        resolver = LocaleResolver(accept_language="*")
        assert resolver.resolve(LocaleSignals(query_lang="xx-XX")) == "xx-XX"

    def test_not_accepted_falls_back_to_default(self):
        """A candidate outside the accept-list resolves to the default."""
        resolver = LocaleResolver(default_locale="en-US", accept_language="en-US,zh-CN")
        signals = LocaleSignals(accept_language="fr-FR,fr;q=0.9")
        assert resolver.resolve(signals) == "en-US"

    def test_accepted_locale_is_kept(self):
        resolver = LocaleResolver(default_locale="en-US", accept_language="en-US,zh-CN")
        assert resolver.resolve(LocaleSignals(query_lang="zh-CN")) == "zh-CN"

    def test_matching_is_exact(self):
        """A language tag does not match a region-qualified entry."""
        resolver = LocaleResolver(default_locale="en-US", accept_language="en-US,zh-CN")
        assert resolver.resolve(LocaleSignals(query_lang="zh")) == "en-US"

    def test_is_accepted(self):
        resolver = LocaleResolver(accept_language="en-US,zh-CN")
        assert resolver.is_accepted("zh-CN") is True
        assert resolver.is_accepted("fr-FR") is False


class TestResolveRequest:
    """Tests for LocaleResolver.resolve_request()."""

    def test_resolves_from_request(self, request_factory):
        resolver = LocaleResolver()
        request = request_factory(
            cookies={"x-client-language": "de-DE"},
            headers={"accept-language": "fr-FR"},
        )
        assert resolver.resolve_request(request) == "de-DE"

    def test_result_is_memoized_on_request_state(self, request_factory):
        resolver = LocaleResolver()
        request = request_factory(query={"lang": "zh-CN"})

        assert resolver.resolve_request(request) == "zh-CN"
        assert getattr(request.state, REQUEST_STATE_KEY) == "zh-CN"

    def test_memoized_value_is_reused(self, request_factory):
        """Later calls for the same request do not re-read the signals."""
        resolver = LocaleResolver()
        request = request_factory(query={"lang": "zh-CN"})
        setattr(request.state, REQUEST_STATE_KEY, "ja-JP")

        assert resolver.resolve_request(request) == "ja-JP"

    def test_memo_is_per_request(self, request_factory):
        resolver = LocaleResolver()
        first = request_factory(query={"lang": "zh-CN"})
        second = request_factory(query={"lang": "fr-FR"})

        assert resolver.resolve_request(first) == "zh-CN"
        assert resolver.resolve_request(second) == "fr-FR"
