"""Tests for infrastructure.i18n.loader module."""

import pytest

from infrastructure.i18n import (
    CallableMessageLoader,
    ConfigurationError,
    MessageLoader,
    MessageRequest,
    RemoteLoadError,
    YAMLMessageLoader,
)
from infrastructure.i18n.loader import as_message_loader


class TestCallableMessageLoader:
    """Tests for CallableMessageLoader."""

    @pytest.mark.asyncio
    async def test_sync_callable(self):
        loader = CallableMessageLoader(lambda request: {"locale": request.locale})
        result = await loader.load(MessageRequest("fr-FR", "global"))
        assert result == {"locale": "fr-FR"}

    @pytest.mark.asyncio
    async def test_async_callable(self):
        async def fetch(request):
            return {"module": request.module}

        loader = CallableMessageLoader(fetch)
        result = await loader.load(MessageRequest("fr-FR", "billing"))
        assert result == {"module": "billing"}

    @pytest.mark.asyncio
    async def test_none_result_is_empty(self):
        loader = CallableMessageLoader(lambda request: None)
        assert await loader.load(MessageRequest("fr-FR", "global")) == {}

    @pytest.mark.asyncio
    async def test_exception_is_wrapped(self):
        def fetch(request):
            raise ConnectionError("refused")

        loader = CallableMessageLoader(fetch)
        with pytest.raises(RemoteLoadError) as exc_info:
            await loader.load(MessageRequest("fr-FR", "global"))

        assert exc_info.value.locale == "fr-FR"
        assert exc_info.value.module == "global"
        assert isinstance(exc_info.value.__cause__, ConnectionError)

    @pytest.mark.asyncio
    async def test_non_mapping_result(self):
        loader = CallableMessageLoader(lambda request: ["hello"])
        with pytest.raises(RemoteLoadError):
            await loader.load(MessageRequest("fr-FR", "global"))

    def test_non_callable(self):
        with pytest.raises(ConfigurationError):
            CallableMessageLoader("not callable")


class TestYAMLMessageLoader:
    """Tests for YAMLMessageLoader."""

    def test_missing_directory(self, tmp_path):
        with pytest.raises(ConfigurationError):
            YAMLMessageLoader(tmp_path / "missing")

    def test_load_all(self, temp_messages_dir):
        result = YAMLMessageLoader(temp_messages_dir).load_all()

        assert result["en-US"]["global"]["hello"] == "Hello from YAML"
        assert result["fr-FR"]["global"]["farewell"] == "Au revoir"
        assert result["en-US"]["billing"]["invoice"]["title"] == "Invoice {number}"
        assert "billing" not in result["fr-FR"]

    @pytest.mark.asyncio
    async def test_load_single_pair(self, temp_messages_dir):
        loader = YAMLMessageLoader(temp_messages_dir)
        result = await loader.load(MessageRequest("fr-FR", "global"))
        assert result["hello"] == "Bonjour depuis YAML"

    @pytest.mark.asyncio
    async def test_load_missing_file_is_empty(self, temp_messages_dir):
        loader = YAMLMessageLoader(temp_messages_dir)
        assert await loader.load(MessageRequest("de-DE", "global")) == {}

    def test_unrecognized_file_is_skipped(self, temp_messages_dir):
        (temp_messages_dir / "README.yml").write_text("hello: world\n", encoding="utf-8")
        result = YAMLMessageLoader(temp_messages_dir).load_all()
        assert "README" not in result

    def test_empty_file_is_skipped(self, temp_messages_dir):
        (temp_messages_dir / "global.de-DE.yml").write_text("", encoding="utf-8")
        assert "de-DE" not in YAMLMessageLoader(temp_messages_dir).load_all()

    def test_non_mapping_file_is_skipped(self, temp_messages_dir):
        (temp_messages_dir / "global.de-DE.yml").write_text("- a\n- b\n", encoding="utf-8")
        assert "de-DE" not in YAMLMessageLoader(temp_messages_dir).load_all()

    def test_invalid_yaml_raises(self, temp_messages_dir):
        (temp_messages_dir / "global.de-DE.yml").write_text("hello: [unclosed\n", encoding="utf-8")
        with pytest.raises(RemoteLoadError):
            YAMLMessageLoader(temp_messages_dir).load_all()


class TestAsMessageLoader:
    """Tests for as_message_loader()."""

    def test_none(self):
        assert as_message_loader(None) is None

    def test_loader_passthrough(self, temp_messages_dir):
        loader = YAMLMessageLoader(temp_messages_dir)
        assert as_message_loader(loader) is loader

    def test_callable_is_wrapped(self):
        loader = as_message_loader(lambda request: {})
        assert isinstance(loader, CallableMessageLoader)
        assert isinstance(loader, MessageLoader)
