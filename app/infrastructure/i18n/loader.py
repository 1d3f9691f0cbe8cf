"""Message loading interface and implementations.

A MessageLoader supplies messages for a (locale, module) pair that the
MessageStore does not know yet. Two implementations are provided:

- CallableMessageLoader adapts an integrator callback (sync or async).
- YAMLMessageLoader reads ``<module>.<locale>.yml`` files from a directory,
  either all at once at startup (load_all) or one pair at a time (load).
"""

import inspect
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from infrastructure.i18n.exceptions import ConfigurationError, RemoteLoadError
from infrastructure.i18n.models import MessageMap, MessageRequest, RequestMessages
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class MessageLoader(ABC):
    """Abstract base for message loaders.

    Implementations must define how messages for a single (locale, module)
    pair are fetched.
    """

    @abstractmethod
    async def load(self, request: MessageRequest) -> MessageMap:
        """Load messages for one (locale, module) pair.

        Args:
            request: Locale and module to load.

        Returns:
            The message map (may be empty).

        Raises:
            RemoteLoadError: If the messages could not be loaded.
        """
        pass


class CallableMessageLoader(MessageLoader):
    """Adapts a ``request_messages`` callback to the MessageLoader interface.

    The callback receives a MessageRequest and returns a message map, or an
    awaitable resolving to one.

    Example:
        async def fetch(request: MessageRequest) -> dict:
            return await client.get_messages(request.locale, request.module)

        loader = CallableMessageLoader(fetch)
    """

    def __init__(self, func: RequestMessages):
        if not callable(func):
            raise ConfigurationError("request_messages must be callable")
        self.func = func

    async def load(self, request: MessageRequest) -> MessageMap:
        try:
            result = self.func(request)
            if inspect.isawaitable(result):
                result = await result
        except Exception as e:
            raise RemoteLoadError(request.locale, request.module, str(e)) from e

        if result is None:
            return {}
        if not isinstance(result, Mapping):
            raise RemoteLoadError(
                request.locale,
                request.module,
                f"expected a mapping, got {type(result).__name__}",
            )
        return result


class YAMLMessageLoader(MessageLoader):
    """Loader for YAML message files.

    Expects files named ``<module>.<locale>.yml`` (for example
    ``global.en-US.yml``), each holding a mapping of message id to template.

    Attributes:
        messages_dir: Directory containing the YAML files.
    """

    def __init__(self, messages_dir: Path):
        """Initialize YAML message loader.

        Args:
            messages_dir: Directory with YAML message files.

        Raises:
            ConfigurationError: If the directory does not exist.
        """
        self.messages_dir = Path(messages_dir)

        if not self.messages_dir.is_dir():
            raise ConfigurationError(f"Messages directory not found: {self.messages_dir}")

        logger.info("initialized_yaml_loader", messages_dir=str(self.messages_dir))

    async def load(self, request: MessageRequest) -> MessageMap:
        path = self.messages_dir / f"{request.module}.{request.locale}.yml"
        if not path.is_file():
            logger.debug(
                "yaml_messages_not_found",
                locale=request.locale,
                module=request.module,
                file=str(path),
            )
            return {}
        return self._read(path, request.locale, request.module)

    def load_all(self) -> Dict[str, Dict[str, MessageMap]]:
        """Read every message file in the directory.

        Returns:
            Nested dict ``{locale: {module: messages}}``.

        Raises:
            RemoteLoadError: If a file cannot be parsed.
        """
        result: Dict[str, Dict[str, MessageMap]] = {}
        for yaml_file in sorted(self.messages_dir.glob("*.yml")):
            # "global.en-US.yml" -> module "global", locale "en-US"
            parts = yaml_file.stem.split(".")
            if len(parts) < 2:
                logger.warning("unrecognized_message_file", file=str(yaml_file))
                continue
            module, locale = ".".join(parts[:-1]), parts[-1]
            messages = self._read(yaml_file, locale, module)
            if messages:
                result.setdefault(locale, {})[module] = messages

        logger.info(
            "loaded_yaml_messages",
            messages_dir=str(self.messages_dir),
            locale_count=len(result),
        )
        return result

    def _read(self, path: Path, locale: str, module: str) -> Dict[str, Any]:
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            logger.error("yaml_parse_error", file=str(path), error=str(e))
            raise RemoteLoadError(locale, module, f"failed to parse {path}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            logger.warning("invalid_yaml_format", file=str(path), expected="dict")
            return {}
        return data


def as_message_loader(source: Optional[Any]) -> Optional[MessageLoader]:
    """Normalize a ``request_messages`` option into a MessageLoader.

    Args:
        source: None, a MessageLoader, or a callable.

    Returns:
        A MessageLoader, or None when no remote loading is configured.

    Raises:
        ConfigurationError: If source is neither a loader nor callable.
    """
    if source is None or isinstance(source, MessageLoader):
        return source
    return CallableMessageLoader(source)
