"""Global configuration data structures and loading.

Provides immutable config data loaded from ~/.jjstacks/config.toml. The
config is loaded once at the CLI entry point and stored in the context.
"""

import os
import tomllib
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

import tomlkit

DEFAULT_SHORT_ID_LENGTH = 8


@dataclass(frozen=True)
class GlobalConfig:
    """Immutable global configuration data."""

    short_id_length: int
    show_parallel_groups: bool
    default_revset: str | None

    @staticmethod
    def defaults() -> "GlobalConfig":
        return GlobalConfig(
            short_id_length=DEFAULT_SHORT_ID_LENGTH,
            show_parallel_groups=True,
            default_revset=None,
        )


CONFIG_KEYS = ("short_id_length", "show_parallel_groups", "default_revset")


class ConfigStore(ABC):
    """Abstract interface for global config operations.

    Provides dependency injection for config access, enabling in-memory
    implementations for tests without touching the filesystem.
    """

    @abstractmethod
    def exists(self) -> bool:
        """Check if global config exists."""
        ...

    @abstractmethod
    def load(self) -> GlobalConfig:
        """Load global config, falling back to defaults when none exists.

        Raises:
            ValueError: If the config holds values of the wrong type
        """
        ...

    @abstractmethod
    def save(self, config: GlobalConfig) -> None:
        ...

    @abstractmethod
    def path(self) -> Path:
        """Get the path to the global config file (for messages)."""
        ...


def config_from_mapping(data: dict, source: Path) -> GlobalConfig:
    """Build a GlobalConfig from decoded TOML, validating field types.

    Raises:
        ValueError: If a field has the wrong type or an invalid value
    """
    defaults = GlobalConfig.defaults()

    short_id_length = data.get("short_id_length", defaults.short_id_length)
    if isinstance(short_id_length, bool) or not isinstance(short_id_length, int):
        raise ValueError(f"'short_id_length' must be an integer in {source}")
    if short_id_length <= 0:
        raise ValueError(f"'short_id_length' must be positive in {source}")

    show_parallel_groups = data.get("show_parallel_groups", defaults.show_parallel_groups)
    if not isinstance(show_parallel_groups, bool):
        raise ValueError(f"'show_parallel_groups' must be true or false in {source}")

    default_revset = data.get("default_revset", defaults.default_revset)
    if default_revset is not None and not isinstance(default_revset, str):
        raise ValueError(f"'default_revset' must be a string in {source}")

    return GlobalConfig(
        short_id_length=short_id_length,
        show_parallel_groups=show_parallel_groups,
        default_revset=default_revset or None,
    )


def parse_config_value(key: str, raw: str) -> int | bool | str:
    """Convert a `config set` command-line value to the key's type.

    Raises:
        ValueError: If the key is unknown or the value cannot be converted
    """
    if key not in CONFIG_KEYS:
        raise ValueError(f"Unknown config key: {key}. Valid keys: {', '.join(CONFIG_KEYS)}")
    if key == "short_id_length":
        if not raw.isdigit() or int(raw) <= 0:
            raise ValueError(f"'{key}' must be a positive integer, got '{raw}'")
        return int(raw)
    if key == "show_parallel_groups":
        lowered = raw.lower()
        if lowered not in ("true", "false"):
            raise ValueError(f"'{key}' must be 'true' or 'false', got '{raw}'")
        return lowered == "true"
    return raw


class RealConfigStore(ConfigStore):
    """Production implementation that reads/writes ~/.jjstacks/config.toml."""

    def exists(self) -> bool:
        return self.path().exists()

    def load(self) -> GlobalConfig:
        config_path = self.path()
        if not config_path.exists():
            return GlobalConfig.defaults()

        try:
            data = tomllib.loads(config_path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Malformed config file {config_path}: {e}") from e
        return config_from_mapping(data, config_path)

    def save(self, config: GlobalConfig) -> None:
        """Save global config, preserving comments in an existing file.

        Raises:
            PermissionError: If the directory or file cannot be written
        """
        config_path = self.path()
        parent = config_path.parent

        if parent.exists() and not os.access(parent, os.W_OK):
            raise PermissionError(f"Cannot write to directory: {parent}")
        parent.mkdir(parents=True, exist_ok=True)

        if config_path.exists():
            with config_path.open("r", encoding="utf-8") as f:
                doc = tomlkit.load(f)
        else:
            doc = tomlkit.document()
            doc.add(tomlkit.comment("Global jjstacks configuration"))

        doc["short_id_length"] = config.short_id_length
        doc["show_parallel_groups"] = config.show_parallel_groups
        if config.default_revset is not None:
            doc["default_revset"] = config.default_revset
        elif "default_revset" in doc:
            del doc["default_revset"]

        with config_path.open("w", encoding="utf-8") as f:
            tomlkit.dump(doc, f)

    def path(self) -> Path:
        return Path.home() / ".jjstacks" / "config.toml"


class InMemoryConfigStore(ConfigStore):
    """Test implementation that stores config in memory without touching filesystem."""

    def __init__(self, config: GlobalConfig | None = None) -> None:
        """Initialize in-memory config store.

        Args:
            config: Initial config state (None = config doesn't exist)
        """
        self._config = config

    def exists(self) -> bool:
        return self._config is not None

    def load(self) -> GlobalConfig:
        if self._config is None:
            return GlobalConfig.defaults()
        return self._config

    def save(self, config: GlobalConfig) -> None:
        self._config = config

    def path(self) -> Path:
        return Path("/test/.jjstacks/config.toml")
