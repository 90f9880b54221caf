"""
Naming configuration.

A single NamingConfig value drives identifier normalization. Hosts may build
one at startup and pass it to every naming call (``config=...``); calls that
omit it share a process-wide default that is constructed once, on first use.

Overrides can be kept in a YAML file next to the generator settings:

    word_delimiters: ["-", " ", "_", "."]
    prefix_leading_digit: true
    enum_default: _UNKNOWN_
"""

import dataclasses
import logging
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Union

import yaml

logger = logging.getLogger("restnaming.config")


class NamingConfigError(Exception):
    """Raised when a naming configuration cannot be loaded or is invalid."""

    pass


@dataclass(frozen=True)
class NamingConfig:
    """Read-only settings shared by the naming operations."""

    word_delimiters: tuple[str, ...] = ("-", " ", "_")
    prefix_leading_digit: bool = True
    enum_default: str = "_DEFAULT_"
    details_suffix: str = "details"
    max_action_segments: int = 2
    class_suffixes: tuple[str, ...] = ("services", "service", "impl", "class", "controller")

    def __post_init__(self):
        for name in ("word_delimiters", "class_suffixes"):
            value = getattr(self, name)
            if isinstance(value, str) or not all(isinstance(v, str) and v for v in value):
                raise NamingConfigError(f"{name} must be a sequence of non-empty strings")
        if any(len(d) != 1 for d in self.word_delimiters):
            raise NamingConfigError("word_delimiters must be single characters")
        if not isinstance(self.enum_default, str) or not self.enum_default:
            raise NamingConfigError("enum_default must be a non-empty string")
        if not isinstance(self.details_suffix, str) or not self.details_suffix:
            raise NamingConfigError("details_suffix must be a non-empty string")
        if not isinstance(self.max_action_segments, int) or self.max_action_segments < 1:
            raise NamingConfigError("max_action_segments must be a positive integer")

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> "NamingConfig":
        """
        Build a config from a plain mapping (e.g. parsed YAML).

        Lists are converted to tuples; unknown keys are rejected.

        Raises:
            NamingConfigError: If a key is unknown or a value is invalid
        """
        known = {f.name for f in dataclasses.fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise NamingConfigError(f"Unknown naming config keys: {', '.join(unknown)}")

        values = {k: tuple(v) if isinstance(v, list) else v for k, v in data.items()}
        try:
            return cls(**values)
        except TypeError as e:
            raise NamingConfigError(f"Invalid naming config: {e}") from e


def load_naming_config(path: Union[str, Path]) -> NamingConfig:
    """
    Load a NamingConfig from a YAML file.

    Args:
        path: YAML file holding a mapping of NamingConfig field names

    Returns:
        NamingConfig with the file's values over the defaults

    Raises:
        NamingConfigError: If the file is missing, unparsable, or invalid
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise NamingConfigError(f"Cannot read naming config {path}: {e}") from e

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise NamingConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise NamingConfigError(f"Naming config {path} must contain a mapping")

    config = NamingConfig.from_mapping(data)
    logger.debug(f"Loaded naming config from {path}: {config}")
    return config


_default_config: Optional[NamingConfig] = None
_default_config_lock = threading.Lock()


def get_default_config() -> NamingConfig:
    """
    Get or create the process-wide default config (lazy creation).

    Double-checked under a lock so concurrent first calls build it once.
    """
    global _default_config
    if _default_config is None:
        with _default_config_lock:
            if _default_config is None:
                _default_config = NamingConfig()
    return _default_config


def set_default_config(config: NamingConfig) -> None:
    """
    Install the process-wide default at startup, before any naming call.

    The default is read-only once built; installing a second one, or one
    after get_default_config() has run, raises NamingConfigError.
    """
    global _default_config
    if not isinstance(config, NamingConfig):
        raise NamingConfigError(f"Expected a NamingConfig, got {type(config).__name__}")
    with _default_config_lock:
        if _default_config is not None:
            raise NamingConfigError("The default naming config is already in use")
        _default_config = config


def resolve_config(config: Optional[NamingConfig]) -> NamingConfig:
    """Return config, or the process-wide default when it is None."""
    return config if config is not None else get_default_config()
