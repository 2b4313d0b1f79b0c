"""Configuration loading for semdb.

Configuration sources are merged in priority order:
    1. Defaults (defined in IndexConfig)
    2. Global config (~/.semdb.toml)
    3. Project config (./semdb.toml)
    4. Explicit config file
    5. Environment variables (SEMDB_* prefix)
    6. Overrides passed as kwargs (typically CLI flags)

Example:
    >>> config = load_config(top_k=5)
    >>> config.top_k
    5
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError
from .store import DEFAULT_DB_NAME
from .views.completion import DEFAULT_THRESHOLD_TOO_MANY_ENTITIES

Verbosity = Literal["quiet", "normal", "verbose"]

GLOBAL_CONFIG_NAME = ".semdb.toml"
PROJECT_CONFIG_NAME = "semdb.toml"
ENV_PREFIX = "SEMDB_"


@dataclass(frozen=True)
class IndexConfig:
    """Settings shared by the CLI and library callers.

    Attributes:
        db_name: Default database file name
        readable_db: Pretty-print saved databases
        top_k: Entities kept per file by the top-K view
        completion_threshold: Above this many entities, completion lists
            only directories and files
        allow_root_mismatch: Merge databases whose roots differ without asking
        verbosity: Logging verbosity level
    """

    db_name: str = DEFAULT_DB_NAME
    readable_db: bool = False
    top_k: int = 10
    completion_threshold: int = DEFAULT_THRESHOLD_TOO_MANY_ENTITIES
    allow_root_mismatch: bool = False
    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        for name in ("top_k", "completion_threshold"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidConfigError(name, value, "must be an integer")
        for name in ("readable_db", "allow_root_mismatch"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise InvalidConfigError(name, value, "must be true or false")
        if not isinstance(self.db_name, str) or not self.db_name:
            raise InvalidConfigError("db_name", self.db_name, "must be a non-empty string")
        if self.top_k < 0:
            raise InvalidConfigError("top_k", self.top_k, "must be non-negative")
        if self.completion_threshold < 0:
            raise InvalidConfigError(
                "completion_threshold", self.completion_threshold, "must be non-negative"
            )
        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise InvalidConfigError(
                "verbosity", self.verbosity, "expected quiet, normal or verbose"
            )


def load_config(config_file: Optional[Path] = None, **overrides: Any) -> IndexConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides; ``verbose``/``quiet`` booleans are
            translated to ``verbosity``. ``None`` values are ignored.

    Raises:
        ConfigurationError: a config file is missing or invalid
        InvalidConfigError: a value is out of range
    """
    merged: dict[str, Any] = {}

    for candidate in (Path.home() / GLOBAL_CONFIG_NAME, Path.cwd() / PROJECT_CONFIG_NAME):
        if candidate.exists():
            merged.update(_load_toml_file(candidate))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        merged.update(_load_toml_file(config_file))

    merged.update(_load_env_vars())

    if overrides.pop("verbose", False):
        overrides["verbosity"] = "verbose"
    if overrides.pop("quiet", False):
        overrides["verbosity"] = "quiet"
    merged.update({k: v for k, v in overrides.items() if v is not None})

    known = {f.name for f in fields(IndexConfig)}
    unknown = sorted(set(merged) - known)
    if unknown:
        raise ConfigurationError(f"Unknown configuration keys: {', '.join(unknown)}")

    try:
        return IndexConfig(**merged)
    except TypeError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e


def _load_env_vars() -> dict[str, Any]:
    """Read SEMDB_<FIELD> environment variables, e.g. SEMDB_TOP_K=20."""
    type_hints = get_type_hints(IndexConfig)
    result: dict[str, Any] = {}

    for f in fields(IndexConfig):
        env_key = f"{ENV_PREFIX}{f.name.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is None:
            continue
        try:
            result[f.name] = _parse_env_value(env_value, type_hints[f.name])
        except ValueError as e:
            raise InvalidConfigError(env_key, env_value, str(e)) from e

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        if lower in ("false", "0", "no", "off"):
            return False
        raise ValueError(f"expected true/false, got '{value}'")
    if type_hint is int:
        return int(value)
    return value


def _load_toml_file(path: Path) -> dict[str, Any]:
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        import tomli as tomllib  # type: ignore[no-redef]

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Invalid config file '{path}': {e}") from e

    # settings may sit at the top level or under a [semdb] table
    section = data.get("semdb", data)
    if not isinstance(section, dict):
        raise ConfigurationError(f"Invalid config file '{path}': [semdb] must be a table")
    return section
