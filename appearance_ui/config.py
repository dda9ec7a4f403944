"""Configuration loading for appearance_ui."""
from __future__ import annotations

import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Mapping, MutableMapping

from .naming import DEFAULT_CLASS_PREFIX


class ConfigError(ValueError):
    """Raised when a configuration value is invalid."""


@dataclass(slots=True, frozen=True)
class NamingConfig:
    """Class token settings shared by every builder."""

    class_prefix: str = DEFAULT_CLASS_PREFIX


@dataclass(slots=True, frozen=True)
class TableConfig:
    """Table builder tunables."""

    long_text_threshold: int = 100


@dataclass(slots=True, frozen=True)
class Config:
    """Top-level configuration container."""

    naming: NamingConfig = field(default_factory=NamingConfig)
    table: TableConfig = field(default_factory=TableConfig)


DEFAULT_CONFIG = Config()


def _load_toml(path: Path) -> Mapping[str, Any]:
    if not path.exists():
        return {}
    with path.open("rb") as fh:
        try:
            return tomllib.load(fh)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc


def load_config(path: str | Path | None = None) -> Config:
    """Load configuration from ``path`` if provided, otherwise defaults.

    Parameters
    ----------
    path:
        Path to a ``config.toml`` file. When ``None`` or missing the default
        configuration is returned.
    """

    cfg = DEFAULT_CONFIG
    if path is None:
        return cfg

    data = _load_toml(Path(path))
    naming_data = data.get("naming")
    if isinstance(naming_data, Mapping):
        cfg = replace(cfg, naming=_parse_naming(naming_data, base=cfg.naming))
    table_data = data.get("table")
    if isinstance(table_data, Mapping):
        cfg = replace(cfg, table=_parse_table(table_data, base=cfg.table))
    return cfg


def _parse_naming(data: Mapping[str, Any], base: NamingConfig) -> NamingConfig:
    overrides: MutableMapping[str, Any] = {}
    if "class_prefix" in data:
        prefix = str(data["class_prefix"]).strip()
        if not prefix:
            raise ConfigError("naming.class_prefix must not be empty")
        overrides["class_prefix"] = prefix
    if not overrides:
        return base
    return replace(base, **overrides)


def _parse_table(data: Mapping[str, Any], base: TableConfig) -> TableConfig:
    overrides: MutableMapping[str, Any] = {}
    if "long_text_threshold" in data:
        try:
            threshold = int(data["long_text_threshold"])
        except (TypeError, ValueError) as exc:
            raise ConfigError("table.long_text_threshold must be an integer") from exc
        if threshold < 0:
            raise ConfigError("table.long_text_threshold must be zero or greater")
        overrides["long_text_threshold"] = threshold
    if not overrides:
        return base
    return replace(base, **overrides)


__all__ = [
    "Config",
    "ConfigError",
    "DEFAULT_CONFIG",
    "NamingConfig",
    "TableConfig",
    "load_config",
]
