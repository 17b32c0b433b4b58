"""Configuration primitives for the Google Trends CSV parser."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, MutableMapping, Optional

import yaml

from .errors import ConfigurationError

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent / "configs" / "gtrends.yaml"

_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"}


def _merge_dict(base: MutableMapping[str, Any], updates: Mapping[str, Any]) -> MutableMapping[str, Any]:
    for key, value in updates.items():
        if isinstance(value, Mapping) and isinstance(base.get(key), MutableMapping):
            _merge_dict(base[key], value)  # type: ignore[index]
        else:
            base[key] = value
    return base


@dataclass(slots=True)
class CsvConfig:
    """Field splitting defaults for CSV sections."""

    separator: Optional[str] = ","

    def validate(self) -> None:
        if not self.separator:
            raise ConfigurationError("csv.separator must be a non-empty string")
        try:
            re.compile(self.separator)
        except re.error as exc:
            raise ConfigurationError(f"csv.separator is not a valid pattern: {exc}") from exc


@dataclass(slots=True)
class LoggingConfig:
    """Logger wiring used by the parser and the CLI."""

    logger_name: str = "gtrends_csv"
    level: str = "INFO"

    def validate(self) -> None:
        if not self.logger_name:
            raise ConfigurationError("logging.logger_name must be a non-empty string")
        if str(self.level).upper() not in _LEVELS:
            raise ConfigurationError(f"Unknown logging level: {self.level}")

    @property
    def numeric_level(self) -> int:
        return getattr(logging, str(self.level).upper(), logging.INFO)


@dataclass(slots=True)
class GtrendsConfig:
    """Top-level configuration object."""

    csv: CsvConfig = field(default_factory=CsvConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GtrendsConfig":
        """Build a :class:`GtrendsConfig` from a nested mapping.

        The legacy ``google.csv.separator`` key is honoured when the
        ``csv`` section does not name a separator.
        """

        def section(name: str) -> Dict[str, Any]:
            raw = data.get(name) or {}
            if not isinstance(raw, Mapping):
                raise ConfigurationError(f"Configuration section '{name}' must be a mapping")
            return dict(raw)

        csv_section = section("csv")
        legacy = data.get("google.csv.separator")
        if "separator" not in csv_section and legacy is not None:
            csv_section["separator"] = legacy
        try:
            return cls(csv=CsvConfig(**csv_section), logging=LoggingConfig(**section("logging")))
        except TypeError as exc:
            raise ConfigurationError(f"Unknown configuration key: {exc}") from exc

    def to_dict(self) -> Dict[str, Any]:
        """Convert the configuration into a serialisable mapping."""

        return {
            "csv": {"separator": self.csv.separator},
            "logging": {"logger_name": self.logging.logger_name, "level": self.logging.level},
        }

    def validate(self) -> None:
        self.csv.validate()
        self.logging.validate()


def load_config(
    path: Optional[Path | str] = None,
    overrides: Optional[Mapping[str, Any]] = None,
) -> GtrendsConfig:
    """Load configuration from YAML, defaulting to the packaged defaults."""

    path = Path(path) if path is not None else DEFAULT_CONFIG_PATH
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")
    try:
        with path.open("r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh) or {}
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Cannot parse configuration {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigurationError("Configuration YAML must produce a mapping")
    if overrides:
        _merge_dict(data, overrides)
    config = GtrendsConfig.from_dict(data)
    config.validate()
    return config
