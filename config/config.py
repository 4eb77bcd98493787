"""Layered configuration with loading and validation.

Precedence, lowest to highest:
1. Default values
2. JSON configuration files (``settings.json``, ``species.json``)
3. Environment variables
4. Command-line arguments

Configuration is deep-merged across all sources, allowing partial overrides
at any level of the hierarchy.

Unit modes are stored as the raw settings strings. They are resolved to unit
enums by ``measure.preferences``, which falls back to a default instead of
rejecting an unknown value.
"""
from __future__ import annotations

import argparse
import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from loguru import logger

from core.exceptions import ConfigurationError
from query.filters import DEFAULT_FILTER_STRINGS

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
EXPORT_FORMATS = ("csv", "xlsx")
TOURNAMENT_LIMITS = (4, 5)


@dataclass(frozen=True)
class UnitsConfig:
    """Entry unit settings.

    Attributes:
        weight_mode: "lbs_oz" | "decimal_lbs" | "kgs"
        length_mode: "inches" | "centimeters"
    """
    weight_mode: str = "decimal_lbs"
    length_mode: str = "inches"


@dataclass(frozen=True)
class QueryConfig:
    """Map/list query settings.

    Attributes:
        require_location: Only list catches that have GPS coordinates
        limit: Maximum catches listed, None for no limit
        default_filter: Filter-sheet strings applied when none are given
    """
    require_location: bool = True
    limit: Optional[int] = None
    default_filter: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_FILTER_STRINGS))

    def __post_init__(self):
        if self.limit is not None and self.limit < 0:
            raise ConfigurationError(f"Invalid query limit: {self.limit}")
        unknown = set(self.default_filter) - set(DEFAULT_FILTER_STRINGS)
        if unknown:
            raise ConfigurationError(f"Unknown default filter keys: {sorted(unknown)}")


@dataclass(frozen=True)
class TournamentSettings:
    """Tournament leaderboard settings.

    Attributes:
        limit: Number of catches that count (4 or 5)
        species: Normalized tournament species
    """
    limit: int = 5
    species: str = "largemouth"

    def __post_init__(self):
        if self.limit not in TOURNAMENT_LIMITS:
            raise ConfigurationError(f"Invalid tournament limit: {self.limit}")


@dataclass(frozen=True)
class ExportConfig:
    """Share/export settings.

    Attributes:
        output_dir: Directory exported files are written to
        format: "csv" or "xlsx"
    """
    output_dir: str = "exports"
    format: str = "csv"

    def __post_init__(self):
        if self.format not in EXPORT_FORMATS:
            raise ConfigurationError(f"Invalid export format: {self.format}")


@dataclass(frozen=True)
class AppConfig:
    """Complete application configuration.

    Attributes:
        units: Entry unit settings
        query: Map/list query settings
        tournament: Tournament leaderboard settings
        export: Share/export settings
        species_data: Species catalog loaded from ``species.json``
        debug: Debug mode flag
        log_level: Logging verbosity level
    """
    units: UnitsConfig
    query: QueryConfig
    tournament: TournamentSettings
    export: ExportConfig

    species_data: Dict[str, Any] = field(default_factory=dict)

    debug: bool = False
    log_level: str = "INFO"

    def __post_init__(self):
        if self.log_level not in LOG_LEVELS:
            raise ConfigurationError(f"Invalid log level: {self.log_level}")


class ConfigLoader:
    """Loads configuration from all sources with proper precedence."""

    def __init__(self, config_dir: Path = Path("config")):
        self.config_dir = Path(config_dir)

    def load(self, argv: List[str]) -> Tuple[AppConfig, List[str]]:
        """Load configuration: defaults -> files -> env -> CLI.

        Args:
            argv: Command-line arguments to parse

        Returns:
            Tuple of (AppConfig instance, unknown CLI arguments)

        Raises:
            ConfigurationError: If the merged configuration is invalid
        """
        config_dict = self._get_defaults()

        self._deep_update(config_dict, self._load_json_configs())
        self._deep_update(config_dict, self._load_env_overrides())

        cli_overrides, unknown_args = self._parse_cli_args(argv)
        self._deep_update(config_dict, cli_overrides)

        return self._build_config(config_dict), unknown_args

    def _get_defaults(self) -> Dict[str, Any]:
        return {
            "units": {
                "weight_mode": "decimal_lbs",
                "length_mode": "inches",
            },
            "query": {
                "require_location": True,
                "limit": None,
                "default_filter": dict(DEFAULT_FILTER_STRINGS),
            },
            "tournament": {
                "limit": 5,
                "species": "largemouth",
            },
            "export": {
                "output_dir": "exports",
                "format": "csv",
            },
            "debug": False,
            "log_level": "INFO",
        }

    def _load_json_configs(self) -> Dict[str, Any]:
        """Load ``settings.json`` (merged at the root) and ``species.json``.

        Missing files are skipped; unreadable files are logged and skipped.
        """
        loaded: Dict[str, Any] = {}

        settings = self._read_json("settings.json")
        if isinstance(settings, dict):
            loaded.update(settings)

        species = self._read_json("species.json")
        loaded["species_data"] = species if isinstance(species, dict) else {}
        return loaded

    def _read_json(self, filename: str) -> Optional[Any]:
        file_path = self.config_dir / filename
        if not file_path.exists():
            return None
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                return json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"[config] Failed to load {filename}: {e}")
            return None

    def _load_env_overrides(self) -> Dict[str, Any]:
        """Load configuration overrides from environment variables.

        Supported environment variables:
        - CATCH_WEIGHT_MODE: Weight entry mode
        - CATCH_LENGTH_MODE: Length entry mode
        - CATCH_EXPORT_DIR: Export output directory
        - CATCH_EXPORT_FORMAT: Export file format
        - DEBUG: Enable debug mode
        - LOG_LEVEL: Set logging level
        """
        overrides: Dict[str, Any] = {}

        env_map = {
            "CATCH_WEIGHT_MODE": ("units", "weight_mode"),
            "CATCH_LENGTH_MODE": ("units", "length_mode"),
            "CATCH_EXPORT_DIR": ("export", "output_dir"),
            "CATCH_EXPORT_FORMAT": ("export", "format"),
        }
        for env_name, (section, key) in env_map.items():
            value = os.getenv(env_name)
            if value:
                overrides.setdefault(section, {})[key] = value.strip()

        if self._env_bool("DEBUG"):
            overrides["debug"] = True

        log_level = os.getenv("LOG_LEVEL")
        if log_level:
            overrides["log_level"] = log_level.strip().upper()

        return overrides

    def _parse_cli_args(self, argv: List[str]) -> Tuple[Dict[str, Any], List[str]]:
        """Parse the configuration CLI arguments, leaving others for the caller."""
        parser = argparse.ArgumentParser(description="Catch query engine", add_help=False, allow_abbrev=False)
        parser.add_argument("--weight-mode", help="Weight entry mode (lbs_oz, decimal_lbs, kgs)")
        parser.add_argument("--length-mode", help="Length entry mode (inches, centimeters)")
        parser.add_argument("--export-dir", help="Directory for exported files")
        parser.add_argument("--export-format", choices=list(EXPORT_FORMATS), help="Export file format")
        parser.add_argument("--limit", type=int, help="Maximum number of catches listed")
        parser.add_argument(
            "--include-unlocated",
            action="store_true",
            help="Also list catches without GPS coordinates",
        )
        parser.add_argument("--debug", action="store_true", help="Enable debug mode")
        parser.add_argument("--log-level", choices=list(LOG_LEVELS), help="Set logging level")

        known, unknown = parser.parse_known_args(argv)

        overrides: Dict[str, Any] = {}
        if known.weight_mode:
            overrides.setdefault("units", {})["weight_mode"] = known.weight_mode
        if known.length_mode:
            overrides.setdefault("units", {})["length_mode"] = known.length_mode
        if known.export_dir:
            overrides.setdefault("export", {})["output_dir"] = known.export_dir
        if known.export_format:
            overrides.setdefault("export", {})["format"] = known.export_format
        if known.limit is not None:
            overrides.setdefault("query", {})["limit"] = known.limit
        if known.include_unlocated:
            overrides.setdefault("query", {})["require_location"] = False
        if known.debug:
            overrides["debug"] = True
        if known.log_level:
            overrides["log_level"] = known.log_level

        return overrides, unknown

    def _build_config(self, config_dict: Dict[str, Any]) -> AppConfig:
        """Build and validate the final configuration object.

        Raises:
            ConfigurationError: If configuration is invalid
        """
        try:
            return AppConfig(
                units=UnitsConfig(**config_dict.get("units", {})),
                query=QueryConfig(**config_dict.get("query", {})),
                tournament=TournamentSettings(**config_dict.get("tournament", {})),
                export=ExportConfig(**config_dict.get("export", {})),
                species_data=config_dict.get("species_data", {}),
                debug=config_dict.get("debug", False),
                log_level=config_dict.get("log_level", "INFO"),
            )
        except TypeError as e:
            raise ConfigurationError(f"Unknown configuration key: {e}") from e

    @staticmethod
    def _env_bool(name: str, default: bool = False) -> bool:
        """Parse boolean from environment variable ("1", "true", "yes", "y", "on")."""
        val = os.getenv(name)
        if val is None:
            return default
        return val.strip().lower() in {"1", "true", "yes", "y", "on"}

    @staticmethod
    def _deep_update(target: Dict[str, Any], updates: Dict[str, Any]) -> None:
        """Recursively merge ``updates`` into ``target`` without clobbering nested dicts."""
        for key, new_val in updates.items():
            if isinstance(new_val, dict) and isinstance(target.get(key), dict):
                ConfigLoader._deep_update(target[key], new_val)
            else:
                target[key] = new_val


def parse_app_args(argv: List[str], config_dir: Path = Path("config")) -> Tuple[AppConfig, List[str]]:
    """Convenience wrapper around ``ConfigLoader(config_dir).load(argv)``."""
    return ConfigLoader(config_dir).load(argv)


__all__ = [
    "AppConfig",
    "UnitsConfig",
    "QueryConfig",
    "TournamentSettings",
    "ExportConfig",
    "ConfigLoader",
    "parse_app_args",
]
