"""Configuration service facade for simplified configuration access.

Gives callers flat properties instead of nested ``config.section.key`` access
and resolves the unit setting strings into explicit ``UnitPreferences``.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

from config.config import AppConfig, ConfigLoader
from measure.preferences import UnitPreferences
from query.filters import QueryFilter
from query.species import SpeciesCatalog


class ConfigurationService:
    """Facade over AppConfig.

    Example:
        config_service = ConfigurationService(config)
        prefs = config_service.unit_preferences  # instead of parsing config.units.*
    """

    def __init__(self, config: AppConfig):
        self._config = config

    # Units
    @property
    def weight_mode(self) -> str:
        return self._config.units.weight_mode

    @property
    def length_mode(self) -> str:
        return self._config.units.length_mode

    @property
    def unit_preferences(self) -> UnitPreferences:
        """Unit enums for the configured modes, with the documented fallbacks."""
        return UnitPreferences.from_settings(self.weight_mode, self.length_mode)

    # Query
    @property
    def require_location(self) -> bool:
        return self._config.query.require_location

    @property
    def query_limit(self) -> Optional[int]:
        return self._config.query.limit

    def default_filter(self) -> QueryFilter:
        return QueryFilter.from_strings(**self._config.query.default_filter)

    # Tournament
    @property
    def tournament_limit(self) -> int:
        return self._config.tournament.limit

    @property
    def tournament_species(self) -> str:
        return self._config.tournament.species

    # Export
    @property
    def export_dir(self) -> str:
        return self._config.export.output_dir

    @property
    def export_format(self) -> str:
        return self._config.export.format

    # General
    @property
    def debug(self) -> bool:
        return self._config.debug

    @property
    def log_level(self) -> str:
        """Effective log level; debug mode forces DEBUG."""
        return "DEBUG" if self._config.debug else self._config.log_level

    def species_catalog(self) -> SpeciesCatalog:
        return SpeciesCatalog.from_config(self._config.species_data)

    @property
    def raw_config(self) -> AppConfig:
        return self._config

    def to_dict(self) -> Dict[str, Any]:
        """Dictionary representation for session logging."""
        return {
            "units": {
                "weight_mode": self.weight_mode,
                "length_mode": self.length_mode,
            },
            "query": {
                "require_location": self.require_location,
                "limit": self.query_limit,
            },
            "tournament": {
                "limit": self.tournament_limit,
                "species": self.tournament_species,
            },
            "export": {
                "output_dir": self.export_dir,
                "format": self.export_format,
            },
            "debug": self.debug,
            "log_level": self.log_level,
        }


class ConfigurationServiceFactory:
    """Static factory methods for common ConfigurationService creation patterns."""

    @staticmethod
    def create_from_args(args: list[str], config_dir: Path = Path("config")) -> tuple[ConfigurationService, list[str]]:
        """Load from all sources; returns the service and the unparsed arguments."""
        config, unknown_args = ConfigLoader(config_dir).load(args)
        return ConfigurationService(config), unknown_args

    @staticmethod
    def create_from_config(config: AppConfig) -> ConfigurationService:
        return ConfigurationService(config)

    @staticmethod
    def create_default(config_dir: Path = Path("config")) -> ConfigurationService:
        config, _ = ConfigLoader(config_dir).load([])
        return ConfigurationService(config)
