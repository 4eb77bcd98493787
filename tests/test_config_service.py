"""Unit tests for configuration loading and the configuration service."""
import json

import pytest

from config.config import (
    AppConfig,
    ConfigLoader,
    ExportConfig,
    QueryConfig,
    TournamentSettings,
    UnitsConfig,
    parse_app_args,
)
from config.service import ConfigurationService, ConfigurationServiceFactory
from core.exceptions import ConfigurationError
from measure.units import EventType, LengthUnit, WeightUnit

ENV_VARS = ("CATCH_WEIGHT_MODE", "CATCH_LENGTH_MODE", "CATCH_EXPORT_DIR", "CATCH_EXPORT_FORMAT", "DEBUG", "LOG_LEVEL")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestConfigurationService:
    """Tests for ConfigurationService facade."""

    @pytest.fixture
    def app_config(self):
        return AppConfig(
            units=UnitsConfig(weight_mode="lbs_oz", length_mode="centimeters"),
            query=QueryConfig(require_location=False, limit=25),
            tournament=TournamentSettings(limit=4, species="smallmouth"),
            export=ExportConfig(output_dir="shared", format="xlsx"),
            species_data={"species": ["smallmouth", "walleye"], "aliases": {"bronzeback": "smallmouth"}},
            debug=False,
            log_level="WARNING",
        )

    def test_unit_properties(self, app_config):
        service = ConfigurationService(app_config)

        assert service.weight_mode == "lbs_oz"
        assert service.unit_preferences.weight_unit is WeightUnit.POUNDS_OUNCES
        assert service.unit_preferences.length_unit is LengthUnit.CENTIMETERS

    def test_query_properties(self, app_config):
        service = ConfigurationService(app_config)

        assert service.require_location is False
        assert service.query_limit == 25

    def test_default_filter(self, app_config):
        query = ConfigurationService(app_config).default_filter()

        assert query.event_type is EventType.BOTH
        assert query.matches_all_species

    def test_tournament_and_export_properties(self, app_config):
        service = ConfigurationService(app_config)

        assert service.tournament_limit == 4
        assert service.tournament_species == "smallmouth"
        assert service.export_dir == "shared"
        assert service.export_format == "xlsx"

    def test_species_catalog(self, app_config):
        catalog = ConfigurationService(app_config).species_catalog()

        assert catalog.resolve("Bronzeback") == "smallmouth"

    def test_log_level(self, app_config):
        assert ConfigurationService(app_config).log_level == "WARNING"

    def test_debug_forces_debug_log_level(self, app_config):
        config = AppConfig(
            units=app_config.units,
            query=app_config.query,
            tournament=app_config.tournament,
            export=app_config.export,
            debug=True,
            log_level="ERROR",
        )

        assert ConfigurationService(config).log_level == "DEBUG"

    def test_unknown_unit_mode_falls_back(self):
        config = AppConfig(
            units=UnitsConfig(weight_mode="stone", length_mode="inches"),
            query=QueryConfig(),
            tournament=TournamentSettings(),
            export=ExportConfig(),
        )

        assert ConfigurationService(config).unit_preferences.weight_unit is WeightUnit.DECIMAL_POUNDS

    def test_to_dict(self, app_config):
        data = ConfigurationService(app_config).to_dict()

        assert data["units"] == {"weight_mode": "lbs_oz", "length_mode": "centimeters"}
        assert data["export"]["format"] == "xlsx"
        assert data["log_level"] == "WARNING"

    def test_raw_config(self, app_config):
        assert ConfigurationServiceFactory.create_from_config(app_config).raw_config is app_config


class TestConfigValidation:
    """Tests for dataclass validation."""

    def test_invalid_tournament_limit(self):
        with pytest.raises(ConfigurationError):
            TournamentSettings(limit=3)

    def test_invalid_export_format(self):
        with pytest.raises(ConfigurationError):
            ExportConfig(format="pdf")

    def test_negative_query_limit(self):
        with pytest.raises(ConfigurationError):
            QueryConfig(limit=-1)

    def test_unknown_default_filter_key(self):
        with pytest.raises(ConfigurationError):
            QueryConfig(default_filter={"colour": "green"})

    def test_invalid_log_level(self):
        with pytest.raises(ConfigurationError):
            AppConfig(UnitsConfig(), QueryConfig(), TournamentSettings(), ExportConfig(), log_level="LOUD")


class TestConfigLoader:
    """Tests for layered configuration loading."""

    def test_defaults_without_files(self, tmp_path):
        config, unknown = ConfigLoader(tmp_path).load([])

        assert config.units.weight_mode == "decimal_lbs"
        assert config.query.require_location is True
        assert config.tournament.limit == 5
        assert config.export.format == "csv"
        assert config.species_data == {}
        assert unknown == []

    def test_settings_file_merged(self, tmp_path):
        # Arrange
        settings = {"units": {"weight_mode": "kgs"}, "query": {"default_filter": {"species": "walleye"}}}
        (tmp_path / "settings.json").write_text(json.dumps(settings), encoding="utf-8")

        # Act
        config, _ = ConfigLoader(tmp_path).load([])

        # Assert
        assert config.units.weight_mode == "kgs"
        assert config.units.length_mode == "inches"
        assert config.query.default_filter["species"] == "walleye"
        assert config.query.default_filter["event_type"] == "Both"

    def test_species_file_loaded(self, tmp_path):
        (tmp_path / "species.json").write_text(json.dumps({"species": ["carp"]}), encoding="utf-8")

        config, _ = ConfigLoader(tmp_path).load([])

        assert config.species_data == {"species": ["carp"]}

    def test_malformed_settings_file_skipped(self, tmp_path):
        (tmp_path / "settings.json").write_text("{not json", encoding="utf-8")

        config, _ = ConfigLoader(tmp_path).load([])

        assert config.units.weight_mode == "decimal_lbs"

    def test_env_overrides_file(self, tmp_path, monkeypatch):
        (tmp_path / "settings.json").write_text(json.dumps({"units": {"weight_mode": "kgs"}}), encoding="utf-8")
        monkeypatch.setenv("CATCH_WEIGHT_MODE", "lbs_oz")
        monkeypatch.setenv("CATCH_EXPORT_FORMAT", "xlsx")
        monkeypatch.setenv("LOG_LEVEL", "warning")

        config, _ = ConfigLoader(tmp_path).load([])

        assert config.units.weight_mode == "lbs_oz"
        assert config.export.format == "xlsx"
        assert config.log_level == "WARNING"

    def test_debug_env(self, tmp_path, monkeypatch):
        monkeypatch.setenv("DEBUG", "yes")

        config, _ = ConfigLoader(tmp_path).load([])

        assert config.debug is True

    def test_cli_overrides_env(self, tmp_path, monkeypatch):
        monkeypatch.setenv("CATCH_LENGTH_MODE", "inches")

        config, unknown = ConfigLoader(tmp_path).load(
            ["--length-mode", "centimeters", "--limit", "10", "--include-unlocated", "catches.json", "--species", "carp"]
        )

        assert config.units.length_mode == "centimeters"
        assert config.query.limit == 10
        assert config.query.require_location is False
        assert unknown == ["catches.json", "--species", "carp"]

    def test_export_flag_left_for_caller(self, tmp_path):
        config, unknown = ConfigLoader(tmp_path).load(["--export", "out.csv", "--export-dir", "shared"])

        assert config.export.output_dir == "shared"
        assert unknown == ["--export", "out.csv"]

    def test_unknown_section_key_raises(self, tmp_path):
        (tmp_path / "settings.json").write_text(json.dumps({"units": {"volume_mode": "l"}}), encoding="utf-8")

        with pytest.raises(ConfigurationError):
            ConfigLoader(tmp_path).load([])

    def test_parse_app_args(self, tmp_path):
        config, _ = parse_app_args(["--debug"], tmp_path)

        assert config.debug is True

    def test_factory_create_from_args(self, tmp_path):
        service, unknown = ConfigurationServiceFactory.create_from_args(["--weight-mode", "kgs", "x.json"], tmp_path)

        assert service.unit_preferences.weight_unit is WeightUnit.KILOGRAMS
        assert unknown == ["x.json"]

    def test_factory_create_default(self, tmp_path):
        service = ConfigurationServiceFactory.create_default(tmp_path)

        assert service.export_dir == "exports"
