"""Unit tests for settings loading.

Tests TOML loading, environment overrides, schema enforcement and
seeding of new documents from lab defaults.
"""

from pathlib import Path

import pytest

from ephys_meta.config import LoggingConfig, Settings, load_settings, new_document
from ephys_meta.exceptions import ConfigError

pytestmark = pytest.mark.unit


@pytest.fixture
def settings_toml(tmp_path: Path) -> Path:
    path = tmp_path / "ephys_meta.toml"
    path.write_text(
        "[logging]\n"
        'level = "debug"\n'
        "\n"
        "[defaults]\n"
        'lab = "Loren Frank Lab"\n'
        'institution = "University of California, San Francisco"\n'
        'species = "Rattus norvegicus"\n'
    )
    return path


class TestSettingsLoading:
    """Test settings sources."""

    def test_Should_UseDefaults_When_NoFileGiven(self):
        settings = load_settings()

        assert settings.logging.level == "INFO"
        assert settings.logging.structured is False
        assert settings.defaults.lab == ""
        assert settings.defaults.data_acq_device["name"] == "SpikeGadgets"

    def test_Should_LoadValues_When_TomlGiven(self, settings_toml):
        settings = load_settings(settings_toml)

        assert settings.logging.level == "DEBUG"
        assert settings.defaults.lab == "Loren Frank Lab"

    def test_Should_PreferEnvironment_When_BothSourcesSet(self, settings_toml, monkeypatch):
        monkeypatch.setenv("EPHYS_META_LOGGING__LEVEL", "ERROR")
        monkeypatch.setenv("EPHYS_META_DEFAULTS__LAB", "Buzsaki Lab")

        settings = load_settings(settings_toml)

        assert settings.logging.level == "ERROR"
        assert settings.defaults.lab == "Buzsaki Lab"
        assert settings.defaults.species == "Rattus norvegicus"

    def test_Should_RaiseFileNotFound_When_TomlMissing(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_settings(tmp_path / "missing.toml")

    def test_Should_RaiseConfigError_When_TomlMalformed(self, tmp_path):
        path = tmp_path / "bad.toml"
        path.write_text("[logging\nlevel = ")

        with pytest.raises(ConfigError):
            load_settings(path)

    def test_Should_RaiseConfigError_When_UnknownKeyPresent(self, tmp_path):
        path = tmp_path / "extra.toml"
        path.write_text('[logging]\nlevel = "INFO"\nformat = "json"\n')

        with pytest.raises(ConfigError):
            load_settings(path)

    def test_Should_RaiseConfigError_When_LevelInvalid(self, tmp_path):
        path = tmp_path / "level.toml"
        path.write_text('[logging]\nlevel = "LOUD"\n')

        with pytest.raises(ConfigError):
            load_settings(path)


class TestLoggingConfig:
    def test_Should_UppercaseLevel_When_Lowercase(self):
        assert LoggingConfig(level="warning").level == "WARNING"

    def test_Should_BeImmutable_When_Constructed(self):
        settings = Settings()

        with pytest.raises(Exception):
            settings.logging = LoggingConfig()


class TestNewDocument:
    """Test seeding new documents."""

    def test_Should_SeedLabFields_When_DefaultsConfigured(self, settings_toml):
        document = new_document(load_settings(settings_toml))

        assert document["lab"] == "Loren Frank Lab"
        assert document["institution"] == "University of California, San Francisco"
        assert document["subject"]["species"] == "Rattus norvegicus"
        assert document["subject"]["sex"] == "U"
        assert document["data_acq_device"] == [
            {"name": "SpikeGadgets", "system": "SpikeGadgets", "amplifier": "Intan", "adc_circuit": "Intan"}
        ]

    def test_Should_LeaveDefaults_When_SettingsEmpty(self):
        document = new_document(Settings(defaults={"data_acq_device": {}}))

        assert document["lab"] == ""
        assert document["data_acq_device"] == []

    def test_Should_ReturnFreshDocument_When_CalledTwice(self):
        first = new_document()
        first["keywords"].append("x")

        assert new_document()["keywords"] == []
