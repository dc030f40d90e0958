"""Tests pour le module config."""

import json
from unittest.mock import MagicMock

import pytest
from pydantic import BaseModel, ValidationError

from linux_config_store.config import (
    DEFAULT_SECTION,
    ConfigLoader,
    FileConfigLoader,
    StoreSettings,
    load_store_settings,
)
from linux_config_store.config.loader import validate_with_schema
from linux_config_store.errors import FileConfigurationError


class SampleConfig(BaseModel):
    name: str
    port: int


class TestFileConfigLoader:
    """Tests pour FileConfigLoader."""

    def setup_method(self):
        """Initialise le loader avant chaque test."""
        self.loader = FileConfigLoader()

    def test_read_json(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_data = {"key": "value", "nested": {"a": 1}}
        config_file.write_text(json.dumps(config_data))

        assert self.loader.read(config_file) == config_data

    def test_read_toml(self, tmp_path):
        config_file = tmp_path / "config.TOML"
        config_file.write_text('[section]\nkey = "value"\n')

        assert self.loader.read(config_file)["section"]["key"] == "value"

    def test_file_not_found(self):
        with pytest.raises(FileNotFoundError):
            self.loader.read("/nonexistent/config.toml")

    def test_unsupported_extension(self, tmp_path):
        config_file = tmp_path / "config.xml"
        config_file.write_text("<config></config>")

        with pytest.raises(ValueError, match="Extension non supportée"):
            self.loader.read(config_file)

    def test_json_root_must_be_a_table(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text("[1, 2]")

        with pytest.raises(ValueError, match="racine"):
            self.loader.read(config_file)

    def test_malformed_toml_is_a_value_error(self, tmp_path):
        config_file = tmp_path / "config.toml"
        config_file.write_text("[section\n")

        with pytest.raises(ValueError):
            self.loader.read(config_file)

    def test_load_section_validates_table(self, tmp_path):
        config_file = tmp_path / "config.toml"
        config_file.write_text('[service]\nname = "bt"\nport = 3\n')

        result = self.loader.load_section(config_file, "service", SampleConfig)

        assert result == SampleConfig(name="bt", port=3)

    def test_load_section_falls_back_to_document(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text('{"name": "bt", "port": 3}')

        result = self.loader.load_section(config_file, "service", SampleConfig)

        assert result.port == 3

    def test_load_section_rejects_scalar_table(self, tmp_path):
        config_file = tmp_path / "config.toml"
        config_file.write_text("service = 3\n")

        with pytest.raises(ValueError, match="table"):
            self.loader.load_section(config_file, "service", SampleConfig)

    def test_load_section_invalid_data_raises(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text('{"name": "bt", "port": "abc"}')

        with pytest.raises(ValidationError):
            self.loader.load_section(config_file, "service", SampleConfig)


class TestValidateWithSchema:
    """Tests pour validate_with_schema."""

    def test_returns_model_instance(self):
        assert validate_with_schema(
            {"name": "a", "port": 1}, SampleConfig
        ) == SampleConfig(name="a", port=1)

    def test_non_basemodel_schema_raises_type_error(self):
        with pytest.raises(TypeError, match="pydantic.BaseModel"):
            validate_with_schema({}, dict)


class TestConfigLoaderContract:
    """Un ConfigLoader ne fournit que read()."""

    def test_custom_reader_gets_section_selection(self):
        class MemoryLoader(ConfigLoader):
            def read(self, config_path):
                return {"service": {"name": str(config_path), "port": 9}}

        result = MemoryLoader().load_section("mem", "service", SampleConfig)

        assert result == SampleConfig(name="mem", port=9)

    def test_read_is_abstract(self):
        with pytest.raises(TypeError):
            ConfigLoader()


class TestStoreSettings:
    """Tests pour StoreSettings."""

    def test_defaults(self):
        settings = StoreSettings()

        assert settings.default_section == DEFAULT_SECTION == "Global"
        assert settings.max_line_length == 1024
        assert settings.temp_suffix == ".new"
        assert settings.file_mode == 0o660
        assert settings.sync_storage is True

    def test_frozen(self):
        settings = StoreSettings()

        with pytest.raises(ValidationError):
            settings.max_line_length = 10

    @pytest.mark.parametrize("field,value", [
        ("max_line_length", 4),
        ("temp_suffix", ""),
        ("temp_suffix", "/tmp"),
        ("file_mode", 0o17777),
        ("default_section", "Glo\nbal"),
        ("default_section", "Global\r"),
        ("unknown", 1),
    ])
    def test_invalid_values(self, field, value):
        with pytest.raises(ValidationError):
            StoreSettings(**{field: value})


class TestLoadStoreSettings:
    """Tests pour load_store_settings."""

    def test_none_returns_defaults(self):
        assert load_store_settings() == StoreSettings()

    def test_load_store_table_from_toml(self, tmp_path):
        config_file = tmp_path / "store.toml"
        config_file.write_text(
            "[store]\n"
            'default_section = "Info"\n'
            "file_mode = 0o600\n"
            "sync_storage = false\n"
        )

        settings = load_store_settings(config_file)

        assert settings.default_section == "Info"
        assert settings.file_mode == 0o600
        assert settings.sync_storage is False

    def test_load_whole_document_without_table(self, tmp_path):
        config_file = tmp_path / "store.json"
        config_file.write_text('{"max_line_length": 256}')

        assert load_store_settings(config_file).max_line_length == 256

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileConfigurationError):
            load_store_settings(tmp_path / "absent.toml")

    def test_invalid_values_raise(self, tmp_path):
        config_file = tmp_path / "store.toml"
        config_file.write_text("[store]\nmax_line_length = 2\n")

        with pytest.raises(FileConfigurationError, match="max_line_length"):
            load_store_settings(config_file)

    def test_injected_loader(self):
        loader = MagicMock()
        loader.load_section.return_value = StoreSettings(temp_suffix=".tmp")

        settings = load_store_settings("any.toml", config_loader=loader)

        loader.load_section.assert_called_once_with(
            "any.toml", "store", StoreSettings
        )
        assert settings.temp_suffix == ".tmp"

    def test_store_key_that_is_not_a_table_raises(self, tmp_path):
        config_file = tmp_path / "store.toml"
        config_file.write_text("store = \"oops\"\n")

        with pytest.raises(FileConfigurationError, match="table"):
            load_store_settings(config_file)

    def test_malformed_file_raises(self, tmp_path):
        config_file = tmp_path / "store.json"
        config_file.write_text("{not json")

        with pytest.raises(FileConfigurationError):
            load_store_settings(config_file)
