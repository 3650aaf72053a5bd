"""Tests for configuration management."""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from tika_pipeline.core.config import TikaConfig
from tika_pipeline.core.enums import LogLevel, MetadataRecordType, OutputFormat
from tika_pipeline.core.exceptions import ConfigurationError


class TestTikaConfig:
    """Test cases for TikaConfig."""

    def test_default_config(self, monkeypatch):
        """Test default configuration."""
        monkeypatch.delenv("TIKA_BINARY_PATH", raising=False)
        config = TikaConfig()

        assert config.java_binary_path is None
        assert config.java_binary == "java"
        assert config.tika_binary_path == "tika-app.jar"
        assert config.output_format == OutputFormat.XML
        assert config.output_encoding == "UTF-8"
        assert config.metadata_only is False
        assert config.metadata_class == MetadataRecordType.MAPPING
        assert config.timeout is None
        assert config.log_level == LogLevel.INFO

    def test_tika_path_from_environment(self, monkeypatch):
        """Test the jar path default is read from the environment."""
        monkeypatch.setenv("TIKA_BINARY_PATH", "/srv/tika/tika-app-2.9.jar")

        assert TikaConfig().tika_binary_path == "/srv/tika/tika-app-2.9.jar"

    def test_enum_validation(self):
        """Test string values are coerced to enums."""
        config = TikaConfig(output_format="HTML", metadata_class="pairs", log_level="debug")

        assert config.output_format == OutputFormat.HTML
        assert config.metadata_class == MetadataRecordType.PAIRS
        assert config.log_level == LogLevel.DEBUG

        with pytest.raises(ValidationError):
            TikaConfig(output_format="pdf")

    def test_invalid_timeout(self):
        """Test timeout must be positive."""
        with pytest.raises(ValidationError):
            TikaConfig(timeout=0)


class TestSetParameter:
    """Test cases for setting options by name."""

    def test_set_snake_case(self):
        config = TikaConfig()
        config.set_parameter("output_format", "text")

        assert config.output_format == OutputFormat.TEXT

    def test_set_camel_case(self):
        config = TikaConfig()
        config.set_parameter("metadataOnly", True).set_parameter("javaBinaryPath", "/opt/java")

        assert config.metadata_only is True
        assert config.java_binary == "/opt/java"

    def test_unknown_option(self):
        """Test unknown option fails without touching any option."""
        config = TikaConfig()
        before = config.to_dict()

        with pytest.raises(ConfigurationError, match="does not exist"):
            config.set_parameter("colour", "blue")

        assert config.to_dict() == before

    def test_invalid_value(self):
        """Test invalid value is rejected and the old value kept."""
        config = TikaConfig()

        with pytest.raises(ConfigurationError):
            config.set_parameter("output_format", "docx")

        assert config.output_format == OutputFormat.XML


class TestConfigFiles:
    """Test cases for loading and saving configuration files."""

    def test_config_serialization(self):
        config = TikaConfig(output_format="html", metadata_class="pairs")

        config_dict = config.to_dict()
        assert config_dict["output_format"] == "html"
        assert config_dict["metadata_class"] == "pairs"
        assert config_dict["log_level"] == "INFO"

    def test_config_file_operations(self, temp_dir: Path):
        """Test configuration file save/load operations."""
        config = TikaConfig(
            tika_binary_path="/opt/tika.jar",
            output_format=OutputFormat.TEXT_MAIN,
            timeout=30,
        )

        yaml_path = temp_dir / "config.yaml"
        config.save(yaml_path)
        loaded = TikaConfig.from_file(yaml_path)
        assert loaded.tika_binary_path == "/opt/tika.jar"
        assert loaded.output_format == OutputFormat.TEXT_MAIN
        assert loaded.timeout == 30

        json_path = temp_dir / "config.json"
        config.save(json_path)
        assert json.loads(json_path.read_text())["output_format"] == "text-main"
        assert TikaConfig.from_file(json_path) == loaded

    def test_nested_tika_section(self, temp_dir: Path):
        config_path = temp_dir / "pipeline.yml"
        config_path.write_text("tika:\n  metadata_only: true\n  output_encoding: ISO-8859-1\n")

        config = TikaConfig.from_file(config_path)
        assert config.metadata_only is True
        assert config.output_encoding == "ISO-8859-1"

    def test_unsupported_format(self, temp_dir: Path):
        with pytest.raises(ConfigurationError):
            TikaConfig.from_file(temp_dir / "config.toml")

        with pytest.raises(ConfigurationError):
            TikaConfig().save(temp_dir / "config.ini")
