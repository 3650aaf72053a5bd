"""Tika wrapper configuration management."""

import json
import os
import re
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from tika_pipeline.core.enums import LogLevel, MetadataRecordType, OutputFormat
from tika_pipeline.core.exceptions import ConfigurationError

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


class TikaConfig(BaseModel):
    """Options used to build and run the Tika command."""

    model_config = ConfigDict(validate_assignment=True)

    java_binary_path: Optional[str] = Field(
        default=None,
        description="Java runtime executable, 'java' from PATH when unset",
    )
    tika_binary_path: str = Field(
        default_factory=lambda: os.getenv("TIKA_BINARY_PATH", "tika-app.jar"),
        description="Path to the Tika app jar",
    )
    output_format: OutputFormat = Field(default=OutputFormat.XML, description="Tika output format")
    output_encoding: str = Field(default="UTF-8", min_length=1, description="Output character set")
    metadata_only: bool = Field(default=False, description="Only extract metadata (as JSON)")
    metadata_class: MetadataRecordType = Field(
        default=MetadataRecordType.MAPPING,
        description="Metadata record implementation",
    )
    timeout: Optional[float] = Field(default=None, gt=0, description="Per-document timeout in seconds")
    log_level: LogLevel = Field(default=LogLevel.INFO, description="Logging level")

    @field_validator("output_format", mode="before")
    @classmethod
    def validate_output_format(cls, v):
        """Validate output format."""
        if isinstance(v, str):
            try:
                return OutputFormat(v.lower().lstrip("-"))
            except ValueError:
                raise ValueError(f"Invalid output format: {v}")
        return v

    @field_validator("metadata_class", mode="before")
    @classmethod
    def validate_metadata_class(cls, v):
        """Validate metadata record type."""
        if isinstance(v, str):
            try:
                return MetadataRecordType(v.lower())
            except ValueError:
                raise ValueError(f"Invalid metadata class: {v}")
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level."""
        if isinstance(v, str):
            try:
                return LogLevel(v.upper())
            except ValueError:
                raise ValueError(f"Invalid log level: {v}")
        return v

    @property
    def java_binary(self) -> str:
        return self.java_binary_path or "java"

    @staticmethod
    def option_name(name: str) -> str:
        """Normalize ``outputFormat`` style names to ``output_format``."""
        return _CAMEL_BOUNDARY.sub("_", name).lower()

    def set_parameter(self, name: str, value: Any) -> "TikaConfig":
        """Set a single option by name.

        Args:
            name: Option name, snake_case or camelCase.
            value: New value, validated like the constructor input.

        Returns:
            This configuration.

        Raises:
            ConfigurationError: If the option does not exist or the value is invalid.
        """
        field_name = self.option_name(name)
        if field_name not in type(self).model_fields:
            raise ConfigurationError(f'The option "{name}" does not exist on configuration')

        try:
            setattr(self, field_name, value)
        except ValidationError as e:
            raise ConfigurationError(f'Invalid value for option "{name}": {e}') from e
        return self

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "TikaConfig":
        """Create config from dictionary."""
        return cls(**config_dict)

    @classmethod
    def from_file(cls, config_path: Union[str, Path]) -> "TikaConfig":
        """Load config from file (JSON/YAML)."""
        config_path = Path(config_path)

        if config_path.suffix.lower() == ".json":
            with open(config_path) as f:
                config_dict = json.load(f)
        elif config_path.suffix.lower() in [".yaml", ".yml"]:
            with open(config_path) as f:
                config_dict = yaml.safe_load(f) or {}
        else:
            raise ConfigurationError(f"Unsupported config file format: {config_path.suffix}")

        # allow the options to live under a top-level "tika" key
        if "tika" in config_dict and isinstance(config_dict["tika"], dict):
            config_dict = config_dict["tika"]

        return cls.from_dict(config_dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary with enum values as strings."""
        return self.model_dump(mode="json")

    def save(self, config_path: Union[str, Path]) -> None:
        """Save config to file."""
        config_path = Path(config_path)

        if config_path.suffix.lower() == ".json":
            config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(config_path, "w") as f:
                json.dump(self.to_dict(), f, indent=2)
        elif config_path.suffix.lower() in [".yaml", ".yml"]:
            config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(config_path, "w") as f:
                yaml.dump(self.to_dict(), f, default_flow_style=False)
        else:
            raise ConfigurationError(f"Unsupported config file format: {config_path.suffix}")
