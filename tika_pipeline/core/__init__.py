"""Configuration, errors and logging shared by the extraction components."""

from tika_pipeline.core.config import TikaConfig
from tika_pipeline.core.enums import LogLevel, MetadataRecordType, OutputFormat
from tika_pipeline.core.exceptions import (
    ConfigurationError,
    ExtractionFailure,
    OutputParseFailure,
    TikaPipelineError,
    UnknownDocument,
)
from tika_pipeline.core.logging import get_logger

__all__ = [
    "TikaConfig",
    "LogLevel",
    "MetadataRecordType",
    "OutputFormat",
    "TikaPipelineError",
    "ConfigurationError",
    "UnknownDocument",
    "ExtractionFailure",
    "OutputParseFailure",
    "get_logger",
]
