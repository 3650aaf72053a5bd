"""tika-pipeline - batch text and metadata extraction with the Apache Tika app."""

__version__ = "0.1.0"

from tika_pipeline.core.config import TikaConfig
from tika_pipeline.core.enums import LogLevel, MetadataRecordType, OutputFormat
from tika_pipeline.core.exceptions import (
    ConfigurationError,
    ExtractionFailure,
    OutputParseFailure,
    TikaPipelineError,
    UnknownDocument,
)
from tika_pipeline.extraction.wrapper import TikaWrapper
from tika_pipeline.model.batch import DocumentBatch
from tika_pipeline.model.document import Document
from tika_pipeline.model.metadata import Metadata, MetadataPairs, MetadataSink

__all__ = [
    "TikaWrapper",
    "TikaConfig",
    "Document",
    "DocumentBatch",
    "Metadata",
    "MetadataPairs",
    "MetadataSink",
    "OutputFormat",
    "MetadataRecordType",
    "LogLevel",
    "TikaPipelineError",
    "ConfigurationError",
    "UnknownDocument",
    "ExtractionFailure",
    "OutputParseFailure",
]
