"""Core enums for tika-pipeline."""

from enum import Enum


class OutputFormat(Enum):
    """Output formats understood by the Tika app."""
    XML = "xml"
    HTML = "html"
    TEXT = "text"
    TEXT_MAIN = "text-main"

    @property
    def is_markup(self) -> bool:
        return self in (OutputFormat.XML, OutputFormat.HTML)


class MetadataRecordType(Enum):
    """Metadata record implementations selectable from configuration."""
    MAPPING = "mapping"
    PAIRS = "pairs"


class LogLevel(Enum):
    """Logging levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"
