"""Tika command building, process execution and output parsing."""

from tika_pipeline.extraction.command import build_command, document_command, format_command
from tika_pipeline.extraction.parser import ParsedOutput, parse_document, parse_metadata
from tika_pipeline.extraction.runner import ProcessResult, ProcessRunner, SubprocessRunner
from tika_pipeline.extraction.wrapper import TikaWrapper

__all__ = [
    "build_command",
    "document_command",
    "format_command",
    "parse_document",
    "parse_metadata",
    "ParsedOutput",
    "ProcessResult",
    "ProcessRunner",
    "SubprocessRunner",
    "TikaWrapper",
]
