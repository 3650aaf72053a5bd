"""Exceptions raised by tika-pipeline."""

from typing import Optional


class TikaPipelineError(Exception):
    """Base class for all tika-pipeline errors."""


class ConfigurationError(TikaPipelineError, ValueError):
    """Raised when a configuration option does not exist or cannot be set."""


class UnknownDocument(TikaPipelineError, LookupError):
    """Raised when a document is looked up by a name that is not in the batch."""

    def __init__(self, name: str) -> None:
        super().__init__(f'The document "{name}" does not exist')
        self.name = name


class ExtractionFailure(TikaPipelineError, RuntimeError):
    """Raised when the Tika process does not complete successfully."""

    def __init__(
        self,
        error_output: str,
        returncode: Optional[int] = None,
        command: Optional[str] = None,
    ) -> None:
        super().__init__(error_output)
        self.error_output = error_output
        self.returncode = returncode
        self.command = command


class OutputParseFailure(TikaPipelineError, ValueError):
    """Raised when Tika output is not valid JSON or well-formed markup."""

    def __init__(self, message: str, document_name: Optional[str] = None) -> None:
        super().__init__(message)
        self.document_name = document_name
