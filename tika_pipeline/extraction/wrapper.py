"""Batch orchestration of Tika extractions."""

from typing import Any, Dict, Optional, Union

from tika_pipeline.core.config import TikaConfig
from tika_pipeline.core.exceptions import ExtractionFailure, OutputParseFailure
from tika_pipeline.core.logging import get_logger
from tika_pipeline.extraction.command import build_command, document_command, format_command
from tika_pipeline.extraction.parser import parse_document, parse_metadata
from tika_pipeline.extraction.runner import ProcessRunner, SubprocessRunner
from tika_pipeline.model.batch import DocumentBatch
from tika_pipeline.model.document import Document

_log = get_logger(__name__)


class TikaWrapper:
    """Run Tika over a batch of documents and store the parsed results on them.

    Documents are processed one at a time, in the order they were added. The
    first process failure or unparseable output stops the batch: documents
    already processed keep their results and the remaining ones are left
    untouched.
    """

    def __init__(
        self,
        config: Optional[TikaConfig] = None,
        runner: Optional[ProcessRunner] = None,
        logger: Optional[Any] = None,
    ) -> None:
        """Initialize wrapper.

        Args:
            config: Tika configuration. Defaults are used if None.
            runner: Process runner. A SubprocessRunner built from the
                configuration is used if None.
            logger: Optional logger receiving one info message per command.
        """
        self.config = config or TikaConfig()
        self.runner = runner
        self.logger = logger
        self.batch = DocumentBatch()

    def get_configuration(self) -> TikaConfig:
        return self.config

    def set_logger(self, logger: Any) -> "TikaWrapper":
        self.logger = logger
        return self

    def set_parameter(self, name: str, value: Any) -> "TikaWrapper":
        """Override a configuration option by name.

        Raises:
            ConfigurationError: If the option does not exist or the value is invalid.
        """
        self.config.set_parameter(name, value)
        return self

    def add_document(self, document: Document) -> "TikaWrapper":
        self.batch.add(document)
        return self

    def get_document(self, name: Optional[str] = None) -> Union[Document, Dict[str, Document]]:
        """Get one document by name, or every document when no name is given.

        Raises:
            UnknownDocument: If no document has this name.
        """
        if name is not None:
            return self.batch.get(name)
        return self.batch.documents()

    def clear_documents(self) -> "TikaWrapper":
        """Remove every document from the batch."""
        self.batch.clear()
        return self

    def execute(self) -> "TikaWrapper":
        """Run Tika for every document added to this wrapper.

        Raises:
            ExtractionFailure: If a Tika process exits with an error status.
            OutputParseFailure: If a Tika output cannot be parsed.
        """
        self.run(self.batch)
        return self

    def run(self, batch: DocumentBatch) -> DocumentBatch:
        """Run Tika for every document of ``batch``, in insertion order.

        Returns:
            The same batch, with each document's raw output, content and
            metadata updated in place.
        """
        base = build_command(self.config)
        runner = self.runner
        if runner is None:
            runner = SubprocessRunner(
                encoding=self.config.output_encoding,
                timeout=self.config.timeout,
            )

        _log.debug(f"Processing {len(batch)} documents with {format_command(base)}")

        for document in batch:
            args = document_command(base, document.path, document.password)
            command = format_command(args)
            if self.logger is not None:
                try:
                    self.logger.info(f'Tika command: "{command}"')
                except Exception as e:
                    _log.opt(exception=e).warning(f"Logger failed for document {document.name}")

            result = runner.run(args)
            if not result.is_success:
                raise ExtractionFailure(
                    result.stderr,
                    returncode=result.returncode,
                    command=command,
                )

            document.raw_content = result.stdout
            try:
                self._load(document, result.stdout)
            except OutputParseFailure as e:
                e.document_name = document.name
                raise

        return batch

    def _load(self, document: Document, output: str) -> None:
        if self.config.metadata_only:
            document.metadata = parse_metadata(output, self.config.metadata_class)
        elif self.config.output_format.is_markup:
            parsed = parse_document(output, self.config.output_format, self.config.metadata_class)
            document.metadata = parsed.metadata
            if parsed.content is not None:
                document.content = parsed.content
        else:
            document.content = output
