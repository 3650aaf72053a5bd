"""Document object processed by the Tika wrapper."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

from tika_pipeline.model.metadata import MetadataSink


@dataclass(eq=False)
class Document:
    """
    A source file to run through Tika, together with what Tika produced for it.

    ``name`` identifies the document inside a batch. ``raw_content`` holds the
    unparsed Tika output of the last execution; ``content`` and ``metadata``
    are derived from it depending on the configured output mode.
    """

    name: str
    path: Union[str, Path]
    password: Optional[str] = field(default=None, repr=False)
    raw_content: Optional[str] = field(default=None, repr=False)
    content: Optional[str] = field(default=None, repr=False)
    metadata: Optional[MetadataSink] = None

    def __post_init__(self) -> None:
        self.path = Path(self.path)

    @property
    def filename(self) -> str:
        """Get the filename without path."""
        return self.path.name

    @property
    def extension(self) -> str:
        """Get the file extension."""
        return self.path.suffix.lstrip(".")

    @property
    def content_length(self) -> int:
        """Get the length of the content."""
        return len(self.content) if self.content else 0

    @property
    def is_processed(self) -> bool:
        """Check if Tika output has been stored on the document."""
        return self.raw_content is not None

    def is_empty(self) -> bool:
        """Check if the document content is empty."""
        return not self.content or not self.content.strip()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "path": str(self.path),
            "content": self.content,
            "metadata": self.metadata.to_dict() if self.metadata is not None else None,
        }

    def __str__(self) -> str:
        """String representation showing name and filename."""
        return f"Document({self.name}, {self.filename})"
