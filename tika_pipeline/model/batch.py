"""Ordered, name-keyed collection of documents."""

from typing import Dict, Iterator

from tika_pipeline.core.exceptions import UnknownDocument
from tika_pipeline.model.document import Document


class DocumentBatch:
    """Documents processed together against one base command.

    Iteration follows insertion order. Adding a document whose name is already
    present replaces the previous entry at its original position.
    """

    def __init__(self) -> None:
        self._documents: Dict[str, Document] = {}

    def add(self, document: Document) -> "DocumentBatch":
        self._documents[document.name] = document
        return self

    def get(self, name: str) -> Document:
        if name not in self._documents:
            raise UnknownDocument(name)
        return self._documents[name]

    def documents(self) -> Dict[str, Document]:
        """Return a copy of the name to document mapping."""
        return dict(self._documents)

    def clear(self) -> "DocumentBatch":
        self._documents = {}
        return self

    def __len__(self) -> int:
        return len(self._documents)

    def __iter__(self) -> Iterator[Document]:
        return iter(list(self._documents.values()))

    def __contains__(self, name: object) -> bool:
        return name in self._documents

    def __repr__(self) -> str:
        return f"DocumentBatch(documents={list(self._documents)})"
