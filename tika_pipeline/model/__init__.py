"""Document and metadata model."""

from tika_pipeline.model.batch import DocumentBatch
from tika_pipeline.model.document import Document
from tika_pipeline.model.metadata import Metadata, MetadataPairs, MetadataSink, create_metadata

__all__ = [
    "Document",
    "DocumentBatch",
    "Metadata",
    "MetadataPairs",
    "MetadataSink",
    "create_metadata",
]
