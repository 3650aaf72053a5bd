"""Parse raw Tika output into content and metadata.

Two modes are supported:

- metadata-only: Tika was run with ``--json`` and printed a flat JSON object
  mapping field names to a string or a list of strings.
- structured document: Tika printed an XHTML (``--xml``) or HTML (``--html``)
  document whose ``meta`` elements carry the metadata and whose ``body``
  carries the text.
"""

import json
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple, Union

from bs4 import BeautifulSoup

from tika_pipeline.core.enums import MetadataRecordType, OutputFormat
from tika_pipeline.core.exceptions import OutputParseFailure
from tika_pipeline.core.logging import get_logger
from tika_pipeline.model.metadata import MetadataSink, create_metadata

logger = get_logger(__name__)

META_TAG = "meta"
BODY_TAG = "body"


@dataclass
class ParsedOutput:
    """Metadata and body text read from a structured Tika document."""

    metadata: MetadataSink
    content: Optional[str] = None


def parse_metadata(
    raw: str,
    record_type: MetadataRecordType = MetadataRecordType.MAPPING,
) -> MetadataSink:
    """Parse the JSON printed by ``tika --json``.

    Args:
        raw: Raw process output.
        record_type: Metadata record implementation to fill.

    Returns:
        Metadata record with one entry per value; list values add every element
        under the same field name.

    Raises:
        OutputParseFailure: If the output is not a JSON object.
    """
    try:
        fields = json.loads(raw)
    except (json.JSONDecodeError, TypeError) as e:
        raise OutputParseFailure(f"Invalid JSON metadata: {e}") from e

    if not isinstance(fields, dict):
        raise OutputParseFailure(
            f"Expected a JSON object of metadata fields, got {type(fields).__name__}"
        )

    metadata = create_metadata(record_type)
    for name, value in fields.items():
        if isinstance(value, list):
            for item in value:
                metadata.add(name, item)
        else:
            metadata.add(name, value)

    logger.debug(f"Parsed {len(metadata)} metadata fields from JSON output")
    return metadata


def parse_document(
    raw: str,
    output_format: Union[OutputFormat, str] = OutputFormat.XML,
    record_type: MetadataRecordType = MetadataRecordType.MAPPING,
) -> ParsedOutput:
    """Parse an XML or HTML document printed by Tika.

    Args:
        raw: Raw process output.
        output_format: ``xml`` or ``html``, selects the markup parser.
        record_type: Metadata record implementation to fill.

    Returns:
        ParsedOutput with the ``meta`` name/content pairs and the text of the
        first ``body`` element (None when there is no body).

    Raises:
        OutputParseFailure: If the markup cannot be parsed.
    """
    output_format = OutputFormat(output_format)
    if not output_format.is_markup:
        raise ValueError(f"Output format {output_format.value} is not a markup format")
    if not raw or not raw.strip():
        raise OutputParseFailure(f"Empty {output_format.value} output")

    if output_format == OutputFormat.XML:
        meta_pairs, content = _parse_xml(raw)
    else:
        meta_pairs, content = _parse_html(raw)

    metadata = create_metadata(record_type)
    for name, value in meta_pairs:
        metadata.add(name, value)

    if content is None:
        logger.debug("No body element found in Tika output")

    return ParsedOutput(metadata=metadata, content=content)


def _local_name(tag) -> str:
    # comments and processing instructions have a callable tag
    if not isinstance(tag, str):
        return ""
    if "}" in tag:
        tag = tag.split("}", 1)[1]
    return tag.lower()


def _parse_xml(raw: str) -> Tuple[list, Optional[str]]:
    try:
        root = ET.fromstring(raw)
    except ET.ParseError as e:
        raise OutputParseFailure(f"Invalid XML output: {e}") from e

    meta_pairs = list(_meta_pairs(
        (element.get("name"), element.get("content"))
        for element in root.iter()
        if _local_name(element.tag) == META_TAG
    ))

    body = next(
        (element for element in root.iter() if _local_name(element.tag) == BODY_TAG),
        None,
    )
    content = "".join(body.itertext()) if body is not None else None
    return meta_pairs, content


def _parse_html(raw: str) -> Tuple[list, Optional[str]]:
    soup = BeautifulSoup(raw, "html.parser")

    meta_pairs = list(_meta_pairs(
        (element.get("name"), element.get("content"))
        for element in soup.find_all(META_TAG)
    ))

    body = soup.find(BODY_TAG)
    content = body.get_text() if body is not None else None
    return meta_pairs, content


def _meta_pairs(attributes) -> Iterator[Tuple[str, str]]:
    for name, value in attributes:
        # http-equiv and charset metas have no name
        if not name:
            continue
        yield name, value if value is not None else ""
