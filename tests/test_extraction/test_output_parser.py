"""Tests for Tika output parsing."""

import pytest

from tika_pipeline.core.enums import MetadataRecordType, OutputFormat
from tika_pipeline.core.exceptions import OutputParseFailure
from tika_pipeline.extraction.parser import parse_document, parse_metadata
from tika_pipeline.model.metadata import Metadata, MetadataPairs


class TestParseMetadata:
    """Test cases for the metadata-only (JSON) path."""

    def test_scalar_and_list_values(self, sample_json):
        metadata = parse_metadata(sample_json)

        assert isinstance(metadata, Metadata)
        assert metadata.get("title") == ["A"]
        assert metadata.get("author") == ["X", "Y"]

    def test_record_type(self, sample_json):
        metadata = parse_metadata(sample_json, MetadataRecordType.PAIRS)

        assert isinstance(metadata, MetadataPairs)
        assert metadata.pairs() == [("title", "A"), ("author", "X"), ("author", "Y")]

    def test_non_string_values_kept(self):
        metadata = parse_metadata('{"xmpTPg:NPages": 3, "encrypted": false}')

        assert metadata.first("xmpTPg:NPages") == 3
        assert metadata.first("encrypted") is False

    @pytest.mark.parametrize("raw", ["", "{not json", "Exception in thread main"])
    def test_malformed_json(self, raw):
        with pytest.raises(OutputParseFailure, match="Invalid JSON"):
            parse_metadata(raw)

    def test_not_an_object(self):
        with pytest.raises(OutputParseFailure, match="list"):
            parse_metadata('[{"title": "A"}]')


class TestParseXml:
    """Test cases for the structured document path with XHTML output."""

    def test_meta_and_body(self, sample_xhtml):
        parsed = parse_document(sample_xhtml, OutputFormat.XML)

        assert parsed.metadata.get("keyword") == ["foo", "bar"]
        assert parsed.metadata.first("Content-Type") == "application/pdf"
        assert parsed.content == "Hello World"

    def test_nested_markup_flattened(self):
        raw = "<html><body><p>First <i>para</i></p><div><p>Second</p></div></body></html>"

        assert parse_document(raw, "xml").content == "First paraSecond"

    def test_meta_without_name_or_content(self):
        raw = (
            '<html><head><meta http-equiv="refresh" content="0"/>'
            '<meta name="empty"/></head><body/></html>'
        )
        parsed = parse_document(raw, OutputFormat.XML)

        assert parsed.metadata.all() == {"empty": [""]}
        assert parsed.content == ""

    def test_missing_body(self):
        parsed = parse_document('<html><head><meta name="a" content="b"/></head></html>', "xml")

        assert parsed.content is None
        assert parsed.metadata.get("a") == ["b"]

    def test_no_meta_gives_empty_record(self):
        parsed = parse_document("<html><body>text</body></html>", "xml")

        assert len(parsed.metadata) == 0
        assert parsed.content == "text"

    @pytest.mark.parametrize("raw", ["", "   ", "<html><body>unclosed</html>"])
    def test_malformed_xml(self, raw):
        with pytest.raises(OutputParseFailure):
            parse_document(raw, OutputFormat.XML)


class TestParseHtml:
    """Test cases for the structured document path with HTML output."""

    def test_meta_and_body(self):
        raw = (
            "<!DOCTYPE html><html><head>"
            '<meta name="keyword" content="foo">'
            '<meta name="keyword" content="bar">'
            "</head><body>Hello <b>World</b></body></html>"
        )
        parsed = parse_document(raw, OutputFormat.HTML)

        assert parsed.metadata.get("keyword") == ["foo", "bar"]
        assert parsed.content == "Hello World"

    def test_lenient_markup(self):
        parsed = parse_document("<html><body><p>open paragraph<br>line</body>", "html")

        assert parsed.content == "open paragraphline"

    def test_empty_output(self):
        with pytest.raises(OutputParseFailure):
            parse_document("", OutputFormat.HTML)


def test_plain_text_format_rejected():
    with pytest.raises(ValueError):
        parse_document("plain", OutputFormat.TEXT)
