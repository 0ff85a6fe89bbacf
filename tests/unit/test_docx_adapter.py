import pytest

from docverify.extraction.docx_adapter import DocxAdapter
from docverify.extraction.exceptions import ExtractionError
from docverify.extraction.plain_text_adapter import PlainTextAdapter


class TestDocxAdapter:
    def test_extracts_paragraphs_and_tables(self, sample_docx_bytes: bytes) -> None:
        text = DocxAdapter().extract(sample_docx_bytes)
        assert text.splitlines() == ["Sale agreement between the parties", "Survey No. | 312/4"]

    def test_raises_for_invalid_document(self) -> None:
        with pytest.raises(ExtractionError, match="python-docx extraction failed"):
            DocxAdapter().extract(b"not a docx")


class TestPlainTextAdapter:
    def test_decodes_and_strips(self) -> None:
        assert PlainTextAdapter().extract("  Village: Perungalathur\n".encode()) == (
            "Village: Perungalathur"
        )

    def test_replaces_invalid_bytes(self) -> None:
        assert PlainTextAdapter().extract(b"Taluk \xff") == "Taluk �"
