import io

from docx import Document as DocxDocument

from docverify.extraction.base import BaseTextExtractor
from docverify.extraction.exceptions import ExtractionError


class DocxAdapter(BaseTextExtractor):
    """Extracts paragraph and table text from .docx files using python-docx."""

    def extract(self, data: bytes) -> str:
        try:
            document = DocxDocument(io.BytesIO(data))
            lines = [paragraph.text for paragraph in document.paragraphs]
            for table in document.tables:
                for row in table.rows:
                    lines.append(" | ".join(cell.text.strip() for cell in row.cells))
        except Exception as exc:
            raise ExtractionError(f"python-docx extraction failed: {exc}") from exc
        return "\n".join(line for line in lines if line.strip()).strip()
