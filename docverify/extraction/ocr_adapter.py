import pymupdf

from docverify.extraction.base import BaseTextExtractor
from docverify.extraction.exceptions import OcrExtractionError
from docverify.extraction.ocr_engine import BaseOcrEngine
from docverify.logging.logger import Log

NO_TEXT_DETECTED = "No text detected in image"


class OcrImageAdapter(BaseTextExtractor):
    """Extracts text by handing the raw bytes to an OCR engine.

    Used for images, and for Word files while ``WORD_ENGINE=ocr``.
    """

    def __init__(self, engine: BaseOcrEngine, language: str = "eng") -> None:
        self._engine = engine
        self._language = language

    def extract(self, data: bytes) -> str:
        text = self._engine.recognize(data, self._language).text.strip()
        Log.debug(f"OCR completed. Extracted {len(text)} characters")
        return text or NO_TEXT_DETECTED


class OcrPdfAdapter(OcrImageAdapter):
    """Rasterizes each PDF page with PyMuPDF and runs OCR page by page."""

    def __init__(self, engine: BaseOcrEngine, language: str = "eng", dpi: int = 300) -> None:
        super().__init__(engine, language)
        self._dpi = dpi

    def extract(self, data: bytes) -> str:
        pages = self._rasterize(data)
        texts = [self._engine.recognize(page, self._language).text.strip() for page in pages]
        text = "\n".join(t for t in texts if t).strip()
        Log.debug(f"OCR completed for {len(pages)} PDF pages. Extracted {len(text)} characters")
        return text or NO_TEXT_DETECTED

    def _rasterize(self, data: bytes) -> list[bytes]:
        try:
            with pymupdf.open(stream=data, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                return [page.get_pixmap(dpi=self._dpi).tobytes("png") for page in doc]
        except Exception as exc:
            raise OcrExtractionError(f"PDF rasterization failed: {exc}") from exc
