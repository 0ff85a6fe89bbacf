import io
from abc import ABC, abstractmethod
from dataclasses import dataclass

import pytesseract
from PIL import Image

from docverify.extraction.exceptions import OcrExtractionError


@dataclass(frozen=True)
class OcrResult:
    """Raw text recognized by an OCR engine."""

    text: str


class BaseOcrEngine(ABC):
    """Contract for OCR engines. Engines are opaque and never retried."""

    @abstractmethod
    def recognize(self, data: bytes, language: str) -> OcrResult:
        """Recognize text in an encoded image.

        Raises:
            OcrExtractionError: if the engine cannot process the image.
        """


class TesseractOcrAdapter(BaseOcrEngine):
    """Runs Tesseract through pytesseract on images decoded with Pillow."""

    def __init__(self, tesseract_cmd: str = "") -> None:
        if tesseract_cmd:
            pytesseract.pytesseract.tesseract_cmd = tesseract_cmd

    def recognize(self, data: bytes, language: str) -> OcrResult:
        try:
            with Image.open(io.BytesIO(data)) as image:
                text = pytesseract.image_to_string(image, lang=language)
        except Exception as exc:
            raise OcrExtractionError(f"Tesseract OCR failed: {exc}") from exc
        return OcrResult(text=text)
