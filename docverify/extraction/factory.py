from docverify.config.settings import Settings
from docverify.extraction.base import BaseTextExtractor
from docverify.extraction.docx_adapter import DocxAdapter
from docverify.extraction.models import MimeKind
from docverify.extraction.ocr_adapter import OcrImageAdapter, OcrPdfAdapter
from docverify.extraction.ocr_engine import BaseOcrEngine, TesseractOcrAdapter
from docverify.extraction.pdfplumber_adapter import PdfPlumberAdapter
from docverify.extraction.plain_text_adapter import PlainTextAdapter
from docverify.extraction.pymupdf_adapter import PyMuPdfAdapter
from docverify.extraction.service import TextExtractionService


class TextExtractorFactory:
    """Creates the extractor routing table and the extraction service from settings."""

    PDF_ENGINES: tuple[str, ...] = ("ocr", "pdfplumber", "pymupdf")
    WORD_ENGINES: tuple[str, ...] = ("ocr", "python-docx")

    @classmethod
    def create(
        cls,
        settings: Settings,
        ocr_engine: BaseOcrEngine | None = None,
    ) -> dict[MimeKind, BaseTextExtractor]:
        engine = ocr_engine or TesseractOcrAdapter(settings.tesseract_cmd)
        return {
            MimeKind.IMAGE: OcrImageAdapter(engine, settings.ocr_language),
            MimeKind.PDF: cls._create_pdf_extractor(settings, engine),
            MimeKind.WORD: cls._create_word_extractor(settings, engine),
            MimeKind.TEXT: PlainTextAdapter(),
        }

    @classmethod
    def create_service(
        cls,
        settings: Settings,
        *,
        max_bytes: int | None = None,
        ocr_engine: BaseOcrEngine | None = None,
    ) -> TextExtractionService:
        return TextExtractionService(
            cls.create(settings, ocr_engine),
            max_bytes=max_bytes if max_bytes is not None else settings.max_upload_bytes,
            max_workers=settings.extraction_max_workers,
        )

    @classmethod
    def _create_pdf_extractor(
        cls, settings: Settings, engine: BaseOcrEngine
    ) -> BaseTextExtractor:
        name = settings.pdf_engine.lower()
        if name == "ocr":
            return OcrPdfAdapter(engine, settings.ocr_language, settings.ocr_pdf_dpi)
        if name == "pdfplumber":
            return PdfPlumberAdapter()
        if name == "pymupdf":
            return PyMuPdfAdapter()
        raise ValueError(
            f"Unknown PDF engine '{name}'. Choose from: {list(cls.PDF_ENGINES)}"
        )

    @classmethod
    def _create_word_extractor(
        cls, settings: Settings, engine: BaseOcrEngine
    ) -> BaseTextExtractor:
        name = settings.word_engine.lower()
        if name == "ocr":
            return OcrImageAdapter(engine, settings.ocr_language)
        if name == "python-docx":
            return DocxAdapter()
        raise ValueError(
            f"Unknown Word engine '{name}'. Choose from: {list(cls.WORD_ENGINES)}"
        )
