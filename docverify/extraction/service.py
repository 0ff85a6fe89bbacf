"""Multi-format text extraction with per-file failure isolation."""

from collections.abc import Mapping, Sequence
from concurrent.futures import ThreadPoolExecutor

from docverify.extraction.base import BaseTextExtractor
from docverify.extraction.exceptions import (
    FileReadError,
    FileTooLargeError,
    UnsupportedFileTypeError,
)
from docverify.extraction.models import BatchExtractionResult, ExtractedText, MimeKind, RawFile
from docverify.logging.logger import Log

DEFAULT_MAX_BYTES = 50 * 1024 * 1024

SUPPORTED_MIME_TYPES: dict[str, MimeKind] = {
    "application/pdf": MimeKind.PDF,
    "application/msword": MimeKind.WORD,
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document": MimeKind.WORD,
    "text/plain": MimeKind.TEXT,
    "image/jpeg": MimeKind.IMAGE,
    "image/jpg": MimeKind.IMAGE,
    "image/png": MimeKind.IMAGE,
    "image/gif": MimeKind.IMAGE,
    "image/tiff": MimeKind.IMAGE,
    "image/bmp": MimeKind.IMAGE,
}

SUPPORTED_EXTENSIONS: dict[str, MimeKind] = {
    "pdf": MimeKind.PDF,
    "doc": MimeKind.WORD,
    "docx": MimeKind.WORD,
    "txt": MimeKind.TEXT,
    "jpg": MimeKind.IMAGE,
    "jpeg": MimeKind.IMAGE,
    "png": MimeKind.IMAGE,
    "gif": MimeKind.IMAGE,
    "tiff": MimeKind.IMAGE,
    "bmp": MimeKind.IMAGE,
}


def resolve_mime_kind(mime_type: str, filename: str) -> MimeKind | None:
    """Resolve the document family from the declared MIME type, then the extension."""
    mime = (mime_type or "").split(";", 1)[0].strip().lower()
    kind = SUPPORTED_MIME_TYPES.get(mime)
    if kind is not None:
        return kind
    extension = filename.rsplit(".", 1)[-1].lower() if "." in filename else ""
    return SUPPORTED_EXTENSIONS.get(extension)


class TextExtractionService:
    """Normalizes supported files into a single text blob.

    Each ``MimeKind`` is routed to one extractor. Validation (size, then type)
    happens before any bytes are read.
    """

    def __init__(
        self,
        extractors: Mapping[MimeKind, BaseTextExtractor],
        *,
        max_bytes: int = DEFAULT_MAX_BYTES,
        max_workers: int = 4,
    ) -> None:
        self._extractors = dict(extractors)
        self._max_bytes = max_bytes
        self._max_workers = max(1, max_workers)

    @property
    def max_bytes(self) -> int:
        return self._max_bytes

    def validate(self, file: RawFile) -> MimeKind:
        """Check size and type; return the routing kind.

        Raises:
            FileTooLargeError: if the file exceeds ``max_bytes``.
            UnsupportedFileTypeError: if neither MIME type nor extension is supported.
        """
        if file.size > self._max_bytes:
            raise FileTooLargeError(file.size, self._max_bytes, file.filename)
        kind = resolve_mime_kind(file.mime_type, file.filename)
        if kind is None or kind not in self._extractors:
            raise UnsupportedFileTypeError(file.mime_type, file.filename)
        return kind

    def extract(self, file: RawFile) -> ExtractedText:
        """Extract text from one file.

        Raises:
            ExtractionError: on validation, read, or engine failure.
        """
        kind = self.validate(file)
        Log.info(f"Processing file: {file.filename}, Type: {kind.value}")
        try:
            data = file.read()
        except (OSError, ValueError) as exc:
            raise FileReadError(f"Failed to read {file.filename}: {exc}") from exc
        text = self._extractors[kind].extract(data)
        Log.info(f"Extracted {len(text)} chars from {file.filename}")
        return ExtractedText(source_file_name=file.filename, mime_kind=kind, text=text)

    def extract_many(self, files: Sequence[RawFile]) -> BatchExtractionResult:
        """Extract every file concurrently; a failing file never affects its siblings."""
        if not files:
            return BatchExtractionResult(results=[])
        Log.info(f"Processing {len(files)} files...")
        workers = min(self._max_workers, len(files))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = [executor.submit(self._extract_isolated, file) for file in files]
            results = [future.result() for future in futures]
        batch = BatchExtractionResult(results=results)
        if batch.failure_count:
            Log.warning(
                f"{batch.failure_count} of {batch.total_files} files failed to process",
                failed=[result.source_file_name for result in batch.failed],
            )
        return batch

    def _extract_isolated(self, file: RawFile) -> ExtractedText:
        try:
            return self.extract(file)
        except Exception as exc:  # noqa: BLE001
            Log.error(f"Failed to process {file.filename}: {exc}")
            return ExtractedText(
                source_file_name=file.filename,
                mime_kind=resolve_mime_kind(file.mime_type, file.filename),
                text="",
                success=False,
                error=str(exc),
            )
