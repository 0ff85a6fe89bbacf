class ExtractionError(Exception):
    """Base exception for all text extraction errors."""


class UnsupportedFileTypeError(ExtractionError):
    """Raised when a file's MIME type and extension are both outside the supported set."""

    def __init__(self, mime_type: str, filename: str) -> None:
        self.mime_type = mime_type
        self.filename = filename
        extension = filename.rsplit(".", 1)[-1] if "." in filename else ""
        shown = mime_type or extension or "unknown"
        super().__init__(f"Unsupported file type: {shown} ({filename})")


class FileTooLargeError(ExtractionError):
    """Raised when a file exceeds the configured upload limit."""

    def __init__(self, size: int, max_size: int, filename: str) -> None:
        self.size = size
        self.max_size = max_size
        self.filename = filename
        super().__init__(
            f"File size ({format_file_size(size)}) exceeds maximum allowed size "
            f"({format_file_size(max_size)}) for {filename}"
        )


class OcrExtractionError(ExtractionError):
    """Raised when the OCR engine fails on an image or rasterized page."""


class FileReadError(ExtractionError):
    """Raised when a file's bytes cannot be read or decoded."""


def format_file_size(size: int) -> str:
    if size <= 0:
        return "0 Bytes"
    units = ["Bytes", "KB", "MB", "GB"]
    value = float(size)
    index = 0
    while value >= 1024 and index < len(units) - 1:
        value /= 1024
        index += 1
    return f"{value:.2f}".rstrip("0").rstrip(".") + f" {units[index]}"
