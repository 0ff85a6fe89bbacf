import mimetypes
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class MimeKind(str, Enum):
    """Coarse document family a file is routed by."""

    PDF = "pdf"
    IMAGE = "image"
    WORD = "word"
    TEXT = "text"


@dataclass(frozen=True)
class RawFile:
    """An uploaded file, held only for the duration of extraction.

    Either ``data`` or ``path`` carries the payload; ``read()`` hides which.
    """

    filename: str
    mime_type: str
    size: int
    data: bytes | None = None
    path: Path | None = None

    def read(self) -> bytes:
        if self.data is not None:
            return self.data
        if self.path is None:
            raise ValueError(f"RawFile '{self.filename}' has neither data nor path")
        return self.path.read_bytes()

    @property
    def extension(self) -> str:
        return Path(self.filename).suffix.lstrip(".").lower()

    @classmethod
    def from_path(cls, path: Path, mime_type: str | None = None) -> "RawFile":
        guessed, _ = mimetypes.guess_type(path.name)
        return cls(
            filename=path.name,
            mime_type=mime_type or guessed or "",
            size=path.stat().st_size,
            path=path,
        )


@dataclass(frozen=True)
class ExtractedText:
    """Text produced from one file. Failed entries carry an empty text and the error."""

    source_file_name: str
    mime_kind: MimeKind | None
    text: str
    success: bool = True
    error: str | None = None


@dataclass(frozen=True)
class BatchExtractionResult:
    """Per-file outcomes of a batch, in input order."""

    results: list[ExtractedText] = field(default_factory=list)

    @property
    def total_files(self) -> int:
        return len(self.results)

    @property
    def success_count(self) -> int:
        return sum(1 for result in self.results if result.success)

    @property
    def failure_count(self) -> int:
        return self.total_files - self.success_count

    @property
    def successful(self) -> list[ExtractedText]:
        return [result for result in self.results if result.success]

    @property
    def failed(self) -> list[ExtractedText]:
        return [result for result in self.results if not result.success]
