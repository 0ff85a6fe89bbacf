from docverify.extraction.base import BaseTextExtractor


class PlainTextAdapter(BaseTextExtractor):
    """Decodes plain-text files as UTF-8, replacing invalid bytes."""

    def extract(self, data: bytes) -> str:
        return data.decode("utf-8", errors="replace").strip()
