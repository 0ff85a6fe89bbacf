from abc import ABC, abstractmethod

from docverify.history.serializer import HistoryEntry


class BaseHistoryRepository(ABC):
    """Append-only store of verification results and contract analyses."""

    @abstractmethod
    def append(self, entry: HistoryEntry) -> None:
        """Persist an entry. Entries are never updated once appended."""

    @abstractmethod
    def get(self, entry_id: str) -> HistoryEntry:
        """Return the entry with this id.

        Raises:
            RecordNotFoundError: if no entry has this id.
        """

    @abstractmethod
    def list_recent(self, limit: int = 20) -> list[HistoryEntry]:
        """Return up to ``limit`` entries, most recent first."""
