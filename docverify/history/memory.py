import threading
from typing import Any

from docverify.history.base import BaseHistoryRepository
from docverify.history.exceptions import HistoryError, RecordNotFoundError
from docverify.history.serializer import HistoryEntry, from_payload, to_payload


class InMemoryHistoryRepository(BaseHistoryRepository):
    """Process-scoped history holding serialized payloads, newest first."""

    def __init__(self) -> None:
        self._entries: list[tuple[str, str, dict[str, Any]]] = []
        self._lock = threading.Lock()

    def append(self, entry: HistoryEntry) -> None:
        kind, payload = to_payload(entry)
        entry_id = payload["id"]
        with self._lock:
            if any(existing_id == entry_id for existing_id, _, _ in self._entries):
                raise HistoryError(f"History entry {entry_id} already exists")
            self._entries.insert(0, (entry_id, kind, payload))

    def get(self, entry_id: str) -> HistoryEntry:
        with self._lock:
            found = next((item for item in self._entries if item[0] == entry_id), None)
        if found is None:
            raise RecordNotFoundError(f"History entry {entry_id} not found")
        _, kind, payload = found
        return from_payload(kind, payload)

    def list_recent(self, limit: int = 20) -> list[HistoryEntry]:
        with self._lock:
            window = list(self._entries[: max(0, limit)])
        return [from_payload(kind, payload) for _, kind, payload in window]
