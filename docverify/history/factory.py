from docverify.config.settings import Settings
from docverify.history.base import BaseHistoryRepository
from docverify.history.memory import InMemoryHistoryRepository
from docverify.history.postgres import PostgresHistoryRepository


class HistoryFactory:
    """Creates the history repository selected by settings."""

    ADAPTERS: dict[str, type[BaseHistoryRepository]] = {
        "memory": InMemoryHistoryRepository,
        "postgres": PostgresHistoryRepository,
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseHistoryRepository:
        backend = settings.history_backend.lower()
        adapter_cls = cls.ADAPTERS.get(backend)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown history backend '{backend}'. Choose from: {list(cls.ADAPTERS)}"
            )
        return adapter_cls()
