import pytest

from docverify.config.settings import Settings
from docverify.history.factory import HistoryFactory
from docverify.history.memory import InMemoryHistoryRepository
from docverify.history.postgres import PostgresHistoryRepository


class TestHistoryFactory:
    def test_default_is_memory(self) -> None:
        assert isinstance(HistoryFactory.create(Settings()), InMemoryHistoryRepository)

    def test_postgres_backend_is_case_insensitive(self) -> None:
        repo = HistoryFactory.create(Settings(history_backend="Postgres"))
        assert isinstance(repo, PostgresHistoryRepository)

    def test_raises_for_unknown_backend(self) -> None:
        with pytest.raises(ValueError, match="Unknown history backend 'redis'"):
            HistoryFactory.create(Settings(history_backend="redis"))
