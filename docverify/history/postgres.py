import psycopg
from psycopg.rows import dict_row
from psycopg.types.json import Jsonb

from docverify.database.connection import get_connection
from docverify.history.base import BaseHistoryRepository
from docverify.history.exceptions import HistoryError, RecordNotFoundError
from docverify.history.serializer import HistoryEntry, from_payload, to_payload

CREATE_TABLE_SQL = """
CREATE TABLE IF NOT EXISTS analysis_history (
    seq BIGSERIAL NOT NULL,
    id TEXT PRIMARY KEY,
    kind TEXT NOT NULL,
    payload JSONB NOT NULL,
    created_at TIMESTAMPTZ NOT NULL DEFAULT now()
)
"""


class PostgresHistoryRepository(BaseHistoryRepository):
    """Database operations for the analysis_history table."""

    def ensure_schema(self) -> None:
        """Create the history table if it does not exist."""
        with get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(CREATE_TABLE_SQL)
            conn.commit()

    def append(self, entry: HistoryEntry) -> None:
        kind, payload = to_payload(entry)
        try:
            with get_connection() as conn:
                with conn.cursor() as cur:
                    cur.execute(
                        """
                        INSERT INTO analysis_history (id, kind, payload)
                        VALUES (%s, %s, %s)
                        """,
                        (payload["id"], kind, Jsonb(payload)),
                    )
                conn.commit()
        except psycopg.errors.UniqueViolation as exc:
            raise HistoryError(f"History entry {payload['id']} already exists") from exc

    def get(self, entry_id: str) -> HistoryEntry:
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    "SELECT kind, payload FROM analysis_history WHERE id = %s",
                    (entry_id,),
                )
                row = cur.fetchone()

        if row is None:
            raise RecordNotFoundError(f"History entry {entry_id} not found")
        return from_payload(row["kind"], row["payload"])

    def list_recent(self, limit: int = 20) -> list[HistoryEntry]:
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    """
                    SELECT kind, payload
                    FROM analysis_history
                    ORDER BY seq DESC
                    LIMIT %s
                    """,
                    (max(0, limit),),
                )
                rows = cur.fetchall()

        return [from_payload(row["kind"], row["payload"]) for row in rows]
