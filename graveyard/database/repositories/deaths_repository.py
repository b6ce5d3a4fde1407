from typing import Any

import psycopg
from psycopg import errors
from psycopg.rows import dict_row

from graveyard.database.connection import get_connection
from graveyard.database.models import DeathRecord, NewDeath
from graveyard.submission.exceptions import DuplicateSubmissionError, PersistenceError

_PAYLOAD_COLUMNS = (
    "level",
    "damage_taken",
    "career_seconds",
    "career_runs",
    "career_kills",
    "career_elite_kills",
    "career_bosses",
    "career_gold",
    "career_soulstones",
    "skill_ids",
    "last_run_kills",
    "last_run_soulstones",
    "last_run_regular_kills",
    "last_run_elite_kills",
    "last_run_boss_kills",
    "last_run_gold",
    "last_run_damage_dealt",
    "last_run_duration",
)

_INSERT_COLUMNS = (
    "user_id",
    "character_name",
    "mourned_by",
    "unique_hash",
    "is_hardcore",
    *_PAYLOAD_COLUMNS,
)

_SELECT_COLUMNS = (
    "id",
    "user_id",
    "character_name",
    "mourned_by",
    "unique_hash",
    "is_hardcore",
    "respects_paid",
    "death_date",
    *_PAYLOAD_COLUMNS,
)


class DeathsRepository:
    """Database operations for the deaths table.

    The table's unique constraint on ``unique_hash`` is the authoritative
    duplicate check; a violation is surfaced as DuplicateSubmissionError.
    """

    def insert_death(self, death: NewDeath) -> str:
        """Insert a death and return its id.

        Raises:
            DuplicateSubmissionError: if ``unique_hash`` is already stored.
            PersistenceError: on any other database failure.
        """
        row = self._insert_values(death)
        columns = ", ".join(_INSERT_COLUMNS)
        placeholders = ", ".join(["%s"] * len(_INSERT_COLUMNS))
        query = f"INSERT INTO deaths ({columns}) VALUES ({placeholders}) RETURNING id"
        try:
            with get_connection() as conn:
                with conn.cursor() as cur:
                    cur.execute(query, row)
                    inserted = cur.fetchone()
                conn.commit()
        except errors.UniqueViolation as exc:
            raise DuplicateSubmissionError(death.unique_hash) from exc
        except psycopg.Error as exc:
            raise PersistenceError(f"Failed to store death: {exc}") from exc

        if inserted is None:
            raise PersistenceError("Insert into deaths returned no id")
        return str(inserted[0])

    def find_by_unique_hash(self, unique_hash: str) -> DeathRecord | None:
        """Return the stored death with this fingerprint, if any."""
        columns = ", ".join(_SELECT_COLUMNS)
        try:
            with get_connection() as conn:
                with conn.cursor(row_factory=dict_row) as cur:
                    cur.execute(
                        f"SELECT {columns} FROM deaths WHERE unique_hash = %s",
                        (unique_hash,),
                    )
                    row = cur.fetchone()
        except psycopg.Error as exc:
            raise PersistenceError(f"Failed to look up death: {exc}") from exc

        if row is None:
            return None
        return self._to_record(row)

    @staticmethod
    def _insert_values(death: NewDeath) -> tuple[Any, ...]:
        payload = death.payload
        return (
            death.user_id,
            death.character_name,
            death.mourned_by,
            death.unique_hash,
            True,
            *(getattr(payload, column) for column in _PAYLOAD_COLUMNS),
        )

    @staticmethod
    def _to_record(row: dict[str, Any]) -> DeathRecord:
        values = {column: row[column] for column in _SELECT_COLUMNS if column in row}
        values["id"] = str(row["id"])
        values["user_id"] = str(row["user_id"])
        values["skill_ids"] = list(row.get("skill_ids") or [])
        return DeathRecord(**values)
