import os
from collections.abc import Generator
from typing import Any

import psycopg
import pytest

from graveyard.config.settings import Settings
from graveyard.database.connection import build_conninfo, close_pool, get_connection, init_pool

# Mirrors the production deaths table minus the auth.users foreign key.
_DEATHS_TABLE = """
CREATE TABLE IF NOT EXISTS deaths (
    id              uuid PRIMARY KEY DEFAULT gen_random_uuid(),
    user_id         uuid NOT NULL,
    character_name  text NOT NULL,
    class_id        int NOT NULL DEFAULT 0,
    level           int NOT NULL,
    damage_taken    numeric,
    career_seconds  numeric,
    career_runs     int,
    career_kills    int,
    career_elite_kills int,
    career_bosses   int,
    career_gold     bigint,
    career_soulstones int,
    mourned_by      text,
    skill_ids       integer[] DEFAULT ARRAY[0,0,0,0,0]::integer[],
    last_run_kills          int,
    last_run_soulstones     int,
    last_run_regular_kills  int,
    last_run_elite_kills    int,
    last_run_boss_kills     int,
    last_run_gold           bigint,
    last_run_damage_dealt   numeric,
    last_run_duration       numeric,
    is_hardcore     boolean NOT NULL DEFAULT true,
    death_date      timestamptz NOT NULL DEFAULT now(),
    unique_hash     text NOT NULL UNIQUE,
    respects_paid   int NOT NULL DEFAULT 0,
    report_count    int NOT NULL DEFAULT 0,
    CONSTRAINT deaths_hardcore_only CHECK (is_hardcore = true),
    CONSTRAINT deaths_name_length CHECK (length(character_name) <= 50)
)
"""


def _test_settings() -> Settings:
    os.environ.setdefault("DB_DATABASE", "graveyard_test")
    return Settings()


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    return _test_settings()


@pytest.fixture(scope="session")
def integration_pool(test_settings: Settings) -> Generator[None, None, None]:
    try:
        with psycopg.connect(build_conninfo(test_settings), connect_timeout=3) as probe:
            probe.execute(_DEATHS_TABLE)
    except psycopg.Error as e:
        pytest.skip(f"PostgreSQL test DB not available: {e}. Set DB_* env to run.")
    init_pool(test_settings)
    try:
        yield
    finally:
        close_pool()


@pytest.fixture
def db_conn(integration_pool: None) -> Generator[psycopg.Connection[Any], None, None]:
    with get_connection() as conn:
        yield conn


@pytest.fixture
def cleanup_hashes(db_conn: psycopg.Connection[Any]) -> Generator[list[str], None, None]:
    """Collects unique hashes inserted by a test and deletes them afterwards."""
    hashes: list[str] = []
    yield hashes
    if hashes:
        db_conn.execute("DELETE FROM deaths WHERE unique_hash = ANY(%s)", (hashes,))
        db_conn.commit()
