"""Postgres access for the deaths store.

One pool per process: ``main`` opens it before submitting a save and closes
it afterwards; ``DeathsRepository`` borrows connections through
``get_connection``.
"""

from collections.abc import Generator
from contextlib import contextmanager
from typing import Any

import psycopg
from psycopg_pool import ConnectionPool

from graveyard.config.settings import Settings

POOL_NAME = "graveyard-deaths"

_pool: ConnectionPool | None = None


def build_conninfo(settings: Settings) -> str:
    """libpq connection string for the deaths database."""
    return (
        f"host={settings.db_host} "
        f"port={settings.db_port} "
        f"dbname={settings.db_database} "
        f"user={settings.db_username} "
        f"password={settings.db_password}"
    )


def init_pool(settings: Settings) -> None:
    """Open the deaths pool, replacing any pool left open by an earlier call."""
    global _pool  # noqa: PLW0603
    close_pool()
    # A one-shot submission needs a single insert and at most one lookup.
    _pool = ConnectionPool(
        build_conninfo(settings),
        min_size=1,
        max_size=4,
        name=POOL_NAME,
    )


def close_pool() -> None:
    global _pool  # noqa: PLW0603
    if _pool is not None:
        _pool.close()
        _pool = None


@contextmanager
def get_connection() -> Generator[psycopg.Connection[Any], None, None]:
    """Borrow a connection for one deaths-table operation.

    The repository commits its own writes; an uncommitted transaction is
    rolled back when the connection returns to the pool.
    """
    if _pool is None:
        raise RuntimeError("Deaths pool not initialized. Call init_pool() first.")
    with _pool.connection() as conn:
        yield conn
