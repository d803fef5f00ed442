"""Opening the SQLite file that holds the word store.

One engine is kept per database file for the life of the process. Every
connection handed out enforces foreign keys, which SQLite leaves off by
default, so a relation can never reference a word that is not stored.
"""

import logging
from collections.abc import Generator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

from sqlalchemy import Connection, Engine, create_engine, event
from sqlalchemy.pool import ConnectionPoolEntry

logger = logging.getLogger(__name__)

DEFAULT_DB_PATH = Path("latin.db")

# Database file -> engine opened on it
_engines: dict[Path, Engine] = {}


def _enforce_foreign_keys(dbapi_connection: Any, _connection_record: ConnectionPoolEntry) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def get_engine(db_path: Path | str = DEFAULT_DB_PATH) -> Engine:
    """Return the engine for the word store file `db_path`, opening it on first use."""
    key = Path(db_path)
    engine = _engines.get(key)
    if engine is None:
        logger.debug("Opening word store at %s", key)
        engine = create_engine(f"sqlite:///{key}", echo=False)
        event.listen(engine, "connect", _enforce_foreign_keys)
        _engines[key] = engine
    return engine


def dispose_engine(db_path: Path | str) -> None:
    """Close the pooled connections of `db_path` and forget its engine."""
    engine = _engines.pop(Path(db_path), None)
    if engine is not None:
        engine.dispose()


@contextmanager
def get_connection(
    db_path: Path | str = DEFAULT_DB_PATH,
) -> Generator[Connection]:
    """Yield a connection to the word store as a single transaction.

    The transaction is committed when the block exits normally and rolled
    back if it raises; the exception is re-raised.

    Example:
        with get_connection("latin.db") as conn:
            word = find_by(conn, "rosa, rosae")
            lines = inflection_lines(word)
    """
    with get_engine(db_path).connect() as conn:
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise
