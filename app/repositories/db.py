"""DuckDB connection management."""

import threading
from pathlib import Path

import duckdb
from loguru import logger

from app.models import ALL_DDL
from settings import DB_PATH

_local = threading.local()


def db_exists(path: str = DB_PATH) -> bool:
    """Check if database file exists."""
    return path == ":memory:" or Path(path).exists()


def init_tables(conn: duckdb.DuckDBPyConnection) -> None:
    """Initialize all tables from DDL statements (idempotent - uses IF NOT EXISTS)."""
    for ddl in ALL_DDL:
        conn.execute(ddl)
    logger.debug("DB tables initialized")


def _connections() -> dict[str, duckdb.DuckDBPyConnection]:
    if not hasattr(_local, "conns"):
        _local.conns = {}
    return _local.conns


def get_db(path: str | None = None) -> duckdb.DuckDBPyConnection:
    """Get thread-local connection, creating tables on first use."""
    path = path or DB_PATH
    conns = _connections()
    if path not in conns:
        if not db_exists(path):
            logger.warning("DB not found: {}. Creating empty DB.", path)
        conn = duckdb.connect(path)
        init_tables(conn)
        conns[path] = conn
        logger.debug("DB connected: {}", path)
    return conns[path]


def close_db(path: str | None = None) -> None:
    """Close thread-local connection."""
    path = path or DB_PATH
    conn = _connections().pop(path, None)
    if conn is not None:
        conn.close()
        logger.debug("DB connection closed")
