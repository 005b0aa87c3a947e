"""
Async database access helpers (raw SQL) using asyncpg.

This module owns the connection pool. FastAPI initializes it on startup and
closes it on shutdown (see `api/main.py`). Every helper acquires a pooled
connection for a single statement and releases it afterwards.

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...

Driver failures are re-raised as `StoreError` so routes answer with a plain
500 instead of leaking driver details.
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import parse_qsl, quote, urlencode, urlsplit, urlunsplit

import asyncpg

from . import config
from .errors import StoreError

logger = logging.getLogger(__name__)

_pool: asyncpg.Pool | None = None

_DRIVER_ERRORS = (asyncpg.PostgresError, asyncpg.InterfaceError, OSError)


def _sanitize_database_url(url: str) -> str:
    parts = urlsplit(url)
    if not parts.query:
        return url

    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def _url_from_parts() -> str | None:
    name = config.env_str("DB_NAME")
    user = config.env_str("DB_USER")
    if not name or not user:
        return None

    host = config.env_str("DB_HOST", "localhost")
    port = config.env_int("DB_PORT", 5432)
    password = config.env_str("DB_PASSWORD")
    credentials = quote(user, safe="")
    if password:
        credentials += ":" + quote(password, safe="")
    return f"postgresql://{credentials}@{host}:{port}/{quote(name, safe='')}"


def database_url() -> str:
    url = config.env_str("DATABASE_URL")
    if url:
        return _sanitize_database_url(url)

    url = _url_from_parts()
    if url is None:
        raise RuntimeError("DATABASE_URL is not set (or DB_USER/DB_NAME for discrete settings).")
    return url


async def init_pool() -> None:
    global _pool
    if _pool is not None:
        return None
    _pool = await asyncpg.create_pool(
        dsn=database_url(),
        min_size=config.env_int("DB_POOL_MIN_SIZE", 1),
        max_size=config.env_int("DB_POOL_MAX_SIZE", 10),
        command_timeout=config.env_int("DB_COMMAND_TIMEOUT_S", 30),
    )
    logger.info("db_pool_ready")


async def close_pool() -> None:
    global _pool
    if _pool is None:
        return None
    await _pool.close()
    _pool = None
    logger.info("db_pool_closed")


def pool() -> asyncpg.Pool:
    if _pool is None:
        raise RuntimeError("DB pool is not initialized. Call init_pool() on startup.")
    return _pool


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


async def fetch_one(sql: str, *args: Any) -> dict[str, Any] | None:
    """
    Run a query and return a single row as a dict (or None).
    """
    try:
        row = await pool().fetchrow(sql, *args)
    except _DRIVER_ERRORS as exc:
        logger.exception("store_query_failed op=fetch_one")
        raise StoreError() from exc
    return _record_to_dict(row) if row is not None else None


async def fetch_all(sql: str, *args: Any) -> list[dict[str, Any]]:
    """
    Run a query and return all rows as a list of dicts.
    """
    try:
        rows = await pool().fetch(sql, *args)
    except _DRIVER_ERRORS as exc:
        logger.exception("store_query_failed op=fetch_all")
        raise StoreError() from exc
    return [_record_to_dict(r) for r in rows]


async def execute(sql: str, *args: Any) -> str:
    """
    Run a statement (INSERT/UPDATE/DELETE). Returns the command status tag,
    e.g. "DELETE 1".
    """
    try:
        return await pool().execute(sql, *args)
    except _DRIVER_ERRORS as exc:
        logger.exception("store_query_failed op=execute")
        raise StoreError() from exc
