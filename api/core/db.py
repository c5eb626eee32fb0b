"""
Async database access helpers (raw SQL) using asyncpg.

This module owns the connection pool. FastAPI initializes it on startup and
closes it on shutdown (see `api/main.py`).

Request handlers do not talk to the pool directly: they get a connection with
an open transaction from `transaction()`, wrapped by the feature repository.

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...
"""

from __future__ import annotations

import os
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import asyncpg

_pool: asyncpg.Pool | None = None

Executor = asyncpg.Pool | asyncpg.Connection


def _sanitize_database_url(url: str) -> str:
    parts = urlsplit(url)
    if not parts.query:
        return url

    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def database_url() -> str:
    url = os.environ.get("DATABASE_URL", "").strip()
    if not url:
        raise RuntimeError("DATABASE_URL is not set.")
    return _sanitize_database_url(url)


async def init_pool() -> None:
    global _pool
    if _pool is not None:
        return None
    _pool = await asyncpg.create_pool(
        dsn=database_url(),
        min_size=1,
        max_size=5,
        command_timeout=30,
    )


async def close_pool() -> None:
    global _pool
    if _pool is None:
        return None
    await _pool.close()
    _pool = None


def pool() -> asyncpg.Pool:
    if _pool is None:
        raise RuntimeError("DB pool is not initialized. Call init_pool() on startup.")
    return _pool


class UnitOfWork:
    """
    One pooled connection plus the transaction opened on it.

    `commit()` ends the transaction; anything not committed when the
    surrounding `transaction()` block exits is rolled back.
    """

    def __init__(self, conn: asyncpg.Connection) -> None:
        self.conn = conn
        self._tx = conn.transaction()
        self._active = False

    async def begin(self) -> None:
        await self._tx.start()
        self._active = True

    async def commit(self) -> None:
        if not self._active:
            raise RuntimeError("No open transaction to commit.")
        try:
            await self._tx.commit()
        finally:
            # A failed commit leaves nothing to roll back.
            self._active = False

    async def rollback(self) -> None:
        if not self._active:
            return None
        await self._tx.rollback()
        self._active = False


@asynccontextmanager
async def transaction() -> AsyncIterator[UnitOfWork]:
    async with pool().acquire() as conn:  # type: asyncpg.Connection
        uow = UnitOfWork(conn)
        await uow.begin()
        try:
            yield uow
        finally:
            await uow.rollback()


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


async def fetch_one(sql: str, *args: Any, conn: Executor | None = None) -> dict[str, Any] | None:
    """
    Run a query and return a single row as a dict (or None).

    Runs on `conn` when given, otherwise on the pool.
    """
    row = await (conn or pool()).fetchrow(sql, *args)
    return _record_to_dict(row) if row is not None else None


async def fetch_all(sql: str, *args: Any, conn: Executor | None = None) -> list[dict[str, Any]]:
    """
    Run a query and return all rows as a list of dicts.
    """
    rows = await (conn or pool()).fetch(sql, *args)
    return [_record_to_dict(r) for r in rows]


async def fetch_value(sql: str, *args: Any, conn: Executor | None = None) -> Any:
    return await (conn or pool()).fetchval(sql, *args)


async def execute(sql: str, *args: Any, conn: Executor | None = None) -> str:
    """
    Run a statement (INSERT/UPDATE/DELETE/DDL). Returns the command status tag.
    """
    return await (conn or pool()).execute(sql, *args)
