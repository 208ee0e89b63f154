"""
Conexión a base de datos PostgreSQL

All database access goes through one Database object that owns a psycopg2
ThreadedConnectionPool. Connections are only ever borrowed through
Database.transaction(), which guarantees commit/rollback and the return of
the connection to the pool on every exit path.

Author: TM3
Updated: 2026-10-17
"""
import logging
import threading
import time
from contextlib import contextmanager
from typing import Iterator, Optional

from fastapi import Request
from psycopg2.extras import RealDictCursor
from psycopg2.pool import ThreadedConnectionPool

from app.core.config import Settings

logger = logging.getLogger(__name__)


class Database:
    """
    Pooled psycopg2 access

    Connections use RealDictCursor, so every cursor returns rows as dicts
    (easier to map onto pydantic models and to serialize to JSON).

    Usage:
        db = Database.from_settings(settings)
        db.open()
        with db.transaction() as conn:
            with conn.cursor() as cursor:
                cursor.execute("SELECT * FROM products")
                rows = cursor.fetchall()
        db.close()
    """

    def __init__(self, dsn: str, min_size: int = 1, max_size: int = 10):
        self.dsn = dsn
        self.min_size = min_size
        self.max_size = max_size
        self._pool: Optional[ThreadedConnectionPool] = None
        # getconn() raises PoolError once max_size connections are out,
        # callers wait on a slot instead
        self._slots = threading.BoundedSemaphore(max_size)

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(
            settings.DATABASE_URL,
            min_size=settings.DB_POOL_MIN,
            max_size=settings.DB_POOL_MAX,
        )

    @property
    def is_open(self) -> bool:
        return self._pool is not None

    def open(self) -> None:
        """Create the connection pool (idempotent)"""
        if self._pool is not None:
            return

        if not self.dsn:
            raise RuntimeError("DATABASE_URL not configured")

        self._pool = ThreadedConnectionPool(
            self.min_size,
            self.max_size,
            self.dsn,
            cursor_factory=RealDictCursor,
        )
        logger.info(f"Database pool opened (min={self.min_size}, max={self.max_size})")

    def close(self) -> None:
        if self._pool is None:
            return
        self._pool.closeall()
        self._pool = None
        logger.info("Database pool closed")

    @contextmanager
    def transaction(self) -> Iterator:
        """
        Borrow a connection for the duration of one transaction

        Commits when the block exits normally, rolls back when it raises,
        and always puts the connection back into the pool. Blocks while all
        max_size connections are borrowed.
        """
        if self._pool is None:
            raise RuntimeError("Database pool is not open")

        pool = self._pool
        self._slots.acquire()
        try:
            conn = pool.getconn()
            try:
                yield conn
                conn.commit()
            except Exception:
                conn.rollback()
                raise
            finally:
                pool.putconn(conn)
        finally:
            self._slots.release()

    def ping(self) -> float:
        """
        Run SELECT 1 and return the round trip latency in milliseconds

        Raises whatever psycopg2 raises when the database is unreachable.
        """
        start = time.time()
        with self.transaction() as conn:
            with conn.cursor() as cursor:
                cursor.execute("SELECT 1")
                cursor.fetchone()
        return round((time.time() - start) * 1000, 2)


def get_database(request: Request) -> Database:
    """
    FastAPI dependency returning the application's Database

    Usage:
        @router.get("/items")
        def read_items(db: Database = Depends(get_database)):
            ...
    """
    return request.app.state.db
