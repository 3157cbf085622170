# services/waitlist_store.py

"""
Postgres storage for the waitlist table.

One process-wide ThreadedConnectionPool, built lazily on first use from
DATABASE_URL and shared by every request. Connections are borrowed for a
single statement and always handed back.

ThreadedConnectionPool raises PoolError instead of waiting when every
connection is out, so borrowers queue on a semaphore sized to the pool.
"""

import logging
import threading
from contextlib import contextmanager
from typing import Iterator, Optional

import psycopg2
from psycopg2.pool import PoolError, ThreadedConnectionPool

import config

logger = logging.getLogger(__name__)

_pool: Optional[ThreadedConnectionPool] = None
_slots: Optional[threading.BoundedSemaphore] = None
_pool_lock = threading.Lock()


def _get_pool() -> ThreadedConnectionPool:
    global _pool, _slots
    if _pool is None:
        with _pool_lock:
            if _pool is None:
                if not config.DATABASE_URL:
                    raise RuntimeError("DATABASE_URL environment variable is not set!")
                # slots first: _pool being set means both are ready
                _slots = threading.BoundedSemaphore(config.DB_POOL_MAX)
                _pool = ThreadedConnectionPool(
                    config.DB_POOL_MIN,
                    config.DB_POOL_MAX,
                    config.DATABASE_URL,
                )
                logger.info(
                    "waitlist pool ready (min=%s, max=%s)",
                    config.DB_POOL_MIN,
                    config.DB_POOL_MAX,
                )
    return _pool


@contextmanager
def _connect() -> Iterator["psycopg2.extensions.connection"]:
    pool = _get_pool()
    slots = _slots
    if not slots.acquire(timeout=config.DB_POOL_TIMEOUT):
        raise PoolError("timed out waiting for a free connection")
    try:
        conn = pool.getconn()
        try:
            # commits on success, rolls back on error
            with conn:
                yield conn
        finally:
            pool.putconn(conn)
    finally:
        slots.release()


def init_db() -> None:
    with _connect() as conn:
        with conn.cursor() as cur:
            cur.execute(
                """
                CREATE TABLE IF NOT EXISTS waitlist (
                    id SERIAL PRIMARY KEY,
                    email TEXT NOT NULL UNIQUE,
                    created_at TIMESTAMPTZ NOT NULL DEFAULT now()
                )
                """
            )
    logger.info("waitlist table ensured")


def close_pool() -> None:
    global _pool, _slots
    with _pool_lock:
        if _pool is not None:
            _pool.closeall()
            _pool = None
            _slots = None
            logger.info("waitlist pool closed")


class WaitlistStore:
    """
    Conflict-avoiding writes against the `waitlist` table.
    """

    def add_email(self, email: str) -> bool:
        """
        Insert the email unless it is already on the list.

        Returns True when a row was written, False when the email
        was already present. Storage failures propagate.
        """
        with _connect() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    """
                    INSERT INTO waitlist (email)
                    VALUES (%s)
                    ON CONFLICT (email) DO NOTHING
                    """,
                    (email,),
                )
                return cur.rowcount == 1

    def count_email(self, email: str) -> int:
        with _connect() as conn:
            with conn.cursor() as cur:
                cur.execute("SELECT COUNT(*) FROM waitlist WHERE email = %s", (email,))
                row = cur.fetchone()
                return int(row[0]) if row else 0


_store = WaitlistStore()


def get_store() -> WaitlistStore:
    return _store
