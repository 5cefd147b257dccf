from __future__ import annotations
from contextlib import contextmanager

import mysql.connector

from sqltools.config import Database


@contextmanager
def connection(db: Database):
    """
    Context‑manager that yields a connection **already inside the configured
    database**.  Work done through it is committed when the block exits
    normally; the connection is closed in every case.

    Connection failures (bad credentials, unknown database, network) bubble
    up as :class:`mysql.connector.Error`.
    """
    conn = mysql.connector.connect(**db.dsn(), autocommit=False)
    try:
        yield conn
        conn.commit()
    finally:
        conn.close()
