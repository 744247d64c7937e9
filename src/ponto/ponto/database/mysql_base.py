from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, List, Optional, Sized

from mysql.connector import errors as mysql_errors

from .connection import DatabaseConnection

# UNIQUE / PRIMARY KEY violation.
ER_DUP_ENTRY = 1062


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """Yield (conn, cursor); commit on success, roll back and re-raise on error."""
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    return cur.fetchone() or None


def fetchall(cur) -> List[Dict[str, Any]]:
    return list(cur.fetchall() or [])


def in_clause(values: Sized) -> str:
    """Placeholder list for `col IN (...)`."""
    return ", ".join(["%s"] * len(values))


def is_duplicate_key(exc: mysql_errors.IntegrityError) -> bool:
    return getattr(exc, "errno", None) == ER_DUP_ENTRY
