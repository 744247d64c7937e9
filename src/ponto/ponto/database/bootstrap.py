from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable, Iterator

import mysql.connector

from .connection import DBConfig

logger = logging.getLogger(__name__)

_CREATE_DATABASE = re.compile(r"(?im)^\s*CREATE\s+DATABASE\b.*?;\s*$")
_USE_DATABASE = re.compile(r"(?im)^\s*USE\b.*?;\s*$")


def strip_database_statements(sql: str) -> str:
    """Drop CREATE DATABASE / USE lines so the schema applies to any configured database."""
    return _USE_DATABASE.sub("", _CREATE_DATABASE.sub("", sql))


def iter_sql_statements(sql: str) -> Iterator[str]:
    """Split a script on ';' outside quotes; '--' comment lines are dropped."""
    sql = "\n".join(line for line in sql.splitlines() if not line.lstrip().startswith("--"))

    buf: list[str] = []
    quote = None
    escaped = False

    for ch in sql:
        buf.append(ch)
        if escaped:
            escaped = False
        elif ch == "\\":
            escaped = True
        elif quote:
            if ch == quote:
                quote = None
        elif ch in ("'", '"'):
            quote = ch
        elif ch == ";":
            stmt = "".join(buf[:-1]).strip()
            buf.clear()
            if stmt:
                yield stmt

    tail = "".join(buf).strip()
    if tail:
        yield tail


def _connect(target: DBConfig, *, with_database: bool = True):
    return mysql.connector.connect(use_pure=True, **target.connect_params(with_database=with_database))


def _execute_all(target: DBConfig, statements: Iterable[str], *, with_database: bool = True) -> None:
    conn = _connect(target, with_database=with_database)
    try:
        cur = conn.cursor()
        for stmt in statements:
            cur.execute(stmt)
        conn.commit()
    finally:
        conn.close()


def ensure_database_exists(db_config: dict) -> None:
    target = DBConfig.from_dict(db_config)
    _execute_all(
        target,
        [f"CREATE DATABASE IF NOT EXISTS `{target.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"],
        with_database=False,
    )


def apply_schema(db_config: dict, *, schema_path: str | Path) -> None:
    """Create the database if needed and run schema.sql against it (idempotent)."""
    target = DBConfig.from_dict(db_config)
    ensure_database_exists(db_config)

    sql = strip_database_statements(Path(schema_path).read_text(encoding="utf-8"))
    _execute_all(target, iter_sql_statements(sql))
    logger.info("Schema applied to %s@%s/%s", target.user, target.host, target.database)


def list_tables(db_config: dict) -> list[str]:
    conn = _connect(DBConfig.from_dict(db_config))
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()
