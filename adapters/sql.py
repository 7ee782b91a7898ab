from __future__ import annotations

import sqlite3
from contextlib import closing
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple
from urllib.parse import unquote, urlsplit

from adapters.base import DatabaseAdapter
from adapters.consoles import Console, for_uri

ENGINES = {
    "sqlite": "sqlite",
    "postgres": "postgres",
    "postgresql": "postgres",
    "mysql": "mysql",
    "mysql2": "mysql",
}


class SqlAdapter(DatabaseAdapter):
    """URI-driven adapter over sqlite3, psycopg and the MySQL drivers.

    Connections are opened per call; constructing the adapter only validates
    the URI, so a config can be built before the database is reachable.
    """

    def __init__(self, mapper: Any, uri: Optional[str] = None, extension: Optional[Sequence[str]] = None):
        if not uri:
            raise ValueError("uri is required for the sql adapter")
        super().__init__(mapper, uri, extension=extension)
        self._parsed = urlsplit(uri)
        scheme = self._parsed.scheme.lower()
        if scheme not in ENGINES:
            raise ValueError(f"Unsupported SQL uri scheme: {scheme or '<none>'}")
        self.engine = ENGINES[scheme]

    def _db_path(self) -> str:
        raw = unquote(f"{self._parsed.netloc}{self._parsed.path}")
        if raw in {"", "memory", ":memory:"}:
            return ":memory:"
        return str(Path(raw).expanduser())

    def _db_params(self) -> Dict[str, Any]:
        parsed = self._parsed
        params: Dict[str, Any] = {
            "host": parsed.hostname or "localhost",
            "user": unquote(parsed.username or ""),
            "password": unquote(parsed.password or ""),
        }
        if parsed.port:
            params["port"] = parsed.port
        database = parsed.path.lstrip("/")
        params["dbname" if self.engine == "postgres" else "database"] = database
        return params

    def _connect(self) -> Tuple[Any, str]:
        if self.engine == "sqlite":
            conn = sqlite3.connect(self._db_path())
            conn.row_factory = sqlite3.Row
            return conn, "sqlite3"
        params = self._db_params()
        if self.engine == "postgres":
            try:
                import psycopg  # type: ignore

                return psycopg.connect(**params), "psycopg"
            except ImportError:
                try:
                    import psycopg2  # type: ignore

                    return psycopg2.connect(**params), "psycopg2"
                except ImportError as exc:
                    raise ImportError(
                        "No PostgreSQL driver found. Install one of: "
                        '`python -m pip install "psycopg[binary]"` or `python -m pip install psycopg2-binary`.'
                    ) from exc
        try:
            import mysql.connector  # type: ignore

            return mysql.connector.connect(**params), "mysql.connector"
        except ImportError:
            try:
                import pymysql  # type: ignore

                return pymysql.connect(**params), "pymysql"
            except ImportError as exc:
                raise ImportError(
                    "No MySQL driver found. Install one of: "
                    "`python -m pip install mysql-connector-python` or `python -m pip install pymysql`."
                ) from exc

    def execute_select(self, sql: str, row_limit: int, timeout_ms: int) -> List[Dict[str, Any]]:
        if row_limit <= 0:
            raise ValueError("row_limit must be positive")
        placeholder = "?" if self.engine == "sqlite" else "%s"
        wrapped_sql = f"SELECT * FROM ({sql}) AS guarded_query LIMIT {placeholder}"
        conn, driver = self._connect()
        try:
            if driver == "sqlite3":
                conn.execute(f"PRAGMA busy_timeout = {int(timeout_ms)}")
                with closing(conn.cursor()) as cur:
                    cur.execute(wrapped_sql, (row_limit,))
                    return [dict(row) for row in cur.fetchall()]

            if self.engine == "postgres":
                with conn.cursor() as cur:
                    cur.execute(f"SET statement_timeout = '{int(timeout_ms)}ms'")
                    return _fetch_dicts(cur, wrapped_sql, row_limit)

            with closing(conn.cursor()) as cur:
                cur.execute(f"SET SESSION MAX_EXECUTION_TIME={int(timeout_ms)}")
                return _fetch_dicts(cur, wrapped_sql, row_limit)
        finally:
            conn.close()

    def console(self) -> Console:
        return for_uri(self._parsed)


def _fetch_dicts(cur: Any, sql: str, row_limit: int) -> List[Dict[str, Any]]:
    cur.execute(sql, (row_limit,))
    rows = cur.fetchall()
    columns = [desc[0] for desc in cur.description]
    return [{columns[i]: row[i] for i in range(len(columns))} for row in rows]
