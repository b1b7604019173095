"""
Read access to the Drupal tables that hold published content.

:class:`DrupalSource` wraps a DB-API connection, either PyMySQL against
the live site database or DuckDB against a snapshot produced by
``scripts/snapshot_drupal_to_duckdb.py``.  Every query goes through
:meth:`DrupalSource._query`, which converts driver failures into
:class:`SourceQueryError`.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

import duckdb
import pymysql

POST_TYPES = ("blog", "story", "page")


class SourceConnectionError(ConnectionError):
    """Raised when the Drupal database cannot be reached."""


class SourceQueryError(RuntimeError):
    """Raised when a query against the Drupal database fails."""


_DRIVER_ERRORS = (pymysql.err.MySQLError, duckdb.Error)


class DrupalSource:
    """A Drupal database opened for reading.

    ``placeholder`` is the driver's parameter marker: ``%s`` for PyMySQL,
    ``?`` for DuckDB.  ``table_prefix`` is prepended to every table name,
    matching Drupal's ``$db_prefix`` setting.
    """

    def __init__(self, connection: Any, *, placeholder: str = "%s", table_prefix: str = "") -> None:
        self.connection = connection
        self.placeholder = placeholder
        self.table_prefix = table_prefix or ""

    @classmethod
    def connect_mysql(
        cls,
        *,
        host: str,
        port: int,
        user: str,
        password: str,
        database: str,
        table_prefix: str = "",
    ) -> "DrupalSource":
        try:
            connection = pymysql.connect(
                host=host,
                port=int(port),
                user=user,
                password=password,
                db=database,
                charset="utf8mb4",
            )
        except pymysql.err.MySQLError as e:
            raise SourceConnectionError(
                f"Could not connect to MySQL database '{database}' at {host}:{port}: {e}"
            ) from e
        return cls(connection, placeholder="%s", table_prefix=table_prefix)

    @classmethod
    def open_duckdb(cls, path: str, *, table_prefix: str = "") -> "DrupalSource":
        try:
            connection = duckdb.connect(database=path, read_only=True)
        except duckdb.Error as e:
            raise SourceConnectionError(f"Could not open DuckDB snapshot '{path}': {e}") from e
        return cls(connection, placeholder="?", table_prefix=table_prefix)

    def table(self, name: str) -> str:
        return f"{self.table_prefix}{name}"

    def close(self) -> None:
        self.connection.close()

    def _query(self, sql: str, params: Optional[Sequence[Any]] = None) -> List[Dict[str, Any]]:
        """Run ``sql`` and return every row as a column-name keyed dict."""
        cursor = self.connection.cursor()
        try:
            cursor.execute(sql, list(params) if params else None)
            columns = [col[0] for col in cursor.description or []]
            return [dict(zip(columns, row)) for row in cursor.fetchall()]
        except _DRIVER_ERRORS as e:
            raise SourceQueryError(f"Query failed: {e}") from e
        finally:
            cursor.close()

    def existing_tables(self) -> List[str]:
        rows = self._query("SHOW TABLES")
        return [str(next(iter(row.values()))) for row in rows]

    def fetch_posts(self) -> List[Dict[str, Any]]:
        """Return blog, story and page nodes joined to their current revision.

        Rows are ordered by node id and carry the keys ``nid``, ``title``,
        ``body``, ``created``, ``status``, ``type``, ``format_name`` and
        ``author``.  Unpublished nodes are included; filtering happens in
        the import tool.
        """
        types = ", ".join(f"'{t}'" for t in POST_TYPES)
        sql = (
            "SELECT n.nid AS nid, n.title AS title, nr.body AS body, n.created AS created, "
            "n.status AS status, n.type AS type, f.name AS format_name, u.name AS author "
            f"FROM {self.table('node')} AS n "
            f"JOIN {self.table('node_revisions')} AS nr ON n.nid = nr.nid AND n.vid = nr.vid "
            f"LEFT JOIN {self.table('users')} AS u ON n.uid = u.uid "
            f"LEFT JOIN {self.table('filter_formats')} AS f ON nr.format = f.format "
            f"WHERE n.type IN ({types}) "
            "ORDER BY n.nid"
        )
        return self._query(sql)

    def fetch_aliases(self, nid: int) -> List[str]:
        """Return the alias destinations of ``node/<nid>``, lowest alias id first."""
        sql = (
            f"SELECT dst FROM {self.table('url_alias')} "
            f"WHERE src = {self.placeholder} ORDER BY pid"
        )
        return [row["dst"] for row in self._query(sql, [f"node/{nid}"]) if row["dst"] is not None]

    def fetch_tags(self, nid: int) -> List[str]:
        sql = (
            f"SELECT DISTINCT td.name AS name FROM {self.table('term_data')} AS td "
            f"JOIN {self.table('term_node')} AS tn ON td.tid = tn.tid "
            f"WHERE tn.nid = {self.placeholder} ORDER BY td.name"
        )
        return [row["name"] for row in self._query(sql, [nid])]
