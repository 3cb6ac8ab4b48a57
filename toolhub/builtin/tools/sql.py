"""
SQL Tools (sqlite3)
"""

import sqlite3
from typing import Any

from toolhub.api.decorators import mcp_tool


class SqlService:
    """
    Read-only query tools over a sqlite3 connection.
    The connection must allow use from the calling thread
    (e.g. ``check_same_thread=False``) when tools run off the main thread.
    """

    def __init__(self, connection: sqlite3.Connection):
        self.connection = connection

    @mcp_tool(
        "Execute a select SQL query and return the rows. "
        "Raises if the query is not a SELECT statement.",
        name="query_sql",
        category="database",
        tags=("sql", "query", "database"),
        timeout_ms=30000,
        requires_auth=True,
    )
    def query_by_sql(self, sql: str) -> list[dict[str, Any]]:
        if not sql.strip().lower().startswith("select"):
            raise ValueError("Only SELECT queries are allowed.")
        cursor = self.connection.execute(sql)
        columns = [c[0] for c in cursor.description]
        return [dict(zip(columns, row)) for row in cursor.fetchall()]

    @mcp_tool(
        "Return all table names in the database separated by comma.",
        name="list_tables",
        category="database",
        tags=("sql", "tables", "schema", "database"),
        cacheable=True,
        cache_ttl_seconds=600,
    )
    def list_all_table_names(self) -> str:
        rows = self.connection.execute(
            "SELECT name FROM sqlite_master WHERE type = 'table' ORDER BY name"
        ).fetchall()
        return ",".join(row[0] for row in rows)

    @mcp_tool(
        "Return the columns of the given table as name:type pairs separated by comma.",
        name="get_table_schema",
        category="database",
        tags=("sql", "schema", "table", "database", "structure"),
        cacheable=True,
        cache_ttl_seconds=1800,
    )
    def get_table_schema(self, table_name: str) -> str:
        # PRAGMA does not accept bound parameters
        quoted = table_name.replace('"', '""')
        rows = self.connection.execute(f'PRAGMA table_info("{quoted}")').fetchall()
        if not rows:
            return f"Table not found: {table_name}"
        return ",".join(f"{row[1]}:{row[2]}" for row in rows)
