"""Thin wrappers around DB-API cursors returned by the driver adapters."""

from collections.abc import Iterator
from typing import Any, Optional

from querybuilder.utils.logging import get_logger

__all__ = (
    "PreparedStatement",
    "QueryResult",
)

logger = get_logger("result")


class QueryResult:
    """Result cursor returned by ``query()``.

    Wraps an open PEP 249 cursor and adds the convenience helpers application code
    reaches for most often.
    """

    __slots__ = ("_cursor", "sql")

    def __init__(self, cursor: Any, sql: str) -> None:
        self._cursor = cursor
        self.sql = sql

    @property
    def cursor(self) -> Any:
        """The underlying driver cursor."""
        return self._cursor

    @property
    def rowcount(self) -> int:
        return getattr(self._cursor, "rowcount", -1)

    @property
    def columns(self) -> list[str]:
        """Column names reported by the cursor description."""
        description = getattr(self._cursor, "description", None) or ()
        return [column[0] for column in description]

    def first(self) -> Optional[Any]:
        """Fetch the next row, or ``None`` when the result is exhausted."""
        return self._cursor.fetchone()

    def all(self) -> list[Any]:
        return list(self._cursor.fetchall())

    def has_results(self) -> bool:
        return self.rowcount > 0

    def close(self) -> None:
        self._cursor.close()

    def __iter__(self) -> Iterator[Any]:
        return iter(self._cursor)

    def __enter__(self) -> "QueryResult":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


class PreparedStatement:
    """Rendered SQL bound to a connection, executed later with parameters.

    Args:
        connection: A PEP 249 connection.
        sql: The rendered statement, using the driver's placeholder style.
        options: Driver options forwarded to ``connection.cursor()``.
    """

    __slots__ = ("_connection", "options", "sql")

    def __init__(self, connection: Any, sql: str, options: Optional[dict[str, Any]] = None) -> None:
        self._connection = connection
        self.sql = sql
        self.options = options or {}

    def execute(self, parameters: Any = None) -> QueryResult:
        """Execute the statement with ``parameters`` and return the open result."""
        cursor = self._connection.cursor(**self.options)
        logger.debug("Executing prepared statement: %s", self.sql)
        cursor.execute(self.sql, parameters)
        return QueryResult(cursor, self.sql)

    def execute_many(self, parameters: "list[Any]") -> int:
        """Execute the statement once per parameter set and return the affected rows."""
        cursor = self._connection.cursor(**self.options)
        try:
            cursor.executemany(self.sql, parameters)
            return getattr(cursor, "rowcount", -1)
        finally:
            cursor.close()
