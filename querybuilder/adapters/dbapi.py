from typing import Any, Optional

from querybuilder.statement.result import PreparedStatement, QueryResult
from querybuilder.utils.logging import get_logger

__all__ = ("GenericDriverAdapter",)

logger = get_logger("adapters.dbapi")


class GenericDriverAdapter:
    """A driver adapter for any DB-API (PEP 249) compliant connection.

    This class also serves as the base class for the database-specific adapters.

    Args:
        connection: An open PEP 249 connection.
    """

    def __init__(self, connection: Any) -> None:
        self._connection = connection

    @property
    def connection(self) -> Any:
        return self._connection

    def _cursor(self, **options: Any) -> Any:
        """Get a cursor from the connection."""
        return self._connection.cursor(**options)

    def execute(self, sql: str) -> int:
        """Run a data-changing statement and return the affected row count."""
        cur = self._cursor()
        try:
            logger.debug("Executing: %s", sql)
            cur.execute(sql)
            return cur.rowcount if hasattr(cur, "rowcount") else -1
        finally:
            cur.close()

    def query(self, sql: str) -> QueryResult:
        """Run a row-returning statement; the caller owns the returned cursor."""
        cur = self._cursor()
        logger.debug("Querying: %s", sql)
        cur.execute(sql)
        return QueryResult(cur, sql)

    def prepare(self, sql: str, options: Optional[dict[str, Any]] = None) -> PreparedStatement:
        """Bind ``sql`` to this connection for later execution with parameters."""
        return PreparedStatement(self._connection, sql, options)
