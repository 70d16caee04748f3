"""Base class shared by every statement builder.

Builders accumulate clause fragments through chainable mutators and render them
into MySQL text on demand. Rendering is a pure read of the builder state.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, Any, Optional

import sqlglot
from sqlglot import exp
from sqlglot.errors import ParseError as SQLGlotParseError
from typing_extensions import Self

from querybuilder.exceptions import DriverError, ImproperConfigurationError, SQLParsingError
from querybuilder.statement.literal import MYSQL_DIALECT
from querybuilder.utils.logging import get_logger

if TYPE_CHECKING:
    from querybuilder.protocols import DriverAdapterProtocol
    from querybuilder.statement.result import PreparedStatement, QueryResult

__all__ = (
    "QueryBuilder",
    "Section",
    "join_sql",
)

logger = get_logger("builder")


class Section(Enum):
    """Clause sections a builder can record as most recently touched."""

    NONE = "none"
    FROM = "from"
    JOIN = "join"
    WHERE = "where"
    GROUP = "group"
    HAVING = "having"
    ORDER = "order"


def join_sql(*parts: Optional[str]) -> str:
    """Join the non-empty fragments with single spaces."""
    return " ".join(part for part in parts if part)


class QueryBuilder(ABC):
    """Abstract base class for SQL statement builders.

    Provides the driver plumbing, the diagnostics channel for silently ignored calls,
    and sqlglot-backed introspection of the rendered text.

    Args:
        driver: Optional driver adapter used by ``execute()``, ``query()`` and ``prepare()``.
    """

    def __init__(self, driver: "Optional[DriverAdapterProtocol]" = None) -> None:
        self.driver = driver
        self._diagnostics: list[str] = []

    @abstractmethod
    def render(self) -> str:
        """Render the accumulated state into a SQL string.

        Returns:
            str: The SQL text for this statement.
        """

    def _touch(self, section: Section) -> None:
        """Record that ``section`` was mutated. Only SELECT tracks this."""

    def _note(self, message: str) -> None:
        """Record a call that was accepted but had no effect."""
        self._diagnostics.append(message)
        logger.debug("%s: %s", type(self).__name__, message)

    @property
    def diagnostics(self) -> tuple[str, ...]:
        """Messages for chained calls that were ignored, oldest first."""
        return tuple(self._diagnostics)

    def using_driver(self, driver: "DriverAdapterProtocol") -> Self:
        """Attach the driver adapter used to run this statement.

        Args:
            driver: The driver adapter.

        Returns:
            The current builder instance for method chaining.
        """
        self.driver = driver
        return self

    def _require_driver(self) -> "DriverAdapterProtocol":
        if self.driver is None:
            msg = f"{type(self).__name__} has no driver attached. Use using_driver() or a QueryFactory with a driver."
            raise ImproperConfigurationError(msg)
        return self.driver

    def execute(self) -> int:
        """Run the statement and return the affected row count.

        Raises:
            ImproperConfigurationError: If no driver is attached.
            DriverError: If the driver rejects the statement.

        Returns:
            int: The number of affected rows reported by the driver.
        """
        driver = self._require_driver()
        sql = self.render()
        try:
            return driver.execute(sql)
        except Exception as e:
            msg = f"Driver failed to execute statement: {e!s}"
            raise DriverError(msg, sql) from e

    def query(self) -> "QueryResult":
        """Run the statement and return the open result cursor.

        Raises:
            ImproperConfigurationError: If no driver is attached.
            DriverError: If the driver rejects the statement.

        Returns:
            QueryResult: The result wrapper.
        """
        driver = self._require_driver()
        sql = self.render()
        try:
            return driver.query(sql)
        except Exception as e:
            msg = f"Driver failed to run query: {e!s}"
            raise DriverError(msg, sql) from e

    def prepare(self, options: Optional[dict[str, Any]] = None) -> "PreparedStatement":
        """Prepare the statement for later execution with bound parameters.

        Args:
            options: Driver options forwarded to the adapter.

        Raises:
            ImproperConfigurationError: If no driver is attached.
            DriverError: If the driver rejects the statement.

        Returns:
            PreparedStatement: The prepared handle.
        """
        driver = self._require_driver()
        sql = self.render()
        try:
            return driver.prepare(sql, options)
        except Exception as e:
            msg = f"Driver failed to prepare statement: {e!s}"
            raise DriverError(msg, sql) from e

    def to_expression(self) -> exp.Expression:
        """Parse the rendered text with sqlglot using the MySQL dialect.

        Raises:
            SQLParsingError: If sqlglot cannot parse the rendered text.

        Returns:
            exp.Expression: The parsed expression tree.
        """
        sql = self.render()
        try:
            parsed = sqlglot.parse_one(sql, read=MYSQL_DIALECT)
        except SQLGlotParseError as e:
            msg = f"Rendered SQL could not be parsed: {e!s}"
            raise SQLParsingError(msg) from e
        if parsed is None:
            msg = f"Rendered SQL produced no statement: {sql!r}"
            raise SQLParsingError(msg)
        return parsed

    def pretty(self) -> str:
        """Return the rendered statement pretty-printed by sqlglot."""
        return self.to_expression().sql(dialect=MYSQL_DIALECT, pretty=True)

    def __str__(self) -> str:
        return self.render()
