"""INSERT statement builder."""

from enum import Enum
from typing import TYPE_CHECKING, Optional

from typing_extensions import Self

from querybuilder.statement.builder._base import QueryBuilder, join_sql
from querybuilder.statement.builder.mixins import InsertValuesMixin, OrderByClauseMixin

if TYPE_CHECKING:
    from querybuilder.protocols import DriverAdapterProtocol
    from querybuilder.statement.builder.mixins import ValueSource

__all__ = ("Insert", "Priority")


class Priority(Enum):
    """Scheduling modifiers for data-changing statements."""

    DEFAULT = ""
    LOW_PRIORITY = "LOW_PRIORITY"
    HIGH_PRIORITY = "HIGH_PRIORITY"


class Insert(InsertValuesMixin, OrderByClauseMixin, QueryBuilder):
    """Builder for INSERT statements.

    The column list is fixed at construction. Rows come from exactly one source:
    literal ``values()`` tuples, raw ``rows()`` constructors or ``values_select()``.

    Example:
        ```python
        query = (
            Insert("id", "name")
            .into("users")
            .values(1, "alice")
            .values(2, "bob")
            .on_duplicate_key_update("name=VALUES(name)")
        )
        ```
    """

    def __init__(self, *columns: str, driver: "Optional[DriverAdapterProtocol]" = None) -> None:
        super().__init__(driver)
        self._columns: list[str] = list(columns)
        self._into: Optional[str] = None
        self._source: "Optional[ValueSource]" = None
        self._order: list[str] = []
        self._priority = Priority.DEFAULT
        self._ignore = False
        self._on_duplicate: list[str] = []

    def low_priority(self) -> Self:
        self._priority = Priority.LOW_PRIORITY
        return self

    def high_priority(self) -> Self:
        self._priority = Priority.HIGH_PRIORITY
        return self

    def ignore(self) -> Self:
        self._ignore = True
        return self

    def on_duplicate_key_update(self, *assignments: str) -> Self:
        """Set the ``ON DUPLICATE KEY UPDATE`` assignment list.

        Args:
            *assignments: Raw assignments, e.g. ``"hits=hits+1"``.

        Returns:
            The current builder instance for method chaining.
        """
        self._on_duplicate = list(assignments)
        return self

    def render(self) -> str:
        return join_sql(
            "INSERT",
            self._priority.value,
            "IGNORE" if self._ignore else "",
            self._render_into(),
            self._render_values(),
            f"ON DUPLICATE KEY UPDATE {','.join(self._on_duplicate)}" if self._on_duplicate else "",
        )
