"""UPDATE statement builder."""

from typing import TYPE_CHECKING, Any, Optional

from typing_extensions import Self

from querybuilder.statement.builder._base import QueryBuilder, join_sql
from querybuilder.statement.builder._predicates import PredicateList
from querybuilder.statement.builder.mixins import LimitClauseMixin, OrderByClauseMixin, WhereClauseMixin
from querybuilder.statement.literal import format_literal

if TYPE_CHECKING:
    from querybuilder.protocols import DriverAdapterProtocol
    from querybuilder.typing import Assignment

__all__ = ("Update",)


class Update(WhereClauseMixin, OrderByClauseMixin, LimitClauseMixin, QueryBuilder):
    """Builder for UPDATE statements.

    Example:
        ```python
        query = Update("users").set("status", "inactive").where("last_login < '2020-01-01'").limit(100)
        ```
    """

    def __init__(self, table: str, driver: "Optional[DriverAdapterProtocol]" = None) -> None:
        super().__init__(driver)
        self.table = table
        self._low_priority = False
        self._ignore = False
        self._assignments: "list[Assignment]" = []
        self._where = PredicateList()
        self._order: list[str] = []
        self._limit: Optional[int] = None

    @property
    def assignments(self) -> "tuple[Assignment, ...]":
        return tuple(self._assignments)

    def low_priority(self) -> Self:
        self._low_priority = True
        return self

    def ignore(self) -> Self:
        self._ignore = True
        return self

    def set(self, column: str, value: Any) -> Self:
        """Append a ``column = value`` assignment.

        Args:
            column: The column to assign.
            value: The new value, formatted as a literal.

        Returns:
            The current builder instance for method chaining.
        """
        self._assignments.append((column, value))
        return self

    def sets(self, *assignments: "Assignment") -> Self:
        """Replace the assignment list with ``(column, value)`` pairs.

        Entries that are not two-item pairs are skipped.

        Returns:
            The current builder instance for method chaining.
        """
        accepted: "list[Assignment]" = []
        for assignment in assignments:
            if isinstance(assignment, (tuple, list)) and len(assignment) == 2:
                accepted.append((assignment[0], assignment[1]))
            else:
                self._note(f"sets() skipped malformed assignment {assignment!r}")
        self._assignments = accepted
        return self

    def _render_set(self) -> str:
        if not self._assignments:
            return "SET"
        return "SET " + ",".join(f"{column} = {format_literal(value)}" for column, value in self._assignments)

    def render(self) -> str:
        return join_sql(
            "UPDATE",
            "LOW_PRIORITY" if self._low_priority else "",
            "IGNORE" if self._ignore else "",
            self.table,
            self._render_set(),
            self._render_where(),
            self._render_order_by(),
            self._render_limit(),
        )
