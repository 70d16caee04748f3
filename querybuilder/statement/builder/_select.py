# ruff: noqa: SLF001
"""SELECT statement builder.

The builder remembers which clause section was touched last. Context-sensitive
calls read that focus when they are made:

* ``on()``, ``ons()`` and ``using()`` attach to the most recent join, and do nothing
  unless a join call was the last section touched.
* ``with_rollup()`` flags ``ORDER BY`` or ``GROUP BY``, whichever was touched last,
  and does nothing otherwise.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Optional, Union

from sqlglot import exp
from typing_extensions import Self

from querybuilder.protocols import StatementProtocol
from querybuilder.statement.builder._base import QueryBuilder, Section, join_sql
from querybuilder.statement.builder._join import Join, JoinKind
from querybuilder.statement.builder._predicates import PredicateList
from querybuilder.statement.builder.mixins import (
    HavingClauseMixin,
    LimitClauseMixin,
    OffsetClauseMixin,
    OrderByClauseMixin,
    WhereClauseMixin,
)
from querybuilder.statement.literal import MYSQL_DIALECT

if TYPE_CHECKING:
    from querybuilder.protocols import DriverAdapterProtocol
    from querybuilder.statement.builder._with import With
    from querybuilder.typing import ColumnRef

__all__ = (
    "Distinct",
    "Focus",
    "Select",
)


class Distinct(Enum):
    """Duplicate-row handling of the projection."""

    ALL = ""
    DISTINCT = "DISTINCT"
    DISTINCTROW = "DISTINCTROW"


@dataclass(frozen=True)
class Focus:
    """The clause section touched last and, for joins, which join."""

    section: Section = Section.NONE
    join_key: Optional[str] = None


def _render_expression(expression: Any) -> str:
    if isinstance(expression, str):
        return expression
    if isinstance(expression, exp.Expression):
        return expression.sql(dialect=MYSQL_DIALECT)
    if isinstance(expression, StatementProtocol):
        return f"({expression.render()})"
    return str(expression)


def _render_column(column: "ColumnRef") -> str:
    if isinstance(column, tuple) and len(column) == 2:
        expression, alias = column
        return f"{_render_expression(expression)} AS {alias}"
    return _render_expression(column)


class Select(
    WhereClauseMixin,
    HavingClauseMixin,
    OrderByClauseMixin,
    LimitClauseMixin,
    OffsetClauseMixin,
    QueryBuilder,
):
    """Builder for SELECT statements.

    Example:
        ```python
        query = (
            Select("u.id", ("COUNT(o.id)", "orders"))
            .from_("users", "u")
            .left_join("orders", "o")
            .on("o.user_id = u.id")
            .where("u.active = 1")
            .group("u.id")
            .with_rollup()
            .order("orders DESC")
            .limit(10)
        )
        ```
    """

    def __init__(self, *columns: "ColumnRef", driver: "Optional[DriverAdapterProtocol]" = None) -> None:
        super().__init__(driver)
        self._columns: "list[ColumnRef]" = list(columns)
        self._with: "Optional[With]" = None
        self._distinct = Distinct.ALL
        self._high_priority = False
        self._straight_join = False
        self._from: "Optional[Union[str, StatementProtocol]]" = None
        self._from_alias: Optional[str] = None
        self._joins: dict[str, Join] = {}
        self._where = PredicateList()
        self._group: list[str] = []
        self._group_rollup = False
        self._having = PredicateList()
        self._order: list[str] = []
        self._order_rollup = False
        self._limit: Optional[int] = None
        self._offset: Optional[int] = None
        self._focus = Focus()

    @property
    def focus(self) -> Focus:
        return self._focus

    @property
    def joins(self) -> dict[str, Join]:
        """Joins keyed by table key, in render order."""
        return dict(self._joins)

    def _touch(self, section: Section) -> None:
        self._focus = Focus(section)

    def _set_columns(self, columns: "Sequence[ColumnRef]") -> Self:
        self._columns = list(columns)
        return self

    def column(self, expression: Any, alias: Optional[str] = None) -> Self:
        """Append a projection item, optionally aliased.

        Returns:
            The current builder instance for method chaining.
        """
        self._columns.append((expression, alias) if alias else expression)
        return self

    def with_(self, with_: "With") -> Self:
        """Prefix the statement with a WITH clause."""
        self._with = with_
        return self

    def distinct(self) -> Self:
        self._distinct = Distinct.DISTINCT
        return self

    def distinct_row(self) -> Self:
        self._distinct = Distinct.DISTINCTROW
        return self

    def high_priority(self) -> Self:
        self._high_priority = True
        return self

    def straight_join(self) -> Self:
        self._straight_join = True
        return self

    def from_(self, table: str, alias: Optional[str] = None) -> Self:
        """Set the source table.

        Args:
            table: The table name.
            alias: Optional table alias.

        Returns:
            The current builder instance for method chaining.
        """
        self._from = table
        self._from_alias = alias
        self._touch(Section.FROM)
        return self

    def from_select(self, select: StatementProtocol, alias: Optional[str] = None) -> Self:
        """Use a parenthesized subquery as the source."""
        self._from = select
        self._from_alias = alias
        self._touch(Section.FROM)
        return self

    def _add_join(
        self, kind: JoinKind, key: str, source: Union[str, StatementProtocol], alias: Optional[str]
    ) -> Self:
        join = Join(kind)
        if isinstance(source, str):
            join.table(source)
        else:
            join.table_select(source)
        if alias:
            join.as_(alias)
        if key in self._joins:
            self._note(f"join on {key!r} replaced an earlier join with the same key")
        self._joins[key] = join
        self._focus = Focus(Section.JOIN, key)
        return self

    def join(self, table: str, alias: Optional[str] = None) -> Self:
        return self._add_join(JoinKind.PLAIN, table, table, alias)

    def inner_join(self, table: str, alias: Optional[str] = None) -> Self:
        return self._add_join(JoinKind.INNER, table, table, alias)

    def left_join(self, table: str, alias: Optional[str] = None) -> Self:
        return self._add_join(JoinKind.LEFT, table, table, alias)

    def right_join(self, table: str, alias: Optional[str] = None) -> Self:
        return self._add_join(JoinKind.RIGHT, table, table, alias)

    def full_join(self, table: str, alias: Optional[str] = None) -> Self:
        return self._add_join(JoinKind.FULL, table, table, alias)

    def join_select(self, table: str, select: StatementProtocol, alias: Optional[str] = None) -> Self:
        """Join a subquery.

        Args:
            table: Key identifying this join for later ``on()``/``using()`` calls.
            select: The subquery.
            alias: Optional alias for the subquery.

        Returns:
            The current builder instance for method chaining.
        """
        return self._add_join(JoinKind.PLAIN, table, select, alias)

    def inner_join_select(self, table: str, select: StatementProtocol, alias: Optional[str] = None) -> Self:
        return self._add_join(JoinKind.INNER, table, select, alias)

    def left_join_select(self, table: str, select: StatementProtocol, alias: Optional[str] = None) -> Self:
        return self._add_join(JoinKind.LEFT, table, select, alias)

    def right_join_select(self, table: str, select: StatementProtocol, alias: Optional[str] = None) -> Self:
        return self._add_join(JoinKind.RIGHT, table, select, alias)

    def full_join_select(self, table: str, select: StatementProtocol, alias: Optional[str] = None) -> Self:
        return self._add_join(JoinKind.FULL, table, select, alias)

    def _current_join(self, method: str) -> Optional[Join]:
        if self._focus.section is not Section.JOIN or self._focus.join_key is None:
            self._note(f"{method}() ignored: the last clause touched was {self._focus.section.value!r}, not a join")
            return None
        return self._joins[self._focus.join_key]

    def using(self, *columns: str) -> Self:
        """Set ``USING (...)`` on the most recent join."""
        join = self._current_join("using")
        if join is not None:
            join.using(*columns)
        return self

    def on(self, clause: str, connective: Optional[str] = None) -> Self:
        """Append an ON condition to the most recent join.

        Args:
            clause: The condition text.
            connective: Optional token joining the clause to the previous one, e.g. ``"AND"``.

        Returns:
            The current builder instance for method chaining.
        """
        join = self._current_join("on")
        if join is not None:
            seen = len(join.diagnostics)
            join.on(clause, connective)
            self._diagnostics.extend(join.diagnostics[seen:])
        return self

    def ons(self, *clauses: str) -> Self:
        """Replace the ON condition of the most recent join."""
        join = self._current_join("ons")
        if join is not None:
            join.ons(*clauses)
        return self

    def group(self, column: str) -> Self:
        self._group.append(column)
        self._touch(Section.GROUP)
        return self

    def groups(self, *columns: str) -> Self:
        self._group = list(columns)
        self._touch(Section.GROUP)
        return self

    def with_rollup(self) -> Self:
        """Add ``WITH ROLLUP`` to ORDER BY or GROUP BY, whichever was touched last."""
        if self._focus.section is Section.ORDER:
            self._order_rollup = True
        elif self._focus.section is Section.GROUP:
            self._group_rollup = True
        else:
            self._note(
                f"with_rollup() ignored: the last clause touched was {self._focus.section.value!r}, "
                "not 'group' or 'order'"
            )
        return self

    def _render_modifiers(self) -> str:
        return join_sql(
            self._distinct.value,
            "HIGH_PRIORITY" if self._high_priority else "",
            "STRAIGHT_JOIN" if self._straight_join else "",
        )

    def _render_from(self) -> str:
        if self._from is None:
            return ""
        source = self._from if isinstance(self._from, str) else f"({self._from.render()})"
        return join_sql("FROM", source, f"AS {self._from_alias}" if self._from_alias else "")

    def _render_group_by(self) -> str:
        if not self._group:
            return ""
        return join_sql("GROUP BY", ",".join(self._group), "WITH ROLLUP" if self._group_rollup else "")

    def render(self) -> str:
        order_by = self._render_order_by()
        if order_by and self._order_rollup:
            order_by = f"{order_by} WITH ROLLUP"
        return join_sql(
            self._with.render() if self._with is not None else "",
            "SELECT",
            self._render_modifiers(),
            ", ".join(_render_column(column) for column in self._columns),
            self._render_from(),
            *(join.render() for join in self._joins.values()),
            self._render_where(),
            self._render_group_by(),
            self._render_having(),
            order_by,
            self._render_limit(),
            self._render_offset(),
        )
