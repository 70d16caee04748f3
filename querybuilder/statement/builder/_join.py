from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Optional, Union

from typing_extensions import Self

from querybuilder.statement.builder._base import QueryBuilder, join_sql
from querybuilder.statement.builder._predicates import PredicateList

if TYPE_CHECKING:
    from querybuilder.protocols import DriverAdapterProtocol, StatementProtocol

__all__ = (
    "Join",
    "JoinCondition",
    "JoinKind",
    "OnPredicates",
    "UsingColumns",
)


class JoinKind(Enum):
    """Join keywords. ``PLAIN`` renders a bare ``JOIN``."""

    PLAIN = "JOIN"
    INNER = "INNER JOIN"
    LEFT = "LEFT JOIN"
    RIGHT = "RIGHT JOIN"
    FULL = "FULL JOIN"

    @classmethod
    def from_name(cls, name: "Optional[Union[str, JoinKind]]") -> "JoinKind":
        """Resolve ``"inner"``, ``"LEFT"`` and friends; anything unknown is ``PLAIN``."""
        if isinstance(name, JoinKind):
            return name
        if not name:
            return cls.PLAIN
        return cls.__members__.get(name.upper(), cls.PLAIN)


@dataclass(frozen=True)
class UsingColumns:
    columns: tuple[str, ...]

    def render(self) -> str:
        return f"USING ({', '.join(self.columns)})" if self.columns else ""


@dataclass
class OnPredicates:
    predicates: PredicateList = field(default_factory=PredicateList)

    def render(self) -> str:
        return f"ON {self.predicates.render()}" if self.predicates else ""


JoinCondition = Union[UsingColumns, OnPredicates]


class Join(QueryBuilder):
    """One joined table or subquery.

    ``using()`` and ``on()``/``ons()`` are mutually exclusive; the last call wins.

    Example:
        ```python
        Join("left").table("orders").as_("o").on("o.user_id = u.id")
        ```
    """

    def __init__(
        self, kind: "Optional[Union[str, JoinKind]]" = None, driver: "Optional[DriverAdapterProtocol]" = None
    ) -> None:
        super().__init__(driver)
        self.kind = JoinKind.from_name(kind)
        self._source: "Optional[Union[str, StatementProtocol]]" = None
        self._alias: Optional[str] = None
        self._condition: Optional[JoinCondition] = None

    @property
    def condition(self) -> Optional[JoinCondition]:
        return self._condition

    def table(self, name: str) -> Self:
        """Join a table by name."""
        self._source = name
        return self

    def table_select(self, select: "StatementProtocol") -> Self:
        """Join a parenthesized subquery."""
        self._source = select
        return self

    def as_(self, alias: str) -> Self:
        self._alias = alias
        return self

    def using(self, *columns: str) -> Self:
        """Set a ``USING (...)`` column list, replacing any ON condition."""
        self._condition = UsingColumns(tuple(columns))
        return self

    def on(self, clause: str, connective: Optional[str] = None) -> Self:
        """Append to the ON condition, replacing any USING list.

        Args:
            clause: The condition text, e.g. ``"o.user_id = u.id"``.
            connective: Optional token joining the clause to the previous one, e.g. ``"AND"``.

        Returns:
            The current builder instance for method chaining.
        """
        if not isinstance(self._condition, OnPredicates):
            self._condition = OnPredicates()
        if not self._condition.predicates.add(clause, connective):
            self._note(f"on() dropped connective {connective!r}: no earlier condition to join")
        return self

    def ons(self, *clauses: str) -> Self:
        """Replace the ON condition with the given tokens, replacing any USING list."""
        self._condition = OnPredicates(PredicateList(*clauses))
        return self

    def _render_source(self) -> str:
        if self._source is None:
            return ""
        if isinstance(self._source, str):
            return self._source
        return f"({self._source.render()})"

    def render(self) -> str:
        return join_sql(
            self.kind.value,
            self._render_source(),
            f"AS {self._alias}" if self._alias else "",
            self._condition.render() if self._condition is not None else "",
        )
