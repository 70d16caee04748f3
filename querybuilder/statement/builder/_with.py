from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from typing_extensions import Self

from querybuilder.statement.builder._base import QueryBuilder, join_sql

if TYPE_CHECKING:
    from querybuilder.protocols import DriverAdapterProtocol, StatementProtocol

__all__ = ("CommonTableExpression", "With")


@dataclass(frozen=True)
class CommonTableExpression:
    """One named sub-select of a WITH clause."""

    name: str
    select: "StatementProtocol"
    columns: tuple[str, ...] = ()

    def render(self) -> str:
        columns = f"({','.join(self.columns)})" if self.columns else ""
        return join_sql(self.name, columns, f"AS ({self.select.render()})")


class With(QueryBuilder):
    """WITH clause (Common Table Expressions) prefix for a SELECT.

    Example:
        ```python
        cte = With().sub_select(Select("id").from_("users"), "active_users")
        Select("*").with_(cte).from_("active_users")
        ```
    """

    def __init__(self, driver: "Optional[DriverAdapterProtocol]" = None) -> None:
        super().__init__(driver)
        self._ctes: list[CommonTableExpression] = []
        self._recursive = False

    @property
    def ctes(self) -> tuple[CommonTableExpression, ...]:
        return tuple(self._ctes)

    def sub_select(
        self, select: "StatementProtocol", name: str, columns: Optional[Sequence[str]] = None
    ) -> Self:
        """Append a named sub-select.

        Args:
            select: The query defining the CTE.
            name: The name other clauses refer to.
            columns: Optional column names for the CTE.

        Returns:
            The current builder instance for method chaining.
        """
        self._ctes.append(CommonTableExpression(name, select, tuple(columns or ())))
        return self

    def recursive(self) -> Self:
        self._recursive = True
        return self

    def render(self) -> str:
        return join_sql("WITH", "RECURSIVE" if self._recursive else "", ",".join(cte.render() for cte in self._ctes))
