"""DELETE statement builder."""

from typing import TYPE_CHECKING, Optional

from typing_extensions import Self

from querybuilder.statement.builder._base import QueryBuilder, join_sql
from querybuilder.statement.builder._predicates import PredicateList
from querybuilder.statement.builder.mixins import LimitClauseMixin, OrderByClauseMixin, WhereClauseMixin

if TYPE_CHECKING:
    from querybuilder.protocols import DriverAdapterProtocol

__all__ = ("Delete",)


class Delete(WhereClauseMixin, OrderByClauseMixin, LimitClauseMixin, QueryBuilder):
    """Builder for single-table DELETE statements.

    Example:
        ```python
        query = Delete("sessions", "s").quick().where("s.expires_at < NOW()").order("s.id").limit(500)
        ```
    """

    def __init__(
        self, table: str, alias: Optional[str] = None, driver: "Optional[DriverAdapterProtocol]" = None
    ) -> None:
        super().__init__(driver)
        self.table = table
        self.alias = alias
        self._low_priority = False
        self._quick = False
        self._ignore = False
        self._where = PredicateList()
        self._order: list[str] = []
        self._limit: Optional[int] = None

    def low_priority(self) -> Self:
        self._low_priority = True
        return self

    def quick(self) -> Self:
        self._quick = True
        return self

    def ignore(self) -> Self:
        self._ignore = True
        return self

    def render(self) -> str:
        return join_sql(
            "DELETE",
            "LOW_PRIORITY" if self._low_priority else "",
            "QUICK" if self._quick else "",
            "IGNORE" if self._ignore else "",
            "FROM",
            self.table,
            f"AS {self.alias}" if self.alias else "",
            self._render_where(),
            self._render_order_by(),
            self._render_limit(),
        )
