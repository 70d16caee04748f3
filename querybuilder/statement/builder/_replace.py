"""REPLACE statement builder."""

from typing import TYPE_CHECKING, Optional

from typing_extensions import Self

from querybuilder.statement.builder._base import QueryBuilder, join_sql
from querybuilder.statement.builder.mixins import InsertValuesMixin, OrderByClauseMixin

if TYPE_CHECKING:
    from querybuilder.protocols import DriverAdapterProtocol
    from querybuilder.statement.builder.mixins import ValueSource

__all__ = ("Replace",)


class Replace(InsertValuesMixin, OrderByClauseMixin, QueryBuilder):
    """Builder for REPLACE statements.

    Shares the value sources of :class:`~querybuilder.statement.builder.Insert` but
    has no ``IGNORE``, ``HIGH_PRIORITY`` or ``ON DUPLICATE KEY UPDATE``.
    """

    def __init__(self, *columns: str, driver: "Optional[DriverAdapterProtocol]" = None) -> None:
        super().__init__(driver)
        self._columns: list[str] = list(columns)
        self._into: Optional[str] = None
        self._source: "Optional[ValueSource]" = None
        self._order: list[str] = []
        self._low_priority = False

    def low_priority(self) -> Self:
        self._low_priority = True
        return self

    def render(self) -> str:
        return join_sql(
            "REPLACE",
            "LOW_PRIORITY" if self._low_priority else "",
            self._render_into(),
            self._render_values(),
        )
