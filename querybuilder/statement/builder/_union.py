"""UNION of SELECT statements."""

from enum import Enum
from typing import TYPE_CHECKING, Optional

from typing_extensions import Self

from querybuilder.statement.builder._base import QueryBuilder

if TYPE_CHECKING:
    from querybuilder.protocols import DriverAdapterProtocol
    from querybuilder.statement.builder._select import Select

__all__ = ("Union", "UnionKind")


class UnionKind(Enum):
    DEFAULT = "UNION"
    ALL = "UNION ALL"
    DISTINCT = "UNION DISTINCT"


class Union(QueryBuilder):
    """Combine SELECT statements with ``UNION``, ``UNION ALL`` or ``UNION DISTINCT``.

    Example:
        ```python
        Union(Select("id").from_("customers"), Select("id").from_("suppliers")).all()
        ```
    """

    def __init__(self, *selects: "Select", driver: "Optional[DriverAdapterProtocol]" = None) -> None:
        super().__init__(driver)
        self._selects: "list[Select]" = list(selects)
        self.kind = UnionKind.DEFAULT

    @property
    def selects(self) -> "tuple[Select, ...]":
        return tuple(self._selects)

    def all(self) -> Self:
        self.kind = UnionKind.ALL
        return self

    def distinct(self) -> Self:
        self.kind = UnionKind.DISTINCT
        return self

    def add(self, select: "Select") -> Self:
        self._selects.append(select)
        return self

    def remove(self, index: int) -> bool:
        """Remove the SELECT at ``index``.

        Args:
            index: Position of the SELECT to remove.

        Returns:
            bool: ``False`` if there was no SELECT at ``index``.
        """
        if not 0 <= index < len(self._selects):
            self._note(f"remove() ignored: no select at index {index}")
            return False
        del self._selects[index]
        return True

    def render(self) -> str:
        return f" {self.kind.value} ".join(select.render() for select in self._selects)
