"""Multi-statement batches."""

from typing import TYPE_CHECKING, Optional

from typing_extensions import Self

from querybuilder.statement.builder._base import QueryBuilder

if TYPE_CHECKING:
    from querybuilder.protocols import DriverAdapterProtocol, StatementProtocol

__all__ = ("DEFAULT_SEPARATOR", "Batch")

DEFAULT_SEPARATOR = ";"


class Batch(QueryBuilder):
    """An ordered list of independent statements rendered as one string.

    Example:
        ```python
        Batch(Update("t").set("a", 1), Delete("u").where("b = 2")).render()
        # "UPDATE t SET a = 1;DELETE FROM u WHERE b = 2"
        ```

    Args:
        *statements: The initial statements.
        separator: Text placed between rendered statements.
        driver: Optional driver adapter.
    """

    def __init__(
        self,
        *statements: "StatementProtocol",
        separator: str = DEFAULT_SEPARATOR,
        driver: "Optional[DriverAdapterProtocol]" = None,
    ) -> None:
        super().__init__(driver)
        self._statements: "list[StatementProtocol]" = list(statements)
        self.separator = separator

    @property
    def statements(self) -> "tuple[StatementProtocol, ...]":
        return tuple(self._statements)

    def add(self, statement: "StatementProtocol") -> Self:
        self._statements.append(statement)
        return self

    def remove(self, index: int) -> bool:
        """Remove the statement at ``index``; later statements shift down by one.

        Args:
            index: Position of the statement to remove.

        Returns:
            bool: ``False`` if there was no statement at ``index``.
        """
        if not 0 <= index < len(self._statements):
            self._note(f"remove() ignored: no statement at index {index}")
            return False
        del self._statements[index]
        return True

    def render(self, separator: Optional[str] = None) -> str:
        sep = self.separator if separator is None else separator
        return sep.join(statement.render() for statement in self._statements)

    def __len__(self) -> int:
        return len(self._statements)
