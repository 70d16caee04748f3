"""CALL and DO statement builders."""

from typing import TYPE_CHECKING, Any, Optional

from typing_extensions import Self

from querybuilder.statement.builder._base import QueryBuilder
from querybuilder.statement.literal import format_literal

if TYPE_CHECKING:
    from querybuilder.protocols import DriverAdapterProtocol

__all__ = ("Call", "Do")


class Call(QueryBuilder):
    """Builder for ``CALL procedure(...)``.

    Parameters are formatted as literals: ``Call("archive").params(2024, "eu")``
    renders ``CALL archive(2024,'eu')``.
    """

    def __init__(self, procedure: str, driver: "Optional[DriverAdapterProtocol]" = None) -> None:
        super().__init__(driver)
        self.procedure = procedure
        self._params: list[Any] = []

    def params(self, *params: Any) -> Self:
        """Replace the parameter list."""
        self._params = list(params)
        return self

    def render(self) -> str:
        return f"CALL {self.procedure}({','.join(format_literal(param) for param in self._params)})"


class Do(QueryBuilder):
    """Builder for ``DO expr, ...``, which evaluates expressions without returning rows."""

    def __init__(self, *expressions: str, driver: "Optional[DriverAdapterProtocol]" = None) -> None:
        super().__init__(driver)
        self._expressions = list(expressions)

    def expression(self, expression: str) -> Self:
        self._expressions.append(expression)
        return self

    def render(self) -> str:
        return f"DO {','.join(self._expressions)}"
