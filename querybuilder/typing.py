"""Type aliases shared across the statement builders."""

from decimal import Decimal
from typing import TYPE_CHECKING, Any, Union

from sqlglot import exp
from typing_extensions import TypeAlias

if TYPE_CHECKING:
    from querybuilder.protocols import StatementProtocol
    from querybuilder.statement.literal import Raw, Sentinel

__all__ = (
    "Assignment",
    "ColumnRef",
    "LiteralValue",
)

LiteralValue: TypeAlias = Union[
    "Sentinel", "Raw", str, int, float, Decimal, bool, None, exp.Expression, "StatementProtocol", Any
]
"""Scalar values accepted by ``values()``, ``set()`` and ``params()``."""

ColumnRef: TypeAlias = Union[str, "StatementProtocol", tuple[Any, str]]
"""A projection item: a bare expression or an ``(expression, alias)`` pair."""

Assignment: TypeAlias = tuple[str, LiteralValue]
"""A ``(column, value)`` pair used by UPDATE ... SET."""
