"""Scalar literal formatting.

Values passed to ``values()``, ``set()`` and ``params()`` are turned into SQL text
here. Strings are wrapped in single quotes **without escaping**: callers must
pre-escape untrusted input or bind it through the driver instead.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from sqlglot import exp

from querybuilder.protocols import StatementProtocol

__all__ = (
    "DEFAULT",
    "NULL",
    "Raw",
    "Sentinel",
    "format_literal",
)

MYSQL_DIALECT = "mysql"


class Sentinel(Enum):
    """Reserved keywords that are always rendered unquoted."""

    NULL = "NULL"
    DEFAULT = "DEFAULT"

    def __str__(self) -> str:
        return self.value


NULL = Sentinel.NULL
DEFAULT = Sentinel.DEFAULT

_SENTINEL_NAMES = frozenset(member.value for member in Sentinel)


@dataclass(frozen=True)
class Raw:
    """A pre-built SQL fragment emitted verbatim, e.g. ``Raw("NOW()")``."""

    sql: str

    def __str__(self) -> str:
        return self.sql


def format_literal(value: Any) -> str:
    """Convert a scalar value into its SQL textual representation.

    Args:
        value: The value to format.

    Returns:
        The SQL text for ``value``. Never raises.
    """
    if isinstance(value, Sentinel):
        return value.value
    if isinstance(value, str):
        upper = value.upper()
        if upper in _SENTINEL_NAMES:
            return upper
        return f"'{value}'"
    if value is None:
        return Sentinel.NULL.value
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, Raw):
        return value.sql
    if isinstance(value, exp.Expression):
        return value.sql(dialect=MYSQL_DIALECT)
    if isinstance(value, StatementProtocol):
        return f"({value.render()})"
    return str(value)
