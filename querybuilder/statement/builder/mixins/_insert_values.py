"""Value sources shared by INSERT and REPLACE.

A statement holds at most one source at a time: literal tuples, raw ``ROW(...)``
tuples, or a nested SELECT. Setting one kind replaces whatever was there.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, Optional, Union

from typing_extensions import Self

from querybuilder.protocols import StatementProtocol
from querybuilder.statement.builder._base import join_sql
from querybuilder.statement.literal import format_literal

__all__ = (
    "InsertValuesMixin",
    "RowTuples",
    "SelectSource",
    "ValueSource",
    "ValueTuples",
)


@dataclass
class ValueTuples:
    """Literal tuples rendered as ``(1,'a'),(2,'b')``."""

    tuples: list[tuple[Any, ...]] = field(default_factory=list)

    def render(self) -> str:
        return ",".join(f"({','.join(format_literal(value) for value in row)})" for row in self.tuples)


@dataclass
class RowTuples:
    """Raw row constructors rendered as ``ROW(1,2),ROW(3,4)``; values are not quoted."""

    tuples: list[tuple[Any, ...]] = field(default_factory=list)

    def render(self) -> str:
        return ",".join(f"ROW({','.join(str(value) for value in row)})" for row in self.tuples)


@dataclass
class SelectSource:
    """A nested SELECT supplying the inserted rows."""

    select: StatementProtocol

    def render(self) -> str:
        return f"({self.select.render()})"


ValueSource = Union[ValueTuples, RowTuples, SelectSource]


class InsertValuesMixin:
    """Mixin providing the column list and value sources of INSERT and REPLACE."""

    _into: Optional[str]
    _columns: list[str]
    _source: Optional[ValueSource]

    def _set_columns(self, columns: "Sequence[str]") -> Self:
        self._columns = list(columns)
        return self

    @property
    def columns(self) -> tuple[str, ...]:
        return tuple(self._columns)

    @property
    def source(self) -> Optional[ValueSource]:
        """The active value source, if any."""
        return self._source

    def into(self, table: str) -> Self:
        """Set the target table.

        Returns:
            The current builder instance for method chaining.
        """
        self._into = table
        return self

    def values(self, *values: Any) -> Self:
        """Append one tuple of literal values.

        Values are formatted with :func:`~querybuilder.statement.literal.format_literal`.
        A tuple whose length differs from the column count is dropped.

        Returns:
            The current builder instance for method chaining.
        """
        if len(values) != len(self._columns):
            self._note(  # type: ignore[attr-defined]
                f"values() dropped: got {len(values)} values for {len(self._columns)} columns"
            )
            return self
        if not isinstance(self._source, ValueTuples):
            self._source = ValueTuples()
        self._source.tuples.append(values)
        return self

    def rows(self, *values: Any) -> Self:
        """Append one ``ROW(...)`` constructor with raw, unquoted values.

        A row whose length differs from the column count is dropped.

        Returns:
            The current builder instance for method chaining.
        """
        if len(values) != len(self._columns):
            self._note(  # type: ignore[attr-defined]
                f"rows() dropped: got {len(values)} values for {len(self._columns)} columns"
            )
            return self
        if not isinstance(self._source, RowTuples):
            self._source = RowTuples()
        self._source.tuples.append(values)
        return self

    def values_select(self, select: StatementProtocol) -> Self:
        """Use a nested SELECT as the value source.

        Returns:
            The current builder instance for method chaining.
        """
        self._source = SelectSource(select)
        return self

    def _render_into(self) -> str:
        return join_sql("INTO", self._into, f"({','.join(self._columns)})")

    def _render_values(self) -> str:
        if self._source is None:
            return "VALUES"
        rendered = f"VALUES {self._source.render()}"
        if isinstance(self._source, RowTuples):
            order_by = self._render_order_by()  # type: ignore[attr-defined]
            if order_by:
                rendered = f"{rendered} {order_by}"
        return rendered
