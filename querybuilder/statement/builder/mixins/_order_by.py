from typing_extensions import Self

from querybuilder.statement.builder._base import Section

__all__ = ("OrderByClauseMixin",)


class OrderByClauseMixin:
    """Mixin providing ORDER BY clause methods."""

    _order: list[str]

    def order(self, column: str) -> Self:
        """Append an ORDER BY item, e.g. ``"created_at DESC"``.

        Returns:
            The current builder instance for method chaining.
        """
        self._order.append(column)
        self._touch(Section.ORDER)  # type: ignore[attr-defined]
        return self

    def orders(self, *columns: str) -> Self:
        """Replace the ORDER BY list.

        Returns:
            The current builder instance for method chaining.
        """
        self._order = list(columns)
        self._touch(Section.ORDER)  # type: ignore[attr-defined]
        return self

    def _render_order_by(self) -> str:
        return f"ORDER BY {','.join(self._order)}" if self._order else ""
