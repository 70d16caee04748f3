from typing import Optional

from typing_extensions import Self

__all__ = ("LimitClauseMixin", "OffsetClauseMixin")


class LimitClauseMixin:
    """Mixin providing the LIMIT clause."""

    _limit: Optional[int]

    def limit(self, value: int = 1) -> Self:
        """Set the LIMIT clause.

        Args:
            value: The maximum number of rows.

        Returns:
            The current builder instance for method chaining.
        """
        self._limit = value
        return self

    def _render_limit(self) -> str:
        return f"LIMIT {self._limit}" if self._limit is not None else ""


class OffsetClauseMixin:
    """Mixin providing the OFFSET clause for SELECT builders."""

    _offset: Optional[int]

    def offset(self, value: int) -> Self:
        """Set the OFFSET clause.

        Args:
            value: The number of rows to skip.

        Returns:
            The current builder instance for method chaining.
        """
        self._offset = value
        return self

    def _render_offset(self) -> str:
        return f"OFFSET {self._offset}" if self._offset is not None else ""
