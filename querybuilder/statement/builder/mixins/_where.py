from typing import Optional

from typing_extensions import Self

from querybuilder.statement.builder._base import Section
from querybuilder.statement.builder._predicates import PredicateList

__all__ = ("HavingClauseMixin", "WhereClauseMixin")


class WhereClauseMixin:
    """Mixin providing WHERE clause methods for SELECT, UPDATE, and DELETE builders."""

    _where: PredicateList

    def where(self, clause: str, connective: Optional[str] = None) -> Self:
        """Append a condition to the WHERE clause.

        Args:
            clause: The condition text, e.g. ``"age > 18"``.
            connective: Optional token joining the clause to the previous one, e.g. ``"AND"``.

        Returns:
            The current builder instance for method chaining.
        """
        if not self._where.add(clause, connective):
            self._note(  # type: ignore[attr-defined]
                f"where() dropped connective {connective!r}: no earlier condition to join"
            )
        self._touch(Section.WHERE)  # type: ignore[attr-defined]
        return self

    def wheres(self, *clauses: str) -> Self:
        """Replace the whole WHERE clause.

        The tokens are emitted as given, so the caller supplies any connectives:
        ``wheres("a=1", "OR", "b=2")``.

        Returns:
            The current builder instance for method chaining.
        """
        self._where.replace(*clauses)
        self._touch(Section.WHERE)  # type: ignore[attr-defined]
        return self

    def _render_where(self) -> str:
        return f"WHERE {self._where.render()}" if self._where else ""


class HavingClauseMixin:
    """Mixin providing HAVING clause methods for SELECT builders."""

    _having: PredicateList

    def having(self, clause: str, connective: Optional[str] = None) -> Self:
        """Append a condition to the HAVING clause.

        Returns:
            The current builder instance for method chaining.
        """
        if not self._having.add(clause, connective):
            self._note(  # type: ignore[attr-defined]
                f"having() dropped connective {connective!r}: no earlier condition to join"
            )
        self._touch(Section.HAVING)  # type: ignore[attr-defined]
        return self

    def havings(self, *clauses: str) -> Self:
        """Replace the whole HAVING clause.

        Returns:
            The current builder instance for method chaining.
        """
        self._having.replace(*clauses)
        self._touch(Section.HAVING)  # type: ignore[attr-defined]
        return self

    def _render_having(self) -> str:
        return f"HAVING {self._having.render()}" if self._having else ""
