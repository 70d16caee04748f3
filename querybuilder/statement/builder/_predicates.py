from collections.abc import Iterator
from typing import Optional

__all__ = ("PredicateList",)


class PredicateList:
    """Ordered clause and connective tokens for WHERE, HAVING and ON.

    A connective joins its clause to the tokens before it: ``add("a=1")`` followed by
    ``add("b=2", "AND")`` renders ``a=1 AND b=2``. A connective given with the first
    clause has nothing to join and is dropped. No connective is ever inserted
    implicitly.
    """

    __slots__ = ("_tokens",)

    def __init__(self, *tokens: str) -> None:
        self._tokens: list[str] = list(tokens)

    def add(self, clause: str, connective: Optional[str] = None) -> bool:
        """Append ``clause``, preceded by ``connective`` when there is something to join.

        Returns:
            bool: ``False`` if a connective was given but dropped.
        """
        dropped = bool(connective) and not self._tokens
        if connective and self._tokens:
            self._tokens.append(connective)
        self._tokens.append(clause)
        return not dropped

    def replace(self, *tokens: str) -> None:
        self._tokens = list(tokens)

    def clear(self) -> None:
        self._tokens.clear()

    @property
    def tokens(self) -> tuple[str, ...]:
        return tuple(self._tokens)

    def render(self) -> str:
        return " ".join(self._tokens)

    def __bool__(self) -> bool:
        return bool(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self) -> Iterator[str]:
        return iter(self._tokens)

    def __repr__(self) -> str:
        return f"PredicateList({self.render()!r})"
