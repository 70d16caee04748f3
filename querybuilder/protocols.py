"""Runtime protocols shared by the builders and the driver adapters."""

from typing import TYPE_CHECKING, Any, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:
    from querybuilder.statement.result import PreparedStatement, QueryResult

__all__ = (
    "DriverAdapterProtocol",
    "StatementProtocol",
)


@runtime_checkable
class StatementProtocol(Protocol):
    """Anything that renders to a single SQL string."""

    def render(self) -> str: ...  # pragma: no cover


@runtime_checkable
class DriverAdapterProtocol(Protocol):
    """The three operations a builder needs from a database driver.

    Implementations raise their own driver-level exceptions; the builders wrap them
    in :class:`~querybuilder.exceptions.DriverError`.
    """

    def execute(self, sql: str) -> int: ...  # pragma: no cover

    def query(self, sql: str) -> "QueryResult": ...  # pragma: no cover

    def prepare(self, sql: str, options: Optional[dict[str, Any]] = None) -> "PreparedStatement": ...  # pragma: no cover
