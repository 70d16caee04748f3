"""Statement factory.

``QueryFactory`` creates builders that share one injected driver adapter, replacing
a process-wide connection handle.
"""

from typing import TYPE_CHECKING, Any, Optional

from querybuilder.statement.builder import (
    Batch,
    Call,
    Delete,
    Do,
    Insert,
    Join,
    Replace,
    Select,
    Update,
    With,
)
from querybuilder.statement.builder import Union as UnionBuilder

if TYPE_CHECKING:
    from querybuilder.protocols import DriverAdapterProtocol, StatementProtocol
    from querybuilder.typing import ColumnRef

__all__ = ("QueryFactory",)


class QueryFactory:
    """Unified factory for creating statement builders bound to a driver.

    Example:
        ```python
        from querybuilder import QueryFactory
        from querybuilder.adapters.pymysql import PyMysqlConfig

        db = QueryFactory(PyMysqlConfig({"host": "localhost", "user": "app"}).provide_driver())
        rows = db.select("id", "name").from_("users").where("active = 1").query().all()
        ```
    """

    def __init__(self, driver: "Optional[DriverAdapterProtocol]" = None) -> None:
        """Initialize the factory.

        Args:
            driver: Driver adapter handed to every builder this factory creates.
        """
        self.driver = driver

    def select(self, *columns: "ColumnRef") -> Select:
        return Select(*columns, driver=self.driver)

    def insert(self, *columns: str) -> Insert:
        return Insert(*columns, driver=self.driver)

    def replace(self, *columns: str) -> Replace:
        return Replace(*columns, driver=self.driver)

    def update(self, table: str) -> Update:
        return Update(table, driver=self.driver)

    def delete(self, table: str, alias: Optional[str] = None) -> Delete:
        return Delete(table, alias, driver=self.driver)

    def call(self, procedure: str, *params: Any) -> Call:
        return Call(procedure, driver=self.driver).params(*params)

    def do(self, *expressions: str) -> Do:
        return Do(*expressions, driver=self.driver)

    def with_(self) -> With:
        return With(driver=self.driver)

    def join(self, kind: Optional[str] = None) -> Join:
        return Join(kind, driver=self.driver)

    def union(self, *selects: Select) -> UnionBuilder:
        return UnionBuilder(*selects, driver=self.driver)

    def batch(self, *statements: "StatementProtocol", separator: Optional[str] = None) -> Batch:
        if separator is None:
            return Batch(*statements, driver=self.driver)
        return Batch(*statements, separator=separator, driver=self.driver)
