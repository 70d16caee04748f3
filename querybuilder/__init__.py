"""querybuilder: chainable SQL statement builders for MySQL-family databases."""

from querybuilder import adapters, exceptions
from querybuilder._sql import QueryFactory
from querybuilder.exceptions import (
    DriverError,
    ImproperConfigurationError,
    MissingDependencyError,
    QueryBuilderError,
    SQLParsingError,
)
from querybuilder.protocols import DriverAdapterProtocol, StatementProtocol
from querybuilder.statement.builder import (
    Batch,
    Call,
    Delete,
    Do,
    Insert,
    Join,
    QueryBuilder,
    Replace,
    Select,
    Union,
    Update,
    With,
)
from querybuilder.statement.literal import DEFAULT, NULL, Raw, Sentinel, format_literal
from querybuilder.statement.result import PreparedStatement, QueryResult

sql = QueryFactory()
"""Default factory without a driver; attach one per builder with ``using_driver()``."""

__all__ = (
    "DEFAULT",
    "NULL",
    "Batch",
    "Call",
    "Delete",
    "Do",
    "DriverAdapterProtocol",
    "DriverError",
    "ImproperConfigurationError",
    "Insert",
    "Join",
    "MissingDependencyError",
    "PreparedStatement",
    "QueryBuilder",
    "QueryBuilderError",
    "QueryFactory",
    "QueryResult",
    "Raw",
    "Replace",
    "SQLParsingError",
    "Select",
    "Sentinel",
    "StatementProtocol",
    "Union",
    "Update",
    "With",
    "adapters",
    "exceptions",
    "format_literal",
    "sql",
)
