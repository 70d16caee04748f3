"""SQL statement builders for MySQL-family dialects.

This package provides fluent interfaces that accumulate clause fragments and render
them into SQL text in MySQL clause order.
"""

from querybuilder.statement.builder._base import QueryBuilder, Section
from querybuilder.statement.builder._batch import DEFAULT_SEPARATOR, Batch
from querybuilder.statement.builder._call import Call, Do
from querybuilder.statement.builder._delete import Delete
from querybuilder.statement.builder._insert import Insert, Priority
from querybuilder.statement.builder._join import Join, JoinKind, OnPredicates, UsingColumns
from querybuilder.statement.builder._predicates import PredicateList
from querybuilder.statement.builder._replace import Replace
from querybuilder.statement.builder._select import Distinct, Focus, Select
from querybuilder.statement.builder._union import Union, UnionKind
from querybuilder.statement.builder._update import Update
from querybuilder.statement.builder._with import CommonTableExpression, With

__all__ = (
    "DEFAULT_SEPARATOR",
    "Batch",
    "Call",
    "CommonTableExpression",
    "Delete",
    "Distinct",
    "Do",
    "Focus",
    "Insert",
    "Join",
    "JoinKind",
    "OnPredicates",
    "PredicateList",
    "Priority",
    "QueryBuilder",
    "Replace",
    "Section",
    "Select",
    "Union",
    "UnionKind",
    "Update",
    "UsingColumns",
    "With",
)
