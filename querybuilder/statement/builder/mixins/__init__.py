"""SQL statement builder mixins."""

from querybuilder.statement.builder.mixins._insert_values import (
    InsertValuesMixin,
    RowTuples,
    SelectSource,
    ValueSource,
    ValueTuples,
)
from querybuilder.statement.builder.mixins._limit_offset import LimitClauseMixin, OffsetClauseMixin
from querybuilder.statement.builder.mixins._order_by import OrderByClauseMixin
from querybuilder.statement.builder.mixins._where import HavingClauseMixin, WhereClauseMixin

__all__ = (
    "HavingClauseMixin",
    "InsertValuesMixin",
    "LimitClauseMixin",
    "OffsetClauseMixin",
    "OrderByClauseMixin",
    "RowTuples",
    "SelectSource",
    "ValueSource",
    "ValueTuples",
    "WhereClauseMixin",
)
