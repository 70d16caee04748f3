"""Driver adapters that execute rendered statements."""

from querybuilder.adapters.dbapi import GenericDriverAdapter

__all__ = ("GenericDriverAdapter",)
