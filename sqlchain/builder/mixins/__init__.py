"""Clause mixins shared by the statement builders."""

from sqlchain.builder.mixins._returning import ReturningClauseMixin
from sqlchain.builder.mixins._where import WhereClauseMixin

__all__ = (
    "ReturningClauseMixin",
    "WhereClauseMixin",
)
