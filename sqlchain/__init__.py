"""sqlchain: fluent PostgreSQL statement builders."""

from sqlchain import builder, exceptions, typing, utils
from sqlchain.__metadata__ import __version__
from sqlchain.builder import (
    Alias,
    Column,
    CreateTable,
    DeleteFrom,
    Expression,
    InsertInto,
    OrderBy,
    Select,
    TableName,
    Update,
    column_def,
    create_table,
    delete_from,
    from_,
    insert_into,
    select,
    table,
    update,
    with_,
    with_recursive,
)
from sqlchain.exceptions import ArityMismatchError, ColumnConstraintError, SQLBuilderError, SQLChainError
from sqlchain.parameters import Parameters

__all__ = (
    "Alias",
    "ArityMismatchError",
    "Column",
    "ColumnConstraintError",
    "CreateTable",
    "DeleteFrom",
    "Expression",
    "InsertInto",
    "OrderBy",
    "Parameters",
    "SQLBuilderError",
    "SQLChainError",
    "Select",
    "TableName",
    "Update",
    "__version__",
    "builder",
    "column_def",
    "create_table",
    "delete_from",
    "exceptions",
    "from_",
    "insert_into",
    "select",
    "table",
    "typing",
    "update",
    "utils",
    "with_",
    "with_recursive",
)
