"""SQL statement builders.

Entry points: :func:`select`, :func:`from_`, :func:`insert_into`, :func:`update`,
:func:`delete_from`, :func:`create_table`, :func:`with_`, :func:`with_recursive`, plus the
:func:`table` and :func:`column_def` helpers.
"""

from sqlchain.builder._base import QueryStatement, Statement
from sqlchain.builder._column_definition import (
    ColumnConstraint,
    ColumnDefinition,
    ColumnDefinitionBuilder,
    ConstraintCategory,
    column_def,
)
from sqlchain.builder._ddl import CreateTable, CreateTableBuilder, TableConstraint, create_table
from sqlchain.builder._delete import DeleteFrom, delete_from
from sqlchain.builder._fragments import (
    Alias,
    Column,
    ColumnValuePair,
    Condition,
    Expression,
    OutputExpression,
    SortExpression,
    TableName,
)
from sqlchain.builder._insert import (
    BareInsertInto,
    DefaultValues,
    InsertInto,
    InsertIntoColumnsBuilder,
    OnConflict,
    OnConflictClauseBuilder,
    WithColumns,
    WithoutColumns,
    insert_into,
)
from sqlchain.builder._join import FromItem, Join, JoinBuilder, JoinCondition, JoinType, table
from sqlchain.builder._order_by import Direction, Nulls, OrderBy
from sqlchain.builder._select import Distinct, DistinctKind, FromSelectBuilder, Select, from_, select
from sqlchain.builder._update import BareUpdate, Update, update
from sqlchain.builder._with import WithClause, WithQuery, WithQueryBuilder, with_, with_recursive

__all__ = (
    "Alias",
    "BareInsertInto",
    "BareUpdate",
    "Column",
    "ColumnConstraint",
    "ColumnDefinition",
    "ColumnDefinitionBuilder",
    "ColumnValuePair",
    "Condition",
    "ConstraintCategory",
    "CreateTable",
    "CreateTableBuilder",
    "DefaultValues",
    "DeleteFrom",
    "Direction",
    "Distinct",
    "DistinctKind",
    "Expression",
    "FromItem",
    "FromSelectBuilder",
    "InsertInto",
    "InsertIntoColumnsBuilder",
    "Join",
    "JoinBuilder",
    "JoinCondition",
    "JoinType",
    "Nulls",
    "OnConflict",
    "OnConflictClauseBuilder",
    "OrderBy",
    "OutputExpression",
    "QueryStatement",
    "Select",
    "SortExpression",
    "Statement",
    "TableConstraint",
    "TableName",
    "Update",
    "WithClause",
    "WithColumns",
    "WithQuery",
    "WithQueryBuilder",
    "WithoutColumns",
    "column_def",
    "create_table",
    "delete_from",
    "from_",
    "insert_into",
    "select",
    "table",
    "update",
    "with_",
    "with_recursive",
)
