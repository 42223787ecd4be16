"""Column definitions for ``CREATE TABLE``.

A column can carry at most one constraint per category (nullability, primary key, uniqueness,
default, foreign-key reference, check). The builder class returned after each call only offers
the methods of the categories that are still free::

    column_def("code", "char(5)").primary_key().not_null()   # fine
    column_def("code", "char(5)").null().not_null()          # ColumnConstraintError

Builder classes are composed from one mixin per free category and cached per set of occupied
categories.
"""

from dataclasses import dataclass, field
from enum import Enum
from functools import lru_cache
from typing import TYPE_CHECKING, Any, ClassVar, Union

from mypy_extensions import trait
from typing_extensions import TypeAlias

from sqlchain.builder._fragments import Column, ColumnLike, Expression, ExpressionLike, TableName, TableNameLike
from sqlchain.exceptions import ColumnConstraintError, SQLBuilderError
from sqlchain.utils.logging import get_logger
from sqlchain.utils.type_guards import is_text

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = (
    "ColumnConstraint",
    "ColumnDefinition",
    "ColumnDefinitionBuilder",
    "ColumnDefinitionLike",
    "ConstraintCategory",
    "column_def",
    "is_column_pair",
)

logger = get_logger("builder.ddl")


class ConstraintCategory(str, Enum):
    """Column constraint categories, in rendering order."""

    NULLABILITY = "nullability"
    PRIMARY_KEY = "primary key"
    UNIQUE = "unique"
    DEFAULT = "default"
    REFERENCES = "references"
    CHECK = "check"


_RENDER_ORDER = {category: index for index, category in enumerate(ConstraintCategory)}


@dataclass(frozen=True)
class ColumnConstraint:
    category: ConstraintCategory
    text: str

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class ColumnDefinition:
    """``<name> <type> [<constraint> ...]``."""

    name: str
    type_: str
    constraints: "tuple[ColumnConstraint, ...]" = field(default=())

    def __str__(self) -> str:
        if not self.constraints:
            return f"{self.name} {self.type_}"
        ordered = sorted(self.constraints, key=lambda constraint: _RENDER_ORDER[constraint.category])
        return f"{self.name} {self.type_} {' '.join(str(constraint) for constraint in ordered)}"

    @classmethod
    def of(cls, value: "ColumnDefinitionLike") -> "ColumnDefinition":
        """Convert a builder or a plain ``(name, type)`` pair.

        Raises:
            SQLBuilderError: If the value cannot define a column.
        """
        if isinstance(value, ColumnDefinition):
            return value
        if isinstance(value, ColumnDefinitionBuilder):
            return value.definition
        if is_column_pair(value):
            name, type_ = value
            return cls(name, type_)
        msg = f"Cannot use a value of type {type(value).__name__} as a column definition."
        raise SQLBuilderError(msg)


def is_column_pair(value: Any) -> bool:
    """Whether ``value`` is a plain ``(name, type)`` pair of strings."""
    return isinstance(value, tuple) and len(value) == 2 and all(is_text(part) for part in value)  # noqa: PLR2004


@dataclass(frozen=True)
class ColumnDefinitionBuilder:
    """Base of every column definition builder class.

    Instances come from :func:`column_def`; the concrete class tells which categories are
    occupied.
    """

    name: str
    type_: str
    constraints: "tuple[ColumnConstraint, ...]" = field(default=())

    occupied: ClassVar[frozenset[ConstraintCategory]] = frozenset()

    @property
    def definition(self) -> ColumnDefinition:
        return ColumnDefinition(self.name, self.type_, self.constraints)

    def __str__(self) -> str:
        return str(self.definition)

    def __getattr__(self, name: str) -> Any:
        category = _METHOD_CATEGORIES.get(name)
        if category is None:
            msg = f"{type(self).__name__!r} object has no attribute {name!r}"
            raise AttributeError(msg)
        logger.debug("Rejected %s() on column %s, %s is occupied", name, self.name, category.value)
        raise ColumnConstraintError(category.value, name)

    def _with_constraint(self, category: ConstraintCategory, text: str) -> "ColumnDefinitionBuilder":
        builder_class = _builder_class(self.occupied | {category})
        return builder_class(self.name, self.type_, (*self.constraints, ColumnConstraint(category, text)))


@trait
class NullabilityMethods:
    __slots__ = ()

    _with_constraint: "Callable[[ConstraintCategory, str], ColumnDefinitionBuilder]"

    def null(self) -> ColumnDefinitionBuilder:
        return self._with_constraint(ConstraintCategory.NULLABILITY, "NULL")

    def not_null(self) -> ColumnDefinitionBuilder:
        return self._with_constraint(ConstraintCategory.NULLABILITY, "NOT NULL")


@trait
class PrimaryKeyMethods:
    __slots__ = ()

    _with_constraint: "Callable[[ConstraintCategory, str], ColumnDefinitionBuilder]"

    def primary_key(self) -> ColumnDefinitionBuilder:
        return self._with_constraint(ConstraintCategory.PRIMARY_KEY, "PRIMARY KEY")


@trait
class UniqueMethods:
    __slots__ = ()

    _with_constraint: "Callable[[ConstraintCategory, str], ColumnDefinitionBuilder]"

    def unique(self) -> ColumnDefinitionBuilder:
        return self._with_constraint(ConstraintCategory.UNIQUE, "UNIQUE")


@trait
class DefaultMethods:
    __slots__ = ()

    _with_constraint: "Callable[[ConstraintCategory, str], ColumnDefinitionBuilder]"

    def default(self, expression: ExpressionLike) -> ColumnDefinitionBuilder:
        return self._with_constraint(ConstraintCategory.DEFAULT, f"DEFAULT {Expression.of(expression)}")


@trait
class ReferencesMethods:
    __slots__ = ()

    _with_constraint: "Callable[[ConstraintCategory, str], ColumnDefinitionBuilder]"

    def references(self, table_name: TableNameLike, column: "ColumnLike | None" = None) -> ColumnDefinitionBuilder:
        """Add a foreign key: ``REFERENCES <table>[(<column>)]``.

        Without ``column`` the referenced table's primary key is used.
        """
        target = str(TableName.of(table_name))
        if column is not None:
            target = f"{target}({Column.of(column)})"
        return self._with_constraint(ConstraintCategory.REFERENCES, f"REFERENCES {target}")


@trait
class CheckMethods:
    __slots__ = ()

    _with_constraint: "Callable[[ConstraintCategory, str], ColumnDefinitionBuilder]"

    def check(self, condition: ExpressionLike) -> ColumnDefinitionBuilder:
        return self._with_constraint(ConstraintCategory.CHECK, f"CHECK ({Expression.of(condition)})")


_CATEGORY_MIXINS: "dict[ConstraintCategory, type]" = {
    ConstraintCategory.NULLABILITY: NullabilityMethods,
    ConstraintCategory.PRIMARY_KEY: PrimaryKeyMethods,
    ConstraintCategory.UNIQUE: UniqueMethods,
    ConstraintCategory.DEFAULT: DefaultMethods,
    ConstraintCategory.REFERENCES: ReferencesMethods,
    ConstraintCategory.CHECK: CheckMethods,
}

_METHOD_CATEGORIES: "dict[str, ConstraintCategory]" = {
    "null": ConstraintCategory.NULLABILITY,
    "not_null": ConstraintCategory.NULLABILITY,
    "primary_key": ConstraintCategory.PRIMARY_KEY,
    "unique": ConstraintCategory.UNIQUE,
    "default": ConstraintCategory.DEFAULT,
    "references": ConstraintCategory.REFERENCES,
    "check": ConstraintCategory.CHECK,
}


@lru_cache(maxsize=None)
def _builder_class(occupied: "frozenset[ConstraintCategory]") -> "type[ColumnDefinitionBuilder]":
    mixins = tuple(mixin for category, mixin in _CATEGORY_MIXINS.items() if category not in occupied)
    free = "".join(mixin.__name__.removesuffix("Methods") for mixin in mixins) or "Complete"
    namespace = {
        "__module__": __name__,
        "__doc__": ColumnDefinitionBuilder.__doc__,
        "occupied": occupied,
    }
    return type(f"ColumnDefinitionBuilder[{free}]", (*mixins, ColumnDefinitionBuilder), namespace)


def column_def(name: str, type_: str) -> ColumnDefinitionBuilder:
    """Start a column definition.

    Example:
        >>> str(column_def("director_id", "integer").not_null().references("Person", "id"))
        'director_id integer NOT NULL REFERENCES Person(id)'
    """
    return _builder_class(frozenset())(name, type_)


ColumnDefinitionLike: TypeAlias = Union[ColumnDefinition, ColumnDefinitionBuilder, "tuple[str, str]"]
