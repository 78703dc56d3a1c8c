"""
Core type definitions for the shapecheck schema system.

This module defines the introspectable side of a schema tree:
- SchemaKind: The closed set of node kinds
- MISSING: Sentinel for an absent value (distinct from None, the literal null)
- StringDef / NumberDef / BooleanDef / EnumDef / ArrayDef / ObjectDef:
  Frozen definition records describing one node's constraints
- ParseSuccess / ParseFailure: The two outcomes of SchemaNode.parse()

Invariants:
    - Definitions are immutable once constructed
    - optional and nullable are independent flags
    - Enum options are non-empty, unique, and matched case-sensitively
    - Object field order is insertion order and drives SDL field order

Example:
    >>> from shapecheck.schema.types import EnumDef
    >>> status = EnumDef(options=("draft", "published"))
    >>> status.kind
    <SchemaKind.ENUM: 'enum'>
"""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field as dataclass_field
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, ClassVar, Generic, Literal, Mapping, TypeVar, Union

if TYPE_CHECKING:
    from .nodes import SchemaNode

T = TypeVar("T")


class SchemaKind(Enum):
    """Supported schema node kinds.

    These drive both validation and GraphQL projection.
    """

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ENUM = "enum"
    ARRAY = "array"
    OBJECT = "object"


class _Missing(Enum):
    MISSING = "MISSING"

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING = _Missing.MISSING
"""Marks an absent value, e.g. a property not present in the input mapping."""

Missing = Literal[_Missing.MISSING]


def _check_count(name: str, value: int | None) -> None:
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def _check_bound(name: str, value: float | None) -> None:
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{name} must be a number, got {type(value).__name__}")


@dataclass(frozen=True, kw_only=True)
class SchemaDef:
    """Attributes shared by every definition.

    Attributes:
        optional: The value may be absent (parses to MISSING)
        nullable: The value may be None
    """

    kind: ClassVar[SchemaKind]

    optional: bool = False
    nullable: bool = False


@dataclass(frozen=True, kw_only=True)
class StringDef(SchemaDef):
    """Definition of a string node.

    Attributes:
        min_length: Minimum number of characters, if any
    """

    kind: ClassVar[SchemaKind] = SchemaKind.STRING

    min_length: int | None = None

    def __post_init__(self) -> None:
        _check_count("min_length", self.min_length)


@dataclass(frozen=True, kw_only=True)
class NumberDef(SchemaDef):
    """Definition of a number node.

    Attributes:
        min: Inclusive lower bound, if any
        max: Inclusive upper bound, if any
        is_integer: The value must have no fractional part
    """

    kind: ClassVar[SchemaKind] = SchemaKind.NUMBER

    min: float | None = None
    max: float | None = None
    is_integer: bool = False

    def __post_init__(self) -> None:
        _check_bound("min", self.min)
        _check_bound("max", self.max)
        if self.min is not None and self.max is not None and self.min > self.max:
            raise ValueError(f"min ({self.min}) must be <= max ({self.max})")


@dataclass(frozen=True, kw_only=True)
class BooleanDef(SchemaDef):
    """Definition of a boolean node."""

    kind: ClassVar[SchemaKind] = SchemaKind.BOOLEAN


@dataclass(frozen=True, kw_only=True)
class EnumDef(SchemaDef):
    """Definition of an enum node.

    Attributes:
        options: Allowed values in declaration order
    """

    kind: ClassVar[SchemaKind] = SchemaKind.ENUM

    options: tuple[str, ...]

    def __post_init__(self) -> None:
        if isinstance(self.options, str):
            raise TypeError("options must be a sequence of strings, not a single string")
        options = tuple(self.options)
        if not options:
            raise ValueError("enum options cannot be empty")
        for option in options:
            if not isinstance(option, str):
                raise TypeError(f"enum options must be strings, got {type(option).__name__}")
        if len(options) != len(set(options)):
            raise ValueError(f"Duplicate enum option in {options}")
        object.__setattr__(self, "options", options)


@dataclass(frozen=True, kw_only=True)
class ArrayDef(SchemaDef):
    """Definition of an array node.

    Attributes:
        items: Schema every element is validated against
        min_items: Minimum length, if any
        max_items: Maximum length, if any
    """

    kind: ClassVar[SchemaKind] = SchemaKind.ARRAY

    items: SchemaNode[Any]
    min_items: int | None = None
    max_items: int | None = None

    def __post_init__(self) -> None:
        _check_count("min_items", self.min_items)
        _check_count("max_items", self.max_items)
        if (
            self.min_items is not None
            and self.max_items is not None
            and self.min_items > self.max_items
        ):
            raise ValueError(
                f"min_items ({self.min_items}) must be <= max_items ({self.max_items})"
            )


@dataclass(frozen=True, kw_only=True)
class ObjectDef(SchemaDef):
    """Definition of an object node.

    The field mapping is copied into a read-only view, so a definition
    can never come to reference itself after construction.

    Attributes:
        fields: Field name -> schema node, in declaration order
    """

    kind: ClassVar[SchemaKind] = SchemaKind.OBJECT

    fields: Mapping[str, SchemaNode[Any]] = dataclass_field(
        default_factory=lambda: MappingProxyType({})
    )

    def __post_init__(self) -> None:
        if not isinstance(self.fields, Mapping):
            raise TypeError(f"fields must be a mapping, got {type(self.fields).__name__}")
        for name in self.fields:
            if not isinstance(name, str) or not name:
                raise ValueError(f"Field names must be non-empty strings, got {name!r}")
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    def __hash__(self) -> int:
        """Hash over flags and field items (mappingproxy itself is unhashable)."""
        return hash((self.optional, self.nullable, tuple(self.fields.items())))


AnySchemaDef = Union[StringDef, NumberDef, BooleanDef, EnumDef, ArrayDef, ObjectDef]


@dataclass(frozen=True)
class ParseSuccess(Generic[T]):
    """Successful parse carrying the normalized value."""

    data: T
    ok: ClassVar[bool] = True


@dataclass(frozen=True)
class ParseFailure:
    """Failed parse carrying every collected error message.

    Attributes:
        errors: Non-empty, ordered error messages
    """

    errors: tuple[str, ...]
    ok: ClassVar[bool] = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "errors", tuple(self.errors))
        if not self.errors:
            raise ValueError("ParseFailure requires at least one error")


ParseResult = Union[ParseSuccess[T], ParseFailure]
