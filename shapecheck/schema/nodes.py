"""
Schema nodes: the validators a schema tree is built from.

Every node exposes the same contract:
- parse(value) -> ParseSuccess | ParseFailure
- definition: the frozen record describing its constraints

parse() evaluates in a fixed order for every kind:
    1. absent value with a default configured -> the default
    2. absent value on an optional node -> MISSING
    3. None on a nullable node -> None
    4. kind-specific type check, then constraint checks

A failed type check short-circuits the constraint checks. Constraint
violations are all collected, never short-circuited.

Invariants:
    - Nodes are frozen; modifiers return a new node
    - parse() never raises for bad input
    - A failure never carries partial data

Example:
    >>> from shapecheck import validate
    >>> user = validate.object({
    ...     "name": validate.string().min(1),
    ...     "age": validate.number().min(0).int(),
    ... })
    >>> user.parse({"name": "Ada", "age": "36"}).errors
    ('age: Not a number',)
"""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, replace
from dataclasses import field as dataclass_field
from typing import Any, Generic, TypeVar, Union

from ..errors import ValidationError
from .types import (
    MISSING,
    ArrayDef,
    BooleanDef,
    EnumDef,
    NumberDef,
    ObjectDef,
    ParseFailure,
    ParseResult,
    ParseSuccess,
    SchemaDef,
    SchemaKind,
    StringDef,
)

T = TypeVar("T")
NodeT = TypeVar("NodeT", bound="SchemaNode[Any]")


class SchemaNode(ABC, Generic[T]):
    """Base contract shared by all schema nodes.

    Subclasses are frozen dataclasses with two fields: ``definition`` and
    ``default_value`` (MISSING when no default is configured).
    """

    definition: SchemaDef
    default_value: Any

    @property
    def kind(self) -> SchemaKind:
        """The node's kind tag."""
        return self.definition.kind

    def parse(self, value: Any = MISSING) -> ParseResult[T]:
        """Validate and normalize a value.

        Args:
            value: The value to validate; MISSING when absent

        Returns:
            ParseSuccess with the normalized value, or ParseFailure
            with every collected error message
        """
        if value is MISSING and self.default_value is not MISSING:
            return ParseSuccess(copy.deepcopy(self.default_value))
        if value is MISSING and self.definition.optional:
            return ParseSuccess(MISSING)
        if value is None and self.definition.nullable:
            return ParseSuccess(None)
        return self._parse_value(value)

    def parse_or_raise(self, value: Any = MISSING) -> T:
        """Parse a value and raise if invalid.

        Raises:
            ValidationError: If validation fails
        """
        result = self.parse(value)
        if isinstance(result, ParseFailure):
            raise ValidationError(
                f"Validation failed: {'; '.join(result.errors)}",
                errors=result.errors,
            )
        return result.data

    def optional(self: NodeT) -> NodeT:
        """Return a copy that accepts an absent value."""
        return replace(self, definition=replace(self.definition, optional=True))

    def nullable(self: NodeT) -> NodeT:
        """Return a copy that accepts None."""
        return replace(self, definition=replace(self.definition, nullable=True))

    def default(self: NodeT, value: Any) -> NodeT:
        """Return a copy that resolves an absent value to ``value``.

        The default wins over optional: an absent value parses to the
        default, never to MISSING.
        """
        return replace(self, default_value=value)

    @abstractmethod
    def _parse_value(self, value: Any) -> ParseResult[T]:
        """Run the kind-specific type and constraint checks."""


@dataclass(frozen=True)
class StringSchema(SchemaNode[str]):
    """String validator.

    Example:
        >>> validate.string().min(3).parse("hi").errors
        ('String must be at least 3 characters',)
    """

    definition: StringDef = dataclass_field(default_factory=StringDef)
    default_value: Any = MISSING

    def min(self, length: int) -> StringSchema:
        """Require at least ``length`` characters."""
        return replace(self, definition=replace(self.definition, min_length=length))

    def _parse_value(self, value: Any) -> ParseResult[str]:
        if not isinstance(value, str):
            return ParseFailure(("Not a string",))

        errors: list[str] = []
        min_length = self.definition.min_length
        if min_length is not None and len(value) < min_length:
            errors.append(f"String must be at least {min_length} characters")

        return ParseFailure(tuple(errors)) if errors else ParseSuccess(value)


@dataclass(frozen=True)
class NumberSchema(SchemaNode[Union[int, float]]):
    """Number validator.

    bool is rejected even though it subclasses int.
    """

    definition: NumberDef = dataclass_field(default_factory=NumberDef)
    default_value: Any = MISSING

    def min(self, bound: float) -> NumberSchema:
        """Require the value to be at least ``bound``."""
        return replace(self, definition=replace(self.definition, min=bound))

    def max(self, bound: float) -> NumberSchema:
        """Require the value to be at most ``bound``."""
        return replace(self, definition=replace(self.definition, max=bound))

    def int(self) -> NumberSchema:
        """Require the value to have no fractional part."""
        return replace(self, definition=replace(self.definition, is_integer=True))

    def _parse_value(self, value: Any) -> ParseResult[Union[int, float]]:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return ParseFailure(("Not a number",))

        errors: list[str] = []
        d = self.definition
        if d.min is not None and value < d.min:
            errors.append(f"Number must be at least {d.min}")
        if d.max is not None and value > d.max:
            errors.append(f"Number must be at most {d.max}")
        if d.is_integer and not _is_integral(value):
            errors.append("Number not integer")

        return ParseFailure(tuple(errors)) if errors else ParseSuccess(value)


def _is_integral(value: Union[int, float]) -> bool:
    if isinstance(value, int):
        return True
    return value.is_integer()


@dataclass(frozen=True)
class BooleanSchema(SchemaNode[bool]):
    """Boolean validator. Only True and False pass."""

    definition: BooleanDef = dataclass_field(default_factory=BooleanDef)
    default_value: Any = MISSING

    def _parse_value(self, value: Any) -> ParseResult[bool]:
        if not isinstance(value, bool):
            return ParseFailure(("Not a boolean",))
        return ParseSuccess(value)


@dataclass(frozen=True)
class EnumSchema(SchemaNode[str]):
    """Validator accepting one of a fixed set of strings.

    Membership is an exact, case-sensitive match.
    """

    definition: EnumDef
    default_value: Any = MISSING

    @property
    def options(self) -> tuple[str, ...]:
        """Allowed values in declaration order."""
        return self.definition.options

    def _parse_value(self, value: Any) -> ParseResult[str]:
        if not isinstance(value, str):
            return ParseFailure(("Not a string",))
        if value not in self.definition.options:
            return ParseFailure(
                (f"Value must be one of: {', '.join(self.definition.options)}",)
            )
        return ParseSuccess(value)


@dataclass(frozen=True)
class ArraySchema(SchemaNode[list]):
    """Validator for a list whose elements all match one item schema.

    Length bounds are checked first, then every element. A failing element
    contributes ``Item at index I: <errors>``; valid elements are collected
    but only returned when no element failed.
    """

    definition: ArrayDef
    default_value: Any = MISSING

    def __post_init__(self) -> None:
        if not isinstance(self.definition.items, SchemaNode):
            raise TypeError(
                f"Array items must be a schema node, got {type(self.definition.items).__name__}"
            )

    @property
    def items(self) -> SchemaNode[Any]:
        """Schema applied to each element."""
        return self.definition.items

    def min(self, count: int) -> ArraySchema:
        """Require at least ``count`` elements."""
        return replace(self, definition=replace(self.definition, min_items=count))

    def max(self, count: int) -> ArraySchema:
        """Require at most ``count`` elements."""
        return replace(self, definition=replace(self.definition, max_items=count))

    def _parse_value(self, value: Any) -> ParseResult[list]:
        if not isinstance(value, (list, tuple)):
            return ParseFailure(("Not an array",))

        errors: list[str] = []
        d = self.definition
        if d.min_items is not None and len(value) < d.min_items:
            errors.append(f"Array must have at least {d.min_items} items")
        if d.max_items is not None and len(value) > d.max_items:
            errors.append(f"Array must have at most {d.max_items} items")

        parsed: list[Any] = []
        for index, item in enumerate(value):
            result = d.items.parse(item)
            if isinstance(result, ParseFailure):
                errors.append(f"Item at index {index}: {', '.join(result.errors)}")
            else:
                parsed.append(result.data)

        return ParseFailure(tuple(errors)) if errors else ParseSuccess(parsed)


@dataclass(frozen=True)
class ObjectSchema(SchemaNode[dict]):
    """Validator for a mapping with a fixed set of named fields.

    Every declared field is attempted, even after an earlier one fails.
    Failing fields contribute errors prefixed with ``<field>: ``. Unknown
    input keys are ignored, and optional fields that are absent are left
    out of the output.
    """

    definition: ObjectDef = dataclass_field(default_factory=ObjectDef)
    default_value: Any = MISSING

    def __post_init__(self) -> None:
        for name, node in self.definition.fields.items():
            if not isinstance(node, SchemaNode):
                raise TypeError(
                    f"Field '{name}' must be a schema node, got {type(node).__name__}"
                )

    @property
    def fields(self) -> Mapping[str, SchemaNode[Any]]:
        """Declared fields in declaration order."""
        return self.definition.fields

    def _parse_value(self, value: Any) -> ParseResult[dict]:
        if not isinstance(value, Mapping):
            return ParseFailure(("Not an object",))

        errors: list[str] = []
        data: dict[str, Any] = {}
        for name, node in self.definition.fields.items():
            result = node.parse(value.get(name, MISSING))
            if isinstance(result, ParseFailure):
                errors.extend(f"{name}: {error}" for error in result.errors)
            elif result.data is not MISSING:
                data[name] = result.data

        return ParseFailure(tuple(errors)) if errors else ParseSuccess(data)


AnySchema = Union[
    StringSchema, NumberSchema, BooleanSchema, EnumSchema, ArraySchema, ObjectSchema
]
