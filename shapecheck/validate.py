"""
Factory functions for building schema nodes.

This module is the construction entry point, meant to be imported as a
namespace:

    >>> from shapecheck import validate
    >>> user = validate.object({
    ...     "email": validate.string().min(5),
    ...     "age": validate.number().int().optional(),
    ...     "role": validate.enum(["admin", "user"]),
    ...     "tags": validate.array(validate.string()).max(10),
    ... })
    >>> user.parse({"email": "ada@example.com", "role": "admin", "tags": []}).ok
    True

Every factory returns a fresh node; modifiers return new nodes, so a
node can be shared between schemas once built.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from .schema.nodes import (
    ArraySchema,
    BooleanSchema,
    EnumSchema,
    NumberSchema,
    ObjectSchema,
    SchemaNode,
    StringSchema,
)
from .schema.types import ArrayDef, EnumDef, ObjectDef


def string() -> StringSchema:
    """Create a string schema."""
    return StringSchema()


def number() -> NumberSchema:
    """Create a number schema (int or float, never bool)."""
    return NumberSchema()


def boolean() -> BooleanSchema:
    """Create a boolean schema."""
    return BooleanSchema()


def enum(options: Sequence[str]) -> EnumSchema:
    """Create an enum schema.

    Args:
        options: Allowed values, non-empty and unique

    Raises:
        ValueError: If options is empty or has duplicates
        TypeError: If an option is not a string
    """
    return EnumSchema(definition=EnumDef(options=tuple(options)))


def array(items: SchemaNode[Any]) -> ArraySchema:
    """Create an array schema validating each element against ``items``.

    Raises:
        TypeError: If items is not a schema node
    """
    return ArraySchema(definition=ArrayDef(items=items))


def object(fields: Optional[Mapping[str, SchemaNode[Any]]] = None) -> ObjectSchema:
    """Create an object schema.

    Args:
        fields: Field name -> schema node; order defines SDL field order

    Raises:
        TypeError: If a field value is not a schema node
        ValueError: If a field name is empty
    """
    return ObjectSchema(definition=ObjectDef(fields=fields if fields is not None else {}))
