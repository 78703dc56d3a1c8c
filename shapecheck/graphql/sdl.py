"""
GraphQL SDL projection of object schemas.

Walks an object schema tree and emits one GraphQL ``type`` block per
object and one ``enum`` block per enum, inlining scalars and lists:

    >>> from shapecheck import validate
    >>> user = validate.object({
    ...     "id": validate.number().int(),
    ...     "name": validate.string(),
    ... })
    >>> print(to_graphql_sdl(user, "User"))
    type User {
      id: Int!
      name: String!
    }

Naming rules for nested structures:
    - object field ``address`` -> type ``Address``
    - enum field ``status`` -> enum ``StatusEnum``
    - arrays pass their field name down to the item schema
    - without a field name, names are minted from ``NestedType``/``Enum``

A nested name that is already registered is reused, never emitted twice.
A root name that a nested type or enum already claimed is a SchemaError.
Nested definitions are registered before the type that references them,
and that registration order is the output order.

Invariants:
    - Output is deterministic for a given tree and settings
    - A TypeRegistry never outlives one projection call
    - Misuse raises SchemaError before anything is emitted
"""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, Mapping, Optional

from ..config import Settings, get_settings
from ..errors import SchemaError
from ..schema.nodes import SchemaNode
from ..schema.types import (
    ArrayDef,
    BooleanDef,
    EnumDef,
    NumberDef,
    ObjectDef,
    SchemaDef,
    StringDef,
)
from .registry import TypeRegistry

logger = logging.getLogger(__name__)

_INVALID_ENUM_CHARS = re.compile(r"[^A-Z0-9]")


def to_graphql_sdl(
    schema: SchemaNode[Any],
    type_name: str,
    settings: Optional[Settings] = None,
) -> str:
    """Convert an object schema to a GraphQL SDL document.

    Args:
        schema: Root object schema
        type_name: GraphQL name of the root type
        settings: Output settings (defaults to get_settings())

    Returns:
        The root type plus every nested type/enum, separated by blank lines

    Raises:
        SchemaError: If the root is not an object schema, or a nested type
            or enum resolves to the root name
    """
    settings = settings or get_settings()
    registry = TypeRegistry()
    logger.debug(f"Projecting '{type_name}' to GraphQL SDL")
    _resolve_root(schema.definition, type_name, registry, settings)
    logger.debug(f"Projected '{type_name}' into {len(registry)} definition(s)")
    return "\n\n".join(registry.get_all())


def generate_graphql_schema(
    schemas: Mapping[str, SchemaNode[Any]],
    settings: Optional[Settings] = None,
) -> str:
    """Generate one SDL document from several named object schemas.

    All schemas share a single registry, so a nested type or enum that
    several of them reach under the same name is emitted once.

    Args:
        schemas: Type name -> object schema
        settings: Output settings (defaults to get_settings())

    Returns:
        All definitions in first-registration order, separated by blank lines

    Raises:
        SchemaError: If any schema is not an object schema, or a root name
            was already claimed by a nested type or enum
    """
    settings = settings or get_settings()
    registry = TypeRegistry()
    for type_name, schema in schemas.items():
        _resolve_root(schema.definition, type_name, registry, settings)
    logger.debug(
        f"Generated GraphQL schema for {len(schemas)} root type(s), "
        f"{len(registry)} definition(s)"
    )
    return "\n\n".join(registry.get_all())


def schema_def_to_graphql_type(
    definition: SchemaDef,
    field_name: Optional[str] = None,
    registry: Optional[TypeRegistry] = None,
    settings: Optional[Settings] = None,
) -> str:
    """Convert a schema definition to a GraphQL type reference.

    A field is nullable in SDL when its definition is nullable or optional;
    otherwise the reference carries a trailing ``!``.

    Without a registry, enums render as a quoted union and objects as
    ``JSON``, since no named definition can be emitted.

    Example:
        >>> schema_def_to_graphql_type(validate.string().min(1).definition)
        'String!'
    """
    settings = settings or get_settings()
    nullable = definition.nullable or definition.optional

    def finish(base_type: str) -> str:
        return base_type if nullable else f"{base_type}!"

    if isinstance(definition, StringDef):
        return finish("String")

    if isinstance(definition, NumberDef):
        return finish("Int" if definition.is_integer else "Float")

    if isinstance(definition, BooleanDef):
        return finish("Boolean")

    if isinstance(definition, EnumDef):
        if registry is None:
            return " | ".join(f'"{option}"' for option in definition.options)

        if field_name:
            enum_name = f"{_capitalize(field_name)}{settings.enum_suffix}"
        else:
            enum_name = registry.generate_unique_name(settings.anonymous_enum_name)

        if not registry.has(enum_name):
            registry.register(enum_name, _enum_to_sdl(definition, enum_name, settings))
        return finish(enum_name)

    if isinstance(definition, ArrayDef):
        item_type = schema_def_to_graphql_type(
            definition.items.definition, field_name, registry, settings
        )
        if item_type.endswith("!"):
            item_type = item_type[:-1]
        return finish(f"[{item_type}!]")

    if isinstance(definition, ObjectDef):
        if registry is None:
            return "JSON"

        if field_name:
            nested_name = _capitalize(field_name)
        else:
            nested_name = registry.generate_unique_name(settings.anonymous_type_name)

        if not registry.has(nested_name):
            registry.register(
                nested_name, _object_to_sdl(definition, nested_name, registry, settings)
            )
        return finish(nested_name)

    logger.warning(
        f"No GraphQL mapping for {type(definition).__name__}, falling back to String"
    )
    return "String"


def to_graphql_type_config(schema: SchemaNode[Any], type_name: str) -> Dict[str, Any]:
    """Convert an object schema to a graphql-core style type config.

    Field types are resolved without a registry, so nested objects map
    to ``JSON`` and enums to a quoted union.

    Returns:
        ``{"name": type_name, "fields": {field: {"type": ...}}}``

    Raises:
        SchemaError: If the schema is not an object schema
    """
    definition = schema.definition
    if not isinstance(definition, ObjectDef):
        raise SchemaError(
            "Only object schemas can be converted to GraphQL type configs",
            kind=definition.kind.value,
        )

    fields = {
        name: {"type": schema_def_to_graphql_type(node.definition, name)}
        for name, node in definition.fields.items()
    }
    return {"name": type_name, "fields": fields}


def _resolve_root(
    definition: SchemaDef,
    type_name: str,
    registry: TypeRegistry,
    settings: Settings,
) -> str:
    """Register a root object type under ``type_name``; return the name.

    Raises:
        SchemaError: If the root is not an object schema, or if a nested
            type or enum already claimed ``type_name``
    """
    if not isinstance(definition, ObjectDef):
        raise SchemaError(
            f"Cannot convert schema type '{definition.kind.value}' to GraphQL SDL. "
            "Only object schemas are supported at the root level.",
            kind=definition.kind.value,
        )

    if registry.has(type_name):
        raise _name_conflict(type_name)
    body = _object_to_sdl(definition, type_name, registry, settings)
    # Field resolution may have registered a nested type under the root's name
    if registry.has(type_name):
        raise _name_conflict(type_name)
    registry.register(type_name, body)
    return type_name


def _name_conflict(type_name: str) -> SchemaError:
    return SchemaError(
        f"Type name '{type_name}' is already used by a nested type or enum; "
        "rename the root type or the conflicting field.",
        kind="object",
    )


def _object_to_sdl(
    definition: ObjectDef,
    type_name: str,
    registry: TypeRegistry,
    settings: Settings,
) -> str:
    """Build the ``type`` block for an object definition.

    Nested types discovered while resolving fields are registered first.
    """
    fields = getattr(definition, "fields", None)
    if not isinstance(fields, Mapping):
        raise SchemaError("Invalid object schema definition", kind="object")

    indent = " " * settings.sdl_indent
    lines = []
    for field_name, node in fields.items():
        field_type = schema_def_to_graphql_type(node.definition, field_name, registry, settings)
        lines.append(f"{indent}{field_name}: {field_type}")

    return f"type {type_name} {{\n" + "\n".join(lines) + "\n}"


def _enum_to_sdl(definition: EnumDef, enum_name: str, settings: Settings) -> str:
    indent = " " * settings.sdl_indent
    values = "\n".join(
        f"{indent}{_INVALID_ENUM_CHARS.sub('_', option.upper())}"
        for option in definition.options
    )
    return f"enum {enum_name} {{\n{values}\n}}"


def _capitalize(name: str) -> str:
    # str.capitalize() would lowercase the rest of the name
    return name[:1].upper() + name[1:]
