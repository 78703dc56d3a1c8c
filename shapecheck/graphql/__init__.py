"""
GraphQL SDL projection for shapecheck object schemas.
"""

from .registry import TypeRegistry
from .sdl import (
    generate_graphql_schema,
    schema_def_to_graphql_type,
    to_graphql_sdl,
    to_graphql_type_config,
)

__all__ = [
    "TypeRegistry",
    "to_graphql_sdl",
    "generate_graphql_schema",
    "schema_def_to_graphql_type",
    "to_graphql_type_config",
]
