"""
shapecheck - composable validation schemas with GraphQL SDL projection.

Build a tree of schema nodes, then parse untrusted values against it:

Example:
    >>> from shapecheck import validate, to_graphql_sdl
    >>>
    >>> User = validate.object({
    ...     "id": validate.number().int(),
    ...     "name": validate.string().min(1),
    ...     "status": validate.enum(["draft", "published"]),
    ... })
    >>>
    >>> result = User.parse({"id": 1, "name": "Ada", "status": "draft"})
    >>> result.ok
    True
    >>> print(to_graphql_sdl(User, "User"))
    enum StatusEnum {
      DRAFT
      PUBLISHED
    }
    <BLANKLINE>
    type User {
      id: Int!
      name: String!
      status: StatusEnum!
    }

Invariants:
    - parse() never raises for bad input
    - Modifiers return new nodes; built nodes are safe to share
    - SDL output is deterministic

Version: 0.1.0
"""

__version__ = "0.1.0"

from . import validate
from .config import Settings, get_settings
from .errors import SchemaError, ShapeCheckError, ValidationError
from .graphql import (
    TypeRegistry,
    generate_graphql_schema,
    schema_def_to_graphql_type,
    to_graphql_sdl,
    to_graphql_type_config,
)
from .log import setup_logging
from .schema import (
    MISSING,
    ArraySchema,
    BooleanSchema,
    EnumSchema,
    NumberSchema,
    ObjectSchema,
    ParseFailure,
    ParseResult,
    ParseSuccess,
    SchemaKind,
    SchemaNode,
    StringSchema,
)

__all__ = [
    # Version
    "__version__",
    # Construction
    "validate",
    # Schema nodes
    "SchemaNode",
    "SchemaKind",
    "StringSchema",
    "NumberSchema",
    "BooleanSchema",
    "EnumSchema",
    "ArraySchema",
    "ObjectSchema",
    "MISSING",
    # Results
    "ParseSuccess",
    "ParseFailure",
    "ParseResult",
    # GraphQL
    "TypeRegistry",
    "to_graphql_sdl",
    "generate_graphql_schema",
    "schema_def_to_graphql_type",
    "to_graphql_type_config",
    # Errors
    "ShapeCheckError",
    "ValidationError",
    "SchemaError",
    # Configuration
    "Settings",
    "get_settings",
    "setup_logging",
]
