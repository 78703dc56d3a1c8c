"""
Schema module for shapecheck.

This module provides the validation engine:
- Definition records (StringDef, NumberDef, ..., ObjectDef)
- Schema nodes implementing the parse contract
- Parse results (ParseSuccess, ParseFailure)

Invariants:
    - Nodes and definitions are immutable after construction
    - parse() reports bad input as a ParseFailure, never an exception
    - Object trees are acyclic: field mappings are frozen at construction
"""

from .nodes import (
    AnySchema,
    ArraySchema,
    BooleanSchema,
    EnumSchema,
    NumberSchema,
    ObjectSchema,
    SchemaNode,
    StringSchema,
)
from .types import (
    MISSING,
    AnySchemaDef,
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

__all__ = [
    # Definitions
    "SchemaKind",
    "SchemaDef",
    "StringDef",
    "NumberDef",
    "BooleanDef",
    "EnumDef",
    "ArrayDef",
    "ObjectDef",
    "AnySchemaDef",
    "MISSING",
    # Nodes
    "SchemaNode",
    "StringSchema",
    "NumberSchema",
    "BooleanSchema",
    "EnumSchema",
    "ArraySchema",
    "ObjectSchema",
    "AnySchema",
    # Results
    "ParseSuccess",
    "ParseFailure",
    "ParseResult",
]
