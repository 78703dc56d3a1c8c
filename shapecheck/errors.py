"""
Error types for shapecheck.

This module defines the exceptions raised by the library:
- ShapeCheckError: Base exception
- ValidationError: Input failed validation (raised by parse_or_raise only)
- SchemaError: A schema tree cannot be projected to GraphQL SDL

Invariants:
    - All errors inherit from ShapeCheckError
    - parse() never raises for bad input; it returns a ParseFailure
    - SchemaError signals a programming error in schema construction
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence


class ShapeCheckError(Exception):
    """Base exception for all shapecheck errors.

    Attributes:
        message: Error message
        code: Error code for programmatic handling
        details: Additional error context
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or "SHAPECHECK_ERROR"
        self.details = details or {}


class ValidationError(ShapeCheckError):
    """Input value failed validation.

    Raised when:
    - parse_or_raise() is used and the value does not match the schema

    Attributes:
        errors: Every error message collected for the value, in order
    """

    def __init__(
        self,
        message: str,
        errors: Optional[Sequence[str]] = None,
    ) -> None:
        error_list: List[str] = list(errors or [])
        super().__init__(
            message,
            code="VALIDATION_ERROR",
            details={"errors": error_list},
        )
        self.errors = error_list


class SchemaError(ShapeCheckError):
    """Schema cannot be converted to GraphQL SDL.

    Raised when:
    - The root passed to the projector is not an object schema
    - An object definition carries no field mapping
    """

    def __init__(
        self,
        message: str,
        kind: Optional[str] = None,
    ) -> None:
        super().__init__(
            message,
            code="SCHEMA_ERROR",
            details={"kind": kind},
        )
        self.kind = kind
