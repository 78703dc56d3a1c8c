"""
Type registry for GraphQL SDL projection.

A TypeRegistry tracks the named type/enum definitions emitted during one
projection pass. It provides:
- Registration of definition text under a type name
- Existence checks so shared nested types are emitted once
- Collision-free names for anonymous nested structures
- The registered definitions in emission order

Invariants:
    - A registry lives for exactly one projection call
    - Registration order is emission order
    - The first definition registered under a name wins
    - generate_unique_name counts independently per base name

Example:
    >>> registry = TypeRegistry()
    >>> registry.generate_unique_name("NestedType")
    'NestedType'
    >>> registry.generate_unique_name("NestedType")
    'NestedType1'
"""

from __future__ import annotations

import logging
from typing import Dict, Iterator, List

logger = logging.getLogger(__name__)


class TypeRegistry:
    """Per-projection store of emitted GraphQL type definitions.

    Not thread-safe and not meant to be shared: create one per
    projection call and pass it explicitly through the recursion.
    """

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._types: Dict[str, str] = {}
        self._name_counters: Dict[str, int] = {}

    def register(self, name: str, definition: str) -> None:
        """Record a type definition under ``name``.

        Re-registering an existing name keeps the original definition.

        Args:
            name: GraphQL type or enum name
            definition: Full SDL text of the definition
        """
        if name in self._types:
            logger.debug(f"Type '{name}' already registered, keeping first definition")
            return
        self._types[name] = definition
        logger.debug(f"Registered GraphQL type: {name}")

    def has(self, name: str) -> bool:
        """Whether a definition is registered under ``name``."""
        return name in self._types

    def generate_unique_name(self, base_name: str) -> str:
        """Mint a name from ``base_name``.

        Returns ``base_name`` on the first call for that base, then
        ``base_name1``, ``base_name2``, ... on later calls.
        """
        count = self._name_counters.get(base_name, 0)
        self._name_counters[base_name] = count + 1
        return base_name if count == 0 else f"{base_name}{count}"

    def get_all(self) -> List[str]:
        """All registered definitions in registration order."""
        return list(self._types.values())

    def names(self) -> List[str]:
        """All registered names in registration order."""
        return list(self._types)

    def clear(self) -> None:
        """Drop all definitions and name counters."""
        self._types.clear()
        self._name_counters.clear()

    def __contains__(self, name: object) -> bool:
        return name in self._types

    def __len__(self) -> int:
        return len(self._types)

    def __iter__(self) -> Iterator[str]:
        return iter(self._types)
