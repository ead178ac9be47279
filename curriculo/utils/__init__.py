"""
Shared utilities for CURRICULO.

Common functionality used across contexts:
- Logger setup with provenance
- Identifier generation
- Document text reading
"""

from curriculo.utils.identifiers import (
    IdGenerator,
    SeededIdGenerator,
    SequentialIdGenerator,
    UUIDGenerator,
)

__all__ = ["IdGenerator", "SeededIdGenerator", "SequentialIdGenerator", "UUIDGenerator"]
