"""
Identifier sources for parsed records.

Every record the parser creates gets an identifier from an IdGenerator that
the caller passes in. UUIDGenerator is the production default; the other two
make repeated parses of the same text produce the same identifiers.
"""

import random
import uuid
from typing import Protocol, runtime_checkable


@runtime_checkable
class IdGenerator(Protocol):
    """Anything that hands out a fresh identifier string per call."""

    def new_id(self) -> str: ...


class UUIDGenerator:
    """Random uuid4 identifiers (one per call, never repeated)."""

    def new_id(self) -> str:
        return str(uuid.uuid4())


class SequentialIdGenerator:
    """
    Counter-based identifiers: "<prefix>-1", "<prefix>-2", ...

    A fresh instance always restarts at 1, so two parses that each get their
    own instance assign identical identifiers.
    """

    def __init__(self, prefix: str = "id"):
        self.prefix = prefix
        self._counter = 0

    def new_id(self) -> str:
        self._counter += 1
        return f"{self.prefix}-{self._counter}"


class SeededIdGenerator:
    """uuid-shaped identifiers drawn from a seeded random stream."""

    def __init__(self, seed: int = 0):
        self.seed = seed
        self._rng = random.Random(seed)

    def new_id(self) -> str:
        return str(uuid.UUID(int=self._rng.getrandbits(128), version=4))
