"""
Identifier allocation for registry entities.
"""

from typing import Dict, Optional

from ..core.enums import EntityKind


DEFAULT_BASES: Dict[EntityKind, int] = {
    EntityKind.STUDENT: 1000,
    EntityKind.COURSE: 100,
}


class IdentifierAllocator:
    """
    Issues monotonically increasing identifiers, one counter per entity kind.

    Counters only move forward, so an identifier is never issued twice for a
    kind even after the entity that held it has been deleted.
    """

    def __init__(self, bases: Optional[Dict[EntityKind, int]] = None):
        self._bases = dict(DEFAULT_BASES)
        if bases:
            self._bases.update(bases)
        self._next: Dict[EntityKind, int] = dict(self._bases)

    def next_id(self, kind: EntityKind) -> int:
        """Issue the next identifier for ``kind``."""
        value = self.peek(kind)
        self._next[kind] = value + 1
        return value

    def peek(self, kind: EntityKind) -> int:
        """Return the identifier the next call to next_id will issue."""
        return self._next.get(kind, self._bases.get(kind, 1))

    def base(self, kind: EntityKind) -> int:
        return self._bases.get(kind, 1)
