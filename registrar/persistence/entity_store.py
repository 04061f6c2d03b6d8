"""
In-memory keyed store used by the registries.
"""

from typing import Dict, Generic, List, Optional

from ..core.interfaces import Repository, K, V


class EntityStore(Repository[K, V], Generic[K, V]):
    """
    Keyed collection for one entity kind.

    Keys are unique; ``insert`` overwrites silently, so callers are
    responsible for key freshness. Not thread-safe.
    """

    def __init__(self, entity_type: str = "entity"):
        self._entity_type = entity_type
        self._entities: Dict[K, V] = {}

    def insert(self, key: K, value: V) -> None:
        """Store value under key."""
        self._entities[key] = value

    def get(self, key: K) -> Optional[V]:
        """Find a value by key."""
        return self._entities.get(key)

    def remove(self, key: K) -> bool:
        """Delete by key."""
        if key not in self._entities:
            return False
        del self._entities[key]
        return True

    def all(self) -> List[V]:
        """Snapshot list of all values."""
        return list(self._entities.values())

    def update(self, key: K, value: V) -> bool:
        """Replace an existing value."""
        if key not in self._entities:
            return False
        self._entities[key] = value
        return True

    def keys(self) -> List[K]:
        return list(self._entities)

    def __contains__(self, key: object) -> bool:
        return key in self._entities

    def __len__(self) -> int:
        return len(self._entities)

    def __repr__(self) -> str:
        return f"EntityStore({self._entity_type}, {len(self._entities)} entries)"
