"""
Persistence module: identifier allocation and in-memory entity storage.
"""

from .entity_store import EntityStore
from .identifiers import IdentifierAllocator, DEFAULT_BASES

__all__ = [
    "EntityStore",
    "IdentifierAllocator",
    "DEFAULT_BASES",
]
