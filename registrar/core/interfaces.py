"""
Core interfaces and abstract base classes for the registrar.
"""

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar


K = TypeVar('K')
V = TypeVar('V')


class Repository(ABC, Generic[K, V]):
    """Abstract base class for keyed entity collections."""
    
    @abstractmethod
    def insert(self, key: K, value: V) -> None:
        """Store a value under key, replacing any existing value."""
        pass
    
    @abstractmethod
    def get(self, key: K) -> Optional[V]:
        """Find a value by key."""
        pass
    
    @abstractmethod
    def remove(self, key: K) -> bool:
        """Delete by key. Returns True iff an entry existed."""
        pass
    
    @abstractmethod
    def all(self) -> List[V]:
        """Snapshot of all stored values."""
        pass
    
    @abstractmethod
    def update(self, key: K, value: V) -> bool:
        """Replace an existing value. Returns False if key is absent."""
        pass
