"""Abstract base classes for dependency injection."""

from abc import ABC, abstractmethod


class KeyValueStore(ABC):
    """Abstract base class for the local persistent key-value store."""

    @abstractmethod
    def get(self, key: str, user_id: str = "default"):
        """Get the value stored under key. Returns None if not found."""
        pass

    @abstractmethod
    def set(self, key: str, value, user_id: str = "default") -> None:
        """Store value under key, replacing any previous value."""
        pass


class DocumentStore(ABC):
    """Abstract base class for the remote document collection store."""

    @abstractmethod
    def fetch_collection(self, name: str) -> list[dict]:
        """Fetch all documents in a collection.
        Returns list of {id, ...fields} dicts."""
        pass

    @abstractmethod
    def seed_collection(self, name: str, documents: list[dict]) -> None:
        """Insert or replace documents in a collection. Each document is a
        dict with an 'id' key plus its fields."""
        pass
