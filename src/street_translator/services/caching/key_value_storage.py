"""Key-value storage abstraction - the persistent medium behind the translation cache."""

from abc import ABC, abstractmethod
from typing import Optional


class KeyValueStorage(ABC):
    """
    Abstract interface for host-provided persistent storage.

    A storage holds opaque strings in named slots. Implementations
    (FileKeyValueStorage, InMemoryKeyValueStorage) handle storage details
    and raise PersistenceError when the medium cannot be used.
    """

    @abstractmethod
    def read(self, slot: str) -> Optional[str]:
        """
        Read the contents of a slot.

        Args:
            slot: Slot name.

        Returns:
            The stored string, or None if the slot was never written.
        """
        pass

    @abstractmethod
    def write(self, slot: str, data: str) -> None:
        """Replace the contents of a slot."""
        pass

    @abstractmethod
    def remove(self, slot: str) -> None:
        """Delete a slot. Removing a missing slot is not an error."""
        pass


class InMemoryKeyValueStorage(KeyValueStorage):
    """
    Simple in-memory storage.

    Used for testing and session-only caching. No persistence.
    """

    def __init__(self):
        self._slots: dict[str, str] = {}

    def read(self, slot: str) -> Optional[str]:
        return self._slots.get(slot)

    def write(self, slot: str, data: str) -> None:
        self._slots[slot] = data

    def remove(self, slot: str) -> None:
        self._slots.pop(slot, None)
