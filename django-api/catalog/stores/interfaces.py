"""Store interfaces (repository pattern).

Stores must be swappable and deal only in opaque serialized collections.
"""

from abc import ABC, abstractmethod


class BlobStore(ABC):
    """Interface for durable storage of one serialized blob per collection."""

    @abstractmethod
    def read(self, name: str) -> bytes | None:
        """Return the stored blob, or None if absent or the medium is unavailable."""
        ...

    @abstractmethod
    def read_for_update(self, name: str) -> bytes | None:
        """Return the current blob ahead of a rewrite, bypassing any read cache.

        Raises:
            PersistenceError: If the medium is unavailable. An unreadable
                collection must never be mistaken for an empty one here.
        """
        ...

    @abstractmethod
    def write(self, name: str, blob: bytes) -> None:
        """Replace the stored blob.

        Raises:
            PersistenceError: If the blob could not be durably written.
        """
        ...
