"""In-process implementation of the BlobStore, for ephemeral sessions."""

import logging

from catalog.domain.errors import PersistenceError
from catalog.stores.interfaces import BlobStore

logger = logging.getLogger(__name__)


class InMemoryBlobStore(BlobStore):
    """Dictionary-backed store. Contents are lost with the process."""

    def __init__(self, initial: dict[str, bytes] | None = None) -> None:
        self._blobs: dict[str, bytes] = dict(initial or {})
        self.available = True

    def read(self, name: str) -> bytes | None:
        if not self.available:
            logger.warning("Store unavailable, reading %s as empty", name)
            return None
        return self._blobs.get(name)

    def read_for_update(self, name: str) -> bytes | None:
        if not self.available:
            raise PersistenceError.for_collection(name)
        return self._blobs.get(name)

    def write(self, name: str, blob: bytes) -> None:
        if not self.available:
            raise PersistenceError.for_collection(name)
        self._blobs[name] = bytes(blob)
