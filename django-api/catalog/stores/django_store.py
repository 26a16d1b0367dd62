"""Django ORM implementation of the BlobStore.

Reads go through the Django cache; the post_save/post_delete receivers in
catalog/signals.py drop the cached entry whenever a row changes. Reads that
precede a write always go to the database, so a stale cache entry never
becomes the base of a rewrite.
"""

import logging

from django.conf import settings
from django.core.cache import caches
from django.db import DatabaseError, transaction

from catalog.domain.errors import PersistenceError
from catalog.models import StoredCollection
from catalog.stores.interfaces import BlobStore

logger = logging.getLogger(__name__)

CACHE_KEY_PREFIX = "catalog:collection:"


def cache_alias() -> str:
    return getattr(settings, "CATALOG", {}).get("CACHE_ALIAS", "default")


def cache_key(name: str) -> str:
    return f"{CACHE_KEY_PREFIX}{name}"


class DjangoBlobStore(BlobStore):
    """Database-backed blob store using Django ORM."""

    def __init__(self, cache_timeout: int | None = 300) -> None:
        self._cache = caches[cache_alias()]
        self._timeout = cache_timeout

    def read(self, name: str) -> bytes | None:
        cached = self._cache.get(cache_key(name))
        if cached is not None:
            return cached
        try:
            blob = self._select(name)
        except DatabaseError:
            logger.warning("Collection %s unreadable, treating as empty", name, exc_info=True)
            return None
        if blob is not None:
            self._cache.set(cache_key(name), blob, self._timeout)
        return blob

    def read_for_update(self, name: str) -> bytes | None:
        try:
            return self._select(name)
        except DatabaseError as exc:
            logger.error("Failed to read collection %s before writing", name, exc_info=True)
            raise PersistenceError.for_collection(name) from exc

    def write(self, name: str, blob: bytes) -> None:
        try:
            with transaction.atomic():
                StoredCollection.objects.update_or_create(
                    name=name, defaults={"payload": bytes(blob)}
                )
        except DatabaseError as exc:
            logger.error("Failed to write collection %s", name, exc_info=True)
            raise PersistenceError.for_collection(name) from exc

    def _select(self, name: str) -> bytes | None:
        payload = (
            StoredCollection.objects.filter(name=name)
            .values_list("payload", flat=True)
            .first()
        )
        return None if payload is None else bytes(payload)
