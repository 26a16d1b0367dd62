"""Generic repository over one stored collection.

The store is the only source of truth. Reads decode the stored blob, and
every mutation re-reads the current blob under the repository lock, then
rewrites the whole collection. Nothing is kept between calls, so several
processes sharing one store never write back an outdated copy.
"""

import dataclasses
import logging
import threading
from collections.abc import Callable, Mapping
from typing import Any, Generic, TypeVar

from rest_framework import serializers

from catalog.domain.errors import InvalidPatchError, NotFoundError
from catalog.domain.value_objects import IdGenerator
from catalog.stores.codecs import CollectionCodec
from catalog.stores.interfaces import BlobStore

logger = logging.getLogger(__name__)

T = TypeVar("T")


def validate_fields(
    schema: type[serializers.Serializer], fields: Mapping[str, Any], entity: str
) -> dict[str, Any]:
    """Validate a partial field set, returning it keyed by model attribute.

    Raises:
        InvalidPatchError: If a field is unknown or has an invalid value.
    """
    if not isinstance(fields, Mapping):
        raise InvalidPatchError.for_entity(entity, {"non_field_errors": ["Expected an object."]})
    checked = schema(data=fields, partial=True)
    if not checked.is_valid():
        raise InvalidPatchError.for_entity(entity, dict(checked.errors))
    return dict(checked.validated_data)


class EntityRepository(Generic[T]):
    """Ordered CRUD collection of one entity type, backed by a BlobStore."""

    def __init__(
        self,
        store: BlobStore,
        codec: CollectionCodec[T],
        schema: type[serializers.Serializer],
        factory: Callable[..., T],
        not_found: type[NotFoundError],
        ids: IdGenerator | None = None,
    ) -> None:
        self._store = store
        self._codec = codec
        self._schema = schema
        self._factory = factory
        self._not_found = not_found
        self.ids = ids or IdGenerator()
        self.lock = threading.RLock()

    @property
    def collection(self) -> str:
        return self._codec.collection

    @property
    def entity(self) -> str:
        return self._not_found.entity

    def load_all(self) -> list[T]:
        """Read the collection from the store.

        Raises:
            DeserializationError: If the stored blob does not match the schema.
        """
        with self.lock:
            return self._load(fresh=False)

    def list_all(self, *, fresh: bool = False) -> list[T]:
        """Return the collection in stored order.

        With ``fresh`` the read skips any store cache and fails with
        PersistenceError rather than reading an unavailable store as empty.
        """
        with self.lock:
            return self._load(fresh)

    def get(self, entity_id: str, *, fresh: bool = False) -> T:
        """Return an entity by ID.

        Raises:
            NotFoundError: If no entity has this id.
        """
        with self.lock:
            items = self._load(fresh)
            return items[self._index_in(items, entity_id)]

    def create(self, fields: Mapping[str, Any]) -> T:
        patch = validate_fields(self._schema, fields, self.entity)
        with self.lock:
            items = self._load(fresh=True)
            entity = self._factory(id=self.ids.next_id({item.id for item in items}), **patch)
            self._commit([*items, entity])
        return entity

    def update(self, entity_id: str, fields: Mapping[str, Any]) -> T:
        patch = validate_fields(self._schema, fields, self.entity)
        with self.lock:
            items = self._load(fresh=True)
            index = self._index_in(items, entity_id)
            items[index] = dataclasses.replace(items[index], **patch)
            self._commit(items)
            return items[index]

    def save(self, entity: T) -> T:
        """Replace the stored entity carrying the same id, in place."""
        with self.lock:
            items = self._load(fresh=True)
            items[self._index_in(items, entity.id)] = entity
            self._commit(items)
        return entity

    def delete(self, entity_id: str) -> bool:
        """Remove an entity. Unknown ids are ignored; returns whether one was removed."""
        with self.lock:
            items = self._load(fresh=True)
            remaining = [item for item in items if item.id != entity_id]
            if len(remaining) == len(items):
                return False
            self._commit(remaining)
        return True

    def _load(self, fresh: bool) -> list[T]:
        read = self._store.read_for_update if fresh else self._store.read
        blob = read(self.collection)
        items = [] if blob is None else self._codec.decode(blob)
        logger.debug("Loaded %d %s", len(items), self.collection)
        return items

    def _index_in(self, items: list[T], entity_id: str) -> int:
        for index, item in enumerate(items):
            if item.id == entity_id:
                return index
        raise self._not_found(entity_id)

    def _commit(self, items: list[T]) -> None:
        self._store.write(self.collection, self._codec.encode(items))
        logger.debug("Persisted %d %s", len(items), self.collection)
