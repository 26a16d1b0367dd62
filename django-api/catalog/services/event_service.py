"""Event service - aggregate logic for events and their editions.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors

Editions live inside their event's record, so every edition change rewrites
the owning event, and deleting an event drops its editions in the same write.
"""

import dataclasses
import logging
from collections.abc import Mapping
from typing import Any

from catalog.domain.errors import EditionNotFoundError, EventNotFoundError
from catalog.domain.models import Event, EventEdition
from catalog.domain.value_objects import IdGenerator
from catalog.schemas import EditionFieldsSerializer, EventFieldsSerializer
from catalog.services.repository import EntityRepository, validate_fields
from catalog.stores.codecs import EventCollectionCodec
from catalog.stores.interfaces import BlobStore

logger = logging.getLogger(__name__)

EVENTS_COLLECTION = "events"


class EventAggregateManager:
    """Service for event and edition lifecycle operations."""

    def __init__(self, store: BlobStore, ids: IdGenerator | None = None) -> None:
        self._events: EntityRepository[Event] = EntityRepository(
            store,
            codec=EventCollectionCodec(EVENTS_COLLECTION),
            schema=EventFieldsSerializer,
            factory=Event,
            not_found=EventNotFoundError,
            ids=ids,
        )

    def load_all(self) -> list[Event]:
        return self._events.load_all()

    def list_events(self) -> list[Event]:
        """Return all events in creation order."""
        return self._events.list_all()

    def get_event(self, event_id: str) -> Event:
        """Return an event by ID.

        Raises:
            EventNotFoundError: If the event does not exist.
        """
        return self._events.get(event_id)

    def list_editions(self, event_id: str) -> list[EventEdition]:
        """Return the editions of an event in creation order.

        Raises:
            EventNotFoundError: If the event does not exist.
        """
        return list(self._events.get(event_id).editions)

    def create_event(self, fields: Mapping[str, Any]) -> Event:
        return self._events.create(fields)

    def update_event(self, event_id: str, fields: Mapping[str, Any]) -> Event:
        return self._events.update(event_id, fields)

    def delete_event(self, event_id: str) -> bool:
        """Delete an event together with all of its editions."""
        with self._events.lock:
            try:
                cascaded = len(self._events.get(event_id, fresh=True).editions)
            except EventNotFoundError:
                return False
            self._events.delete(event_id)
        logger.info("Deleted event %s and %d edition(s)", event_id, cascaded)
        return True

    def create_edition(self, event_id: str, fields: Mapping[str, Any]) -> EventEdition:
        """Append a new edition to an event.

        Raises:
            EventNotFoundError: If the event does not exist.
            InvalidPatchError: If the fields fail validation.
        """
        patch = validate_fields(EditionFieldsSerializer, fields, EditionNotFoundError.entity)
        with self._events.lock:
            event = self._events.get(event_id, fresh=True)
            edition = EventEdition(
                id=self._events.ids.next_id(self._edition_ids()),
                event_id=event.id,
                **patch,
            )
            self._events.save(dataclasses.replace(event, editions=(*event.editions, edition)))
        return edition

    def update_edition(
        self, event_id: str, edition_id: str, fields: Mapping[str, Any]
    ) -> EventEdition:
        """Replace the supplied fields of one edition, keeping sibling order.

        Raises:
            EventNotFoundError: If the event does not exist.
            EditionNotFoundError: If the event has no such edition.
        """
        patch = validate_fields(EditionFieldsSerializer, fields, EditionNotFoundError.entity)
        with self._events.lock:
            event = self._events.get(event_id, fresh=True)
            current = event.find_edition(edition_id)
            if current is None:
                raise EditionNotFoundError(edition_id)
            updated = dataclasses.replace(current, **patch)
            editions = tuple(updated if ed.id == edition_id else ed for ed in event.editions)
            self._events.save(dataclasses.replace(event, editions=editions))
        return updated

    def delete_edition(self, event_id: str, edition_id: str) -> bool:
        """Remove one edition. Unknown event or edition ids are ignored."""
        with self._events.lock:
            try:
                event = self._events.get(event_id, fresh=True)
            except EventNotFoundError:
                return False
            if event.find_edition(edition_id) is None:
                return False
            editions = tuple(ed for ed in event.editions if ed.id != edition_id)
            self._events.save(dataclasses.replace(event, editions=editions))
        return True

    def _edition_ids(self) -> set[str]:
        return {ed.id for event in self._events.list_all(fresh=True) for ed in event.editions}
