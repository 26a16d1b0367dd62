from catalog.domain.models import Event, EventEdition, Paper
from catalog.domain.value_objects import EntityId, IdGenerator

__all__ = [
    "Event",
    "EventEdition",
    "Paper",
    "EntityId",
    "IdGenerator",
]
