"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
The Django ORM model in catalog/models.py only stores serialized collections.
"""

import datetime
from dataclasses import dataclass, field


def current_year() -> int:
    return datetime.date.today().year


@dataclass(frozen=True)
class EventEdition:
    """Domain representation of one dated occurrence of an Event."""

    id: str
    event_id: str
    year: int = field(default_factory=current_year)
    location: str = ""
    date: datetime.date | None = None


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event and the editions it owns."""

    id: str
    name: str = ""
    description: str = ""
    category: str = ""
    editions: tuple[EventEdition, ...] = ()

    def find_edition(self, edition_id: str) -> EventEdition | None:
        for edition in self.editions:
            if edition.id == edition_id:
                return edition
        return None


@dataclass(frozen=True)
class Paper:
    """Domain representation of a Paper."""

    id: str
    title: str = ""
    authors: str = ""
    abstract: str = ""
    year: int = field(default_factory=current_year)
    event: str = ""
    url: str = ""
