"""Admin session - the authorized entry point to catalog mutations.

A session is only constructed for an authorized caller, and it reports a
one-line status for every mutation it performs, successful or not.
"""

import functools
from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from catalog.domain.errors import AccessDeniedError, DomainError
from catalog.domain.models import Event, EventEdition, Paper
from catalog.services.event_service import EventAggregateManager
from catalog.services.paper_service import PaperRepository
from catalog.signals import report_status

F = TypeVar("F", bound=Callable[..., Any])


def announce(entity: str, verb: str) -> Callable[[F], F]:
    """Report "<Entity> <verb> successfully" or the failure reason."""

    def decorator(method: F) -> F:
        @functools.wraps(method)
        def wrapper(self, *args, **kwargs):
            try:
                result = method(self, *args, **kwargs)
            except DomainError as exc:
                report_status(type(self), f"{entity} could not be {verb}: {exc.message}", ok=False)
                raise
            except Exception:
                report_status(type(self), f"{entity} could not be {verb}: unexpected error", ok=False)
                raise
            report_status(type(self), f"{entity} {verb} successfully")
            return result

        return wrapper

    return decorator


class AdminSession:
    """Catalog operations available to an authorized administrator."""

    def __init__(
        self,
        events: EventAggregateManager,
        papers: PaperRepository,
        *,
        authorized: bool,
    ) -> None:
        if not authorized:
            report_status(type(self), "Access denied. Admin privileges required.", ok=False)
            raise AccessDeniedError()
        self.events = events
        self.papers = papers

    # Events

    def list_events(self) -> list[Event]:
        return self.events.list_events()

    def get_event(self, event_id: str) -> Event:
        return self.events.get_event(event_id)

    @announce("Event", "created")
    def create_event(self, fields: Mapping[str, Any]) -> Event:
        return self.events.create_event(fields)

    @announce("Event", "updated")
    def update_event(self, event_id: str, fields: Mapping[str, Any]) -> Event:
        return self.events.update_event(event_id, fields)

    @announce("Event", "deleted")
    def delete_event(self, event_id: str) -> bool:
        return self.events.delete_event(event_id)

    # Editions

    def list_editions(self, event_id: str) -> list[EventEdition]:
        return self.events.list_editions(event_id)

    @announce("Edition", "created")
    def create_edition(self, event_id: str, fields: Mapping[str, Any]) -> EventEdition:
        return self.events.create_edition(event_id, fields)

    @announce("Edition", "updated")
    def update_edition(
        self, event_id: str, edition_id: str, fields: Mapping[str, Any]
    ) -> EventEdition:
        return self.events.update_edition(event_id, edition_id, fields)

    @announce("Edition", "deleted")
    def delete_edition(self, event_id: str, edition_id: str) -> bool:
        return self.events.delete_edition(event_id, edition_id)

    # Papers

    def list_papers(self) -> list[Paper]:
        return self.papers.list_all()

    def get_paper(self, paper_id: str) -> Paper:
        return self.papers.get(paper_id)

    @announce("Paper", "created")
    def create_paper(self, fields: Mapping[str, Any]) -> Paper:
        return self.papers.create(fields)

    @announce("Paper", "updated")
    def update_paper(self, paper_id: str, fields: Mapping[str, Any]) -> Paper:
        return self.papers.update(paper_id, fields)

    @announce("Paper", "deleted")
    def delete_paper(self, paper_id: str) -> bool:
        return self.papers.delete(paper_id)
