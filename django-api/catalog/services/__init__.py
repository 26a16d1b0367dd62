from dataclasses import dataclass

from catalog.domain.value_objects import IdGenerator
from catalog.services.admin_session import AdminSession
from catalog.services.event_service import EventAggregateManager
from catalog.services.paper_service import PaperRepository
from catalog.stores.interfaces import BlobStore

__all__ = [
    "AdminSession",
    "Catalog",
    "EventAggregateManager",
    "PaperRepository",
    "build_catalog",
]


@dataclass(frozen=True)
class Catalog:
    """The repositories of one process, shared by every admin session."""

    events: EventAggregateManager
    papers: PaperRepository

    def open_session(self, *, authorized: bool) -> AdminSession:
        return AdminSession(self.events, self.papers, authorized=authorized)


def build_catalog(store: BlobStore, ids: IdGenerator | None = None) -> Catalog:
    ids = ids or IdGenerator()
    return Catalog(
        events=EventAggregateManager(store, ids=ids),
        papers=PaperRepository(store, ids=ids),
    )
