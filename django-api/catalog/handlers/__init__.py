from catalog.handlers.views import (
    EditionDetailView,
    EditionListView,
    EventDetailView,
    EventListView,
    PaperDetailView,
    PaperListView,
)

__all__ = [
    "EventListView",
    "EventDetailView",
    "EditionListView",
    "EditionDetailView",
    "PaperListView",
    "PaperDetailView",
]
