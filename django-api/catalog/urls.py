from django.urls import path

from catalog.handlers import (
    EditionDetailView,
    EditionListView,
    EventDetailView,
    EventListView,
    PaperDetailView,
    PaperListView,
)
from catalog.services import build_catalog
from catalog.stores import store_from_settings

catalog = build_catalog(store_from_settings())

urlpatterns = [
    path("events", EventListView.as_view(catalog=catalog), name="event-list"),
    path(
        "events/<str:event_id>",
        EventDetailView.as_view(catalog=catalog),
        name="event-detail",
    ),
    path(
        "events/<str:event_id>/editions",
        EditionListView.as_view(catalog=catalog),
        name="edition-list",
    ),
    path(
        "events/<str:event_id>/editions/<str:edition_id>",
        EditionDetailView.as_view(catalog=catalog),
        name="edition-detail",
    ),
    path("papers", PaperListView.as_view(catalog=catalog), name="paper-list"),
    path(
        "papers/<str:paper_id>",
        PaperDetailView.as_view(catalog=catalog),
        name="paper-detail",
    ),
]
