"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

import logging

from rest_framework import status
from rest_framework.parsers import JSONParser
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from catalog.domain.errors import (
    AccessDeniedError,
    DeserializationError,
    DomainError,
    InvalidIdError,
    InvalidPatchError,
    NotFoundError,
    PersistenceError,
)
from catalog.domain.value_objects import EntityId
from catalog.handlers.permissions import IsCatalogAdmin
from catalog.schemas import EditionRecordSerializer, EventRecordSerializer, PaperRecordSerializer
from catalog.services import AdminSession, Catalog

logger = logging.getLogger(__name__)

ERROR_STATUS = [
    (InvalidIdError, status.HTTP_400_BAD_REQUEST),
    (InvalidPatchError, status.HTTP_400_BAD_REQUEST),
    (AccessDeniedError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (DeserializationError, status.HTTP_500_INTERNAL_SERVER_ERROR),
    (PersistenceError, status.HTTP_503_SERVICE_UNAVAILABLE),
]


def parse_id(raw: str) -> str:
    try:
        return EntityId.from_string(raw).value
    except ValueError:
        raise InvalidIdError() from None


def error_response(exc: DomainError) -> Response:
    code = next(
        (code for error_type, code in ERROR_STATUS if isinstance(exc, error_type)),
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
    body = {"code": exc.code.value, "message": exc.message}
    if isinstance(exc, InvalidPatchError):
        body["fields"] = exc.fields
    if code >= 500:
        logger.error("Catalog request failed: %s", exc)
    return Response(body, status=code)


class CatalogView(APIView):
    """Base handler bound to the process-wide Catalog."""

    permission_classes = [IsCatalogAdmin]
    parser_classes = [JSONParser]
    catalog: Catalog | None = None

    def session(self, request: Request) -> AdminSession:
        authorized = all(p.has_permission(request, self) for p in self.get_permissions())
        return self.catalog.open_session(authorized=authorized)

    def handle_exception(self, exc):
        if isinstance(exc, DomainError):
            return error_response(exc)
        return super().handle_exception(exc)


class EventListView(CatalogView):
    """Handler for GET/POST /api/admin/events"""

    def get(self, request: Request) -> Response:
        events = self.session(request).list_events()
        return Response(EventRecordSerializer(events, many=True).data)

    def post(self, request: Request) -> Response:
        event = self.session(request).create_event(request.data)
        return Response(EventRecordSerializer(event).data, status=status.HTTP_201_CREATED)


class EventDetailView(CatalogView):
    """Handler for GET/PATCH/DELETE /api/admin/events/{event_id}"""

    def get(self, request: Request, event_id: str) -> Response:
        event = self.session(request).get_event(parse_id(event_id))
        return Response(EventRecordSerializer(event).data)

    def patch(self, request: Request, event_id: str) -> Response:
        event = self.session(request).update_event(parse_id(event_id), request.data)
        return Response(EventRecordSerializer(event).data)

    def delete(self, request: Request, event_id: str) -> Response:
        self.session(request).delete_event(parse_id(event_id))
        return Response(status=status.HTTP_204_NO_CONTENT)


class EditionListView(CatalogView):
    """Handler for GET/POST /api/admin/events/{event_id}/editions"""

    def get(self, request: Request, event_id: str) -> Response:
        editions = self.session(request).list_editions(parse_id(event_id))
        return Response(EditionRecordSerializer(editions, many=True).data)

    def post(self, request: Request, event_id: str) -> Response:
        edition = self.session(request).create_edition(parse_id(event_id), request.data)
        return Response(EditionRecordSerializer(edition).data, status=status.HTTP_201_CREATED)


class EditionDetailView(CatalogView):
    """Handler for PATCH/DELETE /api/admin/events/{event_id}/editions/{edition_id}"""

    def patch(self, request: Request, event_id: str, edition_id: str) -> Response:
        edition = self.session(request).update_edition(
            parse_id(event_id), parse_id(edition_id), request.data
        )
        return Response(EditionRecordSerializer(edition).data)

    def delete(self, request: Request, event_id: str, edition_id: str) -> Response:
        self.session(request).delete_edition(parse_id(event_id), parse_id(edition_id))
        return Response(status=status.HTTP_204_NO_CONTENT)


class PaperListView(CatalogView):
    """Handler for GET/POST /api/admin/papers"""

    def get(self, request: Request) -> Response:
        papers = self.session(request).list_papers()
        return Response(PaperRecordSerializer(papers, many=True).data)

    def post(self, request: Request) -> Response:
        paper = self.session(request).create_paper(request.data)
        return Response(PaperRecordSerializer(paper).data, status=status.HTTP_201_CREATED)


class PaperDetailView(CatalogView):
    """Handler for GET/PATCH/DELETE /api/admin/papers/{paper_id}"""

    def get(self, request: Request, paper_id: str) -> Response:
        paper = self.session(request).get_paper(parse_id(paper_id))
        return Response(PaperRecordSerializer(paper).data)

    def patch(self, request: Request, paper_id: str) -> Response:
        paper = self.session(request).update_paper(parse_id(paper_id), request.data)
        return Response(PaperRecordSerializer(paper).data)

    def delete(self, request: Request, paper_id: str) -> Response:
        self.session(request).delete_paper(parse_id(paper_id))
        return Response(status=status.HTTP_204_NO_CONTENT)
