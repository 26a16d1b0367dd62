"""Conversion between domain collections and stored JSON documents."""

import io
from collections.abc import Callable, Sequence
from typing import Any, Generic, TypeVar

from rest_framework import serializers
from rest_framework.exceptions import ParseError
from rest_framework.parsers import JSONParser
from rest_framework.renderers import JSONRenderer

from catalog.domain.errors import DeserializationError
from catalog.domain.models import Event, EventEdition, Paper
from catalog.schemas import EventRecordSerializer, PaperRecordSerializer

T = TypeVar("T")


class CollectionCodec(Generic[T]):
    """Encodes a whole collection to one JSON document and back."""

    def __init__(
        self,
        collection: str,
        record: type[serializers.Serializer],
        build: Callable[[dict[str, Any]], T],
    ) -> None:
        self.collection = collection
        self._record = record
        self._build = build

    def encode(self, items: Sequence[T]) -> bytes:
        return JSONRenderer().render(self._record(items, many=True).data)

    def decode(self, blob: bytes) -> list[T]:
        try:
            payload = JSONParser().parse(io.BytesIO(blob))
        except ParseError as exc:
            raise DeserializationError.for_collection(self.collection, str(exc.detail)) from exc
        if not isinstance(payload, list):
            raise DeserializationError.for_collection(self.collection, "expected a JSON array")

        serializer = self._record(data=payload, many=True)
        if not serializer.is_valid():
            raise DeserializationError.for_collection(self.collection, str(serializer.errors))

        items = [self._build(record) for record in serializer.validated_data]
        self._check_unique([item.id for item in items])
        return items

    def _check_unique(self, ids: list[str]) -> None:
        duplicates = sorted({value for value in ids if ids.count(value) > 1})
        if duplicates:
            raise DeserializationError.for_collection(
                self.collection, f"duplicate ids: {', '.join(duplicates)}"
            )


def build_event(record: dict[str, Any]) -> Event:
    editions = tuple(EventEdition(**dict(edition)) for edition in record["editions"])
    return Event(**{**record, "editions": editions})


def build_paper(record: dict[str, Any]) -> Paper:
    return Paper(**record)


class EventCollectionCodec(CollectionCodec[Event]):
    """Events with their editions nested inline."""

    def __init__(self, collection: str = "events") -> None:
        super().__init__(collection, EventRecordSerializer, build_event)

    def decode(self, blob: bytes) -> list[Event]:
        events = super().decode(blob)
        self._check_unique([edition.id for event in events for edition in event.editions])
        return events


class PaperCollectionCodec(CollectionCodec[Paper]):
    def __init__(self, collection: str = "papers") -> None:
        super().__init__(collection, PaperRecordSerializer, build_paper)
