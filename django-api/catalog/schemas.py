"""Serializers describing the catalog document schema.

Record serializers map domain models field-for-field onto the stored JSON
documents (camelCase keys, editions nested in their event) and are reused
for API responses. Field serializers enumerate the fields a caller may
supply on create/update and reject anything else.
"""

from collections.abc import Mapping

from rest_framework import serializers

MIN_YEAR = 1
MAX_YEAR = 9999


class StrictSerializer(serializers.Serializer):
    """Serializer that rejects keys it does not declare."""

    def to_internal_value(self, data):
        if isinstance(data, Mapping):
            unknown = sorted(set(data) - set(self.fields))
            if unknown:
                raise serializers.ValidationError(
                    {name: ["Unknown field."] for name in unknown}
                )
        return super().to_internal_value(data)


class BlankableDateField(serializers.DateField):
    """ISO date that reads an empty string as "no date"."""

    def to_internal_value(self, value):
        if value == "":
            return None
        return super().to_internal_value(value)


class EditionFieldsSerializer(StrictSerializer):
    """Updatable fields of an EventEdition."""

    year = serializers.IntegerField(min_value=MIN_YEAR, max_value=MAX_YEAR)
    location = serializers.CharField(allow_blank=True, max_length=255, trim_whitespace=False)
    date = BlankableDateField(allow_null=True)


class EventFieldsSerializer(StrictSerializer):
    """Updatable fields of an Event. Editions are managed separately."""

    name = serializers.CharField(allow_blank=True, max_length=255, trim_whitespace=False)
    description = serializers.CharField(allow_blank=True, trim_whitespace=False)
    category = serializers.CharField(allow_blank=True, max_length=255, trim_whitespace=False)


class PaperFieldsSerializer(StrictSerializer):
    """Updatable fields of a Paper."""

    title = serializers.CharField(allow_blank=True, trim_whitespace=False)
    authors = serializers.CharField(allow_blank=True, trim_whitespace=False)
    abstract = serializers.CharField(allow_blank=True, trim_whitespace=False)
    year = serializers.IntegerField(min_value=MIN_YEAR, max_value=MAX_YEAR)
    event = serializers.CharField(allow_blank=True, max_length=255, trim_whitespace=False)
    url = serializers.CharField(allow_blank=True, trim_whitespace=False)


class EditionRecordSerializer(EditionFieldsSerializer):
    """Stored/rendered form of an EventEdition."""

    id = serializers.CharField()
    eventId = serializers.CharField(source="event_id")


class EventRecordSerializer(EventFieldsSerializer):
    """Stored/rendered form of an Event, editions included."""

    id = serializers.CharField()
    editions = EditionRecordSerializer(many=True)

    def validate(self, attrs):
        seen = set()
        for edition in attrs["editions"]:
            if edition["event_id"] != attrs["id"]:
                raise serializers.ValidationError(
                    f"Edition {edition['id']} does not belong to event {attrs['id']}"
                )
            if edition["id"] in seen:
                raise serializers.ValidationError(f"Duplicate edition id {edition['id']}")
            seen.add(edition["id"])
        return attrs


class PaperRecordSerializer(PaperFieldsSerializer):
    """Stored/rendered form of a Paper."""

    id = serializers.CharField()
