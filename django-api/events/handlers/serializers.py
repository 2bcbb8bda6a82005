"""Serializers for request parsing and for rendering domain models."""

import re

from rest_framework import serializers

DATE_FORMAT = "%Y-%m-%d"
DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


class StrictCharField(serializers.CharField):
    """CharField that refuses numbers instead of coercing them to text."""

    def to_internal_value(self, data):
        if not isinstance(data, str):
            self.fail("invalid")
        return super().to_internal_value(data)


class StrictDateField(serializers.DateField):
    """Accepts only zero-padded ``yyyy-MM-dd`` strings."""

    def to_internal_value(self, value):
        if not isinstance(value, str) or not DATE_PATTERN.fullmatch(value):
            self.fail("invalid", format="YYYY-MM-DD")
        return super().to_internal_value(value)


class CreateEventRequestSerializer(serializers.Serializer):
    """Shape of a POST /api/events body.

    Only the shape is checked here; blank titles and past dates are
    domain rules left to the service.
    """

    title = StrictCharField(allow_blank=True, trim_whitespace=False, max_length=255)
    date = StrictDateField(input_formats=[DATE_FORMAT])


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.CharField()
    title = serializers.CharField()
    date = serializers.DateField(format=DATE_FORMAT)


class ErrorMessageSerializer(serializers.Serializer):
    code = serializers.CharField()
    description = serializers.CharField()


class ErrorResponseSerializer(serializers.Serializer):
    """Envelope shared by 4xx/5xx error bodies: {"errors": [...]}."""

    errors = ErrorMessageSerializer(many=True)
