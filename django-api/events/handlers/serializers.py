"""Serializers for transforming domain models to API responses."""

from rest_framework import serializers


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.IntegerField(source="id.value")
    title = serializers.CharField()
    description = serializers.CharField()
    address = serializers.CharField()
    date = serializers.DateTimeField(allow_null=True)
    createdAt = serializers.DateTimeField(source="created_at")
    ownerId = serializers.IntegerField(source="owner_id.value")
    image = serializers.CharField(allow_null=True)


class RegistrationSerializer(serializers.Serializer):
    """Serializer for Registration domain model."""

    id = serializers.IntegerField()
    eventId = serializers.IntegerField(source="event_id.value")
    userId = serializers.IntegerField(source="user_id.value")
    createdAt = serializers.DateTimeField(source="created_at")
