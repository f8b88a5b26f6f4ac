"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from collections.abc import Mapping
from typing import Any

from django.conf import settings
from django.core.cache import cache
from django.core.files.storage import default_storage
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from events.cache import detail_key, list_key
from events.domain import ImageUpload
from events.domain.errors import DomainError, EventValidationError
from events.handlers.exceptions import error_response
from events.handlers.serializers import EventSerializer, RegistrationSerializer
from events.services.event_service import EventService
from events.services.validation import UPDATABLE_FIELDS
from events.stores.django_store import DjangoEventStore, DjangoRegistrationLedger

INVALID_BODY = "Request body must be a JSON object or form data"


def get_event_service() -> EventService:
    return EventService(DjangoEventStore(), DjangoRegistrationLedger())


def _payload(request: Request) -> Mapping[str, Any]:
    if not isinstance(request.data, Mapping):
        raise EventValidationError([INVALID_BODY])
    return request.data


def _caller_id(request: Request):
    return getattr(request.user, "id", None)


def _store_image(request: Request) -> ImageUpload | None:
    upload = request.FILES.get("image")
    if upload is None:
        return None
    name = default_storage.save(f"images/{upload.name}", upload)
    return ImageUpload(media_type=upload.content_type or "", storage_ref=name)


def _discard_image(image: ImageUpload | None) -> None:
    if image is not None:
        default_storage.delete(image.storage_ref)


class EventListView(APIView):
    """Handler for GET/POST /api/events"""

    def get(self, request: Request) -> Response:
        data = cache.get(list_key())
        if data is None:
            try:
                events = get_event_service().list_events()
            except DomainError as exc:
                return error_response(exc)
            data = EventSerializer(events, many=True).data
            cache.set(list_key(), data, settings.EVENTS_CACHE_TIMEOUT)
        return Response(data)

    def post(self, request: Request) -> Response:
        image = None
        try:
            data = _payload(request)
            image = _store_image(request)
            event = get_event_service().create_event(
                owner_id=_caller_id(request),
                title=data.get("title"),
                description=data.get("description"),
                address=data.get("address"),
                date=data.get("date"),
                image=image,
            )
        except DomainError as exc:
            _discard_image(image)
            return error_response(exc)
        return Response(EventSerializer(event).data, status=status.HTTP_201_CREATED)


class EventDetailView(APIView):
    """Handler for GET/PUT/PATCH/DELETE /api/events/{event_id}"""

    def get(self, request: Request, event_id: str) -> Response:
        key = detail_key(event_id)
        data = cache.get(key) if key is not None else None
        if data is None:
            try:
                event = get_event_service().get_event(event_id)
            except DomainError as exc:
                return error_response(exc)
            data = EventSerializer(event).data
            if key is not None:
                cache.set(key, data, settings.EVENTS_CACHE_TIMEOUT)
        return Response(data)

    def put(self, request: Request, event_id: str) -> Response:
        image = None
        try:
            data = _payload(request)
            fields = {name: data.get(name) for name in UPDATABLE_FIELDS if name in data}
            image = _store_image(request)
            event = get_event_service().update_event(
                event_id, _caller_id(request), fields, image=image
            )
        except DomainError as exc:
            _discard_image(image)
            return error_response(exc)
        return Response(EventSerializer(event).data)

    patch = put

    def delete(self, request: Request, event_id: str) -> Response:
        try:
            deleted = get_event_service().delete_event(event_id, _caller_id(request))
        except DomainError as exc:
            return error_response(exc)
        return Response(
            {"success": True, "message": "Event deleted successfully", "id": deleted.value}
        )


class RegistrationView(APIView):
    """Handler for POST/DELETE /api/events/{event_id}/register"""

    def post(self, request: Request, event_id: str) -> Response:
        try:
            registration = get_event_service().register(event_id, _caller_id(request))
        except DomainError as exc:
            return error_response(exc)
        return Response(
            {
                "success": True,
                "message": "Registered for event",
                "registration": RegistrationSerializer(registration).data,
            },
            status=status.HTTP_201_CREATED,
        )

    def delete(self, request: Request, event_id: str) -> Response:
        try:
            service = get_event_service()
            user_id = service.unregister(event_id, _caller_id(request))
        except DomainError as exc:
            return error_response(exc)
        return Response(
            {
                "success": True,
                "message": "Unregistered from event",
                "id": int(event_id),
                "userId": user_id.value,
            }
        )


class RegistrationListView(APIView):
    """Handler for GET /api/events/{event_id}/registrations"""

    def get(self, request: Request, event_id: str) -> Response:
        try:
            registrations = get_event_service().list_registrations(event_id, _caller_id(request))
        except DomainError as exc:
            return error_response(exc)
        return Response(RegistrationSerializer(registrations, many=True).data)
