"""Django ORM implementation of the EventStore and RegistrationLedger."""

import logging
from dataclasses import asdict

from django.db import DatabaseError, IntegrityError, transaction
from django.db.models import F

from events import models
from events.domain import Event, EventChanges, EventId, NewEvent, Registration, UserId
from events.domain.errors import DuplicateRegistrationError, StoreFailureError
from events.stores.interfaces import EventStore, RegistrationLedger

logger = logging.getLogger(__name__)


def _to_event(row: models.Event) -> Event:
    return Event(
        id=EventId(row.pk),
        title=row.title,
        description=row.description,
        address=row.address,
        date=row.date,
        created_at=row.created_at,
        owner_id=UserId(row.owner_id),
        image=row.image,
    )


def _to_registration(row: models.Registration) -> Registration:
    return Registration(
        id=row.pk,
        event_id=EventId(row.event_id),
        user_id=UserId(row.user_id),
        created_at=row.created_at,
    )


class DjangoEventStore(EventStore):
    """Relational event store using Django ORM."""

    def list_events(self) -> list[Event]:
        try:
            rows = models.Event.objects.order_by(F("date").asc(nulls_last=True), "id")
            return [_to_event(row) for row in rows]
        except DatabaseError as exc:
            raise StoreFailureError(f"list_events: {exc}") from exc

    def get_event(self, event_id: EventId) -> Event | None:
        try:
            row = models.Event.objects.filter(pk=event_id.value).first()
        except DatabaseError as exc:
            raise StoreFailureError(f"get_event({event_id}): {exc}") from exc
        return _to_event(row) if row is not None else None

    def event_exists(self, event_id: EventId) -> bool:
        try:
            return models.Event.objects.filter(pk=event_id.value).exists()
        except DatabaseError as exc:
            raise StoreFailureError(f"event_exists({event_id}): {exc}") from exc

    def add_event(self, new_event: NewEvent) -> Event:
        try:
            row = models.Event.objects.create(
                title=new_event.title,
                description=new_event.description,
                address=new_event.address,
                date=new_event.date,
                owner_id=new_event.owner_id.value,
                image=new_event.image,
            )
        except DatabaseError as exc:
            raise StoreFailureError(f"add_event: {exc}") from exc
        return _to_event(row)

    def update_event(self, event_id: EventId, changes: EventChanges) -> Event | None:
        fields = {name: value for name, value in asdict(changes).items() if value is not None}
        try:
            with transaction.atomic():
                row = models.Event.objects.select_for_update().filter(pk=event_id.value).first()
                if row is None:
                    return None
                for name, value in fields.items():
                    setattr(row, name, value)
                row.save(update_fields=list(fields))
        except DatabaseError as exc:
            raise StoreFailureError(f"update_event({event_id}): {exc}") from exc
        return _to_event(row)

    def delete_event(self, event_id: EventId) -> bool:
        try:
            _, deleted = models.Event.objects.filter(pk=event_id.value).delete()
        except DatabaseError as exc:
            raise StoreFailureError(f"delete_event({event_id}): {exc}") from exc
        return deleted.get(models.Event._meta.label, 0) > 0


class DjangoRegistrationLedger(RegistrationLedger):
    """Registration relation backed by a unique (event, user) constraint."""

    def register(self, event_id: EventId, user_id: UserId) -> Registration:
        try:
            with transaction.atomic():
                row = models.Registration.objects.create(
                    event_id=event_id.value, user_id=user_id.value
                )
        except IntegrityError as exc:
            if self._is_registered(event_id, user_id):
                logger.info("duplicate registration event=%s user=%s", event_id, user_id)
                raise DuplicateRegistrationError(str(event_id), str(user_id)) from exc
            raise StoreFailureError(f"register({event_id}, {user_id}): {exc}") from exc
        except DatabaseError as exc:
            raise StoreFailureError(f"register({event_id}, {user_id}): {exc}") from exc
        return _to_registration(row)

    def unregister(self, event_id: EventId, user_id: UserId) -> bool:
        try:
            deleted, _ = models.Registration.objects.filter(
                event_id=event_id.value, user_id=user_id.value
            ).delete()
        except DatabaseError as exc:
            raise StoreFailureError(f"unregister({event_id}, {user_id}): {exc}") from exc
        return deleted > 0

    def list_for_event(self, event_id: EventId) -> list[Registration]:
        try:
            rows = models.Registration.objects.filter(event_id=event_id.value).order_by(
                "created_at", "id"
            )
            return [_to_registration(row) for row in rows]
        except DatabaseError as exc:
            raise StoreFailureError(f"list_for_event({event_id}): {exc}") from exc

    def _is_registered(self, event_id: EventId, user_id: UserId) -> bool:
        try:
            return models.Registration.objects.filter(
                event_id=event_id.value, user_id=user_id.value
            ).exists()
        except DatabaseError as exc:
            raise StoreFailureError(f"register({event_id}, {user_id}): {exc}") from exc
