"""Tests for the Django ORM stores.

Run with: pytest tests/test_stores.py -v
"""

from datetime import datetime, timezone

import pytest

from events import models
from events.domain import EventChanges, EventId, NewEvent, UserId
from events.domain.errors import DuplicateRegistrationError, StoreFailureError
from events.stores.django_store import DjangoEventStore, DjangoRegistrationLedger


def _utc(*args) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


@pytest.fixture
def store() -> DjangoEventStore:
    return DjangoEventStore()


@pytest.fixture
def registrations() -> DjangoRegistrationLedger:
    return DjangoRegistrationLedger()


@pytest.fixture
def owner(make_user):
    return make_user("owner@example.com")


@pytest.fixture
def new_event(owner):
    def _new(title: str = "Meetup", date: datetime | None = _utc(2025, 1, 1)) -> NewEvent:
        return NewEvent(
            title=title,
            description="desc",
            address="123 Main St",
            date=date,
            owner_id=UserId(owner.pk),
        )

    return _new


@pytest.mark.django_db
class TestDjangoEventStore:
    def test_add_then_get_returns_identical_record(self, store, new_event, owner):
        created = store.add_event(new_event())

        assert created.id.value > 0
        assert created.owner_id == UserId(owner.pk)
        assert store.get_event(created.id) == created

    def test_get_missing_returns_none(self, store):
        assert store.get_event(EventId(12345)) is None
        assert not store.event_exists(EventId(12345))

    def test_list_orders_dated_events_first(self, store, new_event):
        undated = store.add_event(new_event("undated", date=None))
        later = store.add_event(new_event("later", date=_utc(2024, 1, 1)))
        earlier = store.add_event(new_event("earlier", date=_utc(2023, 6, 15)))

        assert [e.id for e in store.list_events()] == [earlier.id, later.id, undated.id]

    def test_update_merges_only_given_fields(self, store, new_event):
        created = store.add_event(new_event())

        updated = store.update_event(created.id, EventChanges(address="9 Side St"))

        assert updated.address == "9 Side St"
        assert updated.title == created.title
        assert updated.date == created.date
        assert updated.created_at == created.created_at
        assert store.get_event(created.id) == updated

    def test_update_missing_returns_none(self, store):
        assert store.update_event(EventId(999), EventChanges(title="x")) is None

    def test_delete_cascades_to_registrations(self, store, registrations, new_event, make_user):
        created = store.add_event(new_event())
        guest = make_user("guest@example.com")
        registrations.register(created.id, UserId(guest.pk))

        assert store.delete_event(created.id) is True
        assert store.get_event(created.id) is None
        assert not models.Registration.objects.filter(event_id=created.id.value).exists()

    def test_delete_missing_returns_false(self, store):
        assert store.delete_event(EventId(999)) is False

    def test_ids_are_not_reused_after_delete(self, store, new_event):
        first = store.add_event(new_event())
        store.delete_event(first.id)
        second = store.add_event(new_event())
        assert second.id.value > first.id.value

    def test_database_errors_become_store_failures(self, store, monkeypatch):
        from django.db import OperationalError

        def boom(*args, **kwargs):
            raise OperationalError("database is locked")

        monkeypatch.setattr(models.Event.objects, "filter", boom)
        with pytest.raises(StoreFailureError) as excinfo:
            store.get_event(EventId(1))
        assert excinfo.value.message == "Storage operation failed"
        assert "locked" in excinfo.value.detail


@pytest.mark.django_db
class TestDjangoRegistrationLedger:
    def test_register_returns_record(self, store, registrations, new_event, make_user):
        event = store.add_event(new_event())
        guest = make_user("guest@example.com")

        registration = registrations.register(event.id, UserId(guest.pk))

        assert registration.id > 0
        assert registration.event_id == event.id
        assert registration.user_id == UserId(guest.pk)
        assert registration.created_at is not None

    def test_duplicate_is_rejected_by_constraint(self, store, registrations, new_event, make_user):
        event = store.add_event(new_event())
        guest = make_user("guest@example.com")
        registrations.register(event.id, UserId(guest.pk))

        with pytest.raises(DuplicateRegistrationError):
            registrations.register(event.id, UserId(guest.pk))
        assert models.Registration.objects.filter(event_id=event.id.value).count() == 1

    def test_unregister(self, store, registrations, new_event, make_user):
        event = store.add_event(new_event())
        guest = make_user("guest@example.com")
        registrations.register(event.id, UserId(guest.pk))

        assert registrations.unregister(event.id, UserId(guest.pk)) is True
        assert registrations.unregister(event.id, UserId(guest.pk)) is False

    def test_unregister_missing_leaves_ledger_unchanged(
        self, store, registrations, new_event, make_user
    ):
        event = store.add_event(new_event())
        guest = make_user("guest@example.com")
        other = make_user("other@example.com")
        registrations.register(event.id, UserId(guest.pk))

        assert registrations.unregister(event.id, UserId(other.pk)) is False
        assert models.Registration.objects.count() == 1

    def test_list_for_event(self, store, registrations, new_event, make_user):
        event = store.add_event(new_event())
        first = make_user("a@example.com")
        second = make_user("b@example.com")
        registrations.register(event.id, UserId(first.pk))
        registrations.register(event.id, UserId(second.pk))

        listed = registrations.list_for_event(event.id)
        assert [r.user_id.value for r in listed] == [first.pk, second.pk]
