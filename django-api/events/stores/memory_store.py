"""Dict-backed stores for unit tests and local experiments.

Both stores guard their state with a lock so concurrent callers observe the
same single-writer behaviour as the relational store.
"""

import itertools
import threading
from dataclasses import asdict, replace
from datetime import datetime, timezone

from events.domain import Event, EventChanges, EventId, NewEvent, Registration, UserId
from events.domain.errors import DuplicateRegistrationError
from events.stores.interfaces import EventStore, RegistrationLedger


_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


def _now() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryRegistrationLedger(RegistrationLedger):
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._ids = itertools.count(1)
        self._rows: dict[tuple[EventId, UserId], Registration] = {}

    def register(self, event_id: EventId, user_id: UserId) -> Registration:
        with self._lock:
            if (event_id, user_id) in self._rows:
                raise DuplicateRegistrationError(str(event_id), str(user_id))
            registration = Registration(
                id=next(self._ids), event_id=event_id, user_id=user_id, created_at=_now()
            )
            self._rows[(event_id, user_id)] = registration
            return registration

    def unregister(self, event_id: EventId, user_id: UserId) -> bool:
        with self._lock:
            return self._rows.pop((event_id, user_id), None) is not None

    def list_for_event(self, event_id: EventId) -> list[Registration]:
        with self._lock:
            rows = [row for row in self._rows.values() if row.event_id == event_id]
        return sorted(rows, key=lambda row: (row.created_at, row.id))

    def discard_event(self, event_id: EventId) -> None:
        with self._lock:
            for key in [key for key in self._rows if key[0] == event_id]:
                del self._rows[key]

    def __len__(self) -> int:
        return len(self._rows)


class InMemoryEventStore(EventStore):
    """Event store holding domain models in a dict.

    When given a ledger, deleting an event also discards its registrations.
    """

    def __init__(self, ledger: InMemoryRegistrationLedger | None = None) -> None:
        self._lock = threading.Lock()
        self._ids = itertools.count(1)
        self._rows: dict[EventId, Event] = {}
        self._ledger = ledger

    def list_events(self) -> list[Event]:
        with self._lock:
            rows = list(self._rows.values())
        return sorted(rows, key=lambda e: (e.date is None, e.date or _EPOCH, e.id.value))

    def get_event(self, event_id: EventId) -> Event | None:
        return self._rows.get(event_id)

    def event_exists(self, event_id: EventId) -> bool:
        return event_id in self._rows

    def add_event(self, new_event: NewEvent) -> Event:
        with self._lock:
            event = Event(
                id=EventId(next(self._ids)),
                title=new_event.title,
                description=new_event.description,
                address=new_event.address,
                date=new_event.date,
                created_at=_now(),
                owner_id=new_event.owner_id,
                image=new_event.image,
            )
            self._rows[event.id] = event
            return event

    def update_event(self, event_id: EventId, changes: EventChanges) -> Event | None:
        fields = {name: value for name, value in asdict(changes).items() if value is not None}
        with self._lock:
            current = self._rows.get(event_id)
            if current is None:
                return None
            updated = replace(current, **fields)
            self._rows[event_id] = updated
            return updated

    def delete_event(self, event_id: EventId) -> bool:
        with self._lock:
            removed = self._rows.pop(event_id, None) is not None
        if removed and self._ledger is not None:
            self._ledger.discard_event(event_id)
        return removed
