"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in events/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime

from events.domain.value_objects import EventId, UserId


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EventId
    title: str
    description: str
    address: str
    date: datetime | None
    created_at: datetime
    owner_id: UserId
    image: str | None = None


@dataclass(frozen=True)
class Registration:
    """A user's registration for an event."""

    id: int
    event_id: EventId
    user_id: UserId
    created_at: datetime


@dataclass(frozen=True)
class NewEvent:
    """Validated input for inserting an event."""

    title: str
    description: str
    address: str
    date: datetime | None
    owner_id: UserId
    image: str | None = None


@dataclass(frozen=True)
class EventChanges:
    """Validated partial update. Fields left as None keep their stored value."""

    title: str | None = None
    description: str | None = None
    address: str | None = None
    date: datetime | None = None
    image: str | None = None
