"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from events.domain import Event, EventChanges, EventId, NewEvent, Registration, UserId


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def list_events(self) -> list[Event]:
        """Return all events ordered by date ascending, undated events last."""
        ...

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def event_exists(self, event_id: EventId) -> bool:
        """Check if an event exists."""
        ...

    @abstractmethod
    def add_event(self, new_event: NewEvent) -> Event:
        """Insert an event and return it with its assigned id and created_at."""
        ...

    @abstractmethod
    def update_event(self, event_id: EventId, changes: EventChanges) -> Event | None:
        """Merge changes into a stored event. Returns None if it no longer exists."""
        ...

    @abstractmethod
    def delete_event(self, event_id: EventId) -> bool:
        """Delete an event together with its registrations."""
        ...


class RegistrationLedger(ABC):
    """Interface for the event/user registration relation."""

    @abstractmethod
    def register(self, event_id: EventId, user_id: UserId) -> Registration:
        """Insert a registration.

        Raises:
            DuplicateRegistrationError: If the pair is already registered.
        """
        ...

    @abstractmethod
    def unregister(self, event_id: EventId, user_id: UserId) -> bool:
        """Remove a registration. Returns whether a row was removed."""
        ...

    @abstractmethod
    def list_for_event(self, event_id: EventId) -> list[Registration]:
        """Return registrations for an event, oldest first."""
        ...
