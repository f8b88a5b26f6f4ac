"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging
from collections.abc import Mapping
from typing import Any

from events.domain import EventId, ImageUpload, NewEvent, UserId
from events.domain.errors import (
    AuthenticationRequiredError,
    AuthorizationDeniedError,
    EventNotFoundError,
    EventValidationError,
    InvalidEventIdError,
    RegistrationNotFoundError,
)
from events.domain.models import Event, Registration
from events.services import validation
from events.stores.interfaces import EventStore, RegistrationLedger

logger = logging.getLogger(__name__)


def _parse_event_id(event_id: str | int) -> EventId:
    try:
        return EventId.from_string(event_id)
    except ValueError as exc:
        raise InvalidEventIdError() from exc


def _authenticated(caller_id: Any) -> UserId:
    try:
        return UserId.from_value(caller_id)
    except ValueError as exc:
        raise AuthenticationRequiredError() from exc


class EventService:
    """Service for event lifecycle and registration operations."""

    def __init__(self, store: EventStore, registrations: RegistrationLedger) -> None:
        self._store = store
        self._registrations = registrations

    def list_events(self) -> list[Event]:
        """Return all events, dated ones first in ascending order."""
        return self._store.list_events()

    def get_event(self, event_id: str | int) -> Event:
        """Return an event by ID.

        Raises:
            InvalidEventIdError: If the event_id is not a positive integer.
            EventNotFoundError: If the event does not exist.
        """
        return self._require_event(_parse_event_id(event_id))

    def create_event(
        self,
        owner_id: Any,
        title: Any,
        description: Any,
        address: Any,
        date: Any,
        image: ImageUpload | None = None,
    ) -> Event:
        """Create an event owned by the caller.

        Raises:
            AuthenticationRequiredError: If owner_id is not a valid identity.
            EventValidationError: With every invalid field, if any.
        """
        owner = _authenticated(owner_id)

        errors: list[str] = []
        title, description, address, parsed_date = validation.clean_new_event(
            title, description, address, date, errors
        )
        storage_ref = validation.check_image(image, errors)
        if errors:
            raise EventValidationError(errors)

        event = self._store.add_event(
            NewEvent(
                title=title,
                description=description,
                address=address,
                date=parsed_date,
                owner_id=owner,
                image=storage_ref,
            )
        )
        logger.info("event created id=%s owner=%s", event.id, owner)
        return event

    def update_event(
        self,
        event_id: str | int,
        caller_id: Any,
        fields: Mapping[str, Any],
        image: ImageUpload | None = None,
    ) -> Event:
        """Apply a partial update to an event the caller owns.

        Only keys present in ``fields`` are validated and written; every
        other attribute keeps its stored value.

        Raises:
            InvalidEventIdError, AuthenticationRequiredError, EventNotFoundError,
            AuthorizationDeniedError, EventValidationError.
        """
        eid = _parse_event_id(event_id)
        caller = _authenticated(caller_id)
        self._require_owner(self._require_event(eid), caller)

        if image is None and not any(name in fields for name in validation.UPDATABLE_FIELDS):
            raise EventValidationError([validation.NOTHING_TO_UPDATE])

        errors: list[str] = []
        changes = validation.clean_changes(fields, image, errors)
        if errors:
            raise EventValidationError(errors)

        updated = self._store.update_event(eid, changes)
        if updated is None:
            raise EventNotFoundError(str(eid))
        logger.info("event updated id=%s by=%s", eid, caller)
        return updated

    def delete_event(self, event_id: str | int, caller_id: Any) -> EventId:
        """Delete an event the caller owns and return its id."""
        eid = _parse_event_id(event_id)
        caller = _authenticated(caller_id)
        self._require_owner(self._require_event(eid), caller)

        if not self._store.delete_event(eid):
            raise EventNotFoundError(str(eid))
        logger.info("event deleted id=%s by=%s", eid, caller)
        return eid

    def register(self, event_id: str | int, caller_id: Any) -> Registration:
        """Register the caller for an existing event.

        Duplicate detection is left to the ledger's uniqueness constraint.

        Raises:
            DuplicateRegistrationError: If the caller is already registered.
        """
        eid = _parse_event_id(event_id)
        caller = _authenticated(caller_id)
        if not self._store.event_exists(eid):
            raise EventNotFoundError(str(eid))

        registration = self._registrations.register(eid, caller)
        logger.info("registered user=%s event=%s", caller, eid)
        return registration

    def unregister(self, event_id: str | int, caller_id: Any) -> UserId:
        """Remove the caller's registration and return the caller's id."""
        eid = _parse_event_id(event_id)
        caller = _authenticated(caller_id)
        if not self._store.event_exists(eid):
            raise EventNotFoundError(str(eid))

        if not self._registrations.unregister(eid, caller):
            raise RegistrationNotFoundError(str(eid), str(caller))
        logger.info("unregistered user=%s event=%s", caller, eid)
        return caller

    def list_registrations(self, event_id: str | int, caller_id: Any) -> list[Registration]:
        """Return an event's registrations. Only the owner may see them."""
        eid = _parse_event_id(event_id)
        caller = _authenticated(caller_id)
        self._require_owner(self._require_event(eid), caller)
        return self._registrations.list_for_event(eid)

    def _require_event(self, event_id: EventId) -> Event:
        event = self._store.get_event(event_id)
        if event is None:
            raise EventNotFoundError(str(event_id))
        return event

    def _require_owner(self, event: Event, caller: UserId) -> None:
        if event.owner_id != caller:
            raise AuthorizationDeniedError(str(event.id))
