"""Cache keys for event read endpoints."""

from events.domain import EventId

LIST_KEY = "events:list"


def list_key() -> str:
    return LIST_KEY


def detail_key(event_id: str | int) -> str | None:
    """Key for one event, or None when the id cannot name an event."""
    try:
        return f"events:{EventId.from_string(event_id).value}"
    except ValueError:
        return None
