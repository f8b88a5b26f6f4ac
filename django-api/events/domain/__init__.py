from events.domain.models import Event, EventChanges, NewEvent, Registration
from events.domain.value_objects import EventId, ImageUpload, UserId

__all__ = [
    "Event",
    "EventChanges",
    "NewEvent",
    "Registration",
    "EventId",
    "UserId",
    "ImageUpload",
]
