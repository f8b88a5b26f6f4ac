from events.handlers.views import (
    EventDetailView,
    EventListView,
    RegistrationListView,
    RegistrationView,
)

__all__ = [
    "EventListView",
    "EventDetailView",
    "RegistrationView",
    "RegistrationListView",
]
