from django.urls import path

from events.handlers import EventDetailView, EventListView, RegistrationListView, RegistrationView

urlpatterns = [
    path("events", EventListView.as_view(), name="event-list"),
    path("events/<str:event_id>", EventDetailView.as_view(), name="event-detail"),
    path(
        "events/<str:event_id>/register",
        RegistrationView.as_view(),
        name="event-register",
    ),
    path(
        "events/<str:event_id>/unregister",
        RegistrationView.as_view(http_method_names=["delete", "options"]),
        name="event-unregister",
    ),
    path(
        "events/<str:event_id>/registrations",
        RegistrationListView.as_view(),
        name="event-registrations",
    ),
]
