"""Pytest configuration and shared fixtures."""

import pytest
from rest_framework.test import APIClient

from accounts.tokens import issue_token
from events.services.event_service import EventService
from events.stores.memory_store import InMemoryEventStore, InMemoryRegistrationLedger


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture(autouse=True)
def media_root(settings, tmp_path):
    settings.MEDIA_ROOT = tmp_path / "media"
    return settings.MEDIA_ROOT


@pytest.fixture
def ledger() -> InMemoryRegistrationLedger:
    return InMemoryRegistrationLedger()


@pytest.fixture
def event_store(ledger) -> InMemoryEventStore:
    return InMemoryEventStore(ledger=ledger)


@pytest.fixture
def service(event_store, ledger) -> EventService:
    return EventService(event_store, ledger)


@pytest.fixture
def make_user(django_user_model):
    def _make(email: str = "owner@example.com", password: str = "secret123"):
        return django_user_model.objects.create_user(
            username=email, email=email, password=password
        )

    return _make


@pytest.fixture
def client_for():
    """Return an APIClient carrying a bearer token for the given user."""

    def _client(user) -> APIClient:
        client = APIClient()
        token = issue_token({"id": user.pk, "email": user.email})
        client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")
        return client

    return _client
