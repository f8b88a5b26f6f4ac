"""Tests for cache behavior.

Run with: pytest tests/test_cache.py -v
"""

import pytest
from django.core.cache import cache

from events import models
from events.cache import detail_key, list_key


@pytest.fixture
def event(make_user):
    owner = make_user("owner@example.com")
    return models.Event.objects.create(
        title="Meetup", description="desc", address="123 Main St", owner=owner
    )


def test_detail_key_normalizes_id():
    assert detail_key("007") == "events:7"
    assert detail_key(7) == "events:7"
    assert detail_key("abc") is None


@pytest.mark.django_db
class TestReadCache:
    def test_list_response_is_cached(self, api_client, event):
        api_client.get("/api/events")
        assert cache.get(list_key()) is not None

    def test_detail_response_is_cached(self, api_client, event):
        api_client.get(f"/api/events/{event.pk}")
        assert cache.get(detail_key(event.pk))["title"] == "Meetup"

    def test_missing_event_is_not_cached(self, api_client):
        api_client.get("/api/events/999")
        assert cache.get(detail_key(999)) is None


@pytest.mark.django_db
class TestCacheInvalidation:
    """Tests for cache invalidation on model changes."""

    def test_event_save_invalidates_list_cache(self, api_client, event):
        api_client.get("/api/events")
        event.title = "Renamed"
        event.save()
        assert cache.get(list_key()) is None

    def test_event_save_invalidates_detail_cache(self, api_client, event):
        api_client.get(f"/api/events/{event.pk}")
        event.title = "Renamed"
        event.save()
        assert cache.get(detail_key(event.pk)) is None
        assert api_client.get(f"/api/events/{event.pk}").data["title"] == "Renamed"

    def test_event_delete_invalidates_caches(self, api_client, event):
        event_id = event.pk
        api_client.get("/api/events")
        api_client.get(f"/api/events/{event_id}")
        event.delete()
        assert cache.get(list_key()) is None
        assert cache.get(detail_key(event_id)) is None

    def test_update_through_api_is_visible(self, client_for, api_client, event):
        api_client.get(f"/api/events/{event.pk}")
        owner_client = client_for(event.owner)

        owner_client.put(f"/api/events/{event.pk}", {"title": "Fresh"}, format="json")

        assert api_client.get(f"/api/events/{event.pk}").data["title"] == "Fresh"
