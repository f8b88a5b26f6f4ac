"""Field rules shared by event creation and update.

Every check appends to an error list instead of raising, so a caller can
report all invalid fields at once.
"""

from collections.abc import Mapping
from datetime import datetime, time, timezone
from typing import Any

from django.utils.dateparse import parse_date, parse_datetime

from events.domain import EventChanges, ImageUpload

TEXT_FIELDS = ("title", "description", "address")
UPDATABLE_FIELDS = (*TEXT_FIELDS, "date")

INVALID_DATE = "date must be a valid date string (e.g. ISO 8601)"
INVALID_IMAGE = "image must be an image file"
NOTHING_TO_UPDATE = (
    "Provide at least one field (title, description, address, date) or an image to update"
)


def trimmed(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


def parse_timestamp(raw: str) -> datetime | None:
    """Parse an ISO 8601 date or datetime and normalize it to UTC.

    Naive values are taken as UTC. Returns None for anything unparseable,
    including well-formed but impossible dates such as 2024-02-30.
    """
    try:
        parsed = parse_datetime(raw)
        if parsed is None:
            day = parse_date(raw)
            if day is None:
                return None
            parsed = datetime.combine(day, time.min)
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed.astimezone(timezone.utc)
    except (ValueError, OverflowError):
        return None


def check_image(image: ImageUpload | None, errors: list[str]) -> str | None:
    if image is None:
        return None
    if not image.is_image:
        errors.append(INVALID_IMAGE)
    return image.storage_ref


def clean_new_event(
    title: Any, description: Any, address: Any, date: Any, errors: list[str]
) -> tuple[str, str, str, datetime | None]:
    values = {"title": trimmed(title), "description": trimmed(description), "address": trimmed(address)}
    for name in TEXT_FIELDS:
        if not values[name]:
            errors.append(f"{name} is required and must not be empty")

    raw_date = trimmed(date)
    parsed = None
    if not raw_date:
        errors.append("date is required and must not be empty")
    else:
        parsed = parse_timestamp(raw_date)
        if parsed is None:
            errors.append(INVALID_DATE)
    return values["title"], values["description"], values["address"], parsed


def clean_changes(
    fields: Mapping[str, Any], image: ImageUpload | None, errors: list[str]
) -> EventChanges:
    """Validate only the keys present in ``fields``; absent keys stay unset."""
    updates: dict[str, Any] = {}
    for name in TEXT_FIELDS:
        if name not in fields:
            continue
        value = trimmed(fields[name])
        if not value:
            errors.append(f"{name} must not be empty")
        else:
            updates[name] = value

    if "date" in fields:
        raw_date = trimmed(fields["date"])
        if not raw_date:
            errors.append("date must not be empty")
        else:
            parsed = parse_timestamp(raw_date)
            if parsed is None:
                errors.append(INVALID_DATE)
            else:
                updates["date"] = parsed

    storage_ref = check_image(image, errors)
    if storage_ref is not None:
        updates["image"] = storage_ref
    return EventChanges(**updates)
