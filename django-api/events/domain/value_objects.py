"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from typing import Any, Self


def _positive_int(value: Any) -> int:
    if isinstance(value, bool):
        raise ValueError("Identifier must be an integer")
    if isinstance(value, str):
        value = value.strip()
        if not value.isdigit():
            raise ValueError("Identifier must be an integer")
    try:
        number = int(value)
    except (TypeError, ValueError) as exc:
        raise ValueError("Identifier must be an integer") from exc
    if not isinstance(value, str) and number != value:
        raise ValueError("Identifier must be an integer")
    if number <= 0:
        raise ValueError("Identifier must be positive")
    return number


@dataclass(frozen=True)
class EventId:
    """Unique identifier for an Event, assigned by the store."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int) or self.value <= 0:
            raise ValueError("EventId must be a positive integer")

    @classmethod
    def from_string(cls, value: str | int) -> Self:
        return cls(value=_positive_int(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class UserId:
    """Identity of an authenticated user."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int) or self.value <= 0:
            raise ValueError("UserId must be a positive integer")

    @classmethod
    def from_value(cls, value: Any) -> Self:
        if value is None:
            raise ValueError("UserId is required")
        return cls(value=_positive_int(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class ImageUpload:
    """Descriptor of a stored upload offered as an event image."""

    media_type: str
    storage_ref: str

    @property
    def is_image(self) -> bool:
        return (self.media_type or "").lower().startswith("image/")
