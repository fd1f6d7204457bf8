from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import FrozenSet, Iterable

from meetings.time_range import TimeRange


@dataclass(frozen=True)
class Event:
    """An already scheduled commitment shared by its attendees."""

    title: str
    when: TimeRange
    attendees: FrozenSet[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        if self.when is None:
            raise ValueError(f"Event {self.title!r} has no time range")
        object.__setattr__(self, "attendees", frozenset(self.attendees))

    def shared_with(self, people: Iterable[str]) -> FrozenSet[str]:
        return self.attendees.intersection(people)


@dataclass(frozen=True)
class MeetingRequest:
    attendees: FrozenSet[str]
    duration: int
    optional_attendees: FrozenSet[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        if self.duration < 0:
            raise ValueError("MeetingRequest duration must be non-negative")
        object.__setattr__(self, "attendees", frozenset(self.attendees))
        object.__setattr__(
            self, "optional_attendees", frozenset(self.optional_attendees)
        )

    def with_optional_attendee(self, attendee: str) -> "MeetingRequest":
        return replace(
            self, optional_attendees=self.optional_attendees | {attendee}
        )
