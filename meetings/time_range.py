from __future__ import annotations

from dataclasses import dataclass
from typing import Union

START_OF_DAY = 0
# Last minute of the day. Ranges that run to midnight are built inclusively
# against it, which stores an exclusive end of 1440.
END_OF_DAY = 24 * 60 - 1
MINUTES_PER_DAY = END_OF_DAY + 1


@dataclass(frozen=True, order=True)
class TimeRange:
    """Half-open span of minutes ``[start, end)`` within a single day."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < START_OF_DAY or self.end > MINUTES_PER_DAY:
            raise ValueError(
                f"TimeRange [{self.start}, {self.end}) is outside of the day"
            )
        if self.end < self.start:
            raise ValueError("TimeRange end must not be before start")

    @classmethod
    def from_start_end(cls, start: int, end: int, inclusive: bool) -> "TimeRange":
        return cls(start, end + 1 if inclusive else end)

    @classmethod
    def from_start_duration(cls, start: int, duration: int) -> "TimeRange":
        return cls(start, start + duration)

    @property
    def duration(self) -> int:
        return self.end - self.start

    def overlaps(self, other: "TimeRange") -> bool:
        return self.start < other.end and other.start < self.end

    def contains(self, other: Union["TimeRange", int]) -> bool:
        if isinstance(other, TimeRange):
            if other.duration == 0:
                return self.start <= other.start <= self.end
            return self.start <= other.start and other.end <= self.end
        return self.start <= other < self.end

    def __str__(self) -> str:
        return f"Range: [{self.start}, {self.end})"


WHOLE_DAY = TimeRange.from_start_end(START_OF_DAY, END_OF_DAY, True)
