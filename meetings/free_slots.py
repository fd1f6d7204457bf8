from __future__ import annotations

from typing import Collection, Iterable, Protocol

from meetings.intervals import merge_busy, overlaps, subtract
from meetings.models import Event
from meetings.observability import get_logger, log_json
from meetings.time_range import END_OF_DAY, START_OF_DAY, WHOLE_DAY, TimeRange

logger = get_logger(__name__)


class FreeSlotFinder(Protocol):
    def __call__(
        self,
        events: Iterable[Event],
        mandatory_attendees: Collection[str],
        duration: int,
    ) -> list[TimeRange]:
        """Return the slots of at least ``duration`` minutes free for everyone."""


def events_involving(
    events: Iterable[Event], attendees: Collection[str]
) -> list[Event]:
    # An event of zero minutes blocks nobody.
    return [
        event
        for event in events
        if event.when.duration > 0 and event.shared_with(attendees)
    ]


def compute_mandatory_free_slots(
    events: Iterable[Event],
    mandatory_attendees: Collection[str],
    duration: int,
) -> list[TimeRange]:
    if duration > WHOLE_DAY.duration:
        return []

    relevant = events_involving(events, mandatory_attendees)
    busy = merge_busy(event.when for event in relevant)
    log_json(
        logger,
        "debug",
        "mandatory_busy_cover",
        events=len(relevant),
        busy=[str(busy_range) for busy_range in busy],
    )

    slots: list[TimeRange] = []
    cursor = START_OF_DAY
    for busy_range in busy:
        if busy_range.start < cursor:
            cursor = max(cursor, busy_range.end)
            continue
        gap = TimeRange.from_start_end(cursor, busy_range.start, False)
        if gap.duration > 0 and gap.duration >= duration:
            slots.append(gap)
        cursor = busy_range.end
    if cursor <= END_OF_DAY:
        gap = TimeRange.from_start_end(cursor, END_OF_DAY, True)
        if gap.duration >= duration:
            slots.append(gap)

    log_json(
        logger, "debug", "mandatory_free_slots", strategy="sweep", count=len(slots)
    )
    return slots


def split_mandatory_free_slots(
    events: Iterable[Event],
    mandatory_attendees: Collection[str],
    duration: int,
) -> list[TimeRange]:
    """Carve the whole day down one conflicting event at a time.

    Slower than the sweep for busy calendars but yields the same slots.
    """
    if duration > WHOLE_DAY.duration:
        return []

    slots = [WHOLE_DAY]
    for event in events_involving(events, mandatory_attendees):
        remaining: list[TimeRange] = []
        for slot in slots:
            if overlaps(slot, event.when):
                remaining.extend(subtract(slot, event.when, duration))
            else:
                remaining.append(slot)
        slots = remaining

    slots.sort()
    log_json(
        logger, "debug", "mandatory_free_slots", strategy="split", count=len(slots)
    )
    return slots
