from __future__ import annotations

from dataclasses import dataclass
from typing import Collection, Iterable, Sequence

from meetings.intervals import intersect, overlaps, subtract
from meetings.models import Event
from meetings.observability import get_logger, log_json
from meetings.time_range import TimeRange

logger = get_logger(__name__)


@dataclass(frozen=True)
class SlotAttendance:
    """A candidate slot and how many optional attendees are still free in it."""

    slot: TimeRange
    score: int


def score_slots(
    events: Iterable[Event],
    optional_attendees: Collection[str],
    free_slots: Sequence[TimeRange],
    duration: int,
) -> list[SlotAttendance]:
    """Split free slots on optional attendee conflicts and score each piece.

    Every slot starts with one point per optional attendee. An event costs the
    part of a slot it overlaps one point per optional attendee it involves;
    the parts outside the event keep their score.
    """
    entries = [SlotAttendance(slot, len(optional_attendees)) for slot in free_slots]
    for event in events:
        common_count = len(event.shared_with(optional_attendees))
        if common_count == 0 or event.when.duration == 0:
            continue
        next_entries: list[SlotAttendance] = []
        for entry in entries:
            if not overlaps(entry.slot, event.when):
                next_entries.append(entry)
                continue
            next_entries.extend(_split_entry(entry, event.when, common_count, duration))
        entries = next_entries
    return entries


def _split_entry(
    entry: SlotAttendance, busy: TimeRange, common_count: int, duration: int
) -> list[SlotAttendance]:
    remainders = subtract(entry.slot, busy, duration)
    conflict = intersect(entry.slot, busy)

    # Time order: left remainder, conflict, right remainder.
    pieces = [
        SlotAttendance(remainder, entry.score)
        for remainder in remainders
        if remainder.start < conflict.start
    ]
    if conflict.duration > 0 and conflict.duration >= duration:
        pieces.append(SlotAttendance(conflict, entry.score - common_count))
    pieces.extend(
        SlotAttendance(remainder, entry.score)
        for remainder in remainders
        if remainder.start >= conflict.end
    )
    if not pieces:
        # Too short to split: any meeting in the slot overlaps the event.
        pieces.append(SlotAttendance(entry.slot, entry.score - common_count))
    return pieces


def select_best(entries: Sequence[SlotAttendance]) -> list[TimeRange]:
    if not entries:
        return []
    max_score = max(entry.score for entry in entries)
    return [entry.slot for entry in entries if entry.score == max_score]


def refine_by_optional_attendance(
    events: Iterable[Event],
    optional_attendees: Collection[str],
    free_slots: Sequence[TimeRange],
    duration: int,
) -> list[TimeRange]:
    if not optional_attendees or not free_slots:
        return list(free_slots)

    entries = score_slots(events, optional_attendees, free_slots, duration)
    log_json(
        logger,
        "debug",
        "optional_slot_scores",
        optional=len(optional_attendees),
        scores=[(str(entry.slot), entry.score) for entry in entries],
    )
    return select_best(entries)
