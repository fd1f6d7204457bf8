"""Entry point for finding the times a requested meeting could take place."""
from __future__ import annotations

from typing import Collection, Optional

from meetings.free_slots import FreeSlotFinder, compute_mandatory_free_slots
from meetings.models import Event, MeetingRequest
from meetings.observability import get_logger, log_json
from meetings.optional import refine_by_optional_attendance
from meetings.time_range import WHOLE_DAY, TimeRange

logger = get_logger(__name__)


def query(
    events: Collection[Event],
    request: MeetingRequest,
    finder: Optional[FreeSlotFinder] = None,
) -> list[TimeRange]:
    """Return the slots where the requested meeting fits.

    No slot conflicts with a mandatory attendee. Among those, only the slots
    that the largest number of optional attendees can also make are returned.
    An empty list means the meeting cannot be scheduled.

    ``finder`` replaces the sweep used for the mandatory attendees, e.g. with
    ``split_mandatory_free_slots``.
    """
    if request.duration > WHOLE_DAY.duration:
        log_json(
            logger,
            "debug",
            "meeting_query_rejected",
            duration=request.duration,
            reason="longer_than_day",
        )
        return []

    finder = finder or compute_mandatory_free_slots
    free_slots = finder(events, request.attendees, request.duration)
    slots = refine_by_optional_attendance(
        events, request.optional_attendees, free_slots, request.duration
    )

    log_json(
        logger,
        "debug",
        "meeting_query_result",
        events=len(events),
        mandatory=len(request.attendees),
        optional=len(request.optional_attendees),
        duration=request.duration,
        free_slots=len(free_slots),
        slots=[str(slot) for slot in slots],
    )
    return slots
