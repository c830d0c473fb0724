from __future__ import annotations

from typing import Optional

from ..events import EventData


class FeedError(ValueError):
    """Fatal problem with feed input: malformed records, rows or configuration."""


def event_filter(
    event: EventData,
    min_time: Optional[int] = None,
    max_time: Optional[int] = None,
    event_type: Optional[int] = None,
    region: Optional[int] = None,
    status: Optional[int] = None,
) -> bool:
    """Return True when the event falls within every filter that is set.

    Time bounds are inclusive; a None filter accepts everything.
    """
    if min_time is not None and event.start < min_time:
        return False
    if max_time is not None and event.start > max_time:
        return False
    if event_type is not None and event.type != event_type:
        return False
    if region is not None and event.region != region:
        return False
    if status is not None and event.status != status:
        return False
    return True
