from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EventDataPoint:
    """Stripped-down event submitted to visualizers after filtering.

      - 'start': int, seconds since the beginning of the Unix epoch
      - 'run': int, event run time in seconds
      - 'status': int, zero for success, non-zero for a failure class
    """

    start: int
    run: int
    status: int = 0

    @property
    def end(self) -> int:
        return self.start + self.run

    @property
    def passed(self) -> bool:
        return self.status == 0


@dataclass(frozen=True)
class EventData:
    """Full event record as stored in the binary event log.

    Status is positive for a failure class, zero for success and negative for
    an event still in progress.
    """

    id: int
    type: int
    start: int
    run: int
    status: int
    region: int
    progress: int

    def to_point(self) -> EventDataPoint:
        return EventDataPoint(start=self.start, run=self.run, status=self.status)
