"""
CSV to binary event log conversion.

Input rows carry eight fields:
  0) event_id
  1) event_type_id
  2) event_start_time (seconds since the Unix epoch)
  3) event_run_time (seconds)
  4) exit_status (0 for success, >0 for failure, <0 for in-progress)
  5) event_region
  6) event_progress (percentage)
  7) error_reason (free text)

Failed events have their status replaced by an error-reason class: the index
(from 1) of the first error-reason filter matching the reason text, or one
past the last filter when none match.
"""

from __future__ import annotations

import csv
import re
from pathlib import Path
from typing import List, Optional, Pattern, Union

from ..events import EventData
from .base import FeedError, event_filter
from .binlog import encode_event

PathLike = Union[str, Path]

# Implied first filter: a blank or all-whitespace reason. It keeps failures
# given with a reason apart from failures with no explanation even when no
# filter config is supplied.
BLANK_REASON = r"^\s*$"

CSV_FIELDS = 8

INT32 = (-(2**31), 2**31 - 1)
INT8 = (-128, 127)
UINT8 = (0, 255)


def _compile(pattern: str) -> Pattern[str]:
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise FeedError(f"Failed to compile regex '{pattern}': {exc}") from exc


def load_error_reason_filters(conf_path: Optional[PathLike] = None) -> List[Pattern[str]]:
    """Build the ordered error-reason filter list.

    The config is pipe-delimited to look tabular in plain text; only the first
    (whitespace-trimmed) field of each row is used; later fields are free for
    human-readable descriptions.
    """
    filters = [_compile(BLANK_REASON)]
    if not conf_path:
        return filters
    try:
        f = open(conf_path, newline="", encoding="utf-8")
    except OSError as exc:
        raise FeedError(f"Failed to open error-reason filter config '{conf_path}': {exc}") from exc
    with f:
        try:
            for fields in csv.reader(f, delimiter="|"):
                if not fields:
                    continue
                filters.append(_compile(fields[0].strip()))
        except csv.Error as exc:
            raise FeedError(f"Error consuming error-reason filter config '{conf_path}': {exc}") from exc
    return filters


def classify_error_reason(reason: str, filters: List[Pattern[str]]) -> int:
    for i, pattern in enumerate(filters):
        if pattern.search(reason):
            return i + 1
    # Implied "other" class, one past the last filter.
    return len(filters) + 1


def _parse_int(value: str, bounds: tuple, what: str, line: int) -> int:
    try:
        parsed = int(value.strip())
    except ValueError:
        raise FeedError(f"Line {line}: cannot parse {what} from '{value}'") from None
    lo, hi = bounds
    if not lo <= parsed <= hi:
        raise FeedError(f"Line {line}: {what} {parsed} is outside [{lo}, {hi}]")
    return parsed


def parse_csv_row(fields: List[str], line: int, filters: List[Pattern[str]]) -> EventData:
    if len(fields) != CSV_FIELDS:
        raise FeedError(f"Line {line}: expected {CSV_FIELDS} fields, got {len(fields)}")
    exit_status = _parse_int(fields[4], INT8, "event status", line)
    if exit_status > 0:
        status = classify_error_reason(fields[7], filters)
        if status > INT8[1]:
            raise FeedError(f"Line {line}: error-reason class {status} does not fit a signed byte")
    else:
        # Successful (0) or in-progress (negative)
        status = exit_status
    return EventData(
        id=_parse_int(fields[0], INT32, "event ID", line),
        type=_parse_int(fields[1], UINT8, "event type", line),
        start=_parse_int(fields[2], INT32, "event start time", line),
        run=_parse_int(fields[3], INT32, "event run time", line),
        status=status,
        region=_parse_int(fields[5], UINT8, "event region", line),
        progress=_parse_int(fields[6], UINT8, "event progress", line),
    )


def convert_csv_to_binary(
    i_path: PathLike,
    o_path: PathLike,
    min_time: Optional[int] = None,
    max_time: Optional[int] = None,
    event_type: Optional[int] = None,
    region: Optional[int] = None,
    status: Optional[int] = None,
    error_reason_filter: Optional[PathLike] = None,
) -> int:
    """Convert CSV event rows into a binary event log.

    Rows failing the filters are dropped; the status filter applies to the
    classified status. Returns the number of records written.
    """
    filters = load_error_reason_filters(error_reason_filter)
    try:
        i_file = open(i_path, newline="", encoding="utf-8")
    except OSError as exc:
        raise FeedError(f"Failed to open CSV input '{i_path}': {exc}") from exc
    written = 0
    with i_file:
        try:
            o_file = open(o_path, "wb")
        except OSError as exc:
            raise FeedError(f"Failed to open binary output '{o_path}': {exc}") from exc
        with o_file:
            reader = csv.reader(i_file)
            try:
                for fields in reader:
                    if not fields:
                        continue
                    event = parse_csv_row(fields, reader.line_num, filters)
                    if event_filter(event, min_time, max_time, event_type, region, status):
                        o_file.write(encode_event(event))
                        written += 1
            except csv.Error as exc:
                raise FeedError(f"Line {reader.line_num}: error consuming CSV input: {exc}") from exc
    return written
