from __future__ import annotations

import struct
from pathlib import Path
from typing import Iterable, Iterator, Union

from ..events import EventData
from .base import FeedError

# Binary event log layout, one record after another with no header:
#   id(int32), type(uint8), start(int32), run(int32), status(int8),
#   region(uint8), progress(uint8) -> 16 bytes, little-endian, unpadded.
RECORD = struct.Struct("<iBiibBB")
RECORD_SIZE = RECORD.size
_READ_RECORDS = 4096

PathLike = Union[str, Path]


def encode_event(event: EventData) -> bytes:
    try:
        return RECORD.pack(
            event.id, event.type, event.start, event.run, event.status, event.region, event.progress
        )
    except struct.error as exc:
        raise FeedError(f"Event {event.id} does not fit the binary record format: {exc}") from exc


def encode_events(events: Iterable[EventData]) -> bytes:
    return b"".join(encode_event(e) for e in events)


def decode_events(data: bytes) -> Iterator[EventData]:
    """Lazily decode a buffer of binary event records."""
    n_records, leftover = divmod(len(data), RECORD_SIZE)
    if leftover:
        raise FeedError(
            f"Binary event data is {len(data)} bytes, not a multiple of the {RECORD_SIZE}-byte record size"
        )
    for fields in RECORD.iter_unpack(data):
        yield EventData(*fields)


def read_binlog(path: PathLike) -> Iterator[EventData]:
    """Lazily decode a binary event log.

    Each call reopens the file, so the sequence can be restarted.
    """
    try:
        f = open(path, "rb")
    except OSError as exc:
        raise FeedError(f"Failed to open binary event log '{path}': {exc}") from exc
    with f:
        offset = 0
        while True:
            chunk = f.read(RECORD_SIZE * _READ_RECORDS)
            if not chunk:
                break
            if len(chunk) % RECORD_SIZE:
                raise FeedError(
                    f"Truncated record at byte offset {offset + len(chunk) - len(chunk) % RECORD_SIZE} in '{path}'"
                )
            yield from decode_events(chunk)
            offset += len(chunk)


def write_binlog(path: PathLike, events: Iterable[EventData]) -> int:
    """Write events to a binary event log, returning the number written."""
    count = 0
    try:
        with open(path, "wb") as f:
            for event in events:
                f.write(encode_event(event))
                count += 1
    except OSError as exc:
        raise FeedError(f"Failed to write binary event log '{path}': {exc}") from exc
    return count
