from .base import FeedError, event_filter
from .binlog import RECORD_SIZE, decode_events, encode_event, encode_events, read_binlog, write_binlog
from .csv_feed import classify_error_reason, convert_csv_to_binary, load_error_reason_filters
from .png import generate_png_from_binlog, write_png

__all__ = [
    "FeedError",
    "RECORD_SIZE",
    "classify_error_reason",
    "convert_csv_to_binary",
    "decode_events",
    "encode_event",
    "encode_events",
    "event_filter",
    "generate_png_from_binlog",
    "load_error_reason_filters",
    "read_binlog",
    "write_binlog",
    "write_png",
]
