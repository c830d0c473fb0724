import pytest

from perspective.events import EventData
from perspective.feeds import (
    FeedError,
    classify_error_reason,
    convert_csv_to_binary,
    load_error_reason_filters,
    read_binlog,
)

ROWS = """\
1,3,100,10,0,1,100,
2,3,110,20,1,1,100,request timeout
3,3,120,30,1,2,100,
4,4,130,40,1,1,100,disk  full
5,3,140,50,-1,1,40,
6,3,150,60,1,1,100,segfault
"""

CONF = """\
timeout        | Upstream timed out
disk\\s+full    | Out of disk space
"""


@pytest.fixture
def csv_path(tmp_path):
    path = tmp_path / "events.csv"
    path.write_text(ROWS)
    return path


@pytest.fixture
def conf_path(tmp_path):
    path = tmp_path / "reasons.conf"
    path.write_text(CONF)
    return path


def test_blank_reason_is_always_the_first_class():
    filters = load_error_reason_filters(None)
    assert len(filters) == 1
    assert classify_error_reason("", filters) == 1
    assert classify_error_reason("  \t", filters) == 1
    assert classify_error_reason("disk full", filters) == 2


def test_first_matching_filter_wins(conf_path):
    filters = load_error_reason_filters(conf_path)
    assert [f.pattern for f in filters] == [r"^\s*$", "timeout", r"disk\s+full"]
    assert classify_error_reason("request timeout, disk full", filters) == 2
    assert classify_error_reason("disk  full", filters) == 3
    assert classify_error_reason("segfault", filters) == 4


def test_convert_classifies_failures(tmp_path, csv_path, conf_path):
    out = tmp_path / "events.bin"
    assert convert_csv_to_binary(csv_path, out, error_reason_filter=conf_path) == 6
    events = list(read_binlog(out))
    assert events[0] == EventData(id=1, type=3, start=100, run=10, status=0, region=1, progress=100)
    assert [e.status for e in events] == [0, 2, 1, 3, -1, 4]
    assert events[4].progress == 40


def test_convert_applies_filters(tmp_path, csv_path):
    out = tmp_path / "events.bin"
    written = convert_csv_to_binary(csv_path, out, min_time=110, max_time=150, event_type=3, region=1)
    assert written == 3
    assert [e.id for e in read_binlog(out)] == [2, 5, 6]


def test_status_filter_uses_classified_status(tmp_path, csv_path):
    out = tmp_path / "events.bin"
    assert convert_csv_to_binary(csv_path, out, status=1) == 1
    assert [e.id for e in read_binlog(out)] == [3]


@pytest.mark.parametrize(
    "rows,message",
    [
        ("1,3,100,10,0,1,100\n", "Line 1: expected 8 fields, got 7"),
        ("1,3,100,10,0,1,100,\n1,x,100,10,0,1,100,\n", "Line 2: cannot parse event type"),
        ("1,3,100,10,0,1,256,\n", "Line 1: event progress 256 is outside"),
        ("1,3,3000000000,10,0,1,100,\n", "event start time"),
    ],
)
def test_malformed_rows_abort_conversion(tmp_path, rows, message):
    src = tmp_path / "bad.csv"
    src.write_text(rows)
    with pytest.raises(FeedError, match=message):
        convert_csv_to_binary(src, tmp_path / "out.bin")


def test_bad_regex_is_reported(tmp_path):
    conf = tmp_path / "reasons.conf"
    conf.write_text("disk (full | Broken\n")
    with pytest.raises(FeedError, match="Failed to compile regex"):
        load_error_reason_filters(conf)


def test_missing_inputs_are_reported(tmp_path, csv_path):
    with pytest.raises(FeedError, match="Failed to open CSV input"):
        convert_csv_to_binary(tmp_path / "missing.csv", tmp_path / "out.bin")
    with pytest.raises(FeedError, match="Failed to open error-reason filter config"):
        convert_csv_to_binary(csv_path, tmp_path / "out.bin", error_reason_filter=tmp_path / "missing.conf")
