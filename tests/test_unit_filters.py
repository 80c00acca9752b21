from datetime import date, datetime, timezone

from carhub.utils.filters import parse_instant


def test_parse_date_only():
    assert parse_instant("2025-06-01") == date(2025, 6, 1)


def test_parse_iso_with_z_suffix():
    dt = parse_instant("2025-06-01T10:30:00Z")
    assert dt == datetime(2025, 6, 1, 10, 30, tzinfo=timezone.utc)


def test_parse_iso_with_millis_and_offset():
    dt = parse_instant("2025-06-01T10:30:00.250+05:30")
    assert dt.utcoffset().total_seconds() == 5.5 * 3600


def test_parse_space_separated_without_seconds():
    assert parse_instant("2025-06-01 10:30") == datetime(2025, 6, 1, 10, 30)


def test_parse_epoch_milliseconds():
    assert parse_instant(0) == datetime(1970, 1, 1, tzinfo=timezone.utc)


def test_objects_pass_through():
    d = date(2025, 1, 2)
    assert parse_instant(d) is d


def test_garbage_returns_none():
    assert parse_instant("not a date") is None
    assert parse_instant("2025-13-01") is None
    assert parse_instant("") is None
    assert parse_instant(None) is None
    assert parse_instant(True) is None
    assert parse_instant({"when": "today"}) is None
