"""Tests for writing and reading the seeded-booking artifact."""

import json
from datetime import datetime, timezone

from booker_seed.artifact import read_seed_result, write_seed_result
from booker_seed.schemas.booking import CreatedBooking, SeedResult
from booker_seed.templates import DEFAULT_TEMPLATES

FIXED_TS = datetime(2025, 1, 15, 10, 30, 0, 123000, tzinfo=timezone.utc)


def _result(ids):
    return SeedResult(
        bookings=[CreatedBooking(bookingid=i, booking=DEFAULT_TEMPLATES[0]) for i in ids],
        timestamp=FIXED_TS,
    )


def test_write_creates_parent_dirs(tmp_path):
    path = tmp_path / "scripts" / "seeded-booking-ids.json"
    write_seed_result(_result([1, 2, 3]), path)

    data = json.loads(path.read_text())
    assert data == {"bookingIds": [1, 2, 3], "timestamp": "2025-01-15T10:30:00.123Z"}


def test_write_is_pretty_printed(tmp_path):
    path = tmp_path / "out.json"
    write_seed_result(_result([7]), path)

    assert path.read_text().startswith('{\n  "bookingIds": [\n')


def test_write_overwrites_previous(tmp_path):
    path = tmp_path / "out.json"
    write_seed_result(_result([1, 2, 3]), path)
    write_seed_result(_result([9]), path)

    assert json.loads(path.read_text())["bookingIds"] == [9]


def test_write_leaves_no_temp_files(tmp_path):
    path = tmp_path / "out.json"
    write_seed_result(_result([1]), path)

    assert [p.name for p in tmp_path.iterdir()] == ["out.json"]


def test_naive_timestamp_treated_as_utc():
    result = SeedResult(timestamp=datetime(2025, 3, 1, 8, 0, 0))
    assert result.to_artifact()["timestamp"] == "2025-03-01T08:00:00.000Z"


def test_read_back(tmp_path):
    path = tmp_path / "out.json"
    write_seed_result(_result([4, 5]), path)

    seeded = read_seed_result(path)
    assert seeded.booking_ids == [4, 5]
    assert seeded.timestamp == FIXED_TS
