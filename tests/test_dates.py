"""
Tests for date and duration formatting.
"""

from datetime import date, datetime, timedelta, timezone

import pytest

from podcast_rss.dates import format_duration, format_rfc1123z, to_datetime


class TestFormatRfc1123z:
    """Tests for format_rfc1123z()."""

    def test_utc(self):
        value = datetime(2006, 1, 2, 15, 4, 5, tzinfo=timezone.utc)

        assert format_rfc1123z(value) == "Mon, 02 Jan 2006 15:04:05 +0000"

    def test_negative_offset(self):
        value = datetime(2006, 1, 2, 15, 4, 5, tzinfo=timezone(timedelta(hours=-7)))

        assert format_rfc1123z(value) == "Mon, 02 Jan 2006 15:04:05 -0700"

    def test_rfc822_string(self):
        assert format_rfc1123z("Mon, 01 Jan 2024 12:00:00 GMT") == "Mon, 01 Jan 2024 12:00:00 +0000"

    def test_date(self):
        assert format_rfc1123z(date(2024, 1, 15)) == "Mon, 15 Jan 2024 00:00:00 +0000"

    def test_now(self):
        assert format_rfc1123z().endswith("+0000")

    def test_invalid_string(self):
        with pytest.raises(ValueError, match="Unrecognized date"):
            format_rfc1123z("not a date")


class TestToDatetime:
    """Tests for to_datetime()."""

    def test_naive_is_utc(self):
        assert to_datetime(datetime(2024, 1, 1)).tzinfo is timezone.utc

    def test_aware_is_kept(self):
        tz = timezone(timedelta(hours=2))

        assert to_datetime(datetime(2024, 1, 1, tzinfo=tz)).tzinfo is tz


class TestFormatDuration:
    """Tests for format_duration()."""

    @pytest.mark.parametrize("seconds,expected", [
        (0, "00:00"),
        (59, "00:59"),
        (3600, "01:00:00"),
        (36000 + 61, "10:01:01"),
    ])
    def test_format(self, seconds, expected):
        assert format_duration(seconds) == expected
