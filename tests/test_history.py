"""Tests for the conversion history store."""

import dataclasses
from datetime import datetime, timezone

import pytest

from measuremint.core.history import ConversionHistory, ConversionRecord, format_timestamp


def _record(inp="1 m", out="3.281 ft", category="📏 Length"):
    return ConversionRecord(input=inp, output=out, category=category)


class TestConversionRecord:
    def test_unique_ids(self):
        assert _record().id != _record().id

    def test_timestamp_is_aware(self):
        assert _record().timestamp.tzinfo is not None

    def test_summary(self):
        assert _record().summary == "1 m → 3.281 ft"

    def test_immutable(self):
        record = _record()
        with pytest.raises(dataclasses.FrozenInstanceError):
            record.output = "0 ft"

    def test_same_conversion_ignores_category_and_time(self):
        assert _record(category="a").same_conversion(_record(category="b"))
        assert not _record().same_conversion(_record(out="3 ft"))


class TestConversionHistory:
    def test_starts_empty(self):
        history = ConversionHistory()
        assert len(history) == 0
        assert not history
        assert history.last is None
        assert history.newest_first() == []

    def test_identical_consecutive_recorded_once(self):
        history = ConversionHistory()
        assert history.record_if_changed(_record())
        assert not history.record_if_changed(_record())
        assert len(history) == 1

    def test_different_conversions_both_recorded(self):
        history = ConversionHistory()
        first = _record()
        second = _record("2 m", "6.562 ft")
        history.record_if_changed(first)
        history.record_if_changed(second)

        assert history.records == (first, second)
        assert history.newest_first() == [second, first]
        assert history.last is second

    def test_only_last_record_compared(self):
        history = ConversionHistory()
        history.record_if_changed(_record())
        history.record_if_changed(_record("2 m", "6.562 ft"))
        assert history.record_if_changed(_record())
        assert len(history) == 3

    def test_input_change_alone_is_recorded(self):
        history = ConversionHistory()
        history.record_if_changed(_record("0 m", "0 ft"))
        assert history.record_if_changed(_record("0 km", "0 ft"))

    def test_clear_then_append(self):
        history = ConversionHistory()
        history.record_if_changed(_record())
        history.clear()
        assert len(history) == 0
        assert history.newest_first() == []

        assert history.record_if_changed(_record())
        assert len(history) == 1

    def test_clear_empty_history(self):
        history = ConversionHistory()
        history.clear()
        assert len(history) == 0

    def test_iterates_oldest_first(self):
        history = ConversionHistory()
        records = [_record(f"{i} m", f"{i} ft") for i in range(3)]
        for r in records:
            history.record_if_changed(r)
        assert list(history) == records


class TestFormatTimestamp:
    def test_afternoon(self):
        ts = datetime(2026, 10, 17, 15, 4).astimezone()
        assert format_timestamp(ts) == "Oct 17, 2026 at 3:04 PM"

    def test_midnight_is_twelve(self):
        ts = datetime(2026, 1, 2, 0, 5).astimezone()
        assert format_timestamp(ts) == "Jan 2, 2026 at 12:05 AM"

    def test_converts_to_local_time(self):
        ts = datetime(2026, 10, 17, 15, 4, tzinfo=timezone.utc)
        assert format_timestamp(ts) == format_timestamp(ts.astimezone())
