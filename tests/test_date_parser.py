# tests/test_date_parser.py

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from smartodo.dates.formatter import format_natural_date
from smartodo.dates.parser import (
    PartialDate,
    parse_due_date,
    parse_natural_date,
    parse_time_today,
)

from .fakes import local_ts

INVALID_INPUTS = ["", "   ", None, "25:00", "Dec 32", "13pm", "not a date", "2:", "12:60", "24:00"]


def _local(ts: int) -> datetime:
    return datetime.fromtimestamp(ts)


def test_tomorrow_is_nine_am_next_day(monday: datetime) -> None:
    midnight = local_ts(2026, 10, 19)
    assert parse_natural_date("tomorrow", monday) == midnight + 86400 + 9 * 3600


def test_first_strategy_wins_without_merging(monday: datetime) -> None:
    # The time after "tomorrow" is trailing text, not merged in.
    assert parse_natural_date("Tomorrow 2pm", monday) == local_ts(2026, 10, 20, 9)
    assert parse_natural_date("Dec 25 2pm", monday) == local_ts(2026, 12, 25, 9)


@pytest.mark.parametrize(
    ("phrase", "expected"),
    [
        ("in 3 days", (2026, 10, 22, 10, 30)),
        ("in 1 day", (2026, 10, 20, 10, 30)),
        ("in 2h", (2026, 10, 19, 12, 30)),
        ("in 2 hours", (2026, 10, 19, 12, 30)),
        ("in 15 min", (2026, 10, 19, 10, 45)),
        ("in 5 m", (2026, 10, 19, 10, 35)),
        ("IN 10 Minutes", (2026, 10, 19, 10, 40)),
    ],
)
def test_in_n_units_counts_from_now(monday: datetime, phrase: str, expected: tuple[int, ...]) -> None:
    assert parse_natural_date(phrase, monday) == local_ts(*expected)


def test_in_with_unknown_unit_fails(monday: datetime) -> None:
    assert parse_natural_date("in 2 weeks", monday) is None
    assert parse_natural_date("in 2 months", monday) is None
    assert parse_natural_date("in soon", monday) is None


def test_in_truncates_seconds() -> None:
    now = datetime(2026, 10, 19, 10, 30, 45)
    assert parse_natural_date("in 5 min", now) == local_ts(2026, 10, 19, 10, 35)


@pytest.mark.parametrize(
    "phrase",
    ["in 5000000 days", "in 999999999999 minutes", "in 99999999999 hours", "in 1" + "0" * 40 + " days"],
)
def test_in_out_of_range_offset_fails(monday: datetime, phrase: str) -> None:
    assert parse_natural_date(phrase, monday) is None
    assert parse_due_date(phrase, monday) is None


def test_in_large_offset_still_formats(monday: datetime) -> None:
    ts = parse_natural_date("in 2000000 minutes", monday)
    assert ts is not None
    assert format_natural_date(ts, monday).endswith("at 7:50 AM")


@pytest.mark.parametrize(
    ("phrase", "day"),
    [
        ("next monday", 26),
        ("next tue", 20),
        ("next Friday", 23),
        ("next sun", 25),
    ],
)
def test_next_weekday(monday: datetime, phrase: str, day: int) -> None:
    assert parse_natural_date(phrase, monday) == local_ts(2026, 10, day, 9)


def test_next_monday_is_always_after_today() -> None:
    for offset in range(7):
        now = datetime(2026, 10, 19, 8, 0) + timedelta(days=offset)
        ts = parse_natural_date("next monday", now)
        assert ts is not None
        when = _local(ts)
        assert when.date() > now.date()
        assert when.weekday() == 0
        assert (when.date() - now.date()).days <= 7


def test_next_without_weekday_fails(monday: datetime) -> None:
    assert parse_natural_date("next week", monday) is None


def test_month_day_this_year_or_next(monday: datetime) -> None:
    assert parse_natural_date("Dec 25", monday) == local_ts(2026, 12, 25, 9)
    assert parse_natural_date("may 20", monday) == local_ts(2027, 5, 20, 9)
    assert parse_natural_date("Sept. 3", monday) == local_ts(2027, 9, 3, 9)


def test_month_day_rolls_when_default_time_already_passed(monday: datetime) -> None:
    # 09:00 today is before 10:30 "now".
    assert parse_natural_date("oct 19", monday) == local_ts(2027, 10, 19, 9)
    early = datetime(2026, 10, 19, 8, 0)
    assert parse_natural_date("oct 19", early) == local_ts(2026, 10, 19, 9)


def test_month_day_past_month_end_normalizes_forward(monday: datetime) -> None:
    assert parse_natural_date("feb 30", monday) == local_ts(2027, 3, 2, 9)


def test_bare_weekday_is_next_occurrence(monday: datetime) -> None:
    assert parse_natural_date("wednesday", monday) == local_ts(2026, 10, 21, 9)
    assert parse_natural_date("Monday", monday) == local_ts(2026, 10, 26, 9)


@pytest.mark.parametrize(
    ("phrase", "expected"),
    [
        ("2pm", (2026, 10, 19, 14, 0)),
        ("14:30", (2026, 10, 19, 14, 30)),
        ("5", (2026, 10, 19, 17, 0)),
        ("12pm", (2026, 10, 19, 12, 0)),
        ("2 pm", (2026, 10, 19, 14, 0)),
        ("2pm sharp", (2026, 10, 19, 14, 0)),
        ("9am", (2026, 10, 20, 9, 0)),
        ("12am", (2026, 10, 20, 0, 0)),
    ],
)
def test_bare_time(monday: datetime, phrase: str, expected: tuple[int, ...]) -> None:
    assert parse_natural_date(phrase, monday) == local_ts(*expected)


@pytest.mark.parametrize("bad", INVALID_INPUTS)
def test_invalid_inputs_fail_every_parser(monday: datetime, bad) -> None:
    assert parse_natural_date(bad, monday) is None
    assert parse_time_today(bad, monday) is None
    assert parse_due_date(bad, monday) is None


def test_parse_time_today_pm_hours() -> None:
    now = datetime(2026, 10, 19, 0, 30)
    for h in range(1, 13):
        for m in range(0, 60):
            ts = parse_time_today(f"{h}:{m:02d}pm", now)
            assert ts is not None
            when = _local(ts)
            assert (when.hour, when.minute) == (h % 12 + 12, m)


def test_parse_time_today_moves_past_time_exactly_one_day(monday: datetime) -> None:
    naive_same_day = local_ts(2026, 10, 19, 9, 15)
    assert parse_time_today("9:15am", monday) == naive_same_day + 24 * 3600
    assert parse_time_today("14:30", monday) == local_ts(2026, 10, 19, 14, 30)


def test_parse_time_today_ignores_date_words(monday: datetime) -> None:
    assert parse_time_today("tomorrow", monday) is None
    assert parse_time_today("12:00xx", monday) == local_ts(2026, 10, 19, 12, 0)


def test_anchor_may_be_epoch_or_aware_datetime(monday: datetime) -> None:
    expected = parse_natural_date("tomorrow", monday)
    epoch = local_ts(2026, 10, 19, 10, 30)
    assert parse_natural_date("tomorrow", epoch) == expected
    aware = datetime(2026, 10, 19, 10, 30, tzinfo=timezone.utc)
    assert parse_natural_date("tomorrow", aware) == expected


def test_default_anchor_reads_the_clock() -> None:
    ts = parse_natural_date("in 1 day")
    assert ts is not None
    now = datetime.now().timestamp()
    assert now + 86400 - 120 <= ts <= now + 86400


def test_partial_date_normalizes_overflowing_day() -> None:
    pd = PartialDate(2026, 4, 31, 9, 0, 0)
    assert pd.to_datetime() == datetime(2026, 5, 1, 9, 0)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("2026-12-01", local_ts(2026, 12, 1)),
        ("12/01/2026", local_ts(2026, 12, 1)),
        ("25/12/2026", local_ts(2026, 12, 25)),
        ("Dec 25, 2026", local_ts(2026, 12, 25)),
        ("25 Dec 2026", local_ts(2026, 12, 25)),
    ],
)
def test_parse_due_date_explicit_formats(monday: datetime, raw: str, expected: int) -> None:
    assert parse_due_date(raw, monday) == expected


def test_parse_due_date_iso_utc(monday: datetime) -> None:
    expected = int(datetime(2026, 12, 1, 15, 0, tzinfo=timezone.utc).timestamp())
    assert parse_due_date("2026-12-01T15:00:00Z", monday) == expected


def test_parse_due_date_falls_back_to_natural_language(monday: datetime) -> None:
    assert parse_due_date("next friday", monday) == parse_natural_date("next friday", monday)
    assert parse_due_date("garbage", monday) is None
