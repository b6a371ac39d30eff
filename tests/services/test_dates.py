import time
from datetime import date, datetime, timedelta, timezone

import pytest

from seedtrack.core.exceptions import ParseError
from seedtrack.services import dates

TODAY = date(2024, 5, 20)


def test_add_calendar_days_round_trips_through_days_between():
    # Includes the UK DST changeovers and a leap day
    anchors = [date(2024, 3, 31), date(2024, 10, 27), date(2024, 2, 29), date(2023, 12, 31)]
    for anchor in anchors:
        for n in range(-400, 401):
            assert dates.days_between(dates.add_calendar_days(anchor, n), anchor) == n


@pytest.fixture
def london_tz(monkeypatch):
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")
    monkeypatch.setenv("TZ", "Europe/London")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()


def test_add_calendar_days_round_trips_aware_timestamps_across_dst(london_tz):
    anchors = [
        datetime(2024, 3, 30, 23, 30, tzinfo=timezone.utc),
        datetime(2024, 10, 26, 23, 30, tzinfo=timezone.utc),
        datetime(2024, 3, 31, 0, 30, tzinfo=timezone(timedelta(hours=1))),
        datetime(2024, 10, 27, 12, 0, tzinfo=timezone.utc),
    ]
    for anchor in anchors:
        for n in range(-40, 41):
            assert dates.days_between(dates.add_calendar_days(anchor, n), anchor) == n


def test_add_calendar_days_keeps_local_wall_time_for_aware_timestamps(london_tz):
    # 23:30 GMT on the eve of the spring change is 23:30 BST the next night
    shifted = dates.add_calendar_days(datetime(2024, 3, 30, 23, 30, tzinfo=timezone.utc), 1)
    assert shifted == datetime(2024, 3, 31, 22, 30, tzinfo=timezone.utc)
    assert shifted.tzinfo is timezone.utc


def test_add_calendar_days_keeps_time_of_day_for_timestamps():
    ts = datetime(2024, 5, 10, 18, 45)
    shifted = dates.add_calendar_days(ts, -3)
    assert shifted == datetime(2024, 5, 7, 18, 45)


def test_add_calendar_days_on_string_truncates_to_day():
    assert dates.add_calendar_days("2024-05-10T18:45:00", 2) == date(2024, 5, 12)


def test_days_between_ignores_time_of_day():
    assert dates.days_between("2024-05-21T00:01:00", "2024-05-20T23:59:00") == 1
    assert dates.days_between("2024-05-20T23:59:00", date(2024, 5, 20)) == 0
    assert dates.days_between("2024-05-19T23:59:59", TODAY) == -1


def test_to_local_date_converts_aware_timestamps_to_local_time():
    ts = datetime(2024, 5, 15, 12, 0, tzinfo=timezone.utc)
    assert dates.to_local_date(ts) == ts.astimezone().date()
    assert dates.to_local_date("2024-05-15T12:00:00.000Z") == ts.astimezone().date()


def test_today_is_a_plain_date():
    result = dates.today()
    assert type(result) is date
    assert result == date.today()


@pytest.mark.parametrize("bad", ["", "   ", "not-a-date", "2024-13-01", "2024-02-30", "15/05/2024"])
def test_parse_iso_rejects_malformed_strings(bad):
    with pytest.raises(ParseError):
        dates.parse_iso(bad)


def test_parse_iso_rejects_non_strings():
    with pytest.raises(ParseError):
        dates.parse_iso(None)


def test_parse_error_is_a_value_error_carrying_the_input():
    with pytest.raises(ValueError) as exc_info:
        dates.to_local_date("garbage")
    assert exc_info.value.value == "garbage"


@pytest.mark.parametrize(
    "offset, label",
    [
        (0, "Today"),
        (1, "Tomorrow"),
        (-1, "Yesterday"),
        (2, "In 2 days"),
        (7, "In 7 days"),
        (-2, "2 days ago"),
        (-7, "7 days ago"),
        (8, "May 28"),
        (-8, "May 12"),
        (200, "Dec 6"),
    ],
)
def test_relative_label(offset, label):
    target = dates.add_calendar_days(TODAY, offset)
    assert dates.relative_label(target, TODAY) == label


def test_relative_label_accepts_iso_strings():
    assert dates.relative_label("2024-05-21T08:00:00", TODAY) == "Tomorrow"


def test_formatting():
    assert dates.format_date("2024-05-05") == "May 5"
    assert dates.format_date_long(date(2024, 5, 15)) == "Wednesday, May 15"
    assert dates.format_date_full(date(2024, 10, 15)) == "October 15, 2024"


def test_date_status():
    assert dates.date_status(date(2024, 5, 19), today=TODAY) == "overdue"
    assert dates.date_status(date(2024, 5, 20), today=TODAY) == "today"
    assert dates.date_status(date(2024, 5, 23), today=TODAY) == "upcoming"
    assert dates.date_status(date(2024, 5, 24), today=TODAY) == "future"
    assert dates.date_status(date(2024, 5, 24), window_days=7, today=TODAY) == "upcoming"


def test_comparisons():
    assert dates.is_past("2024-05-19", TODAY)
    assert not dates.is_past("2024-05-20T23:00:00", TODAY)
    assert dates.is_future("2024-05-21", TODAY)
    assert dates.is_today("2024-05-20T06:00:00", TODAY)
    assert dates.is_within_days("2024-05-13", 7, TODAY)
    assert not dates.is_within_days("2024-05-12", 7, TODAY)


def test_expected_date_calculators():
    assert dates.sow_date("2024-05-15", 8) == date(2024, 3, 20)
    assert dates.germination_date("2024-03-20T10:30:00", 7) == date(2024, 3, 27)
    assert dates.transplant_date("2024-03-27", 21) == date(2024, 4, 17)
    assert dates.plant_out_date("2024-05-15", -14) == date(2024, 5, 1)
    assert dates.harden_off_date(date(2024, 5, 15), 7) == date(2024, 5, 8)
    assert dates.harvest_date("2024-05-15", 80) == date(2024, 8, 3)
