from __future__ import annotations

from dataclasses import FrozenInstanceError
from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from bilal.prayers import ORDER, Prayer, PrayerSnapshot, night_divisions

from .helpers import at, snapshot


@pytest.mark.parametrize(
    "now, current, nxt",
    [
        (at(0, 30), Prayer.ISHAA, Prayer.FAJR),
        (at(4, 9), Prayer.ISHAA, Prayer.FAJR),
        (at(4, 10), Prayer.FAJR, Prayer.SHUROOK),
        (at(5, 35), Prayer.SHUROOK, Prayer.DHUHR),
        (at(12, 9), Prayer.SHUROOK, Prayer.DHUHR),
        (at(12, 10), Prayer.DHUHR, Prayer.ASR),
        (at(15, 45), Prayer.ASR, Prayer.MAGHRIB),
        (at(18, 40), Prayer.MAGHRIB, Prayer.ISHAA),
        (at(20, 5), Prayer.ISHAA, Prayer.FAJR_TOMORROW),
        (at(23, 59), Prayer.ISHAA, Prayer.FAJR_TOMORROW),
    ],
)
def test_current_and_next(now, current, nxt) -> None:
    day = snapshot(now)
    assert day.current() is current
    assert day.next() is nxt


def test_time_of_each_prayer(day) -> None:
    assert day.time(Prayer.FAJR) == at(4, 10)
    assert day.time(Prayer.SHUROOK) == at(5, 35)
    assert day.time(Prayer.DHUHR) == at(12, 10)
    assert day.time(Prayer.ASR) == at(15, 45)
    assert day.time(Prayer.MAGHRIB) == at(18, 40)
    assert day.time(Prayer.ISHAA) == at(20, 5)
    assert day.time(Prayer.FAJR_TOMORROW) == at(4, 11, days=1)


def test_time_remaining_until_next() -> None:
    assert snapshot(at(13, 0)).time_remaining() == (2, 45)
    assert snapshot(at(18, 35)).time_remaining() == (0, 5)


def test_time_remaining_after_ishaa_counts_to_tomorrow() -> None:
    assert snapshot(at(22, 0)).time_remaining() == (6, 11)


def test_time_remaining_truncates_seconds() -> None:
    now = at(18, 35) - timedelta(seconds=30)
    assert snapshot(now).time_remaining() == (0, 5)


def test_night_divisions() -> None:
    first, mid, last = night_divisions(at(18, 0), at(6, 0, days=1))
    assert first == at(22, 0)
    assert mid == at(0, 0, days=1)
    assert last == at(2, 0, days=1)


def test_snapshot_is_ordered(day) -> None:
    times = [getattr(day, k) for k in ORDER]
    assert times == sorted(times)


def test_snapshot_rejects_unordered_times() -> None:
    with pytest.raises(ValueError, match="asr"):
        PrayerSnapshot.from_times(
            fajr=at(4, 10),
            sherook=at(5, 35),
            dohr=at(12, 10),
            asr=at(11, 0),
            maghreb=at(18, 40),
            ishaa=at(20, 5),
            fajr_tomorrow=at(4, 11, days=1),
            now=at(13, 0),
        )


def test_snapshot_is_immutable(day) -> None:
    with pytest.raises(FrozenInstanceError):
        day.fajr = at(3, 0)


def test_late_summer_ishaa_may_follow_the_first_third() -> None:
    day = PrayerSnapshot.from_times(
        fajr=at(2, 40),
        sherook=at(4, 45),
        dohr=at(13, 5),
        asr=at(17, 30),
        maghreb=at(21, 20),
        ishaa=at(22, 52),
        fajr_tomorrow=at(1, 50, days=1),
        now=at(23, 0),
    )
    assert day.first_third_of_night < day.ishaa
    assert day.current() is Prayer.ISHAA
    assert day.next() is Prayer.FAJR_TOMORROW
    assert day.time_remaining() == (2, 50)


def test_ishaa_before_maghrib_is_rejected() -> None:
    with pytest.raises(ValueError, match="ishaa"):
        PrayerSnapshot.from_times(
            fajr=at(4, 10),
            sherook=at(5, 35),
            dohr=at(12, 10),
            asr=at(15, 45),
            maghreb=at(21, 21),
            ishaa=at(21, 5),
            fajr_tomorrow=at(4, 11, days=1),
            now=at(13, 0),
        )


LONDON = ZoneInfo("Europe/London")


def london(day: int, hour: int, minute: int) -> datetime:
    return datetime(2025, 3, day, hour, minute, tzinfo=LONDON)


def clock_change_night(now: datetime) -> PrayerSnapshot:
    # clocks go forward at 01:00 GMT on 2025-03-30
    return PrayerSnapshot.from_times(
        fajr=london(30, 4, 50),
        sherook=london(30, 6, 40),
        dohr=london(30, 13, 10),
        asr=london(30, 16, 35),
        maghreb=london(30, 19, 40),
        ishaa=london(30, 21, 10),
        fajr_tomorrow=london(31, 4, 48),
        now=now,
    )


def test_time_remaining_across_clock_change() -> None:
    day = clock_change_night(london(30, 0, 30))
    assert day.current() is Prayer.ISHAA
    assert day.next() is Prayer.FAJR
    assert day.time_remaining() == (3, 20)


def test_night_divisions_across_clock_change() -> None:
    # 19:00 GMT to 05:00 BST is nine real hours
    first, mid, last = night_divisions(london(29, 19, 0), london(30, 5, 0))
    utc = timezone.utc
    assert first.astimezone(utc) == datetime(2025, 3, 29, 22, 0, tzinfo=utc)
    assert mid.astimezone(utc) == datetime(2025, 3, 29, 23, 30, tzinfo=utc)
    assert last.astimezone(utc) == datetime(2025, 3, 30, 1, 0, tzinfo=utc)
    assert f"{last:%H:%M}" == "02:00"
    assert f"{mid:%H:%M}" == "23:30"
