from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from bilal.prayers import Prayer, PrayerSnapshot

PKT = timezone(timedelta(hours=5))
DAY = (2025, 8, 28)


def at(hour: int, minute: int, days: int = 0) -> datetime:
    return datetime(*DAY, hour, minute, tzinfo=PKT) + timedelta(days=days)


def snapshot(now: datetime) -> PrayerSnapshot:
    return PrayerSnapshot.from_times(
        fajr=at(4, 10),
        sherook=at(5, 35),
        dohr=at(12, 10),
        asr=at(15, 45),
        maghreb=at(18, 40),
        ishaa=at(20, 5),
        fajr_tomorrow=at(4, 11, days=1),
        now=now,
    )


@dataclass(frozen=True)
class FixedSnapshot:
    """Stands in for PrayerSnapshot when a test wants exact query results."""
    current_prayer: Prayer = Prayer.ASR
    next_prayer: Prayer = Prayer.MAGHRIB
    next_time: datetime = at(17, 45)
    remaining: tuple[int, int] = (0, 5)

    def current(self) -> Prayer:
        return self.current_prayer

    def next(self) -> Prayer:
        return self.next_prayer

    def time(self, prayer: Prayer) -> datetime:
        return self.next_time

    def time_remaining(self) -> tuple[int, int]:
        return self.remaining


def write_config(tmp_path, text: str):
    path = tmp_path / "config.toml"
    path.write_text(text, encoding="utf-8")
    return path
