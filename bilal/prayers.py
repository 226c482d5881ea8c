# prayers.py
# One day's prayer times plus the queries the printer needs
# (which window are we in, what comes next, how long until it).

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum


class Prayer(Enum):
    FAJR = "fajr"
    SHUROOK = "sherook"
    DHUHR = "dohr"
    ASR = "asr"
    MAGHRIB = "maghreb"
    ISHAA = "ishaa"
    # after Ishaa the next Fajr belongs to tomorrow
    FAJR_TOMORROW = "fajr_tomorrow"


# canonical order of the nine listed times
ORDER = [
    "fajr", "sherook", "dohr", "asr", "maghreb", "ishaa",
    "first_third_of_night", "midnight", "last_third_of_night",
]
# only these must be ordered; summer Isha can fall after the first third of the night
PRAYER_ORDER = ORDER[:6]

# window that follows each prayer
NEXT = {
    Prayer.FAJR: Prayer.SHUROOK,
    Prayer.SHUROOK: Prayer.DHUHR,
    Prayer.DHUHR: Prayer.ASR,
    Prayer.ASR: Prayer.MAGHRIB,
    Prayer.MAGHRIB: Prayer.ISHAA,
}


def utc(dt: datetime) -> datetime:
    # same-zone datetimes compare and subtract on wall time, which is off across DST changes
    return dt.astimezone(timezone.utc)


def night_divisions(maghreb: datetime, fajr_tomorrow: datetime) -> tuple[datetime, datetime, datetime]:
    """First third, middle and last third of the night between Maghrib and the next Fajr."""
    start = utc(maghreb)
    night = utc(fajr_tomorrow) - start
    tz = maghreb.tzinfo
    return (
        (start + night / 3).astimezone(tz),
        (start + night / 2).astimezone(tz),
        (start + night * 2 / 3).astimezone(tz),
    )


@dataclass(frozen=True)
class PrayerSnapshot:
    fajr: datetime
    sherook: datetime
    dohr: datetime
    asr: datetime
    maghreb: datetime
    ishaa: datetime
    first_third_of_night: datetime
    midnight: datetime
    last_third_of_night: datetime
    fajr_tomorrow: datetime
    now: datetime

    def __post_init__(self):
        times = [utc(getattr(self, k)) for k in PRAYER_ORDER]
        for i in range(1, len(times)):
            if times[i] < times[i - 1]:
                cur, prev = getattr(self, PRAYER_ORDER[i]), getattr(self, PRAYER_ORDER[i - 1])
                raise ValueError(f"{PRAYER_ORDER[i]} ({cur:%H:%M}) is earlier than "
                                 f"{PRAYER_ORDER[i - 1]} ({prev:%H:%M})")

    @classmethod
    def from_times(cls, fajr, sherook, dohr, asr, maghreb, ishaa,
                   fajr_tomorrow, now) -> "PrayerSnapshot":
        first, mid, last = night_divisions(maghreb, fajr_tomorrow)
        return cls(fajr, sherook, dohr, asr, maghreb, ishaa,
                   first, mid, last, fajr_tomorrow, now)

    def current(self) -> Prayer:
        now = utc(self.now)
        if now >= utc(self.ishaa) or now < utc(self.fajr):
            return Prayer.ISHAA
        if now >= utc(self.maghreb):
            return Prayer.MAGHRIB
        if now >= utc(self.asr):
            return Prayer.ASR
        if now >= utc(self.dohr):
            return Prayer.DHUHR
        if now >= utc(self.sherook):
            return Prayer.SHUROOK
        return Prayer.FAJR

    def next(self) -> Prayer:
        if utc(self.now) < utc(self.fajr):
            return Prayer.FAJR
        current = self.current()
        if current is Prayer.ISHAA:
            return Prayer.FAJR_TOMORROW
        return NEXT[current]

    def time(self, prayer: Prayer) -> datetime:
        return getattr(self, prayer.value)

    def time_remaining(self) -> tuple[int, int]:
        """(hours, minutes) left until the next prayer, truncated to whole minutes."""
        left = utc(self.time(self.next())) - utc(self.now)
        minutes = max(0, int(left // timedelta(minutes=1)))
        return divmod(minutes, 60)
