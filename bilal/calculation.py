# calculation.py
# Resolve method/madhab names and compute a day's times with adhanpy.
# Follows adhanpy README: PrayerTimes(coords, date, calculation_parameters=..., time_zone=ZoneInfo(...))

from __future__ import annotations
from collections.abc import Mapping
from datetime import datetime, date, timedelta, tzinfo
import logging
import re

from adhanpy.PrayerTimes import PrayerTimes
from adhanpy.calculation.CalculationMethod import CalculationMethod
from adhanpy.calculation.CalculationParameters import CalculationParameters
from adhanpy.calculation.Madhab import Madhab

from .error import InvalidConfigError, InvalidMadhabError, InvalidMethodError
from .prayers import PrayerSnapshot

logger = logging.getLogger(__name__)

# key -> (adhanpy enum, fajr angle, isha angle, isha interval in minutes)
METHODS = {
    "KARACHI": (CalculationMethod.KARACHI, 18.0, 18.0, 0),
    "MUSLIM_WORLD_LEAGUE": (CalculationMethod.MUSLIM_WORLD_LEAGUE, 18.0, 17.0, 0),
    "EGYPTIAN": (CalculationMethod.EGYPTIAN, 19.5, 17.5, 0),
    "MOON_SIGHTING_COMMITTEE": (CalculationMethod.MOON_SIGHTING_COMMITTEE, 18.0, 18.0, 0),
    # Isha = Maghrib + 90
    "UMM_AL_QURA": (CalculationMethod.UMM_AL_QURA, 18.5, 0.0, 90),
    "NORTH_AMERICA": (CalculationMethod.NORTH_AMERICA, 15.0, 15.0, 0),
}
METHOD_ALIASES = {
    "MWL": "MUSLIM_WORLD_LEAGUE",
    "ISNA": "NORTH_AMERICA",
    "MAKKAH": "UMM_AL_QURA",
    "MOONSIGHTING": "MOON_SIGHTING_COMMITTEE",
    "EGYPT": "EGYPTIAN",
}

# Asr when shadow = 1× (Shafi) or 2× (Hanafi) object length
MADHABS = {
    "SHAFI": Madhab.SHAFI,
    "HANAFI": Madhab.HANAFI,
}


def _key(name: str) -> str:
    # "MuslimWorldLeague", "muslim world league" and "MUSLIM_WORLD_LEAGUE" are the same method
    name = re.sub(r"(?<=[a-z])(?=[A-Z])", "_", name.strip())
    return re.sub(r"[\s\-]+", "_", name).upper()


def parse_method(name: str) -> str:
    key = _key(name)
    key = METHOD_ALIASES.get(key, key)
    if key not in METHODS:
        raise InvalidMethodError(name)
    return key


def parse_madhab(name: str) -> str:
    key = _key(name)
    if key not in MADHABS:
        raise InvalidMadhabError(name)
    return key


def calculation_parameters(method_key: str, madhab_key: str) -> CalculationParameters:
    method, fajr_angle, isha_angle, isha_interval = METHODS[method_key]
    params = CalculationParameters(fajr_angle=fajr_angle, isha_angle=isha_angle, method=method)
    if isha_interval:
        params.isha_interval = isha_interval
    params.madhab = MADHABS[madhab_key]
    return params


def daily_times(d: date, lat: float, lon: float, tz: tzinfo, params: CalculationParameters,
                offsets: Mapping[str, int]) -> dict[str, datetime]:
    """Times for one day in `tz`, with per-prayer minute offsets (positive=later)."""
    pt = PrayerTimes((lat, lon), datetime(d.year, d.month, d.day),
                     calculation_parameters=params, time_zone=tz)

    def adj(dt: datetime, mins: int) -> datetime:
        return dt + timedelta(minutes=mins)

    return {
        "fajr":    adj(pt.fajr,    offsets.get("fajr", 0)),
        "sunrise": pt.sunrise,
        "dhuhr":   adj(pt.dhuhr,   offsets.get("dhuhr", 0)),
        "asr":     adj(pt.asr,     offsets.get("asr", 0)),
        "maghrib": adj(pt.maghrib, offsets.get("maghrib", 0)),
        "isha":    adj(pt.isha,    offsets.get("isha", 0)),
    }


def compute_snapshot(config, now: datetime) -> PrayerSnapshot:
    """Build the snapshot for the day `now` falls on, in the config's timezone."""
    tz = config.tzinfo()
    now = now.astimezone(tz)
    method_key = parse_method(config.method)
    madhab_key = parse_madhab(config.madhab)
    offsets = config.offsets.model_dump()
    logger.debug("method=%s madhab=%s tz=%s offsets=%s", method_key, madhab_key, tz, offsets)

    params = calculation_parameters(method_key, madhab_key)
    today = daily_times(now.date(), config.latitude, config.longitude, tz, params, offsets)
    tomorrow = daily_times(now.date() + timedelta(days=1), config.latitude, config.longitude,
                           tz, params, offsets)
    logger.debug("times for %s: %s", now.date().isoformat(),
                 ", ".join(f"{k}={v:%H:%M}" for k, v in today.items()))

    try:
        return PrayerSnapshot.from_times(
            fajr=today["fajr"],
            sherook=today["sunrise"],
            dohr=today["dhuhr"],
            asr=today["asr"],
            maghreb=today["maghrib"],
            ishaa=today["isha"],
            fajr_tomorrow=tomorrow["fajr"],
            now=now,
        )
    except ValueError as exc:
        # a prayer pushed before the one it follows, usually by [offsets]
        raise InvalidConfigError(exc) from exc
