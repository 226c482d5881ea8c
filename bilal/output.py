# output.py
# Render a PrayerSnapshot: the full day, the current window, or the next prayer.
# Each call writes its line(s) to stdout and nothing else.

from __future__ import annotations
from datetime import datetime
import logging
import sys
from typing import TextIO

from colorama import Fore

from .prayers import Prayer, PrayerSnapshot

logger = logging.getLogger(__name__)

NAMES = {
    Prayer.FAJR: "Fajr",
    Prayer.FAJR_TOMORROW: "Fajr",
    Prayer.SHUROOK: "Shurook",
    Prayer.DHUHR: "Dhuhr",
    Prayer.ASR: "Asr",
    Prayer.MAGHRIB: "Maghrib",
    Prayer.ISHAA: "Ishaa",
}

# status-bar record; kept as a literal template so the bytes never change
RECORD = '{{"icon": "{}", "state": "{}", "text": "{}"}}'
ICON = "bilal"
CURRENT_GLYPH = "⏺ "
NEXT_GLYPH = "▶"

CRITICAL_MINUTES = 30


class Printer:
    def __init__(self, prayers: PrayerSnapshot, show_color: bool, json_format: bool,
                 stream: TextIO | None = None):
        self.prayers = prayers
        self.show_color = show_color
        self.json_format = json_format
        self.stream = stream

    @staticmethod
    def name(prayer: Prayer) -> str:
        return NAMES[prayer]

    def print(self, prayer_fmt: str) -> None:
        # best effort: a closed pipe must not turn into a crash
        stream = self.stream or sys.stdout
        try:
            stream.write(prayer_fmt + "\n")
            stream.flush()
        except OSError as exc:
            logger.debug("could not write output: %s", exc)

    def all(self) -> None:
        """Show all prayers info."""
        prayers = self.prayers

        def fmt_output(name: str, time: datetime) -> str:
            return f"{name}: {time:%H:%M}"

        self.print(fmt_output(self.name(Prayer.FAJR), prayers.fajr))
        self.print(fmt_output(self.name(Prayer.SHUROOK), prayers.sherook))
        self.print(fmt_output(self.name(Prayer.DHUHR), prayers.dohr))
        self.print(fmt_output(self.name(Prayer.ASR), prayers.asr))
        self.print(fmt_output(self.name(Prayer.MAGHRIB), prayers.maghreb))
        self.print(fmt_output(self.name(Prayer.ISHAA), prayers.ishaa))
        self.print(fmt_output("Fist third of night", prayers.first_third_of_night))
        self.print(fmt_output("Midnight", prayers.midnight))
        self.print(fmt_output("Last third of night", prayers.last_third_of_night))

    def current(self) -> None:
        """Show current prayer info."""
        prayer = self.prayers.current()
        hour, minute = self.prayers.time_remaining()

        if hour == 0:
            remaining_fmt = f"({minute:02d} minutes left)"
        else:
            remaining_fmt = f"({hour:02d}:{minute:02d} hours left)"

        prayer_fmt = f"{self.name(prayer)} {remaining_fmt}"
        state = "Critical" if hour == 0 and minute < CRITICAL_MINUTES else "Info"

        if self.json_format:
            prayer_fmt = RECORD.format(ICON, state, f"{CURRENT_GLYPH} {prayer_fmt}")
        elif self.show_color and state == "Critical":
            prayer_fmt = f"{Fore.RED}{prayer_fmt}{Fore.RESET}"
        self.print(prayer_fmt)

    def next(self) -> None:
        """Show next prayer info."""
        prayer = self.prayers.next()
        time = self.prayers.time(prayer)

        prayer_fmt = f"{self.name(prayer)} ({time:%I:%M %p})"
        if self.json_format:
            prayer_fmt = RECORD.format(ICON, "Info", f"{NEXT_GLYPH}{prayer_fmt}")
        self.print(prayer_fmt)

    def next_remaining(self) -> None:
        prayer = self.prayers.next()
        hour, minute = self.prayers.time_remaining()
        self.print(f"{self.name(prayer)} in {hour:02d}:{minute:02d}")
