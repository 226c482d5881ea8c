# bilal: prayer times in your terminal.

__version__ = "0.1.0"

from .error import (
    BilalError,
    InvalidConfigError,
    InvalidMadhabError,
    InvalidMethodError,
    IoError,
    NoFileError,
)
from .output import Printer
from .prayers import Prayer, PrayerSnapshot
