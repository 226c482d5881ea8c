# config.py
# Load ~/.config/bilal/config.toml (or the path given on the command line).
#
#   latitude = 33.6844
#   longitude = 73.0479
#   timezone = "Asia/Karachi"     # optional, system local zone if absent
#   method = "Karachi"
#   madhab = "Hanafi"             # optional, Shafi by default
#   color = true                  # optional
#
#   [offsets]                     # optional, minutes: positive=later, negative=earlier
#   isha = 15

from __future__ import annotations
from datetime import datetime, tzinfo
from pathlib import Path
from typing import Any
import logging
import os
import tomllib
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictInt,
    ValidationError,
    field_validator,
    model_validator,
)

from .calculation import parse_madhab, parse_method
from .error import InvalidConfigError, IoError, NoFileError

logger = logging.getLogger(__name__)

CONFIG_ENV = "BILAL_CONFIG"


def default_path() -> Path:
    base = os.environ.get("XDG_CONFIG_HOME") or os.path.join(os.path.expanduser("~"), ".config")
    return Path(base) / "bilal" / "config.toml"


def config_path(path: str | os.PathLike | None = None) -> Path:
    if path:
        return Path(path)
    env = os.environ.get(CONFIG_ENV)
    if env:
        return Path(env)
    return default_path()


class Offsets(BaseModel):
    """Per-prayer minute offsets (positive=later, negative=earlier)."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    fajr: StrictInt = 0
    dhuhr: StrictInt = 0
    asr: StrictInt = 0
    maghrib: StrictInt = 0
    isha: StrictInt = 0

    @model_validator(mode="before")
    @classmethod
    def _lowercase_keys(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return {str(k).lower(): v for k, v in value.items()}
        return value


class Config(BaseModel):
    model_config = ConfigDict(frozen=True)

    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)
    method: str = Field(min_length=1)
    madhab: str = "Shafi"
    timezone: str | None = None
    color: StrictBool = True
    offsets: Offsets = Field(default_factory=Offsets)

    @field_validator("timezone")
    @classmethod
    def _validate_timezone(cls, value: str | None) -> str | None:
        if value is None:
            return value
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            msg = f"unknown timezone {value!r}"
            raise ValueError(msg) from exc
        return value

    def tzinfo(self) -> tzinfo:
        if self.timezone:
            return ZoneInfo(self.timezone)
        return datetime.now().astimezone().tzinfo

    @classmethod
    def from_dict(cls, data: dict) -> "Config":
        try:
            config = cls.model_validate(data)
        except ValidationError as exc:
            raise InvalidConfigError(exc) from exc
        # unknown names are their own error kinds, not InvalidConfig
        parse_method(config.method)
        parse_madhab(config.madhab)
        return config


def load_config(path: str | os.PathLike | None = None) -> Config:
    path = config_path(path)
    logger.debug("loading config from %s", path)
    if not path.is_file():
        raise NoFileError(path)
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as exc:
        raise InvalidConfigError(exc) from exc
    except OSError as exc:
        raise IoError(exc) from exc
    return Config.from_dict(data)
