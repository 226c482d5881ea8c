# error.py
# Every error the app surfaces. Each kind is its own class so callers can
# tell them apart without looking at the message.

from __future__ import annotations
from pathlib import Path


class BilalError(Exception):
    """Base class for all errors returned by the app."""


class NoFileError(BilalError):
    def __init__(self, path: str | Path):
        self.path = Path(path)
        super().__init__(f'No such file "{self.path}"')


class InvalidConfigError(BilalError):
    def __init__(self, source: Exception):
        self.source = source
        super().__init__("Invalid config")
        self.__cause__ = source


class InvalidMethodError(BilalError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f'No such method "{name}"')


class InvalidMadhabError(BilalError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f'No such madhab "{name}"')


class IoError(BilalError):
    # transparent: the message is the wrapped OSError's own
    def __init__(self, source: OSError):
        self.source = source
        super().__init__(str(source))
        self.__cause__ = source
