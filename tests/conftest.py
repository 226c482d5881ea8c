from __future__ import annotations

import pytest

from .helpers import at, snapshot, write_config


@pytest.fixture
def day():
    return snapshot(at(13, 0))


CONFIG = """\
latitude = 5.6037
longitude = -0.187
timezone = "UTC"
method = "Egyptian"
madhab = "Hanafi"
color = false

[offsets]
isha = 15
"""


@pytest.fixture
def config_file(tmp_path):
    return write_config(tmp_path, CONFIG)
