# -*- coding: utf-8 -*-

"""Pytest configuration.

Adds the repository root to sys.path so `powercalc` imports work without an
editable install, and provides shared fixtures.
"""

from __future__ import annotations

import os
import sys

import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from powercalc.notify import RecordingNotifier  # noqa: E402
from powercalc.sizing.models import Appliance  # noqa: E402
from powercalc.storage.store import StatsStore  # noqa: E402


@pytest.fixture
def fridge_and_tv():
    return [
        Appliance(name="Refrigerator", watts=150, hours=24),
        Appliance(name="LED TV", watts=100, hours=5),
    ]


@pytest.fixture
def store():
    return StatsStore.from_url("sqlite://")


@pytest.fixture
def notifier():
    return RecordingNotifier()
