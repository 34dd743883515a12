from __future__ import annotations

import sys
from pathlib import Path

import numpy as np
import pytest


def pytest_configure() -> None:
    project_root = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(project_root))


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(1234)


@pytest.fixture
def timer():
    from tests.helpers import ManualTimer

    return ManualTimer()


@pytest.fixture
def store():
    from database import MemoryStore

    return MemoryStore()
