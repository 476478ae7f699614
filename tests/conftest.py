from __future__ import annotations

import os
from datetime import datetime

import pytest

os.environ.setdefault("APP_ENV", "testing")


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2025, 11, 3, 9, 15, 30)
