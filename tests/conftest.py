# tests/conftest.py
from __future__ import annotations

import pytest

from cdnsync.domain.assets.entities import BuildContext
from fakes import FakeStorage


@pytest.fixture
def ctx() -> BuildContext:
    return BuildContext(bucket="cdn-bucket", prefix="dev", build_id="b123")


@pytest.fixture
def storage() -> FakeStorage:
    return FakeStorage()
