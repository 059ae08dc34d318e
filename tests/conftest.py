from datetime import datetime, timezone

import pytest

from courtside.persistence import InMemoryRecordStore


FIXED_NOW = datetime(2025, 10, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def store() -> InMemoryRecordStore:
    return InMemoryRecordStore()


@pytest.fixture
def clock():
    return lambda: FIXED_NOW
