"""Root conftest — shared test configuration and fakes used across test packages."""

import os

import pytest

from tests.services.fake_store import FakeStore, RecordingInvalidator
from tests.services.seed_data import CUSTOMERS, INVOICES, REVENUE

# Ensure tests never point at a real hosted store
os.environ.setdefault("STORE_URL", "sqlite+aiosqlite:///test.db")
os.environ.setdefault("STORE_KEY", "test-store-key")


@pytest.fixture
def fake_store():
    return FakeStore(invoices=INVOICES, customers=CUSTOMERS, revenue=REVENUE)


@pytest.fixture
def invalidator():
    return RecordingInvalidator()
