"""Fixtures for end-to-end API tests."""

import pytest
from fastapi.testclient import TestClient

from curbside.interface.api.app import create_app
from curbside.util.clock import ManualClock
from tests.di import TEST_EPOCH, build_test_container


@pytest.fixture
def clock():
    """Manual clock shared by the app under test."""
    return ManualClock(TEST_EPOCH)


@pytest.fixture
def client(clock):
    """Test client over an in-memory app driven by the manual clock."""
    app = create_app(build_test_container(clock=clock))
    with TestClient(app) as test_client:
        yield test_client
