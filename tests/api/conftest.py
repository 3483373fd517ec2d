"""
Fixtures for HTTP API tests.
"""

import pytest
from fastapi.testclient import TestClient

from src.api.ramp_api import create_app
from src.ground_ops.application import GroundOperations
from src.ground_ops.config import Settings


@pytest.fixture
def operations(clock, id_generator) -> GroundOperations:
    return GroundOperations(settings=Settings(), clock=clock, id_generator=id_generator)


@pytest.fixture
def client(operations) -> TestClient:
    return TestClient(create_app(operations))
