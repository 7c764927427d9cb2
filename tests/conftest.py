import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from parking_allocator.api.router import init_router, router
from parking_allocator.state import ParkingLot


@pytest.fixture
def client():
    test_app = FastAPI()
    test_app.include_router(router, prefix="/api/v1")
    init_router(ParkingLot(5, 10, 3))
    yield TestClient(test_app)
    init_router(None)
