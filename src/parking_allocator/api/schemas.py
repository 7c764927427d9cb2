"""API request and response schemas."""

from typing import Optional

from pydantic import BaseModel

from ..state.models import SpotClass, VehicleClass


class SpotResponse(BaseModel):
    """Response schema for a single parking spot."""

    index: int
    spot_class: SpotClass
    occupied: bool


class StatusResponse(BaseModel):
    """Response schema for overall lot occupancy."""

    total_spots: dict[SpotClass, int]
    occupied_spots: dict[SpotClass, int]
    remaining: int
    is_full: bool
    is_empty: bool


class ParkRequest(BaseModel):
    """Request to park a single vehicle."""

    vehicle_class: VehicleClass


class ParkResponse(BaseModel):
    """Outcome of a park request."""

    parked: bool
    vehicle_class: VehicleClass
    spot_class: Optional[SpotClass] = None
    spot_indices: list[int] = []
    remaining: int


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    lot_initialized: bool
    uptime_seconds: float
