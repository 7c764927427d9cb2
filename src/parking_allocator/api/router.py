"""FastAPI route definitions."""

import logging
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, HTTPException, Response

from ..metrics import get_metrics, update_occupancy
from ..state.lot import ParkingLot
from .schemas import (
    HealthResponse,
    ParkRequest,
    ParkResponse,
    SpotResponse,
    StatusResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()

# Dependencies injected at startup
_lot: Optional[ParkingLot] = None
_start_time: datetime = datetime.now()


def init_router(lot: Optional[ParkingLot]) -> None:
    """
    Initialize router with dependencies.

    Args:
        lot: ParkingLot instance to serve, or None to detach it
    """
    global _lot, _start_time

    _lot = lot
    _start_time = datetime.now()

    if lot is not None:
        _publish_occupancy(lot)

    logger.info("API router initialized")


def _publish_occupancy(lot: ParkingLot) -> None:
    """Update occupancy gauges from the served lot."""
    update_occupancy(lot.total_spots, lot.occupied_spots, lot.remaining_spots())


def _require_lot() -> ParkingLot:
    if _lot is None:
        raise HTTPException(status_code=503, detail="Service not initialized")
    return _lot


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Health check endpoint.

    Returns basic health information about the service.
    """
    uptime = (datetime.now() - _start_time).total_seconds()

    return HealthResponse(
        status="healthy",
        lot_initialized=_lot is not None,
        uptime_seconds=uptime,
    )


@router.get("/status", response_model=StatusResponse)
async def get_status() -> StatusResponse:
    """
    Get overall lot occupancy.

    Returns capacity and occupied counts per spot class along with the
    number of free spots.
    """
    state = _require_lot().get_state()

    return StatusResponse(
        total_spots=state.total_spots,
        occupied_spots=state.occupied_spots,
        remaining=state.remaining,
        is_full=state.is_full,
        is_empty=state.is_empty,
    )


@router.get("/spots", response_model=list[SpotResponse])
async def list_spots() -> list[SpotResponse]:
    """List every spot in lot order."""
    state = _require_lot().get_state()

    return [
        SpotResponse(index=s.index, spot_class=s.spot_class, occupied=s.occupied)
        for s in state.spots
    ]


@router.get("/spots/{index}", response_model=SpotResponse)
async def get_spot(index: int) -> SpotResponse:
    """
    Get status for a specific parking spot.

    Args:
        index: Position of the spot in the lot
    """
    spot = _require_lot().get_spot(index)
    if spot is None:
        raise HTTPException(status_code=404, detail=f"Spot {index} not found")

    return SpotResponse(index=spot.index, spot_class=spot.spot_class, occupied=spot.occupied)


@router.post("/park", response_model=ParkResponse)
async def park_vehicle(request: ParkRequest) -> ParkResponse:
    """
    Park one vehicle.

    A vehicle that does not fit is reported with ``parked: false``; this is
    a normal outcome, not an error.
    """
    lot = _require_lot()

    # No await between the scan and the update, so parks never interleave
    allocation = lot.allocate(request.vehicle_class)

    if allocation is None:
        return ParkResponse(
            parked=False,
            vehicle_class=request.vehicle_class,
            remaining=lot.remaining_spots(),
        )

    _publish_occupancy(lot)

    return ParkResponse(
        parked=True,
        vehicle_class=request.vehicle_class,
        spot_class=allocation.spot_class,
        spot_indices=allocation.spot_indices,
        remaining=lot.remaining_spots(),
    )


@router.get("/metrics")
async def prometheus_metrics() -> Response:
    """
    Prometheus metrics endpoint.

    Returns metrics in Prometheus text format including:
    - parking_park_attempts_total: Counter of park attempts by vehicle class and outcome
    - parking_spots_total: Capacity per spot class
    - parking_spots_occupied: Occupied spots per spot class
    - parking_spots_remaining: Free spots across all classes
    """
    return Response(
        content=get_metrics(),
        media_type="text/plain; version=0.0.4; charset=utf-8",
    )
