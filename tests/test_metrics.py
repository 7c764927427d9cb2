from parking_allocator.api.router import init_router
from parking_allocator.metrics import REGISTRY, get_metrics
from parking_allocator.state import ParkingLot, VehicleClass


def sample(name, **labels):
    return REGISTRY.get_sample_value(name, labels) or 0.0


def test_gauges_published_for_served_lot():
    init_router(ParkingLot(2, 0, 3))

    assert sample("parking_spots_total", spot_class="large") == 3
    assert sample("parking_spots_occupied", spot_class="small") == 0
    assert sample("parking_spots_remaining") == 5

    init_router(None)


def test_other_lots_do_not_overwrite_served_gauges(client):
    client.post("/api/v1/park", json={"vehicle_class": "oversized"})

    other = ParkingLot(0, 0, 0)
    other.park(VehicleClass.LIGHT)

    assert sample("parking_spots_remaining") == 15
    assert sample("parking_spots_occupied", spot_class="large") == 3
    assert sample("parking_spots_total", spot_class="medium") == 10


def test_park_attempts_counted_by_outcome():
    lot = ParkingLot(0, 0, 2)
    parked = sample("parking_park_attempts_total", vehicle_class="light", outcome="parked")
    rejected = sample("parking_park_attempts_total", vehicle_class="oversized", outcome="rejected")

    lot.park(VehicleClass.LIGHT)
    lot.park(VehicleClass.OVERSIZED)

    assert sample("parking_park_attempts_total", vehicle_class="light", outcome="parked") == parked + 1
    assert (
        sample("parking_park_attempts_total", vehicle_class="oversized", outcome="rejected")
        == rejected + 1
    )


def test_get_metrics_is_prometheus_text():
    init_router(ParkingLot(1, 1, 1))

    output = get_metrics().decode()

    assert "# TYPE parking_spots_total gauge" in output
    init_router(None)
