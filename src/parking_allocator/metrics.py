"""Prometheus metrics for parking spot allocation."""

from prometheus_client import Counter, Gauge, CollectorRegistry, generate_latest

# Create a custom registry to avoid conflicts with default metrics
REGISTRY = CollectorRegistry()

# Park attempts by vehicle class and outcome
PARK_ATTEMPTS = Counter(
    "parking_park_attempts_total",
    "Total number of park attempts",
    ["vehicle_class", "outcome"],
    registry=REGISTRY,
)

# Capacity per spot class
TOTAL_SPOTS = Gauge(
    "parking_spots_total",
    "Total number of parking spots",
    ["spot_class"],
    registry=REGISTRY,
)

OCCUPIED_SPOTS = Gauge(
    "parking_spots_occupied",
    "Number of occupied parking spots",
    ["spot_class"],
    registry=REGISTRY,
)

REMAINING_SPOTS = Gauge(
    "parking_spots_remaining",
    "Number of free parking spots across all classes",
    registry=REGISTRY,
)


def record_park_attempt(vehicle_class: str, parked: bool) -> None:
    """Record the outcome of a park attempt."""
    outcome = "parked" if parked else "rejected"
    PARK_ATTEMPTS.labels(vehicle_class=vehicle_class, outcome=outcome).inc()


def update_occupancy(total: dict, occupied: dict, remaining: int) -> None:
    """
    Update spot count gauges.

    The gauges are process-wide, so only the lot being served should call this.

    Args:
        total: Mapping of spot class to capacity
        occupied: Mapping of spot class to occupied count
        remaining: Free spots across all classes
    """
    for spot_class, count in total.items():
        TOTAL_SPOTS.labels(spot_class=spot_class.value).set(count)
    for spot_class, count in occupied.items():
        OCCUPIED_SPOTS.labels(spot_class=spot_class.value).set(count)
    REMAINING_SPOTS.set(remaining)


def get_metrics() -> bytes:
    """Generate Prometheus metrics output."""
    return generate_latest(REGISTRY)
