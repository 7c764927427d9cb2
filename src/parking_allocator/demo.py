"""Walk a small lot through one park of each vehicle class."""

from .state.lot import ParkingLot
from .state.models import VehicleClass


def run_demo() -> ParkingLot:
    """Print occupancy of a 5/10/3 lot before and after three parks."""
    lot = ParkingLot(5, 10, 3)

    totals = {c.value: n for c, n in lot.total_spots.items()}
    print(f"Total spots: {totals}")
    print(f"Is parking lot empty? {lot.is_empty()}")

    lot.park(VehicleClass.LIGHT)
    lot.park(VehicleClass.STANDARD)
    lot.park(VehicleClass.OVERSIZED)

    print(f"Remaining spots: {lot.remaining_spots()}")
    print(f"Is parking lot full? {lot.is_full()}")
    return lot


def main():
    """Run the demonstration."""
    run_demo()


if __name__ == "__main__":
    main()
