"""Parking lot spot allocation."""

import logging
from typing import Optional

from ..config import LotConfig
from ..metrics import record_park_attempt
from .models import (
    OVERSIZED_RUN_LENGTH,
    SPOT_PREFERENCES,
    Allocation,
    LotState,
    Spot,
    SpotClass,
    VehicleClass,
)

logger = logging.getLogger(__name__)


class ParkingLot:
    """
    Fixed-capacity parking lot that allocates spots by vehicle class.

    Spots are laid out once at construction: all small spots first, then
    medium, then large. Allocation is first-fit over that order. Light and
    standard vehicles take a single spot, falling back to larger classes;
    oversized vehicles take three adjacent free large spots or nothing.

    Per-class occupied counters are kept alongside the spots and updated in
    the same step that flips a spot's flag, so queries never rescan by class.
    """

    def __init__(self, small_count: int, medium_count: int, large_count: int):
        """
        Initialize the lot with all spots free.

        Args:
            small_count: Number of small spots
            medium_count: Number of medium spots
            large_count: Number of large spots

        Raises:
            ValueError: If any count is negative
        """
        counts = {
            SpotClass.SMALL: small_count,
            SpotClass.MEDIUM: medium_count,
            SpotClass.LARGE: large_count,
        }
        for spot_class, count in counts.items():
            if count < 0:
                raise ValueError(
                    f"Spot count for {spot_class.value} must be non-negative, got {count}"
                )

        self.spots: list[Spot] = []
        for spot_class, count in counts.items():
            for _ in range(count):
                self.spots.append(Spot(index=len(self.spots), spot_class=spot_class))

        self._total_spots: dict[SpotClass, int] = dict(counts)
        self._occupied_spots: dict[SpotClass, int] = {c: 0 for c in SpotClass}

        logger.info(
            f"Initialized ParkingLot with {len(self.spots)} spots "
            f"({small_count} small, {medium_count} medium, {large_count} large)"
        )

    @classmethod
    def from_config(cls, config: LotConfig) -> "ParkingLot":
        """Create a lot from the ``lot`` section of the configuration."""
        return cls(config.small, config.medium, config.large)

    def __len__(self) -> int:
        return len(self.spots)

    @property
    def total_spots(self) -> dict[SpotClass, int]:
        """Capacity per spot class."""
        return dict(self._total_spots)

    @property
    def occupied_spots(self) -> dict[SpotClass, int]:
        """Occupied spot count per spot class."""
        return dict(self._occupied_spots)

    def park(self, vehicle_class: VehicleClass) -> bool:
        """
        Park one vehicle.

        Returns:
            True if spots were claimed, False if the vehicle does not fit
        """
        return self.allocate(vehicle_class) is not None

    def allocate(self, vehicle_class: VehicleClass) -> Optional[Allocation]:
        """
        Park one vehicle and report which spots it took.

        Args:
            vehicle_class: Class of the arriving vehicle

        Returns:
            The claimed spots, or None if no placement rule succeeded.
            The lot is unchanged when None is returned.
        """
        if vehicle_class == VehicleClass.OVERSIZED:
            indices = self._claim_contiguous_large()
            spot_class = SpotClass.LARGE
        else:
            indices = None
            for spot_class in SPOT_PREFERENCES[vehicle_class]:
                index = self._claim_first_available(spot_class)
                if index is not None:
                    indices = [index]
                    break

        record_park_attempt(vehicle_class.value, parked=indices is not None)

        if indices is None:
            logger.info(f"No room for {vehicle_class.value} vehicle")
            return None

        logger.info(
            f"Parked {vehicle_class.value} vehicle in {spot_class.value} spot(s) {indices}"
        )
        return Allocation(
            vehicle_class=vehicle_class,
            spot_class=spot_class,
            spot_indices=indices,
        )

    def _claim_first_available(self, spot_class: SpotClass) -> Optional[int]:
        """Claim the lowest-index free spot of the given class."""
        for spot in self.spots:
            if not spot.occupied and spot.spot_class == spot_class:
                spot.occupied = True
                self._occupied_spots[spot_class] += 1
                return spot.index
        logger.debug(f"No free {spot_class.value} spot")
        return None

    def _claim_contiguous_large(self) -> Optional[list[int]]:
        """Claim the first run of adjacent free large spots long enough for an oversized vehicle."""
        run: list[int] = []

        for spot in self.spots:
            if not spot.occupied and spot.spot_class == SpotClass.LARGE:
                run.append(spot.index)
                if len(run) == OVERSIZED_RUN_LENGTH:
                    break
            else:
                run = []

        if len(run) < OVERSIZED_RUN_LENGTH:
            logger.debug(f"No run of {OVERSIZED_RUN_LENGTH} free large spots")
            return None

        for index in run:
            self.spots[index].occupied = True
        self._occupied_spots[SpotClass.LARGE] += len(run)
        return run

    def remaining_spots(self) -> int:
        """Number of free spots across all classes."""
        return len(self.spots) - sum(1 for s in self.spots if s.occupied)

    def is_full(self) -> bool:
        """True if no spot is free."""
        return self.remaining_spots() == 0

    def is_empty(self) -> bool:
        """True if no spot is occupied."""
        return all(not s.occupied for s in self.spots)

    def get_spot(self, index: int) -> Optional[Spot]:
        """Get a copy of the spot at a position, or None if out of range."""
        if 0 <= index < len(self.spots):
            return self.spots[index].model_copy()
        return None

    def get_state(self) -> LotState:
        """Get current lot state."""
        return LotState(
            spots=[s.model_copy() for s in self.spots],
            total_spots=self.total_spots,
            occupied_spots=self.occupied_spots,
            remaining=self.remaining_spots(),
            is_full=self.is_full(),
            is_empty=self.is_empty(),
        )
