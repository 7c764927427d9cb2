"""Data models for parking lot state."""

from enum import Enum

from pydantic import BaseModel, Field


class SpotClass(str, Enum):
    """Size class of a parking spot, smallest first."""

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


class VehicleClass(str, Enum):
    """Class of an arriving vehicle."""

    LIGHT = "light"
    STANDARD = "standard"
    OVERSIZED = "oversized"


# Spot classes tried in order for vehicles that take a single spot
SPOT_PREFERENCES: dict[VehicleClass, tuple[SpotClass, ...]] = {
    VehicleClass.LIGHT: (SpotClass.SMALL, SpotClass.MEDIUM, SpotClass.LARGE),
    VehicleClass.STANDARD: (SpotClass.MEDIUM, SpotClass.LARGE),
}

# Oversized vehicles need this many adjacent large spots
OVERSIZED_RUN_LENGTH = 3


class Spot(BaseModel):
    """A single parking spot at a fixed position in the lot."""

    index: int = Field(frozen=True)
    spot_class: SpotClass = Field(frozen=True)
    occupied: bool = False


class Allocation(BaseModel):
    """Spots claimed by one successful park."""

    vehicle_class: VehicleClass
    spot_class: SpotClass
    spot_indices: list[int]


class LotState(BaseModel):
    """Point-in-time view of the whole lot."""

    spots: list[Spot]
    total_spots: dict[SpotClass, int]
    occupied_spots: dict[SpotClass, int]
    remaining: int
    is_full: bool
    is_empty: bool
