"""State management module."""

from .models import Allocation, LotState, Spot, SpotClass, VehicleClass
from .lot import ParkingLot

__all__ = ["Allocation", "LotState", "Spot", "SpotClass", "VehicleClass", "ParkingLot"]
