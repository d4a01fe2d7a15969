"""
models/vehicle.py
-----------------
Domain model for registered vehicles.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass
class Vehicle:
    """
    Represents a vehicle registered for toll charging.

    Attributes:
        vehicle_id: Database primary key (assigned by the caller).
        vehicle_class_id: Emission/toll class of the vehicle.
        user_id: Owner of the vehicle.
        plate: License plate.
        chassis_id: Chassis number (VIN).
        axles: Number of axles.
        weight: Weight in kilograms.
        country: Country of registration.
        registration_date: Set by the database at insert time.
    """
    vehicle_id: int
    vehicle_class_id: int
    user_id: int
    plate: str
    chassis_id: str
    axles: int
    weight: int
    country: str
    registration_date: Optional[date] = None

    def __str__(self) -> str:
        return f"#{self.vehicle_id} {self.plate} ({self.country}) | user {self.user_id}"
