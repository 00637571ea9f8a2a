"""
Car builder models.

This package provides:
- Car: Value object with brand, model, year, engine and color
- CarBuilder: Fluent builder that assembles a Car
- Preset loading: YAML files that seed a CarBuilder
"""

from .car import Car
from .car_builder import CarBuilder
from .loader import (
    CarFileError,
    apply_car_data,
    load_car_file,
    load_schema,
    validate_car_data,
    validate_car_file,
)

__all__ = [
    "Car",
    "CarBuilder",
    "CarFileError",
    "apply_car_data",
    "load_car_file",
    "load_schema",
    "validate_car_data",
    "validate_car_file",
]
