"""CarBuilder - fluent accumulator for Car values."""

from dataclasses import replace

from .car import Car


class CarBuilder:
    """
    Accumulates Car fields through chained setters.

    Each setter stores its value and returns this builder, so calls can be
    chained. Setting a field twice keeps the last value. build() returns a
    copy, so the builder may keep being used without affecting cars it
    already produced.
    """

    def __init__(self):
        self._car = Car(brand="", model="", year=0, engine="", color="")

    def set_brand(self, brand: str) -> "CarBuilder":
        self._car.brand = brand
        return self

    def set_model(self, model: str) -> "CarBuilder":
        self._car.model = model
        return self

    def set_year(self, year: int) -> "CarBuilder":
        self._car.year = year
        return self

    def set_engine(self, engine: str) -> "CarBuilder":
        self._car.engine = engine
        return self

    def set_color(self, color: str) -> "CarBuilder":
        self._car.color = color
        return self

    def build(self) -> Car:
        """Return a copy of the car assembled so far."""
        return replace(self._car)
