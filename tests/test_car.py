#!/usr/bin/env python3
"""Tests for Car class."""

from models import Car


class TestCar:
    """Tests for Car class."""

    def test_defaults_are_zero_values(self):
        car = Car()
        assert car.brand == ""
        assert car.model == ""
        assert car.year == 0
        assert car.engine == ""
        assert car.color == ""

    def test_attributes(self):
        """All attributes are stored correctly."""
        car = Car("Toyota", "Corolla", 2024, "2.0L Turbo", "Azul")
        assert car.brand == "Toyota"
        assert car.model == "Corolla"
        assert car.year == 2024
        assert car.engine == "2.0L Turbo"
        assert car.color == "Azul"

    def test_equality_by_fields(self):
        assert Car("Fiat", "Uno", 1994) == Car(brand="Fiat", model="Uno", year=1994)
        assert Car("Fiat", "Uno", 1994) != Car("Fiat", "Uno", 1995)

    def test_name_property(self):
        """Name property returns formatted car name."""
        car = Car("Toyota", "Corolla", 2024, "2.0L Turbo", "Azul")
        assert car.name == "2024 Toyota Corolla"

    def test_name_skips_missing_parts(self):
        assert Car(brand="Toyota").name == "Toyota"
        assert Car(model="Corolla", year=2024).name == "2024 Corolla"
        assert Car().name == ""

    def test_describe(self):
        car = Car("Toyota", "Corolla", 2024, "2.0L Turbo", "Azul")
        assert car.describe() == (
            "{Brand:Toyota Model:Corolla Year:2024 Engine:2.0L Turbo Color:Azul}"
        )

    def test_describe_empty_car(self):
        assert Car().describe() == "{Brand: Model: Year:0 Engine: Color:}"
