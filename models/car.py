"""Car value object produced by CarBuilder."""

from dataclasses import dataclass


@dataclass
class Car:
    """Descriptive car record. Fields default to their zero values."""

    brand: str = ""
    model: str = ""
    year: int = 0
    engine: str = ""
    color: str = ""

    @property
    def name(self) -> str:
        """Human-readable car name."""
        parts = [str(self.year)] if self.year else []
        parts += [p for p in (self.brand, self.model) if p]
        return " ".join(parts)

    def describe(self) -> str:
        """Single-line listing of every field, e.g. '{Brand:Toyota ... Color:Azul}'."""
        return (
            f"{{Brand:{self.brand} Model:{self.model} Year:{self.year} "
            f"Engine:{self.engine} Color:{self.color}}}"
        )
