#!/usr/bin/env python3
"""
Build a car with CarBuilder and print it.

With no arguments, builds the demonstration car (Toyota Corolla 2024,
2.0L Turbo, Azul). A preset file and per-field flags can replace it.
"""

import argparse
import sys
from pathlib import Path
from tabulate import tabulate
from typing import List, Optional

from models import Car, CarBuilder, CarFileError, load_car_file
from models.loader import SETTERS


def build_demo_car() -> Car:
    """Build the fixed demonstration car."""
    return (
        CarBuilder()
        .set_brand("Toyota")
        .set_model("Corolla")
        .set_year(2024)
        .set_engine("2.0L Turbo")
        .set_color("Azul")
        .build()
    )


def make_car_table(car: Car) -> List[List[str]]:
    """Convert a car to field/value table rows."""
    return [
        ["Brand", car.brand],
        ["Model", car.model],
        ["Year", str(car.year)],
        ["Engine", car.engine],
        ["Color", car.color],
    ]


def apply_field_flags(builder: CarBuilder, args) -> CarBuilder:
    """Apply any field flags given on the command line."""
    for field, setter in SETTERS:
        value = getattr(args, field)
        if value is not None:
            setter(builder, value)
    return builder


def wants_custom_car(args) -> bool:
    return args.file is not None or any(
        getattr(args, field) is not None for field, _ in SETTERS
    )


def make_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Build a car with the fluent CarBuilder",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s
  %(prog)s --table
  %(prog)s --file models/cars/civic.yaml
  %(prog)s --file models/cars/civic.yaml --color Vermelho
  %(prog)s --brand Fiat --model Uno --year 1994
""",
    )
    parser.add_argument(
        "--file",
        type=Path,
        help="Car preset YAML file to start from",
    )
    parser.add_argument("--brand", type=str, help="Car brand")
    parser.add_argument("--model", type=str, help="Car model")
    parser.add_argument("--year", type=int, help="Model year")
    parser.add_argument("--engine", type=str, help="Engine description")
    parser.add_argument("--color", type=str, help="Paint color")
    parser.add_argument(
        "--table",
        action="store_true",
        help="Print the car as a field/value table",
    )
    return parser


def main(argv: Optional[List[str]] = None):
    args = make_parser().parse_args(argv)

    if not wants_custom_car(args):
        car = build_demo_car()
    else:
        if args.file is None:
            builder = CarBuilder()
        elif not args.file.exists():
            print(f"Error: File not found: {args.file}")
            return 1
        else:
            try:
                builder = load_car_file(args.file)
            except CarFileError as e:
                print(f"Error: Invalid car file: {e.filename}")
                for error in e.errors:
                    print(f"  {error}")
                return 1
        car = apply_field_flags(builder, args).build()

    if args.table:
        print(f"Car: {car.name or '-'}")
        print()
        print(tabulate(make_car_table(car), headers=["Field", "Value"], tablefmt="simple"))
    else:
        print(f"Carro Construído: {car.describe()}")

    return 0


if __name__ == "__main__":
    sys.exit(main() or 0)
