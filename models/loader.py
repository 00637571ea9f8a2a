"""YAML preset loading for CarBuilder."""

from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

import yaml
from jsonschema import validate, ValidationError

from .car_builder import CarBuilder

SCHEMA_PATH = Path(__file__).parent / "schema.yaml"
PRESETS_DIR = Path(__file__).parent / "cars"

# Preset key -> builder setter, in the order they are applied
SETTERS = (
    ("brand", CarBuilder.set_brand),
    ("model", CarBuilder.set_model),
    ("year", CarBuilder.set_year),
    ("engine", CarBuilder.set_engine),
    ("color", CarBuilder.set_color),
)


class CarFileError(ValueError):
    """A car preset file could not be parsed or failed schema validation."""

    def __init__(self, filename: Union[str, Path], errors: List[str]):
        self.filename = filename
        self.errors = errors
        super().__init__(f"{filename}: " + "; ".join(e.strip() for e in errors))


def load_schema() -> dict:
    """Load the JSON schema for car preset files."""
    with open(SCHEMA_PATH) as f:
        return yaml.safe_load(f)


def read_car_data(filename: Union[str, Path]) -> Any:
    """Parse a preset file without validating it."""
    with open(filename, "rb") as fp:
        return yaml.load(fp, Loader=yaml.SafeLoader)


def validate_car_data(data: Any, schema: dict) -> List[str]:
    """Check parsed preset data against the schema. Returns list of errors."""
    try:
        validate(instance=data, schema=schema)
    except ValidationError as e:
        errors = [f"Schema validation error: {e.message}"]
        if e.path:
            errors.append(f"  at path: {'.'.join(str(p) for p in e.path)}")
        return errors
    return []


def _parse_car_file(filename: Union[str, Path]) -> Tuple[Any, List[str]]:
    try:
        return read_car_data(filename), []
    except yaml.YAMLError as e:
        return None, [f"YAML parse error: {e}"]
    except OSError as e:
        return None, [f"Error: {e}"]


def validate_car_file(filename: Union[str, Path], schema: dict) -> List[str]:
    """Validate a single car preset file. Returns list of errors."""
    data, errors = _parse_car_file(filename)
    return errors or validate_car_data(data, schema)


def apply_car_data(builder: CarBuilder, data: Dict[str, Any]) -> CarBuilder:
    """Apply each field present in a 'car' mapping through its setter."""
    for key, setter in SETTERS:
        if key in data:
            setter(builder, data[key])
    return builder


def load_car_file(
    filename: Union[str, Path], schema: Optional[dict] = None
) -> CarBuilder:
    """
    Load a preset file into a fresh builder.

    The file is parsed once; the same parsed data is validated and then
    applied. The builder is returned unbuilt so callers can keep chaining
    setters on top of the preset values.

    Raises:
        CarFileError: if the file is unreadable, not YAML, or fails the schema
    """
    if schema is None:
        schema = load_schema()
    data, errors = _parse_car_file(filename)
    if not errors:
        errors = validate_car_data(data, schema)
    if errors:
        raise CarFileError(filename, errors)
    return apply_car_data(CarBuilder(), data["car"])
