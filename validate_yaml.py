#!/usr/bin/env python3
"""
Validate car preset YAML files against the schema.

With no arguments, checks the presets bundled in models/cars/. Any mix of
preset files and directories of presets can be given instead.
"""
import argparse
import sys
from pathlib import Path
from typing import List, Optional

from models import load_schema, validate_car_file
from models.loader import PRESETS_DIR


def preset_files(path: Path) -> List[Path]:
    """Expand a directory into its *.yaml/*.yml presets; files pass through."""
    if path.is_dir():
        return sorted(list(path.glob("*.yaml")) + list(path.glob("*.yml")))
    return [path]


def make_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Validate car preset YAML files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s
  %(prog)s my-presets/
  %(prog)s my-presets/fusca.yaml models/cars/corolla.yaml
""",
    )
    parser.add_argument(
        "paths",
        type=Path,
        nargs="*",
        help="Preset files or directories (default: bundled presets)",
    )
    return parser


def main(argv: Optional[List[str]] = None):
    args = make_parser().parse_args(argv)
    paths = args.paths or [PRESETS_DIR]

    files = []
    for path in paths:
        if not path.exists():
            print(f"Error: Path not found: {path}")
            return 1
        files += preset_files(path)

    if not files:
        print(f"Warning: No YAML files found in {', '.join(str(p) for p in paths)}")
        return 0

    schema = load_schema()
    failed = 0
    for filepath in files:
        errors = validate_car_file(filepath, schema)
        if errors:
            print(f"FAIL: {filepath.name}")
            for error in errors:
                print(f"  {error}")
            failed += 1
        else:
            print(f"OK: {filepath.name}")

    print(f"{len(files) - failed}/{len(files)} presets valid")
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main() or 0)
