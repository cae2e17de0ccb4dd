"""
Main entry point for following ASCII path diagrams.

Usage:
    python -m src.main diagram.txt
    python -m src.main - < diagram.txt
    python -m src.main --example compact-space --verbose
    python -m src.main diagram.txt --config config.yaml --json
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import yaml

from .diagrams import EXAMPLES, get_example, parse_diagram
from .pathfinder import PathfinderConfig, PathResult, find_path


def load_config(config_path: str) -> PathfinderConfig:
    """Load path finding configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f)

    return PathfinderConfig(**(data or {}))


def read_diagram(source: str) -> List[List[str]]:
    """Read a diagram from a file path, or from stdin when source is '-'."""
    if source == "-":
        return parse_diagram(sys.stdin.read())

    path = Path(source)
    if not path.exists():
        raise FileNotFoundError(f"Diagram file not found: {source}")
    return parse_diagram(path.read_text())


def format_error(result: PathResult) -> str:
    error = result.error
    if error is None:
        return "Error: unknown failure"
    if error.row is None or error.col is None:
        return f"Error: {error.message}"
    return f"Error at ({error.row}, {error.col}): {error.message}"


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Follow the path in an ASCII diagram and collect its letters",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example diagram:
  @---A---+
          |
  x-B-+   C
      |   |
      +---+

Example config.yaml:
  max_steps: 10000
  reject_duplicate_end: true
        """
    )
    parser.add_argument(
        "diagram",
        nargs="?",
        help="Path to a diagram text file, or '-' for stdin (not needed with --example)"
    )
    parser.add_argument(
        "--example", "-e",
        help="Run a built-in example diagram by slug"
    )
    parser.add_argument(
        "--list-examples",
        action="store_true",
        help="List the built-in example diagrams"
    )
    parser.add_argument(
        "--config", "-c",
        help="Path to YAML configuration file"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the full result as JSON"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log every step of the walk to stderr"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.list_examples:
        for slug, example in EXAMPLES.items():
            status = "valid" if example.valid else "invalid"
            print(f"{slug:32} {status:8} {example.name}")
        return 0

    config = PathfinderConfig()
    if args.config:
        try:
            config = load_config(args.config)
        except Exception as e:
            print(f"Error loading config: {e}", file=sys.stderr)
            return 1

    # Resolve the diagram to run
    if args.example:
        try:
            example = get_example(args.example)
        except KeyError as e:
            print(f"Error: {e.args[0]}", file=sys.stderr)
            return 1
        rows = example.rows
        if args.verbose:
            print(f"Example: {example.name}")
            print(example.grid)
            print()
    elif args.diagram:
        try:
            rows = read_diagram(args.diagram)
        except (OSError, UnicodeDecodeError) as e:
            print(f"Error reading diagram: {e}", file=sys.stderr)
            return 1
    else:
        print("Error: diagram file required (or use --example)", file=sys.stderr)
        return 1

    result = find_path(rows, config)

    if args.json:
        print(result.model_dump_json(indent=2))
    elif result.success:
        print(result.path)
        print(result.letters)
    else:
        if result.visited:
            print(f"Partial path: {result.path}", file=sys.stderr)
            print(f"Letters so far: {result.letters}", file=sys.stderr)
        print(format_error(result), file=sys.stderr)

    return 0 if result.success else 1


if __name__ == "__main__":
    sys.exit(main())
