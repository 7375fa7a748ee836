"""Command-line entry point for converting a distance between miles and kilometers."""

import argparse
import logging
import sys

from rich.console import Console
from rich.markup import escape

from distance.conversions import CONVERSIONS

log = logging.getLogger(__name__)
console = Console()

ALIASES = {
    "mi-km": "miles_to_kilometers",
    "km-mi": "kilometers_to_miles",
}

# (source unit, target unit) for output formatting
UNITS = {
    "miles_to_kilometers": ("mi", "km"),
    "kilometers_to_miles": ("km", "mi"),
}


class UnknownConversionError(ValueError):
    """Raised when a direction names no known conversion."""


def resolve(direction: str) -> str:
    """Map an alias or canonical name to its canonical conversion name."""
    name = ALIASES.get(direction, direction)
    if name not in CONVERSIONS:
        known = ", ".join(sorted([*CONVERSIONS, *ALIASES]))
        raise UnknownConversionError(f"Unknown conversion {direction!r} (expected one of: {known})")
    return name


def convert(direction: str, value: float) -> float:
    name = resolve(direction)
    result = CONVERSIONS[name](value)
    log.debug("%s(%r) -> %r", name, value, result)
    return result


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Convert a distance between miles and kilometers")
    parser.add_argument(
        "direction",
        help=f"Conversion to apply: one of {', '.join([*CONVERSIONS, *ALIASES])}",
    )
    parser.add_argument("value", type=float, help="Distance to convert")
    parser.add_argument(
        "--verbose",
        action="store_true",
        default=False,
        help="Enable debug logging (default: False)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(name)s] %(levelname)s %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        name = resolve(args.direction)
    except UnknownConversionError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        log.error("Conversion failed: %s", exc)
        sys.exit(1)

    result = convert(name, args.value)
    source_unit, target_unit = UNITS[name]
    console.print(f"{args.value} {source_unit} = [bold]{result}[/bold] {target_unit}")


if __name__ == "__main__":
    main()
