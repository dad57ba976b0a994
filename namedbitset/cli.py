"""Render and parse named bit sets from the command line."""

from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence, Tuple

from .api import pretty
from .configuration import Configuration
from .exceptions import InvalidConfiguration
from .typehints import Digit, DisplaySpec

logger = logging.getLogger(__name__)

DEFAULT_DIGITS = {"r": "r", "w": "w", "x": "x"}


def digit_spec(text: str) -> Tuple[Digit, DisplaySpec]:
    """Parse ``NAME``, ``NAME=E`` or ``NAME=ED`` into a digit and its display."""
    name, sep, characters = text.partition("=")
    if not name:
        raise argparse.ArgumentTypeError(f"missing digit name: {text!r}")
    if not sep:
        return name, None
    if len(characters) == 1:
        return name, characters
    if len(characters) == 2:
        enabled, disabled = characters
        return name, (enabled, disabled)
    raise argparse.ArgumentTypeError(f"invalid digit specification: {text!r}")


def make_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="namedbitset",
        description="Render a named bit set, or read one back from a string.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    p.add_argument(
        "state",
        help=(
            "An integer (0b, 0o and 0x prefixes are accepted) or, "
            "with --parse, a rendered string."
        ),
    )
    p.add_argument(
        "-d",
        "--digit",
        type=digit_spec,
        action="append",
        default=[],
        metavar="NAME[=E[D]]",
        help=(
            "A digit, optionally with its enabled and disabled characters. "
            "Repeat in declaration order. Defaults to r, w and x."
        ),
    )
    p.add_argument(
        "-p",
        "--parse",
        choices=("long", "short"),
        default=None,
        help="Read STATE as a string rendered in this format.",
    )
    p.add_argument(
        "-f",
        "--format",
        choices=("long", "short", "int", "table"),
        default="long",
        help="Output format.",
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debugging information to stderr.",
    )
    return p


def main(
    *,
    state: str,
    digit: Sequence[Tuple[Digit, DisplaySpec]],
    parse: Optional[str],
    format: str,
) -> str:
    """Return `state` rendered in `format` against the configured digits."""
    displays = dict(digit) if digit else DEFAULT_DIGITS
    if digit and len(displays) != len(digit):
        raise InvalidConfiguration("Duplicate digit names given")
    configuration = Configuration(displays)
    logger.debug("configuration: %r", configuration)

    if parse is None:
        bits = configuration.new(int(state, 0))
    else:
        bits = configuration.parse(state, format=parse)
    logger.debug("parsed %r as %d", state, bits.to_i())

    if format == "int":
        return str(bits.to_i())
    if format == "table":
        return pretty(bits)
    return bits.to_s(format)


def cli(argv: Optional[Sequence[str]] = None) -> None:
    """Entry point of the ``namedbitset`` command."""
    parser = make_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s:%(name)s:%(message)s",
    )
    try:
        output = main(
            state=args.state, digit=args.digit, parse=args.parse, format=args.format
        )
    except ValueError as e:
        parser.error(str(e))
    print(output)


if __name__ == "__main__":  # pragma: no cover
    cli()
