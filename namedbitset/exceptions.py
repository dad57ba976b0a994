"""Exceptions raised by namedbitset."""

from __future__ import annotations

from typing import Any, Sequence


class BitSetError(ValueError):
    """Base class of every error raised by namedbitset."""


class InvalidConfiguration(BitSetError):
    """A digit schema could not be turned into a configuration."""


class InvalidDigit(BitSetError):
    """A digit name or index does not resolve to a configured digit."""


class InvalidDigits(BitSetError):
    """One or more tokens given as enabled digits are not digit names.

    Attributes
    ----------
    digits
        Every offending token, in the order they were given.

    """

    def __init__(self, digits: Sequence[Any]) -> None:
        self.digits = tuple(digits)
        super().__init__(
            "Invalid digit(s): {}".format(", ".join(map(repr, self.digits)))
        )


class InvalidState(BitSetError):
    """An integer state lies outside of a configuration's valid range."""


class InvalidFormat(BitSetError):
    """An unknown string format was requested."""


class ShortFormatUnavailable(BitSetError):
    """The short format needs a unique enabled character for every digit."""


class InvalidString(BitSetError):
    """A rendered string could not be read back into a state."""
