"""The schema describing the digits of a :class:`~namedbitset.bitset.BitSet`."""

from __future__ import annotations

import functools
import numbers
import operator
from typing import (
    TYPE_CHECKING,
    Any,
    Iterable,
    Iterator,
    Mapping,
    MutableMapping,
    Sequence,
    Tuple,
)

import toolz

from .exceptions import (
    InvalidConfiguration,
    InvalidDigit,
    InvalidFormat,
    InvalidString,
    ShortFormatUnavailable,
)
from .typehints import ConfigurationSpec, Digit, DisplaySpec

if TYPE_CHECKING:
    from .bitset import BitSet

UNNAMED_ENABLED = "1"
UNNAMED_DISABLED = "0"
NAMED_DISABLED = "-"

FORMATS = frozenset({"long", "short"})


def flatten(tokens: Iterable[Any]) -> Iterator[Any]:
    """Expand the non-string iterables in `tokens` one level deep.

    Examples
    --------
    >>> list(flatten(["red", ("yellow", "green")]))
    ['red', 'yellow', 'green']

    """
    return toolz.concat(
        token if isinstance(token, Iterable) and not isinstance(token, str) else (token,)
        for token in tokens
    )


@functools.singledispatch
def resolve(digit: Any, digits: Sequence[Digit]) -> Digit:
    """Resolve a digit name or a zero-based index against `digits`.

    Names and indexes are dispatched to their own implementations. Any other
    integer-like object is resolved as an index.

    """
    try:
        index = operator.index(digit)
    except TypeError:
        raise InvalidDigit(f"Invalid index or digit: {digit!r}") from None
    return resolve(index, digits)


@resolve.register(str)
def _resolve_name(digit: str, digits: Sequence[Digit]) -> Digit:
    if digit not in digits:
        raise InvalidDigit(f"Invalid digit name: {digit!r}")
    return digit


@resolve.register(int)
def _resolve_index(index: int, digits: Sequence[Digit]) -> Digit:
    if not 0 <= index < len(digits):
        raise InvalidDigit(f"Invalid digit index: {index:d}")
    return digits[index]


def character(token: Any, *, digit: Digit) -> str:
    """Validate that `token` is a single character."""
    if not isinstance(token, str) or len(token) != 1:
        raise InvalidConfiguration(
            f"Display characters must be strings of length 1, "
            f"got {token!r} for digit {digit!r}"
        )
    return token


def display_characters(digit: Digit, display: DisplaySpec) -> Tuple[str, str]:
    """Return the enabled and disabled characters of `digit`.

    Parameters
    ----------
    digit
        The digit name, used in error messages.
    display
        ``None`` for the ``'1'``/``'0'`` defaults, a single enabled character
        (the disabled character is then ``'-'``), or an ``(enabled, disabled)``
        pair.

    """
    if display is None:
        return UNNAMED_ENABLED, UNNAMED_DISABLED
    if isinstance(display, str):
        return character(display, digit=digit), NAMED_DISABLED
    if isinstance(display, Sequence) and len(display) == 2:
        enabled, disabled = display
        return character(enabled, digit=digit), character(disabled, digit=digit)
    raise InvalidConfiguration(
        f"Invalid display specification for digit {digit!r}: {display!r}"
    )


class Configuration:
    """An immutable, ordered set of named binary digits.

    Each digit is assigned a power of two in reverse declaration order: the
    last declared digit is worth 1, the one before it 2 and so on. Two
    configurations are equal when they declare the same digit names in the
    same order, regardless of their display characters.

    Parameters
    ----------
    spec
        Either an iterable of digit names or a mapping from digit name to a
        display specification. See :func:`display_characters`.

    Examples
    --------
    >>> traffic_light = Configuration({"red": "r", "yellow": "y", "green": "g"})
    >>> traffic_light.digits
    ('red', 'yellow', 'green')
    >>> traffic_light.binary_position("red")
    4
    >>> traffic_light.max
    7

    """

    __slots__ = "_digits", "_weights", "_enabled", "_disabled", "_unique_characters"

    def __init__(self, spec: ConfigurationSpec) -> None:
        if isinstance(spec, str) or not isinstance(spec, Iterable):
            raise InvalidConfiguration(f"Invalid configuration: {spec!r}")

        items: Iterable[Tuple[Any, DisplaySpec]] = (
            spec.items()
            if isinstance(spec, Mapping)
            else ((digit, None) for digit in spec)
        )

        enabled: MutableMapping[Digit, str] = {}
        disabled: MutableMapping[Digit, str] = {}

        for digit, display in items:
            if not isinstance(digit, str) or not digit:
                raise InvalidConfiguration(
                    f"Digit names must be non-empty strings, got {digit!r}"
                )
            if digit in enabled:
                raise InvalidConfiguration(f"Duplicate digit name: {digit!r}")
            enabled[digit], disabled[digit] = display_characters(digit, display)

        if not enabled:
            raise InvalidConfiguration("At least one digit must be configured")

        self._digits: Tuple[Digit, ...] = tuple(enabled)
        self._weights: Mapping[Digit, int] = {
            digit: 1 << position
            for position, digit in enumerate(reversed(self._digits))
        }
        self._enabled: Mapping[Digit, str] = enabled
        self._disabled: Mapping[Digit, str] = disabled
        self._unique_characters = len(set(enabled.values())) == len(enabled)

    @classmethod
    def build(cls, spec: Configuration | ConfigurationSpec) -> Configuration:
        """Return `spec` if it is already a configuration, else construct one."""
        return spec if isinstance(spec, Configuration) else cls(spec)

    @property
    def digits(self) -> Tuple[Digit, ...]:
        """Return the digit names in declaration order."""
        return self._digits

    @property
    def min(self) -> int:
        """Return the smallest valid integer state, always 0."""
        return 0

    @property
    def max(self) -> int:
        """Return the integer state with every digit enabled."""
        return 2 * self._weights[self._digits[0]] - 1

    @property
    def valid_range(self) -> range:
        """Return the range of valid integer states."""
        return range(self.min, self.max + 1)

    @property
    def unique_characters(self) -> bool:
        """Return whether every digit has a distinct enabled character."""
        return self._unique_characters

    def find_digit(self, digit: Digit | int) -> Digit:
        """Resolve a digit name or a zero-based index to a digit name.

        Raises
        ------
        InvalidDigit
            If the name is unknown or the index is out of range.

        """
        return resolve(digit, self._digits)

    def binary_position(self, digit: Digit | int) -> int:
        """Return the weight of `digit`, given by name or index."""
        return self._weights[self.find_digit(digit)]

    def enabled_character(self, digit: Digit | int) -> str:
        """Return the character rendering `digit` when it is on."""
        return self._enabled[self.find_digit(digit)]

    def disabled_character(self, digit: Digit | int) -> str:
        """Return the character rendering `digit` when it is off."""
        return self._disabled[self.find_digit(digit)]

    def new(self, *state: Any) -> BitSet:
        """Construct a :class:`~namedbitset.bitset.BitSet` of this configuration.

        `state` is flattened one level. A lone integer is taken as the integer
        state, anything else as the names of the enabled digits.

        Examples
        --------
        >>> traffic_light = Configuration({"red": "r", "yellow": "y", "green": "g"})
        >>> traffic_light.new(5)
        <BitSet: 'r-g'>
        >>> traffic_light.new("red", "green")
        <BitSet: 'r-g'>
        >>> traffic_light.new()
        <BitSet: '---'>

        """
        from .bitset import BitSet

        tokens = list(flatten(state))
        if len(tokens) == 1 and isinstance(tokens[0], numbers.Integral):
            return BitSet(tokens[0], self)
        return BitSet(tokens, self)

    def check_format(self, format: str) -> None:
        """Validate that `format` can be used with this configuration.

        Raises
        ------
        InvalidFormat
            If `format` is not one of ``"long"`` or ``"short"``.
        ShortFormatUnavailable
            If `format` is ``"short"`` but enabled characters are not unique.

        """
        if not isinstance(format, str) or format not in FORMATS:
            raise InvalidFormat(f"Invalid format: {format!r}")
        if format == "short" and not self._unique_characters:
            raise ShortFormatUnavailable(
                "Short format only available for configurations "
                "with unique characters for each digit"
            )

    def parse(self, text: str, format: str = "long") -> BitSet:
        """Read a string rendered by :meth:`BitSet.to_s` back into a bit set.

        Parameters
        ----------
        text
            The rendered string.
        format
            The format `text` was rendered in, ``"long"`` or ``"short"``.

        Examples
        --------
        >>> traffic_light = Configuration({"red": "r", "yellow": "y", "green": "g"})
        >>> traffic_light.parse("r-g").to_i()
        5
        >>> traffic_light.parse("gr", format="short").to_i()
        5

        """
        self.check_format(format)
        if format == "long":
            return self.new(self._parse_long(text))
        return self.new(self._parse_short(text))

    def _parse_long(self, text: str) -> int:
        if len(text) != len(self._digits):
            raise InvalidString(
                f"Expected {len(self._digits):d} characters, "
                f"got {len(text):d}: {text!r}"
            )
        state = 0
        for digit, char in zip(self._digits, text):
            if char == self._enabled[digit]:
                state |= self._weights[digit]
            elif char != self._disabled[digit]:
                raise InvalidString(
                    f"Invalid character {char!r} for digit {digit!r} in {text!r}"
                )
        return state

    def _parse_short(self, text: str) -> Sequence[Digit]:
        digits_by_character = {char: digit for digit, char in self._enabled.items()}
        if text == NAMED_DISABLED and text not in digits_by_character:
            return ()
        if not text:
            raise InvalidString("Empty string is not a valid short format")
        duplicates = [
            char for char, count in toolz.frequencies(text).items() if count > 1
        ]
        if duplicates:
            raise InvalidString(f"Repeated characters {duplicates!r} in {text!r}")
        unknown = [char for char in text if char not in digits_by_character]
        if unknown:
            raise InvalidString(f"Unknown characters {unknown!r} in {text!r}")
        return [digits_by_character[char] for char in text]

    def __len__(self) -> int:
        """Return the number of digits."""
        return len(self._digits)

    def __iter__(self) -> Iterator[Digit]:
        """Iterate over the digit names in declaration order."""
        return iter(self._digits)

    def __contains__(self, digit: Any) -> bool:
        """Check whether `digit` is the name of a configured digit."""
        return isinstance(digit, str) and digit in self._weights

    def __eq__(self, other: Any) -> bool:
        """Return whether `other` declares the same digit names in order."""
        if not isinstance(other, Configuration):
            return NotImplemented
        return self._digits == other._digits

    def __ne__(self, other: Any) -> bool:
        """Return whether `self` does not equal `other`."""
        return not (self == other)

    def __hash__(self) -> int:
        """Return a hash of the digit names."""
        return hash(self._digits)

    def __repr__(self) -> str:
        """Return the string representation of a configuration."""
        displays = {
            digit: (self._enabled[digit], self._disabled[digit])
            for digit in self._digits
        }
        return f"{self.__class__.__name__}({displays})"
