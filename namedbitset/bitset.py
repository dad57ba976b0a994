"""An immutable set of named binary digits backed by an integer."""

from __future__ import annotations

import functools
import numbers
import operator
from typing import (
    AbstractSet,
    Any,
    Iterable,
    Iterator,
    Mapping,
    Optional,
    Sequence,
)

from .configuration import NAMED_DISABLED, Configuration, flatten
from .exceptions import InvalidDigits, InvalidState
from .protocols import BitSetLike, HasEnabledDigits
from .typehints import ConfigurationSpec, Digit, DigitOrIndex, State


def integer_state(other: BitSetLike | int) -> int:
    """Return the integer state of a bit set like object or an integer."""
    if isinstance(other, BitSetLike):
        return other.integer_representation
    return operator.index(other)


class BitSet:
    """A fixed width binary value with named digits.

    Parameters
    ----------
    state
        Either the integer state, or the names of the enabled digits as a
        single name or a collection of names. Nested collections are
        flattened one level.
    configuration
        A :class:`~namedbitset.configuration.Configuration` or anything
        :meth:`~namedbitset.configuration.Configuration.build` accepts.

    Raises
    ------
    InvalidState
        If an integer `state` is outside of the configuration's valid range.
    InvalidDigits
        If `state` names any unknown digit. Every unknown name is reported.

    Examples
    --------
    >>> traffic_light = {"red": "r", "yellow": "y", "green": "g"}
    >>> bits = BitSet(["red", "green"], traffic_light)
    >>> bits.to_i()
    5
    >>> bits.to_s()
    'r-g'
    >>> bits.to_s("short")
    'rg'
    >>> bits.invert()
    <BitSet: '-y-'>

    """

    __slots__ = "_configuration", "_integer_representation"

    def __init__(
        self, state: State, configuration: Configuration | ConfigurationSpec
    ) -> None:
        configuration = Configuration.build(configuration)
        self._configuration = configuration

        if isinstance(state, numbers.Integral):
            state = int(state)
            if state not in configuration.valid_range:
                raise InvalidState(
                    f"State {state:d} outside of valid range "
                    f"[{configuration.min:d}, {configuration.max:d}]"
                )
            self._integer_representation = state
        else:
            tokens = (
                [state]
                if isinstance(state, str) or not isinstance(state, Iterable)
                else list(flatten(state))
            )
            invalid = [token for token in tokens if token not in configuration]
            if invalid:
                raise InvalidDigits(invalid)
            self._integer_representation = functools.reduce(
                operator.or_, map(configuration.binary_position, tokens), 0
            )

    @property
    def configuration(self) -> Configuration:
        """Return the configuration of this bit set."""
        return self._configuration

    @property
    def integer_representation(self) -> int:
        """Return the state of this bit set as an integer."""
        return self._integer_representation

    def to_i(self) -> int:
        """Return the state of this bit set as an integer."""
        return self._integer_representation

    def state(self) -> Mapping[Digit, bool]:
        """Return every digit and whether it is on, in declaration order."""
        return {digit: self[digit] for digit in self._configuration.digits}

    attributes = state

    def get(self, digit: DigitOrIndex) -> bool:
        """Return whether `digit`, given by name or index, is on."""
        return bool(
            self._integer_representation
            & self._configuration.binary_position(digit)
        )

    __getitem__ = get

    def enabled_digits(self) -> AbstractSet[Digit]:
        """Return the digits that are on as a set ordered by declaration."""
        return dict.fromkeys(
            digit for digit in self._configuration.digits if self[digit]
        ).keys()

    def disabled_digits(self) -> AbstractSet[Digit]:
        """Return the digits that are off as a set ordered by declaration."""
        return dict.fromkeys(
            digit for digit in self._configuration.digits if not self[digit]
        ).keys()

    def invert(self) -> BitSet:
        """Return a bit set with every digit toggled.

        The result's state is ``configuration.max - state``. Because
        ``configuration.max`` has every bit set, this is the bitwise
        complement restricted to the configured digits.

        """
        configuration = self._configuration
        return configuration.new(configuration.max - self._integer_representation)

    __invert__ = invert

    def __add__(self, other: Any) -> BitSet:
        """Return a bit set with the enabled digits of `self` and `other` on.

        `other` is either a bit set or a collection of digit names. The result
        is built from digit names, so every token of `other` must name a digit.

        """
        digits = self._other_digits(other)
        if digits is None:
            return NotImplemented
        return BitSet([*self.enabled_digits(), *digits], self._configuration)

    def __sub__(self, other: Any) -> BitSet:
        """Return a bit set with the enabled digits of `other` switched off."""
        digits = self._other_digits(other)
        if digits is None:
            return NotImplemented
        removed = list(flatten(digits))
        return BitSet(
            [digit for digit in self.enabled_digits() if digit not in removed],
            self._configuration,
        )

    @staticmethod
    def _other_digits(other: Any) -> Optional[Sequence[Any]]:
        if isinstance(other, HasEnabledDigits):
            return list(other.enabled_digits())
        if isinstance(other, str):
            return [other]
        if isinstance(other, Iterable):
            return list(other)
        return None

    def union(self, other: BitSetLike | int) -> BitSet:
        """Return a bit set with the digits on in either operand switched on."""
        return self._configuration.new(
            self._integer_representation | integer_state(other)
        )

    __or__ = union

    def intersection(self, other: BitSetLike | int) -> BitSet:
        """Return a bit set with only the digits on in both operands on."""
        return self._configuration.new(
            self._integer_representation & integer_state(other)
        )

    __and__ = intersection

    def symmetric_difference(self, other: BitSetLike | int) -> BitSet:
        """Return a bit set with the digits on in exactly one operand on."""
        return self._configuration.new(
            self._integer_representation ^ integer_state(other)
        )

    __xor__ = symmetric_difference

    def compare(self, other: Any) -> Optional[int]:
        """Compare the integer states of two bit sets.

        Returns
        -------
        Optional[int]
            -1, 0 or 1 if `self` is less than, equal to or greater than
            `other`. ``None`` if `other` is not a bit set or has a different
            configuration, in which case the two are incomparable.

        """
        if not isinstance(other, BitSetLike):
            return None
        if self._configuration != other.configuration:
            return None
        mine = self._integer_representation
        theirs = other.integer_representation
        return (mine > theirs) - (mine < theirs)

    def __lt__(self, other: Any) -> bool:
        result = self.compare(other)
        return NotImplemented if result is None else result < 0

    def __le__(self, other: Any) -> bool:
        result = self.compare(other)
        return NotImplemented if result is None else result <= 0

    def __gt__(self, other: Any) -> bool:
        result = self.compare(other)
        return NotImplemented if result is None else result > 0

    def __ge__(self, other: Any) -> bool:
        result = self.compare(other)
        return NotImplemented if result is None else result >= 0

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, BitSetLike):
            return NotImplemented
        return (
            self._integer_representation == other.integer_representation
            and self._configuration == other.configuration
        )

    def __ne__(self, other: Any) -> bool:
        return not (self == other)

    def eql(self, other: Any) -> bool:
        """Return whether `other` is equal and of exactly the same type."""
        return type(other) is type(self) and self == other

    def __hash__(self) -> int:
        return hash((self._configuration, self._integer_representation))

    def to_s(self, format: str = "long") -> str:
        """Render this bit set as a string.

        Parameters
        ----------
        format
            ``"long"`` renders one character per digit, the enabled or
            disabled character of each digit in declaration order.
            ``"short"`` renders only the enabled characters of the digits that
            are on, or ``"-"`` if no digit is on. It requires every digit to
            have a unique enabled character.

        Raises
        ------
        InvalidFormat
            If `format` is neither ``"long"`` nor ``"short"``.
        ShortFormatUnavailable
            If `format` is ``"short"`` and enabled characters are not unique.

        """
        configuration = self._configuration
        configuration.check_format(format)
        if format == "short":
            return (
                "".join(map(configuration.enabled_character, self.enabled_digits()))
                or NAMED_DISABLED
            )
        return "".join(
            configuration.enabled_character(digit)
            if enabled
            else configuration.disabled_character(digit)
            for digit, enabled in self.state().items()
        )

    def __str__(self) -> str:
        return self.to_s()

    def __format__(self, format_spec: str) -> str:
        return self.to_s(format_spec or "long")

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}: {self.to_s()!r}>"

    def __int__(self) -> int:
        return self._integer_representation

    __index__ = __int__

    def __contains__(self, digit: Any) -> bool:
        """Check whether `digit` names a digit that is on."""
        return digit in self._configuration and self[digit]

    def __iter__(self) -> Iterator[Digit]:
        """Iterate over the names of the enabled digits."""
        return iter(self.enabled_digits())

    def __len__(self) -> int:
        """Return the number of enabled digits."""
        return bin(self._integer_representation).count("1")

    def __bool__(self) -> bool:
        return self._integer_representation != 0
