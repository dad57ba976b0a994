"""Various type definitions used throughout namedbitset."""

from typing import Any, Iterable, Mapping, Optional, Sequence, Union

Digit = str
DigitOrIndex = Union[Digit, int]

# None, an enabled character, or an (enabled, disabled) pair
DisplaySpec = Optional[Union[str, Sequence[str]]]

ConfigurationSpec = Union[Iterable[Digit], Mapping[Digit, DisplaySpec]]

# an integer, a single digit name, or a (possibly nested) collection of names
State = Union[int, Digit, Iterable[Any]]
