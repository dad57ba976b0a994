"""Protocol classes used throughout namedbitset."""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING, AbstractSet

from typing_extensions import Protocol, runtime_checkable

if TYPE_CHECKING:
    from .configuration import Configuration


@runtime_checkable
class BitSetLike(Protocol):
    """A protocol for objects that carry a bit set's logical fields.

    Any object exposing an integer state and a configuration, such as a
    :class:`types.SimpleNamespace` with those two attributes, compares equal to
    a :class:`~namedbitset.bitset.BitSet` holding the same values.

    """

    integer_representation: int
    configuration: Configuration


@runtime_checkable
class HasEnabledDigits(Protocol):
    """A protocol for objects that can list their enabled digits."""

    @abc.abstractmethod
    def enabled_digits(self) -> AbstractSet[str]:
        """Return the names of the enabled digits."""
