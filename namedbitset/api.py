"""namedbitset user-facing API.

These functions are thin conveniences over
:class:`~namedbitset.configuration.Configuration` and
:class:`~namedbitset.bitset.BitSet`.

"""

from __future__ import annotations

from typing import Any, Mapping, Sequence

import tabulate
from public import public

from .bitset import BitSet
from .configuration import Configuration
from .typehints import ConfigurationSpec


@public  # type: ignore[misc]
def configure(spec: Configuration | ConfigurationSpec) -> Configuration:
    """Construct a configuration, or return `spec` if it already is one.

    Parameters
    ----------
    spec
        An iterable of digit names or a mapping from digit name to its
        display characters.

    Examples
    --------
    >>> from namedbitset import configure
    >>> configure(["a", "b", "c"]).max
    7

    """
    return Configuration.build(spec)


@public  # type: ignore[misc]
def parse(
    text: str,
    configuration: Configuration | ConfigurationSpec,
    *,
    format: str = "long",
) -> BitSet:
    """Read a string rendered in `format` into a bit set.

    Parameters
    ----------
    text
        A string produced by :meth:`~namedbitset.bitset.BitSet.to_s`.
    configuration
        The configuration to read `text` against.
    format
        Either ``"long"`` or ``"short"``.

    Examples
    --------
    >>> from namedbitset import parse
    >>> permissions = {"r": "r", "w": "w", "x": "x"}
    >>> parse("rw-", permissions).to_i()
    6
    >>> parse("x", permissions, format="short").to_i()
    1

    """
    return Configuration.build(configuration).parse(text, format=format)


@public  # type: ignore[misc]
def rows(bits: BitSet) -> Sequence[Mapping[str, Any]]:
    """Return one mapping per digit describing its weight and state."""
    configuration = bits.configuration
    return [
        dict(
            digit=digit,
            weight=configuration.binary_position(digit),
            character=(
                configuration.enabled_character(digit)
                if enabled
                else configuration.disabled_character(digit)
            ),
            enabled=enabled,
        )
        for digit, enabled in bits.state().items()
    ]


@public  # type: ignore[misc]
def pretty(
    bits: BitSet,
    *,
    tablefmt: str = "simple",
    headers: str = "keys",
    **kwargs: Any,
) -> str:
    """Pretty-format the digits of a bit set as a table.

    Parameters
    ----------
    bits
        The bit set to format
    tablefmt
        The kind of table to use for formatting
    headers
        A string indicating how to compute column names
    kwargs
        Additional keyword arguments passed to the `tabulate.tabulate`
        function

    Returns
    -------
    str
        Pretty-formatted bit set

    See Also
    --------
    namedbitset.api.show

    """
    return tabulate.tabulate(rows(bits), tablefmt=tablefmt, headers=headers, **kwargs)


@public  # type: ignore[misc]
def show(bits: BitSet, **kwargs: Any) -> None:
    """Pretty-print the digits of a bit set.

    Parameters
    ----------
    bits
        The bit set to print
    kwargs
        Additional keyword arguments passed to the `namedbitset.api.pretty`
        function

    See Also
    --------
    namedbitset.api.pretty

    """
    print(pretty(bits, **kwargs))
