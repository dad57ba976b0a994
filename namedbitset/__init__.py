"""Top-level package for namedbitset."""

from namedbitset.api import *  # noqa: F401,F403
from namedbitset.bitset import BitSet  # noqa: F401
from namedbitset.configuration import Configuration  # noqa: F401
from namedbitset.exceptions import (  # noqa: F401
    BitSetError,
    InvalidConfiguration,
    InvalidDigit,
    InvalidDigits,
    InvalidFormat,
    InvalidState,
    InvalidString,
    ShortFormatUnavailable,
)

import importlib.metadata

__version__ = importlib.metadata.version(__name__)
