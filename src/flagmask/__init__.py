"""
flagmask – named bit flags packed into a single integer.

Import path convention::

    from flagmask import BitFlagSet, FlagDefinition
    from flagmask.kernel.errors import UnknownFlagNameError
    from flagmask.observability.logging import JsonLoggerFactory
"""

from flagmask.kernel.errors import (
    DuplicateBitPositionError,
    InvalidDefinitionError,
    MalformedBinaryStringError,
    OutOfRangeBitsError,
    UnknownBitPositionError,
    UnknownFlagNameError,
)
from flagmask.kernel.types import BitFlagSet, FlagDefinition, FlagRef

__version__ = "0.1.0"
__all__ = [
    "BitFlagSet",
    "DuplicateBitPositionError",
    "FlagDefinition",
    "FlagRef",
    "InvalidDefinitionError",
    "MalformedBinaryStringError",
    "OutOfRangeBitsError",
    "UnknownBitPositionError",
    "UnknownFlagNameError",
    "__version__",
]
