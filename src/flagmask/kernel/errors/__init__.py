"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError                      (domain.py)
    │   ├── ValidationError
    │   │   ├── InvalidDefinitionError   (flags.py)
    │   │   ├── DuplicateBitPositionError
    │   │   ├── MalformedBinaryStringError
    │   │   └── OutOfRangeBitsError
    │   └── NotFoundError
    │       ├── UnknownFlagNameError
    │       └── UnknownBitPositionError
    └── ApplicationError                 (application.py)
"""

from flagmask.kernel.errors.application import ApplicationError
from flagmask.kernel.errors.base import BaseError
from flagmask.kernel.errors.domain import DomainError, NotFoundError, ValidationError
from flagmask.kernel.errors.flags import (
    DuplicateBitPositionError,
    InvalidDefinitionError,
    MalformedBinaryStringError,
    OutOfRangeBitsError,
    UnknownBitPositionError,
    UnknownFlagNameError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "DuplicateBitPositionError",
    "InvalidDefinitionError",
    "MalformedBinaryStringError",
    "NotFoundError",
    "OutOfRangeBitsError",
    "UnknownBitPositionError",
    "UnknownFlagNameError",
    "ValidationError",
]
