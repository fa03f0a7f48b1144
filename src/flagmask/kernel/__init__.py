"""Kernel – flag types and the error hierarchy, free of any framework."""

from flagmask.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    DuplicateBitPositionError,
    InvalidDefinitionError,
    MalformedBinaryStringError,
    NotFoundError,
    OutOfRangeBitsError,
    UnknownBitPositionError,
    UnknownFlagNameError,
    ValidationError,
)
from flagmask.kernel.types import BitFlagSet, FlagDefinition

__all__ = [
    "ApplicationError",
    "BaseError",
    "BitFlagSet",
    "DomainError",
    "DuplicateBitPositionError",
    "FlagDefinition",
    "InvalidDefinitionError",
    "MalformedBinaryStringError",
    "NotFoundError",
    "OutOfRangeBitsError",
    "UnknownBitPositionError",
    "UnknownFlagNameError",
    "ValidationError",
]
