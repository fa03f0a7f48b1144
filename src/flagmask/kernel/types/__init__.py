"""Kernel flag types — public re-export surface.

Modules:
  bits.py       — integer bit helpers
  definition.py — FlagDefinition
  bit_flags.py  — BitFlagSet, FlagRef
"""

from flagmask.kernel.types.bit_flags import BitFlagSet, FlagRef
from flagmask.kernel.types.definition import DefinitionSource, FlagDefinition

__all__ = ["BitFlagSet", "DefinitionSource", "FlagDefinition", "FlagRef"]
