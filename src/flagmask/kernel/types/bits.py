"""Integer bit helpers shared by the flag types."""

from __future__ import annotations

from collections.abc import Iterable


def bit(position: int) -> int:
    """Return the single-bit mask for *position*."""
    return 1 << position


def mask_of(positions: Iterable[int]) -> int:
    """Return a mask with every bit in *positions* set."""
    value = 0
    for position in positions:
        value |= 1 << position
    return value


def low_mask(max_position: int) -> int:
    """Return a mask covering bits ``0..max_position`` inclusive."""
    return (1 << (max_position + 1)) - 1


def count_bits(value: int) -> int:
    return value.bit_count()


def capacity_for(max_position: int) -> int:
    """Smallest power of two that is at least ``max_position + 1``.

    Same result as ``2 ** ceil(log2(max_position + 1))`` without going
    through floats: 0 -> 1, 8 -> 16, 14 -> 16, 24 -> 32.
    """
    return 1 << max_position.bit_length()


__all__ = ["bit", "capacity_for", "count_bits", "low_mask", "mask_of"]
