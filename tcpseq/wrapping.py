"""32-bit wrapping sequence numbers and conversion to and from 64-bit absolute ones."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["WrappingInt32", "wrap", "unwrap"]

_TWO_32 = 1 << 32
_MASK32 = _TWO_32 - 1
_MASK64 = (1 << 64) - 1
_HALF = _TWO_32 // 2


@dataclass(frozen=True, order=False)
class WrappingInt32:
    """A 32-bit integer expressed relative to an arbitrary initial sequence number."""

    raw_value: int

    def __post_init__(self) -> None:
        if not isinstance(self.raw_value, int) or isinstance(self.raw_value, bool):
            raise TypeError("raw_value must be an int")
        if not 0 <= self.raw_value <= _MASK32:
            raise ValueError(f"raw_value {self.raw_value} does not fit in 32 unsigned bits")

    def __add__(self, other: object) -> WrappingInt32:
        """Step `other` positions past this point, wrapping modulo 2**32."""
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return WrappingInt32((self.raw_value + other) & _MASK32)

    def __sub__(self, other: object) -> WrappingInt32 | int:
        """Step back by an int, or give the signed 32-bit offset from another point."""
        if isinstance(other, WrappingInt32):
            diff = (self.raw_value - other.raw_value) & _MASK32
            return diff - _TWO_32 if diff >= _HALF else diff
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return WrappingInt32((self.raw_value - other) & _MASK32)

    def __str__(self) -> str:
        return str(self.raw_value)


def wrap(n: int, isn: WrappingInt32) -> WrappingInt32:
    """Turn an absolute 64-bit sequence number into a wrapped 32-bit one."""
    if not 0 <= n <= _MASK64:
        raise ValueError(f"absolute sequence number {n} does not fit in 64 unsigned bits")
    return WrappingInt32((isn.raw_value + n) % _TWO_32)


def unwrap(n: WrappingInt32, isn: WrappingInt32, checkpoint: int) -> int:
    """Return the absolute sequence number that wraps to `n` and is closest to `checkpoint`."""
    if not 0 <= checkpoint <= _MASK64:
        raise ValueError(f"checkpoint {checkpoint} does not fit in 64 unsigned bits")

    offset = (n.raw_value - isn.raw_value) % _TWO_32
    quotient = checkpoint // _TWO_32
    candidate = (offset + quotient * _TWO_32) & _MASK64

    if quotient >= 1:
        lower = (candidate - _TWO_32) & _MASK64
        if ((checkpoint - lower) & _MASK64) < _HALF:
            return lower

    upper = (candidate + _TWO_32) & _MASK64
    if ((upper - checkpoint) & _MASK64) < _HALF:
        return upper

    return candidate