"""Floor of the base-2 logarithm of unsigned 32-bit integers."""

from __future__ import annotations

_MASK = 0xFFFFFFFF
_MAGIC = 0x07C4ACDD
_TAB32 = (
    0, 9, 1, 10, 13, 21, 2, 29,
    11, 14, 16, 18, 22, 25, 3, 30,
    8, 12, 20, 28, 15, 17, 24, 7,
    19, 27, 23, 6, 26, 5, 4, 31,
)


def _check(value: int) -> int:
    value = int(value)
    if not 0 <= value <= _MASK:
        raise ValueError(f"value out of unsigned 32-bit range: {value}")
    return value


def fast_log2(value: int) -> int:
    """Floor of log2 via a De Bruijn lookup; zero maps to zero."""
    value = _check(value)
    for shift in (1, 2, 4, 8, 16):
        value |= value >> shift
    return _TAB32[((value * _MAGIC) & _MASK) >> 27]


def fast_log2_2(value: int) -> int:
    """Floor of log2 from the highest set bit; zero maps to zero."""
    value = _check(value)
    return value.bit_length() - 1 if value else 0