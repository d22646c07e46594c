"""
Packs an ordered vector of bounded integer fields into a single 64-bit integer.

The packed value is read as a mixed-radix number: field i is a digit with radix
2**bits[i], and its place value ("scale") is 2**(sum of the widths after it).

|bits[0]|bits[1]|...|bits[n-1]|
 high                    low
"""

from __future__ import annotations

import operator
from functools import lru_cache
from typing import Sequence

from compositeid.errors import FieldOverflow, InvalidLayout
from compositeid.utils.logger import get_logger

PACKED_BITS = 64

_MASK64 = (1 << PACKED_BITS) - 1
_SIGN64 = 1 << (PACKED_BITS - 1)

logger = get_logger("CompositeCodec")


def _validate_bits(bits: tuple[int, ...]) -> None:
    if not bits:
        raise InvalidLayout("layout must declare at least one field")
    for i, width in enumerate(bits):
        if isinstance(width, bool) or not isinstance(width, int) or width <= 0:
            raise InvalidLayout(f"field #{i} has invalid bit width {width!r}")
    total = sum(bits)
    if total > PACKED_BITS:
        raise InvalidLayout(f"layout {list(bits)} needs {total} bits, only {PACKED_BITS} available")


@lru_cache(maxsize=None)
def _scales_for(bits: tuple[int, ...]) -> tuple[int, ...]:
    _validate_bits(bits)

    scales = [1] * len(bits)
    for i in range(len(bits) - 2, -1, -1):
        scales[i] = scales[i + 1] << bits[i + 1]

    logger.debug(f"precomputed scales for layout {list(bits)}: {scales}")
    return tuple(scales)


def precompute_scales(bits: Sequence[int]) -> tuple[int, ...]:
    """
    returns the place value of every field; memoized per layout.
    """
    return _scales_for(tuple(bits))


def _check_lengths(count: int, bits: Sequence[int], scales: Sequence[int]) -> None:
    if not (count == len(bits) == len(scales)):
        raise InvalidLayout(
            f"field count {count} does not match layout (bits={len(bits)}, scales={len(scales)})"
        )


def encode(fields: Sequence[int], bits: Sequence[int], scales: Sequence[int]) -> int:
    """
    unchecked multiply-and-sum packing.

    a field outside [0, 2**bits[i]) spills into its neighbours without any error;
    use encode_checked() where that must not happen.
    """
    _check_lengths(len(fields), bits, scales)

    packed = 0
    for value, scale in zip(fields, scales):
        packed += int(value) * scale
    return packed


def encode_checked(fields: Sequence[int], bits: Sequence[int], scales: Sequence[int]) -> int:
    _check_lengths(len(fields), bits, scales)

    for i, (value, width) in enumerate(zip(fields, bits)):
        if isinstance(value, bool):
            raise TypeError(f"field #{i} must be an integer, got {value!r}")
        value = operator.index(value)
        if not 0 <= value < (1 << width):
            logger.debug(f"rejecting field #{i}: {value} out of range for {width} bits")
            raise FieldOverflow(i, value, width)

    return encode(fields, bits, scales)


def decode(packed: int, bits: Sequence[int], scales: Sequence[int]) -> list[int]:
    """
    unpacks every field in layout order.

    floor division and modulo also recover the fields from the signed 64-bit
    form of a packed value (see to_signed64()).
    """
    _check_lengths(len(bits), bits, scales)

    packed = int(packed)
    return [(packed // scale) % (1 << width) for width, scale in zip(bits, scales)]


def to_signed64(packed: int) -> int:
    """
    reinterprets an unsigned packed value as a signed 64-bit integer (e.g. for a BIGINT column).
    """
    packed = int(packed) & _MASK64
    if packed & _SIGN64:
        return packed - (1 << PACKED_BITS)
    return packed


class CompositeLayout:
    """
    an immutable, named bit layout with its precomputed scale table.
    """

    __slots__ = ("names", "bits", "scales")

    names: tuple[str, ...]
    bits: tuple[int, ...]
    scales: tuple[int, ...]

    def __init__(self, bits: Sequence[int], names: Sequence[str] | None = None) -> None:
        bits = tuple(bits)
        scales = precompute_scales(bits)

        if names is None:
            names = [f"field{i}" for i in range(len(bits))]
        names = tuple(names)
        if len(names) != len(bits):
            raise InvalidLayout(f"{len(names)} field names given for {len(bits)} fields")

        object.__setattr__(self, "names", names)
        object.__setattr__(self, "bits", bits)
        object.__setattr__(self, "scales", scales)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("CompositeLayout is immutable")

    @property
    def total_bits(self) -> int:
        return sum(self.bits)

    def max_value(self, index: int) -> int:
        return (1 << self.bits[index]) - 1

    def encode(self, fields: Sequence[int]) -> int:
        return encode(fields, self.bits, self.scales)

    def encode_checked(self, fields: Sequence[int]) -> int:
        return encode_checked(fields, self.bits, self.scales)

    def decode(self, packed: int) -> list[int]:
        return decode(packed, self.bits, self.scales)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CompositeLayout):
            return False
        return self.bits == other.bits and self.names == other.names

    def __hash__(self) -> int:
        return hash((self.bits, self.names))

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}:{width}" for name, width in zip(self.names, self.bits))
        return f"CompositeLayout({fields})"
