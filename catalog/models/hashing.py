"""Deterministic 32-bit polynomial hashing.

Python's built-in ``hash`` of ``str`` is salted per process, so model
hashes are accumulated from these helpers instead. The arithmetic matches
the classic ``31 * h + x`` scheme with signed 32-bit wrap-around.
"""

import struct
from collections.abc import Iterable

HASH_MULTIPLIER = 31

_MASK_32 = 0xFFFFFFFF


def to_int32(value: int) -> int:
    """Wrap an arbitrary int to a signed 32-bit value."""
    value &= _MASK_32
    return value - (1 << 32) if value & 0x80000000 else value


def string_hash(value: str) -> int:
    """Polynomial hash over the UTF-16 code units of ``value``."""
    data = value.encode("utf-16-be")
    result = 0
    for i in range(0, len(data), 2):
        unit = (data[i] << 8) | data[i + 1]
        result = (HASH_MULTIPLIER * result + unit) & _MASK_32
    return to_int32(result)


def float_hash(value: float) -> int:
    """Fold the IEEE-754 bit pattern of ``value`` into 32 bits."""
    (bits,) = struct.unpack(">Q", struct.pack(">d", float(value)))
    return to_int32(bits ^ (bits >> 32))


def accumulate(seed: int, components: Iterable[int]) -> int:
    """Fold ``components`` into ``seed`` as ``h = 31 * h + c``."""
    result = to_int32(seed)
    for component in components:
        result = to_int32(HASH_MULTIPLIER * result + component)
    return result
