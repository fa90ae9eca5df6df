"""Fixed-width integers packed big-endian from secure random bytes."""

from __future__ import annotations

from dataclasses import dataclass

from securerandom.source import ByteReader, random_bytes, read_exact


@dataclass(frozen=True)
class IntSpec:
    bits: int
    signed: bool = False

    @property
    def num_bytes(self) -> int:
        return self.bits // 8

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1


UINT16 = IntSpec(16)
UINT32 = IntSpec(32)
UINT64 = IntSpec(64)
INT16 = IntSpec(16, signed=True)
INT32 = IntSpec(32, signed=True)
INT64 = IntSpec(64, signed=True)


def pack_int(data: bytes, signed: bool = False) -> int:
    """Pack bytes big-endian into an integer of len(data) * 8 bits.

    The first byte lands in the most significant position. Signed results
    are the same bit pattern read as two's complement.
    """
    if not data:
        raise ValueError("Cannot pack an empty byte sequence")
    return int.from_bytes(data, "big", signed=signed)


def random_int(spec: IntSpec, reader: ByteReader = random_bytes) -> int:
    """Return a uniformly distributed integer over the full range of spec."""
    return pack_int(read_exact(reader, spec.num_bytes), signed=spec.signed)


def uint16(reader: ByteReader = random_bytes) -> int:
    return random_int(UINT16, reader)


def uint32(reader: ByteReader = random_bytes) -> int:
    return random_int(UINT32, reader)


def uint64(reader: ByteReader = random_bytes) -> int:
    return random_int(UINT64, reader)


def int16(reader: ByteReader = random_bytes) -> int:
    return random_int(INT16, reader)


def int32(reader: ByteReader = random_bytes) -> int:
    return random_int(INT32, reader)


def int64(reader: ByteReader = random_bytes) -> int:
    return random_int(INT64, reader)
