"""Object facade over the secure random helpers."""

from __future__ import annotations

import random

from securerandom import encoding, integers
from securerandom.seed import rand_source, seed
from securerandom.source import ByteReader, random_bytes, read_exact


class SecureRandom:
    """Secure random values drawn from a single byte reader.

    Uses `secrets` by default. Pass a `reader` to substitute the byte source,
    e.g. a fixed byte stream for deterministic testing.
    """

    def __init__(self, reader: ByteReader | None = None):
        self._read = reader if reader is not None else random_bytes

    def get_bytes(self, n: int) -> bytes:
        return read_exact(self._read, n)

    def get_uint16(self) -> int:
        return integers.uint16(self._read)

    def get_uint32(self) -> int:
        return integers.uint32(self._read)

    def get_uint64(self) -> int:
        return integers.uint64(self._read)

    def get_int16(self) -> int:
        return integers.int16(self._read)

    def get_int32(self) -> int:
        return integers.int32(self._read)

    def get_int64(self) -> int:
        return integers.int64(self._read)

    def get_base64(self, max_len: int) -> str:
        return encoding.b64_string(max_len, self._read)

    def get_urlsafe_base64(self, max_len: int) -> str:
        return encoding.urlsafe_b64_string(max_len, self._read)

    def get_seed(self) -> int:
        return seed(self._read)

    def get_rand_source(self) -> random.Random:
        return rand_source(self._read)
