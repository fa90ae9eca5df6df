"""Seeds for non-cryptographic pseudorandom generators."""

from __future__ import annotations

import random

from securerandom.integers import int64
from securerandom.source import ByteReader, random_bytes


def seed(reader: ByteReader = random_bytes) -> int:
    """Return a signed 64-bit seed drawn from the secure source."""
    return int64(reader)


def rand_source(reader: ByteReader = random_bytes) -> random.Random:
    """Return a `random.Random` seeded from the secure source.

    The generator itself is not cryptographically secure; only its seed is.
    """
    return random.Random(seed(reader))
