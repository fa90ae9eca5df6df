"""Secure random bytes, integers, Base64 strings and PRNG seeds.

Every call draws fresh bytes from the operating system's secure source:

    from securerandom import int64, rand_source

    rng = rand_source()          # random.Random seeded securely
    value = int64()              # SourceUnavailableError if the OS source fails
"""

from securerandom.source import ByteReader, SourceUnavailableError, random_bytes, read_exact
from securerandom.integers import (
    IntSpec, UINT16, UINT32, UINT64, INT16, INT32, INT64,
    pack_int, random_int, uint16, uint32, uint64, int16, int32, int64,
)
from securerandom.encoding import (
    Alphabet, maximum_bytes, random_b64, b64_string, urlsafe_b64_string,
)
from securerandom.seed import seed, rand_source
from securerandom.generator import SecureRandom

__all__ = [
    "ByteReader", "SourceUnavailableError", "random_bytes", "read_exact",
    "IntSpec", "UINT16", "UINT32", "UINT64", "INT16", "INT32", "INT64",
    "pack_int", "random_int", "uint16", "uint32", "uint64",
    "int16", "int32", "int64",
    "Alphabet", "maximum_bytes", "random_b64", "b64_string", "urlsafe_b64_string",
    "seed", "rand_source",
    "SecureRandom",
]
