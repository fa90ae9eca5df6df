"""Random Base64 strings bounded by a maximum length."""

from __future__ import annotations

import base64
from enum import Enum

from securerandom.source import ByteReader, random_bytes, read_exact

# Base64 emits 4 characters for every 3 input bytes.
B64_BLOCK_CHARS = 4
B64_BLOCK_BYTES = 3


class Alphabet(Enum):
    STANDARD = "standard"   # + /
    URL_SAFE = "url_safe"   # - _


_ENCODERS = {
    Alphabet.STANDARD: base64.b64encode,
    Alphabet.URL_SAFE: base64.urlsafe_b64encode,
}


def maximum_bytes(size: int) -> int:
    """Return how many raw bytes fit in a Base64 string of at most size chars.

    Uses real division before truncating toward zero, so the bound is exact
    only when size is a multiple of 4.
    """
    return int(size / B64_BLOCK_CHARS * B64_BLOCK_BYTES)


def random_b64(
    max_len: int,
    alphabet: Alphabet = Alphabet.STANDARD,
    reader: ByteReader = random_bytes,
) -> str:
    """Return a random Base64 string that gets as close to max_len as it can.

    A max_len of zero or less yields an empty string. Source failures
    propagate as SourceUnavailableError and no string is produced.
    """
    encoder = _ENCODERS.get(alphabet)
    if encoder is None:
        raise ValueError(f"Unsupported Base64 alphabet: {alphabet!r}")

    data = read_exact(reader, max(maximum_bytes(max_len), 0))
    return encoder(data).decode("ascii")


def b64_string(max_len: int, reader: ByteReader = random_bytes) -> str:
    """Standard alphabet (``+``/``/``) with ``=`` padding."""
    return random_b64(max_len, Alphabet.STANDARD, reader)


def urlsafe_b64_string(max_len: int, reader: ByteReader = random_bytes) -> str:
    """URL-safe alphabet (``-``/``_``) with ``=`` padding."""
    return random_b64(max_len, Alphabet.URL_SAFE, reader)
