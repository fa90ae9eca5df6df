"""Secure random byte source backed by the operating system."""

from __future__ import annotations

import logging
from collections.abc import Callable
from secrets import token_bytes

logger = logging.getLogger(__name__)

# Any callable returning exactly n secure random bytes.
ByteReader = Callable[[int], bytes]


class SourceUnavailableError(OSError):
    """The platform entropy source could not supply the requested bytes."""


def _check_length(data: bytes, n: int) -> bytes:
    if len(data) != n:
        logger.warning("Secure random source returned %d of %d bytes", len(data), n)
        raise SourceUnavailableError(f"Wrong read size: got {len(data)} of {n} bytes")
    return data


def random_bytes(n: int) -> bytes:
    """Return n bytes from the platform's cryptographically secure source.

    Raises:
        ValueError: If n is negative.
        SourceUnavailableError: If the source fails or returns a short read.
            The original exception, if any, is chained as ``__cause__``.
    """
    if n < 0:
        raise ValueError(f"Byte count must be non-negative, got {n}")

    logger.debug("Drawing %d secure random bytes", n)
    try:
        data = token_bytes(n)
    except OSError as exc:
        logger.warning("Secure random source failed for %d bytes: %s", n, exc)
        raise SourceUnavailableError(f"Secure random source failed for {n} bytes") from exc
    return _check_length(data, n)


def read_exact(reader: ByteReader, n: int) -> bytes:
    """Draw n bytes from reader, refusing a result of any other length."""
    return _check_length(reader(n), n)
