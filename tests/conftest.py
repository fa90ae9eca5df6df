"""Shared test fixtures."""

import pytest

from securerandom.source import SourceUnavailableError


class StreamReader:
    """Byte reader that hands out a fixed byte stream in order."""

    def __init__(self, data: bytes):
        self._data = data
        self._pos = 0
        self.requests: list[int] = []

    def __call__(self, n: int) -> bytes:
        self.requests.append(n)
        if self._pos + n > len(self._data):
            raise SourceUnavailableError(f"Stream exhausted after {self._pos} bytes")
        chunk = self._data[self._pos:self._pos + n]
        self._pos += n
        return chunk


@pytest.fixture
def stream_reader():
    """Factory for deterministic byte readers."""
    return StreamReader


@pytest.fixture
def failing_reader():
    """Byte reader that behaves like an exhausted entropy source."""
    def read(n: int) -> bytes:
        raise SourceUnavailableError("entropy source unavailable")
    return read


@pytest.fixture
def broken_os_source(monkeypatch):
    """Make the platform source raise, as a failed device read would."""
    def token_bytes(n: int) -> bytes:
        raise OSError(5, "Input/output error")
    monkeypatch.setattr("securerandom.source.token_bytes", token_bytes)
