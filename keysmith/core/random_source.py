"""
Unbiased integer draws from the OS CSPRNG.

Every random decision made by the generators goes through ``next_below``.
Draws are rejection-sampled against the largest multiple of the bound that
fits a 32-bit word, so reducing modulo the bound carries no bias.
"""
from __future__ import annotations

import os
from typing import Callable, List, Optional, Tuple

from keysmith.core.error_dialect import InvalidArgumentError

WORD_BYTES = 4
WORD_SPAN = 1 << (8 * WORD_BYTES)


def secure_random_bytes(n: int) -> bytes:
    try:
        data = os.urandom(n)
    except OSError as exc:
        raise OSError(f"OS CSPRNG failure requesting {n} byte(s): {exc}") from exc
    if len(data) != n:
        raise OSError(f"OS CSPRNG returned unexpected byte count ({len(data)} != {n})")
    return data


def assert_csprng_ready() -> None:
    secure_random_bytes(32)


def _check_bound(n: object) -> int:
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidArgumentError(f"bound must be an integer, got {type(n).__name__}")
    if n <= 0:
        raise InvalidArgumentError(f"bound must be > 0, got {n}")
    if n > WORD_SPAN:
        raise InvalidArgumentError(f"bound must be <= 2**{8 * WORD_BYTES}, got {n}")
    return n


class RandomSource:
    """Base for word sources; subclasses supply ``next_word``."""

    def next_word(self) -> int:
        raise NotImplementedError

    def next_below(self, n: int) -> int:
        bound = _check_bound(n)
        ceiling = (WORD_SPAN // bound) * bound
        while True:
            drawn = self.next_word()
            if drawn < ceiling:
                return drawn % bound


class SystemRandomSource(RandomSource):
    def __init__(self, read_bytes: Optional[Callable[[int], bytes]] = None) -> None:
        self._read_bytes = read_bytes

    def next_word(self) -> int:
        reader = self._read_bytes or secure_random_bytes
        raw = reader(WORD_BYTES)
        if len(raw) != WORD_BYTES:
            raise OSError(f"random word source returned {len(raw)} byte(s), expected {WORD_BYTES}")
        return int.from_bytes(raw, "big", signed=False)


class RecordingRandomSource(RandomSource):
    """
    Wraps another source and records every accepted ``(bound, value)`` draw.
    Values are passed through untouched.
    """

    def __init__(self, inner: Optional[RandomSource] = None) -> None:
        self._inner = inner if inner is not None else SystemRandomSource()
        self.draws: List[Tuple[int, int]] = []

    def next_word(self) -> int:
        return self._inner.next_word()

    def next_below(self, n: int) -> int:
        value = self._inner.next_below(n)
        self.draws.append((n, value))
        return value

    def bounds(self) -> Tuple[int, ...]:
        return tuple(bound for bound, _ in self.draws)


DEFAULT_SOURCE = SystemRandomSource()


def resolve_source(source: Optional[RandomSource]) -> RandomSource:
    return DEFAULT_SOURCE if source is None else source


def next_below(n: int, source: Optional[RandomSource] = None) -> int:
    return resolve_source(source).next_below(n)
