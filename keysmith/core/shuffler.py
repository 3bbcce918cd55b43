from __future__ import annotations

from typing import Iterable, List, Optional, TypeVar

from keysmith.core.random_source import RandomSource, resolve_source

T = TypeVar("T")


def shuffle(sequence: Iterable[T], source: Optional[RandomSource] = None) -> List[T]:
    """Return a uniformly random permutation of ``sequence`` (Fisher-Yates, top-down)."""
    rng = resolve_source(source)
    arr = list(sequence)
    for i in range(len(arr) - 1, 0, -1):
        j = rng.next_below(i + 1)
        arr[i], arr[j] = arr[j], arr[i]
    return arr
