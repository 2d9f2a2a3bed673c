"""
Unbiased random ordering over small string collections.

The generator is always passed in. Seeding it makes every ordering,
and therefore every move sequence, reproducible.
"""

from __future__ import annotations

from typing import Iterable, Iterator

import numpy as np


def shuffled(items: Iterable[str], rng: np.random.Generator) -> list[str]:
    """Return a uniform random permutation of items. The input is not modified."""
    pool = list(items)
    return [pool[i] for i in rng.permutation(len(pool))]


def iter_shuffled(items: Iterable[str], rng: np.random.Generator) -> Iterator[str]:
    """
    Lazily yield items in uniform random order (incremental Fisher-Yates).

    Each yielded element costs one draw, so a consumer that stops after the
    first acceptable element pays O(1) draws instead of a full permutation.
    """
    pool = list(items)
    n = len(pool)
    for i in range(n):
        j = int(rng.integers(i, n))
        pool[i], pool[j] = pool[j], pool[i]
        yield pool[i]
