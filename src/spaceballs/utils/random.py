# src/spaceballs/utils/random.py

from __future__ import annotations

from typing import Hashable
import numpy as np


def make_rng(seed: int | None = None, stream: str = "spawn") -> np.random.Generator:
    """
    Return a fresh RNG for a named stream.

    - If seed is None: entropy-seeded (non-reproducible).
    - Otherwise the stream name is folded into the SeedSequence so that
      different streams drawn from the same seed stay independent.
    """
    if seed is None:
        return np.random.default_rng()
    ss = np.random.SeedSequence([int(seed), _stable_int(stream)])
    return np.random.default_rng(ss)


def _stable_int(x: Hashable) -> int:
    """
    Convert arbitrary key -> stable 32-bit integer without relying on Python's hash().
    """
    s = repr(x).encode("utf-8", errors="surrogatepass")
    # FNV-1a folding into 32 bits
    h = 2166136261
    for b in s:
        h ^= b
        h = (h * 16777619) & 0xFFFFFFFF
    return h
