# sim/rng.py
from __future__ import annotations

from functools import cache
from zlib import crc32

import numpy as np


def _u32(x: int) -> int:
    return int(x & 0xFFFFFFFF)


def _crc32_u32(s: str) -> int:
    return _u32(crc32(s.encode("utf-8")))


class RNGRegistry:
    """
    Deterministic registry of named numpy.random.Generator streams.
    Seed path: [master_seed, crc32(scenario), crc32(stream name)]
    """

    def __init__(self, master_seed: int, *, scenario: str = ""):
        self.master_seed = _u32(master_seed)
        self.scenario_tag = _crc32_u32(scenario)

    @cache
    def stream(self, name: str) -> np.random.Generator:
        # same name -> same cached generator; a fresh registry replays from the start
        ss = np.random.SeedSequence(
            entropy=[self.master_seed, self.scenario_tag, _crc32_u32(name)]
        )
        return np.random.Generator(np.random.PCG64(ss))
