# sim/rng.py
from zlib import crc32

import numpy as np


def _tag(s: str) -> int:
    return crc32(s.encode("utf-8")) & 0xFFFFFFFF


class RNGRegistry:
    """
    One numpy Generator per named stream, all derived from a master seed.

    Streams are independent of each other, so drawing more prices never shifts
    where facilities land. master_seed=None pulls fresh OS entropy; the value
    drawn is kept on `master_seed` so the run can be replayed.
    """

    def __init__(self, master_seed: int | None = None, *, scenario: str | int = 0):
        if master_seed is None:
            master_seed = int(np.random.SeedSequence().entropy)
        self.master_seed = master_seed & 0xFFFFFFFF
        self.scenario_tag = _tag(str(scenario))
        self._streams: dict[str, np.random.Generator] = {}

    def stream(self, name: str) -> np.random.Generator:
        if name not in self._streams:
            ss = np.random.SeedSequence(entropy=[self.master_seed, self.scenario_tag, _tag(name)])
            self._streams[name] = np.random.Generator(np.random.PCG64(ss))
        return self._streams[name]
