from __future__ import annotations

import hashlib
from dataclasses import dataclass
from typing import Dict, Optional, Sequence

import numpy as np
from numpy.random import Generator


@dataclass(frozen=True)
class RngManager:
    """Derives named random streams from one base seed.

    Each stream depends only on the base seed and its name, so a resample
    draws the same rows whether it runs first, last, or in another worker.
    """

    seed: Optional[int] = None

    @property
    def root(self) -> int:
        return 0 if self.seed is None else int(self.seed) & 0xFFFFFFFF

    def seed_for(self, name: str) -> int:
        digest = hashlib.sha256(f"{self.root}:{name}".encode("utf-8")).digest()
        # uint32 so it is accepted as a sklearn random_state
        return int.from_bytes(digest[:4], "little", signed=False)

    def stream(self, name: str) -> Generator:
        return np.random.default_rng(self.seed_for(name))

    def streams(self, prefix: str, names: Sequence[str]) -> Dict[str, Generator]:
        return {name: self.stream(f"{prefix}/{name}") for name in names}
