from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

import numpy as np
from sklearn.model_selection import KFold

from tunechar.core.ids import format_ids
from tunechar.core.rng import RngManager

from ..interfaces import ResampleSplitter
from .types import Resample


@dataclass
class BootstrapSplitter(ResampleSplitter):
    n: int
    seed: Optional[int] = None

    def split(self, n_samples: int) -> Iterator[Resample]:
        streams = RngManager(self.seed).streams("bootstrap", format_ids("Resample", self.n))
        for rid, gen in streams.items():
            idx_tr = gen.integers(0, n_samples, size=n_samples)
            oob = np.ones(n_samples, dtype=bool)
            oob[idx_tr] = False
            idx_te = np.flatnonzero(oob)
            if idx_te.size == 0:
                # Degenerate draw (tiny data): assess on the analysis rows.
                idx_te = np.unique(idx_tr)
            yield Resample(resample_id=rid, idx_tr=idx_tr, idx_te=idx_te)


@dataclass
class KFoldSplitter(ResampleSplitter):
    n: int
    seed: Optional[int] = None

    def split(self, n_samples: int) -> Iterator[Resample]:
        random_state = RngManager(self.seed).seed_for("kfold/split")
        kf = KFold(n_splits=self.n, shuffle=True, random_state=random_state)
        ids = format_ids("Fold", self.n)
        for rid, (idx_tr, idx_te) in zip(ids, kf.split(np.arange(n_samples))):
            yield Resample(resample_id=rid, idx_tr=idx_tr, idx_te=idx_te)
