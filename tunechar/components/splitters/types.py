"""Resample return contracts.

Splitters yield a *single, stable* payload shape: row indices into the
original X/y for the analysis (fit) and assessment (score) sets, plus the
resample id that every downstream record is keyed by.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Resample:
    resample_id: str
    idx_tr: np.ndarray
    idx_te: np.ndarray
