"""Running sample-peak tracking."""

from __future__ import annotations

import numpy as np


class PeakTracker:
    """Largest absolute raw sample seen so far; never decreases."""

    def __init__(self) -> None:
        self._peak = 0.0

    @property
    def peak(self) -> float:
        return self._peak

    def observe(self, sample: float) -> float:
        magnitude = abs(float(sample))
        if magnitude > self._peak:
            self._peak = magnitude
        return self._peak

    def observe_block(self, samples: np.ndarray) -> float:
        # fmax skips NaN, so a corrupt sample cannot hide the real peak.
        block_peak = float(np.fmax.reduce(np.abs(np.ravel(samples)), initial=0.0))
        if block_peak > self._peak:
            self._peak = block_peak
        return self._peak
