"""Loudness histogram and percentile gain estimation."""

from __future__ import annotations

from fractions import Fraction

import numpy as np

STEPS_PER_DB = 100
MAX_LOUDNESS_DB = 120.0
REFERENCE_LOUDNESS_DB = 64.54
MIN_GAIN_DB = -24.0
DEFAULT_PERCENTILE = 0.95


class LoudnessHistogram:
    """Counts windowed loudness values in fixed-resolution bins.

    Bin ``i`` covers ``[i / steps_per_db, (i + 1) / steps_per_db)`` dB. Values
    outside ``[0, max_loudness_db)`` clamp to the edge bins, so every recorded
    window is counted.
    """

    def __init__(self, steps_per_db: int = STEPS_PER_DB, max_loudness_db: float = MAX_LOUDNESS_DB) -> None:
        if steps_per_db <= 0:
            raise ValueError("steps_per_db must be a positive integer.")
        if max_loudness_db <= 0:
            raise ValueError("max_loudness_db must be positive.")
        self.steps_per_db = int(steps_per_db)
        self.max_loudness_db = float(max_loudness_db)
        self._counts = np.zeros(int(round(self.max_loudness_db * self.steps_per_db)), dtype=np.int64)

    @property
    def slots(self) -> int:
        return int(self._counts.size)

    @property
    def counts(self) -> np.ndarray:
        view = self._counts.view()
        view.flags.writeable = False
        return view

    @property
    def total(self) -> int:
        return int(self._counts.sum())

    def bin_for(self, loudness_db: float | np.ndarray) -> np.ndarray:
        scaled = np.floor(np.asarray(loudness_db, dtype=np.float64) * self.steps_per_db)
        scaled = np.nan_to_num(scaled, nan=0.0, posinf=self.slots - 1, neginf=0.0)
        return np.clip(scaled, 0, self.slots - 1).astype(np.intp)

    def loudness_for_bin(self, index: int) -> float:
        return index / self.steps_per_db

    def record(self, loudness_db: float) -> int:
        """Count one window and return the bin it landed in."""

        index = int(self.bin_for(loudness_db))
        self._counts[index] += 1
        return index

    def record_many(self, loudness_db: np.ndarray) -> None:
        bins = self.bin_for(loudness_db).ravel()
        np.add.at(self._counts, bins, 1)

    def merge(self, other: LoudnessHistogram) -> None:
        if other.steps_per_db != self.steps_per_db or other.slots != self.slots:
            raise ValueError("Cannot merge histograms with different bin layouts.")
        self._counts += other._counts

    def percentile_gain(
        self,
        reference_loudness_db: float = REFERENCE_LOUDNESS_DB,
        percentile: float = DEFAULT_PERCENTILE,
    ) -> float:
        """Return ``reference - measured`` where measured is the ``percentile`` loudness.

        The measured loudness is the first bin, scanning down from the loudest,
        at which the windows seen so far reach ``1 - percentile`` of the total.
        An empty histogram reports the floor-bin gain. The result is rounded to
        float32 precision and clamped to ``[MIN_GAIN_DB, reference_loudness_db]``.
        """

        if not 0.0 < percentile < 1.0:
            raise ValueError("percentile must be strictly between 0 and 1.")

        total = self.total
        if total == 0:
            return self._clamp_gain(reference_loudness_db - self.loudness_for_bin(0), reference_loudness_db)

        fraction = Fraction(percentile).limit_denominator(10_000)
        tail = fraction.denominator - fraction.numerator
        loud_counts = np.cumsum(self._counts[::-1])
        offset_from_top = int(np.argmax(loud_counts * fraction.denominator >= tail * total))
        index = self.slots - 1 - offset_from_top
        return self._clamp_gain(reference_loudness_db - self.loudness_for_bin(index), reference_loudness_db)

    @staticmethod
    def _clamp_gain(gain: float, reference_loudness_db: float) -> float:
        return min(max(float(np.float32(gain)), MIN_GAIN_DB), reference_loudness_db)
