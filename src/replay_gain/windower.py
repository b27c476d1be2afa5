"""Short-term energy windowing of filtered stereo samples."""

from __future__ import annotations

import numpy as np

from .coefficients import CHANNEL_COUNT

# Keeps the logarithm defined for digital silence.
ENERGY_EPSILON = 1e-16
# Full-scale calibration offset of the loudness scale (90 dB less 3 dB for stereo).
LOUDNESS_OFFSET_DB = 90.0 - 3.0


class EnergyWindower:
    """Turn filtered ``(pairs, 2)`` frames into one loudness value per window."""

    def __init__(self, window_pairs: int) -> None:
        if window_pairs <= 0:
            raise ValueError("window_pairs must be a positive integer.")
        self.window_pairs = int(window_pairs)

    def loudness_values(self, filtered: np.ndarray) -> np.ndarray:
        filtered = np.asarray(filtered, dtype=np.float64)
        if filtered.ndim != 2 or filtered.shape[1] != CHANNEL_COUNT:
            raise ValueError(f"Expected a (pairs, {CHANNEL_COUNT}) block, got shape {filtered.shape}.")
        if filtered.shape[0] % self.window_pairs:
            raise ValueError(
                f"Block of {filtered.shape[0]} pairs is not a whole number of {self.window_pairs}-pair windows."
            )

        windows = filtered.reshape(-1, self.window_pairs, CHANNEL_COUNT)
        # Mean square per channel, summed over both channels.
        energy = (ENERGY_EPSILON + np.sum(np.square(windows), axis=(1, 2))) / self.window_pairs
        return 10.0 * np.log10(energy) + LOUDNESS_OFFSET_DB
