"""Stateful equal-loudness filtering for interleaved stereo frames."""

from __future__ import annotations

import numpy as np
from scipy import signal

from .coefficients import CHANNEL_COUNT, FilterCoefficients, SampleRateProfile

NEGLIGIBLE_HISTORY = 1e-10


class FilterStage:
    """One direct-form IIR stage with per-channel input/output delay lines.

    Delay lines hold the last ``order`` inputs and outputs of each channel,
    most recent first. They persist across every call so that splitting a
    signal into blocks never changes the filtered result.
    """

    def __init__(self, coefficients: FilterCoefficients, channels: int = CHANNEL_COUNT) -> None:
        self._b = np.asarray(coefficients.b, dtype=np.float64)
        self._a = np.asarray(coefficients.a, dtype=np.float64)
        self.order = coefficients.order
        self.channels = channels
        self._inputs = np.zeros((channels, self.order), dtype=np.float64)
        self._outputs = np.zeros((channels, self.order), dtype=np.float64)

    @property
    def input_history(self) -> np.ndarray:
        return self._inputs.copy()

    @property
    def output_history(self) -> np.ndarray:
        return self._outputs.copy()

    def is_negligible(self, threshold: float = NEGLIGIBLE_HISTORY) -> bool:
        # NaN compares false, so a non-finite history counts as negligible.
        return not (np.any(np.abs(self._inputs) > threshold) or np.any(np.abs(self._outputs) > threshold))

    def flush_if_negligible(self, threshold: float = NEGLIGIBLE_HISTORY) -> bool:
        """Zero the delay lines when every entry is below ``threshold``."""

        if not self.is_negligible(threshold):
            return False
        self._inputs.fill(0.0)
        self._outputs.fill(0.0)
        return True

    def process(self, block: np.ndarray) -> np.ndarray:
        """Filter a ``(samples, channels)`` block and advance the delay lines."""

        block = np.asarray(block, dtype=np.float64)
        if block.ndim != 2 or block.shape[1] != self.channels:
            raise ValueError(f"Expected a (samples, {self.channels}) block, got shape {block.shape}.")

        filtered = np.empty_like(block)
        if block.shape[0] == 0:
            return filtered

        for channel in range(self.channels):
            initial = signal.lfiltic(self._b, self._a, self._outputs[channel], self._inputs[channel])
            filtered[:, channel], _ = signal.lfilter(self._b, self._a, block[:, channel], zi=initial)
            self._inputs[channel] = np.concatenate((block[::-1, channel], self._inputs[channel]))[: self.order]
            self._outputs[channel] = np.concatenate((filtered[::-1, channel], self._outputs[channel]))[: self.order]
        return filtered


class EqualLoudnessFilter:
    """Yule equal-loudness stage followed by the Butterworth DC-removal stage."""

    def __init__(self, profile: SampleRateProfile) -> None:
        self.profile = profile
        self.yule = FilterStage(profile.yule)
        self.butter = FilterStage(profile.butter)

    def process(self, pairs: np.ndarray) -> np.ndarray:
        """Filter one frame of ``(pairs, 2)`` samples."""

        self.yule.flush_if_negligible()
        self.butter.flush_if_negligible()
        return self.butter.process(self.yule.process(pairs))
