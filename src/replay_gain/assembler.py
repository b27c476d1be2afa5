"""Frame assembly for arbitrarily chunked interleaved sample streams."""

from __future__ import annotations

from collections.abc import Callable

import numpy as np

SAMPLE_DTYPE = np.float32


class FrameAssembler:
    """Cut incoming chunks into fixed-size frames and hand each to ``dispatch``.

    Samples short of a full frame wait in a pending buffer; between calls the
    buffer always holds fewer than ``frame_size`` samples.
    """

    def __init__(self, frame_size: int, dispatch: Callable[[np.ndarray], None]) -> None:
        if frame_size <= 0:
            raise ValueError("frame_size must be a positive integer.")
        self.frame_size = int(frame_size)
        self._dispatch = dispatch
        self._pending = np.zeros(self.frame_size, dtype=SAMPLE_DTYPE)
        self._pending_count = 0

    @property
    def pending_count(self) -> int:
        return self._pending_count

    @property
    def pending(self) -> np.ndarray:
        return self._pending[: self._pending_count].copy()

    def push(self, samples: np.ndarray) -> int:
        """Buffer ``samples`` and dispatch every frame they complete.

        Returns the number of frames dispatched.
        """

        samples = np.asarray(samples, dtype=SAMPLE_DTYPE).reshape(-1)
        dispatched = 0
        offset = 0

        if self._pending_count:
            take = min(self.frame_size - self._pending_count, samples.size)
            self._pending[self._pending_count : self._pending_count + take] = samples[:take]
            self._pending_count += take
            offset = take
            if self._pending_count < self.frame_size:
                return dispatched
            self._dispatch(self._pending)
            self._pending_count = 0
            dispatched += 1

        while samples.size - offset >= self.frame_size:
            self._dispatch(samples[offset : offset + self.frame_size])
            offset += self.frame_size
            dispatched += 1

        tail = samples.size - offset
        self._pending[:tail] = samples[offset:]
        self._pending_count = tail
        return dispatched

    def flush(self) -> None:
        """Zero-pad the pending samples to a full frame and dispatch it."""

        self._pending[self._pending_count :] = 0.0
        self._dispatch(self._pending)
        self._pending_count = 0
