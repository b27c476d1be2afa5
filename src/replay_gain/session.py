"""ReplayGain analysis session: the public incremental-processing API.

A session is created for one supported sample rate, fed interleaved stereo
float samples, and finished exactly once::

    session = ReplayGain(44_100)
    session.process_samples(samples)
    gain, peak = session.finish()

Two entry points accept samples. :meth:`ReplayGain.process_samples` takes
chunks of any length and buffers the remainder. :meth:`ReplayGain.process_frame`
takes exactly one frame and is meant for callers that already chunk their
input; mixing the two on one session is a programming error.

Sessions hold no locks. Give each session to a single thread.
"""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple
import logging

import numpy as np

from .assembler import SAMPLE_DTYPE, FrameAssembler
from .coefficients import CHANNEL_COUNT, SampleRateProfile, profile_for_rate
from .filters import EqualLoudnessFilter
from .histogram import LoudnessHistogram
from .peak import PeakTracker
from .utils.config import AnalysisSettings
from .windower import EnergyWindower

LOGGER = logging.getLogger(__name__)


class FrameContractError(AssertionError):
    """Raised when the strict per-frame entry point is misused.

    This signals a bug in the caller, not a data problem; the session is
    aborted and must be discarded.
    """


class SessionClosedError(RuntimeError):
    """Raised when a finished or aborted session is used again."""


class SessionState(str, Enum):
    """Lifecycle states of a :class:`ReplayGain` session."""

    ACCUMULATING = "accumulating"
    FINALIZED = "finalized"
    ABORTED = "aborted"


class TrackResult(NamedTuple):
    """Gain in dB to add at playback, and the raw sample peak."""

    gain: float
    peak: float


class ReplayGain:
    """Loudness analysis for one stereo float stream."""

    def __init__(self, sample_rate: int, settings: AnalysisSettings | None = None) -> None:
        self._profile = profile_for_rate(sample_rate)
        self.settings = settings or AnalysisSettings()
        self._filter = EqualLoudnessFilter(self._profile)
        self._windower = EnergyWindower(self._profile.window_pairs)
        self._histogram = LoudnessHistogram(
            steps_per_db=self.settings.steps_per_db,
            max_loudness_db=self.settings.max_loudness_db,
        )
        self._peak = PeakTracker()
        self._assembler = FrameAssembler(self._profile.frame_size, self._analyze_frame)
        self._state = SessionState.ACCUMULATING
        self._frames = 0

        LOGGER.debug(
            "replaygain_session_created",
            extra={
                "sample_rate_hz": self._profile.sample_rate_hz,
                "base_rate_hz": self._profile.base_rate_hz,
                "frame_size": self._profile.frame_size,
            },
        )

    @property
    def sample_rate(self) -> int:
        return self._profile.sample_rate_hz

    @property
    def profile(self) -> SampleRateProfile:
        return self._profile

    @property
    def histogram(self) -> LoudnessHistogram:
        return self._histogram

    @property
    def peak(self) -> float:
        """Peak of every frame analysed so far."""

        return self._peak.peak

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def frames_processed(self) -> int:
        return self._frames

    @property
    def pending_count(self) -> int:
        return self._assembler.pending_count

    def frame_size(self) -> int:
        """Interleaved float count of one analysis frame (``rate / 20 * 2``)."""

        return self._profile.frame_size

    def process_frame(self, frame: np.ndarray) -> None:
        """Analyse exactly one frame.

        Raises :class:`FrameContractError` if ``frame`` is not exactly
        :meth:`frame_size` samples long or if :meth:`process_samples` has left
        samples pending.
        """

        self._ensure_accumulating()
        frame = np.asarray(frame, dtype=SAMPLE_DTYPE).reshape(-1)
        if frame.size != self.frame_size():
            self._state = SessionState.ABORTED
            raise FrameContractError(f"process_frame expects {self.frame_size()} samples, got {frame.size}.")
        if self._assembler.pending_count:
            self._state = SessionState.ABORTED
            raise FrameContractError(
                f"process_frame called with {self._assembler.pending_count} buffered samples pending; "
                "use process_samples exclusively when buffering is needed."
            )
        self._analyze_frame(frame)

    def process_samples(self, samples: np.ndarray) -> None:
        """Analyse a chunk of any length, buffering samples short of a frame."""

        self._ensure_accumulating()
        self._assembler.push(samples)

    def finish(self) -> TrackResult:
        """Flush the zero-padded final frame and return ``(gain, peak)``.

        The session cannot be used afterwards.
        """

        self._ensure_accumulating()
        self._assembler.flush()
        self._state = SessionState.FINALIZED

        result = TrackResult(
            gain=self._histogram.percentile_gain(
                reference_loudness_db=self.settings.reference_loudness_db,
                percentile=self.settings.percentile,
            ),
            peak=self._peak.peak,
        )
        LOGGER.debug(
            "replaygain_session_finished",
            extra={
                "sample_rate_hz": self._profile.sample_rate_hz,
                "frames": self._frames,
                "windows": self._histogram.total,
                "gain_db": result.gain,
                "peak": result.peak,
            },
        )
        return result

    def _ensure_accumulating(self) -> None:
        if self._state is not SessionState.ACCUMULATING:
            raise SessionClosedError(f"ReplayGain session is {self._state.value}; create a new session.")

    def _analyze_frame(self, frame: np.ndarray) -> None:
        self._peak.observe_block(frame)
        filtered = self._filter.process(frame.reshape(-1, CHANNEL_COUNT))
        self._histogram.record_many(self._windower.loudness_values(filtered))
        self._frames += 1
