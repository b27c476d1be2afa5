"""Album gain: one gain for several tracks played back as a set."""

from __future__ import annotations

from .histogram import LoudnessHistogram
from .session import ReplayGain, TrackResult
from .utils.config import AnalysisSettings


class AlbumAccumulator:
    """Pool finished track histograms and peaks into an album result."""

    def __init__(self, settings: AnalysisSettings | None = None) -> None:
        self.settings = settings or AnalysisSettings()
        self._histogram = LoudnessHistogram(
            steps_per_db=self.settings.steps_per_db,
            max_loudness_db=self.settings.max_loudness_db,
        )
        self._peak = 0.0
        self.track_count = 0

    @property
    def histogram(self) -> LoudnessHistogram:
        return self._histogram

    def add_track(self, session: ReplayGain) -> TrackResult:
        """Finish ``session`` and fold it into the album; returns the track result."""

        track = session.finish()
        self._histogram.merge(session.histogram)
        self._peak = max(self._peak, track.peak)
        self.track_count += 1
        return track

    def result(self) -> TrackResult:
        return TrackResult(
            gain=self._histogram.percentile_gain(
                reference_loudness_db=self.settings.reference_loudness_db,
                percentile=self.settings.percentile,
            ),
            peak=self._peak,
        )
