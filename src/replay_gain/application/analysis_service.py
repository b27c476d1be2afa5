"""Application services orchestrating loudness analysis use-cases."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from uuid import uuid4

import numpy as np

from replay_gain.album import AlbumAccumulator
from replay_gain.application.event_publisher import EventPublisher, NullEventPublisher
from replay_gain.audio_contract import ensure_stereo
from replay_gain.domain.events import AlbumAnalyzed, AnalysisFailed, TrackAnalyzed
from replay_gain.io.audio_file import iter_interleaved_blocks, probe_audio
from replay_gain.session import ReplayGain, TrackResult
from replay_gain.utils.config import AnalysisSettings


@dataclass(frozen=True, slots=True)
class AlbumReport:
    """Per-track results in input order plus the pooled album result."""

    tracks: tuple[TrackResult, ...]
    album: TrackResult


@dataclass(slots=True)
class AnalyzeLoudness:
    """Use case that runs ReplayGain sessions over sample streams and files."""

    settings: AnalysisSettings = field(default_factory=AnalysisSettings)
    event_publisher: EventPublisher = field(default_factory=NullEventPublisher)

    def analyze_chunks(
        self,
        chunks: Iterable[np.ndarray],
        sample_rate: int,
        *,
        source: str,
        correlation_id: str | None = None,
        album: AlbumAccumulator | None = None,
    ) -> TrackResult:
        run_correlation_id = correlation_id or str(uuid4())
        try:
            session = ReplayGain(sample_rate, self.settings)
            for chunk in chunks:
                session.process_samples(chunk)
            result = album.add_track(session) if album is not None else session.finish()
        except Exception as error:  # noqa: BLE001
            self._publish_failure(run_correlation_id, source, "analysis", error)
            raise

        self.event_publisher.publish(
            TrackAnalyzed(
                correlation_id=run_correlation_id,
                payload_summary={
                    "source": source,
                    "sample_rate_hz": session.sample_rate,
                    "frames": session.frames_processed,
                    "gain_db": result.gain,
                    "peak": result.peak,
                },
            )
        )
        return result

    def analyze_file(
        self,
        path: Path,
        *,
        block_frames: int = 4_096,
        correlation_id: str | None = None,
        album: AlbumAccumulator | None = None,
    ) -> TrackResult:
        run_correlation_id = correlation_id or str(uuid4())
        try:
            info = probe_audio(path)
            ensure_stereo(info.channel_count, path)
        except Exception as error:  # noqa: BLE001
            self._publish_failure(run_correlation_id, str(path), "ingest", error)
            raise

        return self.analyze_chunks(
            iter_interleaved_blocks(path, block_frames),
            info.sample_rate_hz,
            source=str(path),
            correlation_id=run_correlation_id,
            album=album,
        )

    def analyze_album(
        self,
        paths: Sequence[Path],
        *,
        block_frames: int = 4_096,
        correlation_id: str | None = None,
    ) -> AlbumReport:
        if not paths:
            raise ValueError("Album analysis needs at least one track.")

        run_correlation_id = correlation_id or str(uuid4())
        album = AlbumAccumulator(self.settings)
        tracks = tuple(
            self.analyze_file(path, block_frames=block_frames, correlation_id=run_correlation_id, album=album)
            for path in paths
        )
        album_result = album.result()
        self.event_publisher.publish(
            AlbumAnalyzed(
                correlation_id=run_correlation_id,
                payload_summary={
                    "tracks": album.track_count,
                    "gain_db": album_result.gain,
                    "peak": album_result.peak,
                },
            )
        )
        return AlbumReport(tracks=tracks, album=album_result)

    def _publish_failure(self, correlation_id: str, source: str, stage: str, error: Exception) -> None:
        self.event_publisher.publish(
            AnalysisFailed(
                correlation_id=correlation_id,
                payload_summary={"source": source, "stage": stage, "error": str(error)},
            )
        )
