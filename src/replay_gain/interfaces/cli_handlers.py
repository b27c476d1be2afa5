"""CLI-facing handlers that delegate to application services."""

from __future__ import annotations

from contextlib import ExitStack
from pathlib import Path
from uuid import uuid4
import sys

from replay_gain.application.analysis_service import AnalyzeLoudness
from replay_gain.infrastructure.logging_event_publisher import LoggingEventPublisher
from replay_gain.io.raw_samples import iter_float_samples
from replay_gain.session import TrackResult
from replay_gain.utils.config import ScanConfig, load_scan_config

_event_publisher = LoggingEventPublisher()


def resolve_config(config_path: Path | None, endianness: str | None = None) -> ScanConfig:
    config = load_scan_config(config_path) if config_path is not None else ScanConfig()
    if endianness is not None:
        config = config.model_copy(update={"endianness": endianness})
    return ScanConfig.model_validate(config.model_dump())


def _service(config: ScanConfig) -> AnalyzeLoudness:
    return AnalyzeLoudness(settings=config.analysis, event_publisher=_event_publisher)


def analyze_raw_input(
    sample_rate: int,
    input_path: Path | None,
    config: ScanConfig,
    correlation_id: str | None = None,
) -> TrackResult:
    """Analyse raw interleaved float samples from ``input_path`` or stdin (``None`` or ``-``)."""

    with ExitStack() as stack:
        if input_path is None or str(input_path) == "-":
            stream = sys.stdin.buffer
            source = "<stdin>"
        else:
            stream = stack.enter_context(input_path.open("rb"))
            source = str(input_path)

        return _service(config).analyze_chunks(
            iter_float_samples(stream, endianness=config.endianness),
            sample_rate,
            source=source,
            correlation_id=correlation_id or str(uuid4()),
        )


def analyze_paths(
    paths: list[Path],
    config: ScanConfig,
    album: bool = False,
) -> tuple[list[dict[str, object]], dict[str, object] | None]:
    """Analyse decoded audio files.

    Without ``album`` every file is independent and a failure only marks its
    own row. With ``album`` any failure aborts the run, since the album gain
    needs every track.
    """

    if not paths:
        raise ValueError("Provide at least one audio file.")

    service = _service(config)
    if album:
        correlation_id = str(uuid4())
        report = service.analyze_album(paths, block_frames=config.block_frames, correlation_id=correlation_id)
        rows = [
            _track_row(index, path, track, correlation_id)
            for index, (path, track) in enumerate(zip(paths, report.tracks), start=1)
        ]
        summary = {"gain_db": report.album.gain, "peak": report.album.peak, "correlation_id": correlation_id}
        return rows, summary

    rows: list[dict[str, object]] = []
    for index, path in enumerate(paths, start=1):
        correlation_id = str(uuid4())
        try:
            track = service.analyze_file(path, block_frames=config.block_frames, correlation_id=correlation_id)
        except Exception as error:  # noqa: BLE001
            rows.append(
                {
                    "index": index,
                    "path": str(path),
                    "status": "failed",
                    "correlation_id": correlation_id,
                    "error": str(error),
                }
            )
            continue
        rows.append(_track_row(index, path, track, correlation_id))
    return rows, None


def _track_row(index: int, path: Path, track: TrackResult, correlation_id: str) -> dict[str, object]:
    return {
        "index": index,
        "path": str(path),
        "status": "succeeded",
        "gain_db": track.gain,
        "peak": track.peak,
        "correlation_id": correlation_id,
    }
