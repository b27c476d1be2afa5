from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

import numpy as np
import soundfile as sf

from replay_gain.audio_contract import ensure_stereo


@dataclass(frozen=True, slots=True)
class AudioStreamInfo:
    sample_rate_hz: int
    channel_count: int
    frames: int


def probe_audio(path: Path) -> AudioStreamInfo:
    info = sf.info(str(path))
    return AudioStreamInfo(
        sample_rate_hz=int(info.samplerate),
        channel_count=int(info.channels),
        frames=int(info.frames),
    )


def iter_interleaved_blocks(path: Path, block_frames: int = 4_096) -> Iterator[np.ndarray]:
    """Decode a stereo file as interleaved float32 blocks of up to ``block_frames`` pairs."""

    with sf.SoundFile(str(path)) as handle:
        ensure_stereo(handle.channels, path)
        for block in handle.blocks(blocksize=block_frames, dtype="float32", always_2d=True):
            yield np.ascontiguousarray(block).reshape(-1)
