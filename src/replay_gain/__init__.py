"""Public package exports for replay_gain with lazy imports."""

from __future__ import annotations

from importlib import import_module
from typing import Any

__all__ = [
    "ReplayGain",
    "TrackResult",
    "SessionState",
    "FrameContractError",
    "SessionClosedError",
    "AlbumAccumulator",
    "SampleRateProfile",
    "SUPPORTED_SAMPLE_RATES",
    "UnsupportedSampleRateError",
    "find_profile",
    "profile_for_rate",
    "AnalysisSettings",
]

_EXPORT_MODULES: dict[str, str] = {
    "ReplayGain": "replay_gain.session",
    "TrackResult": "replay_gain.session",
    "SessionState": "replay_gain.session",
    "FrameContractError": "replay_gain.session",
    "SessionClosedError": "replay_gain.session",
    "AlbumAccumulator": "replay_gain.album",
    "SampleRateProfile": "replay_gain.coefficients",
    "SUPPORTED_SAMPLE_RATES": "replay_gain.coefficients",
    "UnsupportedSampleRateError": "replay_gain.coefficients",
    "find_profile": "replay_gain.coefficients",
    "profile_for_rate": "replay_gain.coefficients",
    "AnalysisSettings": "replay_gain.utils.config",
}


def __getattr__(name: str) -> Any:
    if name not in _EXPORT_MODULES:
        raise AttributeError(f"module 'replay_gain' has no attribute {name!r}")

    module = import_module(_EXPORT_MODULES[name])
    value = getattr(module, name)
    globals()[name] = value
    return value
