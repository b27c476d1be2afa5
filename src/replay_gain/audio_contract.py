"""Sample contract shared by every entry point feeding the analysis core.

Invariants
----------
* Audio is interleaved stereo: left, right, left, right, ...
* Samples are 32-bit floats, nominally in ``[-1.0, 1.0]``. Values outside that
  range are analysed as-is.
"""

from __future__ import annotations

from pathlib import Path

REQUIRED_CHANNEL_COUNT = 2
SAMPLE_ENCODING = "float32"
SAMPLE_WIDTH_BYTES = 4

# Byte order names accepted by the raw sample reader.
RAW_BYTE_ORDERS: dict[str, str] = {"native": "=", "little": "<", "big": ">"}


class UnsupportedAudioLayoutError(ValueError):
    """Raised when decoded audio does not match the stereo sample contract."""


def ensure_stereo(channel_count: int, source: Path | str | None = None) -> None:
    """Reject anything but two-channel audio."""

    if channel_count == REQUIRED_CHANNEL_COUNT:
        return
    label = f" '{source}'" if source is not None else ""
    raise UnsupportedAudioLayoutError(
        f"Audio{label} has {channel_count} channel(s); only {REQUIRED_CHANNEL_COUNT}-channel audio is supported."
    )
