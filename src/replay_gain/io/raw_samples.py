from __future__ import annotations

from collections.abc import Iterator
from typing import BinaryIO
import logging

import numpy as np

from replay_gain.audio_contract import RAW_BYTE_ORDERS, SAMPLE_WIDTH_BYTES

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_BYTES = 64 * 1024


def raw_sample_dtype(endianness: str = "native") -> np.dtype:
    try:
        prefix = RAW_BYTE_ORDERS[endianness]
    except KeyError as exc:
        supported = ", ".join(RAW_BYTE_ORDERS)
        raise ValueError(f"Unknown byte order {endianness!r}. Supported: {supported}.") from exc
    return np.dtype(f"{prefix}f{SAMPLE_WIDTH_BYTES}")


def iter_float_samples(
    stream: BinaryIO,
    *,
    endianness: str = "native",
    chunk_bytes: int = DEFAULT_CHUNK_BYTES,
) -> Iterator[np.ndarray]:
    """Yield native float32 sample arrays decoded from a raw byte stream.

    Reads never need to align with sample boundaries; a partial value is
    carried into the next read. Bytes left over at end of stream that do not
    form a whole sample are dropped.
    """

    if chunk_bytes <= 0:
        raise ValueError("chunk_bytes must be a positive integer.")
    dtype = raw_sample_dtype(endianness)
    carry = b""
    while True:
        data = stream.read(chunk_bytes)
        if not data:
            break
        data = carry + data
        usable = len(data) - len(data) % SAMPLE_WIDTH_BYTES
        carry = data[usable:]
        if usable:
            yield np.frombuffer(data[:usable], dtype=dtype).astype(np.float32)

    if carry:
        logger.warning(
            "Dropping trailing bytes that do not form a whole sample.",
            extra={"trailing_bytes": len(carry)},
        )
