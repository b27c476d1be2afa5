import numpy as np
import pytest


def interleave(left: np.ndarray, right: np.ndarray) -> np.ndarray:
    stereo = np.empty(left.size * 2, dtype=np.float32)
    stereo[0::2] = left
    stereo[1::2] = right
    return stereo


@pytest.fixture
def stereo_noise():
    sample_rate = 44100
    rng = np.random.default_rng(1234)
    frames = int(sample_rate * 1.5) + 777
    left = rng.uniform(-0.25, 0.25, frames).astype(np.float32)
    right = rng.uniform(-0.25, 0.25, frames).astype(np.float32)
    return {
        "sample_rate": sample_rate,
        "samples": interleave(left, right),
    }


@pytest.fixture
def stereo_sine():
    sample_rate = 44100
    t = np.arange(sample_rate * 2) / sample_rate
    base = np.sin(2 * np.pi * 1000.0 * t).astype(np.float32)
    return {
        "sample_rate": sample_rate,
        "quiet": interleave(0.05 * base, 0.05 * base),
        "loud": interleave(0.5 * base, 0.5 * base),
    }
