import numpy as np
import pytest

from replay_gain.assembler import FrameAssembler


class _Recorder:
    def __init__(self) -> None:
        self.frames = []

    def __call__(self, frame: np.ndarray) -> None:
        self.frames.append(frame.copy())


def test_full_frames_are_dispatched_and_tail_is_kept():
    recorder = _Recorder()
    assembler = FrameAssembler(8, recorder)
    samples = np.arange(21, dtype=np.float32)

    dispatched = assembler.push(samples)

    assert dispatched == 2
    assert np.array_equal(recorder.frames[0], samples[:8])
    assert np.array_equal(recorder.frames[1], samples[8:16])
    assert np.array_equal(assembler.pending, samples[16:])


def test_pending_buffer_is_topped_up_first():
    recorder = _Recorder()
    assembler = FrameAssembler(8, recorder)
    samples = np.arange(30, dtype=np.float32)

    for start, stop in [(0, 3), (3, 5), (5, 5), (5, 17), (17, 30)]:
        assembler.push(samples[start:stop])
        assert 0 <= assembler.pending_count < 8

    assert [frame.tolist() for frame in recorder.frames] == [
        samples[0:8].tolist(),
        samples[8:16].tolist(),
        samples[16:24].tolist(),
    ]
    assert np.array_equal(assembler.pending, samples[24:])


def test_partial_top_up_dispatches_nothing():
    recorder = _Recorder()
    assembler = FrameAssembler(8, recorder)

    assembler.push(np.ones(3))
    assert assembler.push(np.ones(2)) == 0

    assert recorder.frames == []
    assert assembler.pending_count == 5


def test_flush_zero_pads_the_last_frame():
    recorder = _Recorder()
    assembler = FrameAssembler(6, recorder)
    assembler.push(np.array([1.0, 2.0, 3.0]))

    assembler.flush()

    assert recorder.frames[-1].tolist() == [1.0, 2.0, 3.0, 0.0, 0.0, 0.0]
    assert assembler.pending_count == 0


def test_flush_with_nothing_pending_dispatches_a_silent_frame():
    recorder = _Recorder()
    assembler = FrameAssembler(4, recorder)

    assembler.flush()

    assert recorder.frames[0].tolist() == [0.0, 0.0, 0.0, 0.0]


def test_samples_are_coerced_to_float32_and_flattened():
    recorder = _Recorder()
    assembler = FrameAssembler(4, recorder)

    assembler.push(np.array([[0.1, 0.2], [0.3, 0.4]], dtype=np.float64))

    assert recorder.frames[0].dtype == np.float32
    assert np.allclose(recorder.frames[0], [0.1, 0.2, 0.3, 0.4])


def test_frame_size_must_be_positive():
    with pytest.raises(ValueError):
        FrameAssembler(0, lambda frame: None)
