import numpy as np

from replay_gain.peak import PeakTracker


def test_peak_starts_at_zero():
    assert PeakTracker().peak == 0.0


def test_observe_tracks_absolute_maximum():
    tracker = PeakTracker()

    tracker.observe(0.25)
    tracker.observe(-0.75)
    tracker.observe(0.5)

    assert tracker.peak == 0.75


def test_observe_block_is_monotonic():
    tracker = PeakTracker()
    history = []
    for block in (np.array([0.1, -0.2]), np.array([0.05, 0.0]), np.array([-0.9, 0.3]), np.array([0.0, 0.0])):
        history.append(tracker.observe_block(block))

    assert history == sorted(history)
    assert tracker.peak == 0.9


def test_nan_samples_do_not_raise_the_peak():
    tracker = PeakTracker()

    tracker.observe_block(np.array([0.5, np.nan, -0.25], dtype=np.float32))

    assert tracker.peak == 0.5


def test_out_of_range_samples_are_tracked():
    tracker = PeakTracker()

    tracker.observe_block(np.array([3.5, -4.0]))

    assert tracker.peak == 4.0


def test_empty_block_keeps_peak():
    tracker = PeakTracker()
    tracker.observe(0.3)

    tracker.observe_block(np.array([], dtype=np.float32))

    assert tracker.peak == 0.3
