import numpy as np
import pytest

from replay_gain.windower import LOUDNESS_OFFSET_DB, EnergyWindower


def test_full_scale_constant_loudness():
    windower = EnergyWindower(window_pairs=100)

    values = windower.loudness_values(np.ones((100, 2)))

    assert values.shape == (1,)
    assert values[0] == pytest.approx(10.0 * np.log10(2.0) + LOUDNESS_OFFSET_DB)


def test_one_value_per_window():
    windower = EnergyWindower(window_pairs=10)
    block = np.zeros((30, 2))
    block[10:20] = 0.5

    values = windower.loudness_values(block)

    assert values.shape == (3,)
    assert values[1] > values[0]
    assert values[0] == pytest.approx(values[2])


def test_silence_stays_defined_and_below_zero():
    windower = EnergyWindower(window_pairs=2205)

    values = windower.loudness_values(np.zeros((2205, 2)))

    assert np.isfinite(values[0])
    assert values[0] < 0.0


def test_channel_energies_are_summed():
    windower = EnergyWindower(window_pairs=50)
    left_only = np.zeros((50, 2))
    left_only[:, 0] = 0.5
    both = np.full((50, 2), 0.5)

    difference = windower.loudness_values(both)[0] - windower.loudness_values(left_only)[0]

    assert difference == pytest.approx(10.0 * np.log10(2.0))


def test_misaligned_block_is_rejected():
    windower = EnergyWindower(window_pairs=10)

    with pytest.raises(ValueError):
        windower.loudness_values(np.zeros((15, 2)))


def test_window_length_must_be_positive():
    with pytest.raises(ValueError):
        EnergyWindower(window_pairs=0)
