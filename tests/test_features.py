import numpy as np
import pytest

from segfeat.streaming.features import feature_names, majority_label, window_stats


def test_window_stats_channel_major_order():
    buf = np.array([[1.0, 2.0, 3.0], [10.0, 20.0, 0.0]])
    assert np.allclose(window_stats(buf), [2.0, 3.0, 1.0, 10.0, 20.0, 0.0])


def test_window_stats_constant_channel():
    buf = np.full((3, 50), 30.0, dtype=np.float32)
    vec = window_stats(buf)
    assert vec.shape == (9,)
    assert vec.dtype == np.float64
    assert np.allclose(vec, 30.0)


def test_window_stats_rejects_bad_shapes():
    with pytest.raises(ValueError):
        window_stats(np.zeros(5))
    with pytest.raises(ValueError):
        window_stats(np.zeros((2, 0)))


def test_majority_label_earliest_wins_ties():
    assert majority_label(["b", "a", "a", "b"]) == "b"
    assert majority_label(["x", "y", "z"]) == "x"
    assert majority_label([None, "a", "a"]) == "a"
    assert majority_label([None, None, "a"]) is None


def test_majority_label_empty():
    with pytest.raises(ValueError):
        majority_label([])


def test_feature_names_default_and_custom():
    assert feature_names(2) == ["ch0_mean", "ch0_max", "ch0_min", "ch1_mean", "ch1_max", "ch1_min"]
    names = feature_names(3, ["ax", "ay", "az"])
    assert len(names) == 9
    assert names[3:6] == ["ay_mean", "ay_max", "ay_min"]
    with pytest.raises(ValueError):
        feature_names(3, ["ax", "ay"])
