import numpy as np
import pytest

from segfeat.data.windowed_features import extract_windowed_features, load_samples, to_frame
from segfeat.streaming.errors import DimensionMismatchError
from segfeat.streaming.protocol import Sample


def _samples():
    rows = []
    for i in range(7):
        label = "walk" if i < 4 else "sit"
        rows.append(Sample(label=label, values=(float(i), float(-i))))
    return rows


def test_extract_windowed_features_drops_partial_window():
    ds = extract_windowed_features(_samples(), window_length=3)
    assert ds.x.shape == (2, 6)
    assert list(ds.y) == ["walk", "sit"]
    assert ds.class_names == ["sit", "walk"]
    assert np.allclose(ds.x[0], [1.0, 2.0, 0.0, -1.0, 0.0, -2.0])
    assert np.allclose(ds.x[1], [4.0, 5.0, 3.0, -4.0, -3.0, -5.0])


def test_extract_windowed_features_no_full_window():
    ds = extract_windowed_features(_samples()[:2], window_length=3, channels=["a", "b"])
    assert ds.x.shape == (0, 6)
    assert ds.feature_names[0] == "a_mean"
    assert ds.class_names == []


def test_extract_windowed_features_errors():
    with pytest.raises(ValueError):
        extract_windowed_features([], window_length=3)
    bad = [Sample("a", (1.0, 2.0)), Sample("a", (1.0,))]
    with pytest.raises(DimensionMismatchError):
        extract_windowed_features(bad, window_length=3)


def test_load_samples_and_frame(tmp_path):
    path = tmp_path / "samples.txt"
    path.write_text("# ax ay\nrun 1 2\nrun 3 4\n\nrest 5 6\nrest 7 8\n", encoding="utf-8")

    samples = load_samples(path)
    assert len(samples) == 4
    assert samples[2] == Sample("rest", (5.0, 6.0))

    df = to_frame(extract_windowed_features(samples, window_length=2, channels=["ax", "ay"]))
    assert list(df.columns) == ["label", "ax_mean", "ax_max", "ax_min", "ay_mean", "ay_max", "ay_min"]
    assert df["label"].tolist() == ["run", "rest"]
    assert df["ax_mean"].tolist() == pytest.approx([2.0, 6.0])
