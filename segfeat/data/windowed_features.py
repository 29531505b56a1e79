from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import chain
from dataclasses import dataclass
from pathlib import Path

import numpy as np
import pandas as pd

from segfeat.streaming.features import feature_names
from segfeat.streaming.protocol import Sample, iter_samples
from segfeat.streaming.windowing import FeatureVector, TumblingFeatureWindow


@dataclass(frozen=True)
class WindowedFeatureDataset:
    x: np.ndarray
    y: np.ndarray
    feature_names: list[str]
    class_names: list[str]


def load_samples(path: str | Path) -> list[Sample]:
    """Read a whitespace separated sample file (optionally with a leading label column)."""

    path = Path(path)
    with path.open("r", encoding="utf-8") as fh:
        return [s for _lineno, s in iter_samples(fh)]


def extract_windowed_features(
    samples: Iterable[Sample],
    *,
    window_length: int,
    sample_size: int | None = None,
    channels: Sequence[str] | None = None,
) -> WindowedFeatureDataset:
    """Run a whole sample stream through a tumbling window and collect the results.

    Samples left over after the last full window are dropped.
    """

    it = iter(samples)
    first = next(it, None)
    if first is None:
        raise ValueError("No samples to window.")

    if sample_size is None:
        sample_size = len(first.values)
    engine = TumblingFeatureWindow(window_length=window_length, sample_size=sample_size)

    results: list[FeatureVector] = []
    for s in chain([first], it):
        engine.write_sample(s)
        fv = engine.read()
        if fv is not None:
            results.append(fv)

    names = feature_names(sample_size, channels)
    if results:
        x = np.stack([fv.vector for fv in results], axis=0)
    else:
        x = np.empty((0, len(names)), dtype=np.float64)
    y = np.asarray([fv.label for fv in results], dtype=object)
    class_names = sorted({fv.label for fv in results if fv.label is not None})

    return WindowedFeatureDataset(x=x, y=y, feature_names=names, class_names=class_names)


def to_frame(ds: WindowedFeatureDataset) -> pd.DataFrame:
    df = pd.DataFrame(ds.x, columns=ds.feature_names)
    df.insert(0, "label", pd.Series(ds.y, dtype=object))
    return df
