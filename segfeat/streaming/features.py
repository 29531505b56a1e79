from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

import numpy as np

_STATS = ("mean", "max", "min")


def feature_names(sample_size: int, channels: Sequence[str] | None = None) -> list[str]:
    if channels is None:
        channels = [f"ch{i}" for i in range(sample_size)]
    elif len(channels) != sample_size:
        raise ValueError(f"Expected {sample_size} channel names, got {len(channels)}")

    names: list[str] = []
    for ch in channels:
        for s in _STATS:
            names.append(f"{ch}_{s}")
    return names


def window_stats(buffer: np.ndarray) -> np.ndarray:
    """Summarise a (channels, T) window as channel-major [mean, max, min] triples.

    NaN values propagate: a channel holding a NaN yields NaN for all three stats.
    """

    if buffer.ndim != 2 or buffer.shape[1] == 0:
        raise ValueError(f"Expected window shape (C, T) with T > 0, got {buffer.shape}")

    x = buffer.astype(np.float64, copy=False)
    stats = np.empty((x.shape[0], len(_STATS)), dtype=np.float64)
    stats[:, 0] = x.mean(axis=1)
    stats[:, 1] = x.max(axis=1)
    stats[:, 2] = x.min(axis=1)
    return stats.reshape(-1)


def majority_label(labels: Sequence[str | None]) -> str | None:
    """Most frequent label; `None` counts as its own label.

    Ties go to the label that first appears earliest in `labels`.
    """

    if not labels:
        raise ValueError("Cannot vote over an empty label window")

    # Counter keeps first-insertion order and max() returns the first maximum.
    counts = Counter(labels)
    return max(counts, key=counts.__getitem__)
