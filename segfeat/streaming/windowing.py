from __future__ import annotations

import logging
import numbers
from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from segfeat.streaming.errors import ConfigurationError, DimensionMismatchError
from segfeat.streaming.features import majority_label, window_stats
from segfeat.streaming.protocol import Sample

logger = logging.getLogger(__name__)


def _check_positive(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ConfigurationError(f"{name} must be an integer, got {value!r}")
    if value <= 0:
        raise ConfigurationError(f"{name} must be > 0, got {value}")
    return int(value)


@dataclass(frozen=True)
class WindowConfig:
    window_length: int
    sample_size: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "window_length", _check_positive("window_length", self.window_length))
        object.__setattr__(self, "sample_size", _check_positive("sample_size", self.sample_size))


@dataclass(frozen=True, eq=False)
class FeatureVector:
    label: str | None
    vector: np.ndarray  # (3 * sample_size,) float64, read-only

    __hash__ = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FeatureVector):
            return NotImplemented
        return self.label == other.label and np.array_equal(self.vector, other.vector)


class TumblingFeatureWindow:
    """Segment a sample stream into non-overlapping windows and summarise each one.

    Every `window_length` accepted samples produce one `FeatureVector` holding
    per-channel [mean, max, min] and the window's majority label. Results queue
    up in completion order until drained with `read()`.

    Not thread-safe: callers sharing an instance must serialise `write`/`read`.
    """

    def __init__(self, *, window_length: int, sample_size: int):
        self.config = WindowConfig(window_length=window_length, sample_size=sample_size)

        self._values = np.zeros((self.config.sample_size, self.config.window_length), dtype=np.float64)
        self._labels: list[str | None] = [None] * self.config.window_length
        self._cursor = 0
        self._results: deque[FeatureVector] = deque()

    @classmethod
    def from_config(cls, config: WindowConfig) -> "TumblingFeatureWindow":
        return cls(window_length=config.window_length, sample_size=config.sample_size)

    @property
    def window_length(self) -> int:
        return self.config.window_length

    @property
    def sample_size(self) -> int:
        return self.config.sample_size

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def pending(self) -> int:
        """Number of completed feature vectors not yet read."""
        return len(self._results)

    def write(self, label: str | None, values: Sequence[float] | np.ndarray) -> None:
        vec = np.asarray(values, dtype=np.float64)
        if vec.ndim != 1 or vec.shape[0] != self.config.sample_size:
            actual = vec.shape[0] if vec.ndim == 1 else vec.size
            raise DimensionMismatchError(expected=self.config.sample_size, actual=actual)

        self._labels[self._cursor] = label
        self._values[:, self._cursor] = vec

        if self._cursor == self.config.window_length - 1:
            self._complete_window()
            self._cursor = 0
        else:
            self._cursor += 1

    def write_sample(self, sample: Sample) -> None:
        self.write(sample.label, sample.values)

    def read(self) -> FeatureVector | None:
        return self._results.popleft() if self._results else None

    def _complete_window(self) -> None:
        stats = window_stats(self._values)
        # Backed by immutable bytes so the write flag cannot be turned back on.
        vector = np.frombuffer(stats.tobytes(), dtype=np.float64)
        label = majority_label(self._labels)
        self._results.append(FeatureVector(label=label, vector=vector))
        logger.debug("window complete: label=%r pending=%d", label, len(self._results))
