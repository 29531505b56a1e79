from __future__ import annotations

import json
import re
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from segfeat.streaming.windowing import FeatureVector

NULL_LABEL = "null"
SEPARATOR = " "

# Plain decimal literals (optional f/d suffix) plus the exact spellings NaN and
# Infinity. Lowercase "nan", "inf" and "1_0" are not numbers, so they read as labels.
_NUMBER = re.compile(r"[+-]?(?:NaN|Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?[fFdD]?)")


@dataclass(frozen=True)
class Sample:
    label: str | None
    values: tuple[float, ...]


def split_fields(line: str) -> list[str] | None:
    """Split a text row into fields; `None` for blank lines and `#` comments."""

    stripped = line.strip()
    if not stripped or stripped.startswith("#"):
        return None
    # Empty fields between repeated separators are dropped.
    return stripped.split()


def _is_number(text: str) -> bool:
    return _NUMBER.fullmatch(text) is not None


def _to_float(text: str) -> float:
    if not _is_number(text):
        raise ValueError(f"Invalid numeric field: {text!r}")
    return float(text.rstrip("fFdD"))


def has_label(fields: Sequence[str]) -> bool:
    """Heuristic: a row is labeled when its first field does not parse as a number."""
    return not _is_number(fields[0])


def parse_fields(fields: Sequence[str], *, labeled: bool) -> Sample:
    label = fields[0] if labeled else None
    raw = fields[1:] if labeled else fields

    values = [_to_float(f) for f in raw]
    return Sample(label=label, values=tuple(values))


def iter_samples(lines: Iterable[str], *, labeled: bool | None = None) -> Iterator[tuple[int, Sample]]:
    """Yield (line_number, sample) for every data row in `lines`.

    When `labeled` is None it is decided from the first data row and then kept
    fixed for the rest of the stream.
    """

    for lineno, line in enumerate(lines, start=1):
        fields = split_fields(line)
        if fields is None:
            continue
        if labeled is None:
            labeled = has_label(fields)
        yield lineno, parse_fields(fields, labeled=labeled)


def format_value(value: float) -> str:
    return repr(float(value))


def format_feature_vector(fv: "FeatureVector") -> str:
    label = NULL_LABEL if fv.label is None else fv.label
    return SEPARATOR.join([label, *(format_value(v) for v in fv.vector)])


def format_feature_json(fv: "FeatureVector") -> str:
    return json.dumps({"label": fv.label, "features": [float(v) for v in fv.vector]})
