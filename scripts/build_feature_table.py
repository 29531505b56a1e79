#!/usr/bin/env python3
from __future__ import annotations

import argparse
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT))

from segfeat.data.windowed_features import extract_windowed_features, load_samples, to_frame


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Window a sample file and save the per-window feature table as CSV.")
    parser.add_argument("input", help="Space separated sample file (optional leading label column).")
    parser.add_argument("--window-length", type=int, default=100)
    parser.add_argument(
        "--channels",
        default=None,
        help="Comma separated channel names for the feature columns (default: ch0, ch1, ...).",
    )
    parser.add_argument("--out", default="outputs/window_features.csv")
    return parser.parse_args()


def main() -> int:
    args = _parse_args()

    samples = load_samples(args.input)
    if not samples:
        raise SystemExit(f"No samples found in {args.input}.")

    channels = [c.strip() for c in args.channels.split(",")] if args.channels else None
    try:
        ds = extract_windowed_features(samples, window_length=args.window_length, channels=channels)
    except ValueError as e:
        raise SystemExit(str(e)) from e

    out_path = Path(args.out)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    to_frame(ds).to_csv(out_path, index=False)

    print(f"Samples: {len(samples)} | Windows: {len(ds.x)} | Features per window: {len(ds.feature_names)}")
    if ds.class_names:
        counts = {c: int((ds.y == c).sum()) for c in ds.class_names}
        print("Window labels: " + ", ".join(f"{k}={v}" for k, v in counts.items()))
    print(f"\nSaved: {out_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
