#!/usr/bin/env python3
from __future__ import annotations

import argparse
import math
import random
import sys


def _parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Generate fake space separated IMU rows (for local smoke tests of segfeat).")
    p.add_argument("--samples", type=int, default=500)
    p.add_argument("--sample-rate-hz", type=float, default=50.0)
    p.add_argument("--seed", type=int, default=42)
    p.add_argument(
        "--labels",
        default=None,
        help="Optional comma separated labels; the stream cycles through them every --segment samples.",
    )
    p.add_argument("--segment", type=int, default=250, help="Samples per label segment.")
    return p.parse_args()


def main() -> int:
    args = _parse_args()
    random.seed(args.seed)

    sr = float(args.sample_rate_hz)
    if sr <= 0:
        raise SystemExit("--sample-rate-hz must be > 0")
    if args.segment <= 0:
        raise SystemExit("--segment must be > 0")
    dt = 1.0 / sr
    labels = [l.strip() for l in args.labels.split(",")] if args.labels else None

    sys.stdout.write("# ax ay az gx gy gz\n")
    for i in range(int(args.samples)):
        # Gravity on z + small oscillations + noise.
        ax = 0.08 * math.sin(2.0 * math.pi * 1.2 * (i * dt)) + random.uniform(-0.01, 0.01)
        ay = 0.06 * math.sin(2.0 * math.pi * 0.8 * (i * dt + 0.1)) + random.uniform(-0.01, 0.01)
        az = 1.0 + 0.03 * math.sin(2.0 * math.pi * 1.0 * (i * dt + 0.2)) + random.uniform(-0.01, 0.01)

        gx = 0.10 * math.sin(2.0 * math.pi * 0.7 * (i * dt)) + random.uniform(-0.02, 0.02)
        gy = 0.12 * math.sin(2.0 * math.pi * 1.4 * (i * dt + 0.2)) + random.uniform(-0.02, 0.02)
        gz = 0.05 * math.sin(2.0 * math.pi * 0.9 * (i * dt + 0.3)) + random.uniform(-0.02, 0.02)

        fields = [f"{v:.6f}" for v in (ax, ay, az, gx, gy, gz)]
        if labels:
            fields.insert(0, labels[(i // args.segment) % len(labels)])
        sys.stdout.write(" ".join(fields) + "\n")

    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
