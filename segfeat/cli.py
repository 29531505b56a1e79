from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from contextlib import ExitStack
from importlib.metadata import PackageNotFoundError, version
from typing import TextIO

from segfeat.streaming.errors import ConfigurationError
from segfeat.streaming.protocol import (
    format_feature_json,
    format_feature_vector,
    has_label,
    parse_fields,
    split_fields,
)
from segfeat.streaming.windowing import TumblingFeatureWindow

try:
    __version__ = version("segfeat")
except PackageNotFoundError:
    # Running from a source checkout without an install.
    __version__ = "unknown"

logger = logging.getLogger("segfeat")

_FORMATTERS = {
    "text": format_feature_vector,
    "jsonl": format_feature_json,
}


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="segfeat",
        description="Print per-window mean, max and min of each column of a space separated sample file.",
    )
    parser.add_argument("file", nargs="?", default="-", help="File to read from ('-' for stdin).")
    parser.add_argument("-n", "--window-length", type=int, default=100, help="Number of samples to merge into one window.")
    parser.add_argument("--format", choices=sorted(_FORMATTERS), default="text", help="Output line format.")
    parser.add_argument(
        "--skip-bad-rows",
        action="store_true",
        help="Log and skip rows that fail to parse or have the wrong width instead of aborting.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr.")
    parser.add_argument("-q", "--quiet", action="store_true", help="Only log errors.")
    parser.add_argument("--version", action="version", version=f"segfeat {__version__}")
    return parser.parse_args(argv)


def _configure_logging(*, verbose: bool, quiet: bool) -> None:
    level = logging.ERROR if quiet else logging.INFO if verbose else logging.WARNING
    logging.basicConfig(level=level, stream=sys.stderr, format="%(levelname)s %(name)s: %(message)s")


def run(lines: TextIO, out: TextIO, *, window_length: int, fmt: str = "text", skip_bad_rows: bool = False) -> int:
    """Stream `lines` through a tumbling window, writing one line per completed window.

    Returns the number of feature vectors written.
    """

    formatter = _FORMATTERS[fmt]
    engine: TumblingFeatureWindow | None = None
    labeled: bool | None = None
    written = 0

    for lineno, line in enumerate(lines, start=1):
        fields = split_fields(line)
        if fields is None:
            continue
        if labeled is None:
            labeled = has_label(fields)

        try:
            sample = parse_fields(fields, labeled=labeled)
            if engine is None:
                engine = TumblingFeatureWindow(window_length=window_length, sample_size=len(sample.values))
                logger.info(
                    "window length %d, sample size %d, labeled=%s",
                    engine.window_length,
                    engine.sample_size,
                    labeled,
                )
            engine.write_sample(sample)
        except ConfigurationError as e:
            raise SystemExit(f"line {lineno}: {e}") from e
        except ValueError as e:
            if not skip_bad_rows:
                raise SystemExit(f"line {lineno}: {e}") from e
            logger.warning("line %d skipped: %s", lineno, e)
            continue

        fv = engine.read()
        if fv is not None:
            out.write(formatter(fv) + "\n")
            written += 1

    if engine is not None and engine.cursor:
        logger.info("dropped %d trailing samples (incomplete window)", engine.cursor)
    logger.info("wrote %d feature vectors", written)
    return written


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    _configure_logging(verbose=args.verbose, quiet=args.quiet)

    if args.window_length <= 0:
        raise SystemExit("--window-length must be > 0.")

    with ExitStack() as stack:
        if args.file == "-":
            if hasattr(sys.stdin, "reconfigure"):
                sys.stdin.reconfigure(encoding="utf-8", errors="replace")
            lines: TextIO = sys.stdin
        else:
            try:
                lines = stack.enter_context(open(args.file, "r", encoding="utf-8", errors="replace"))
            except OSError as e:
                raise SystemExit(f"Cannot read {args.file}: {e}") from e

        run(
            lines,
            sys.stdout,
            window_length=args.window_length,
            fmt=args.format,
            skip_bad_rows=args.skip_bad_rows,
        )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
