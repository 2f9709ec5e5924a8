"""Command line harness for drawing batches from the rand_ext samplers."""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, Optional

PROJECT_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_LOG_PATH = PROJECT_ROOT / "sampler_logs" / "latest_run.json"

if PROJECT_ROOT.as_posix() not in sys.path:
    sys.path.insert(0, PROJECT_ROOT.as_posix())

from rand_ext import BatchConfig, RandExtError, run_batch
from rand_ext._logging import configure_logging
from rand_ext.batch import SAMPLERS


def _parse_positive_int(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Expected an integer, received '{value}'.") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("Value must be a positive integer.")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Draw non-uniform random integers in [min, max]")
    parser.add_argument(
        "--distribution",
        choices=sorted(SAMPLERS),
        default="exponential",
        help="Distribution to sample from",
    )
    parser.add_argument("--min", dest="minimum", type=int, default=1, help="Inclusive lower bound")
    parser.add_argument("--max", dest="maximum", type=int, default=10, help="Inclusive upper bound")
    parser.add_argument(
        "--parameter",
        type=float,
        default=2.5,
        help="Shape parameter: rate (> 0), gaussian cut-off (>= 2.0) or zipf exponent [1.001, 1000]",
    )
    parser.add_argument("--count", type=int, default=10_000, help="Number of draws in the batch")
    parser.add_argument(
        "--seed",
        type=lambda value: int(value, 0),
        default=None,
        help="Fixed seed (decimal or 0x-prefixed hex); omit to seed from OS entropy",
    )
    parser.add_argument(
        "--max_rejections",
        type=_parse_positive_int,
        default=None,
        help="Abort a gaussian/zipfian rejection loop after this many retries (diagnostics only)",
    )
    parser.add_argument(
        "--samples",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="Include every raw sample in the JSON report",
    )
    parser.add_argument("--log_level", default="WARNING", help="Logging level for stderr diagnostics")
    parser.add_argument(
        "--log",
        nargs="?",
        type=Path,
        const=DEFAULT_LOG_PATH,
        help="Also write the JSON report to PATH (sampler_logs/latest_run.json when PATH is omitted)",
    )
    return parser


def write_report(report: Dict[str, Any], target: Path) -> Path:
    """Write ``report`` as JSON; relative targets land under the project root."""

    if not target.is_absolute():
        target = (PROJECT_ROOT / target).resolve()
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(json.dumps(report, indent=2))
    return target


def main(argv: Optional[list] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.log_level)

    cfg = BatchConfig(
        distribution=args.distribution,
        minimum=args.minimum,
        maximum=args.maximum,
        parameter=args.parameter,
        count=args.count,
        seed=args.seed,
        max_rejections=args.max_rejections,
    )
    try:
        report = run_batch(cfg)
    except RandExtError as exc:
        parser.error(str(exc))

    if not args.samples:
        del report["samples"]
    if args.log is not None:
        write_report(report, args.log)

    print(json.dumps(report, indent=2))


if __name__ == "__main__":
    main()
