"""Command-line entrypoint for sampling Catmull-Rom splines."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys
from importlib import metadata
from typing import Any

import numpy as np

from .config import SUPPORTED_DTYPES, SamplingConfig, SplineRunConfig
from .spline import CatmullRomSpline


logger = logging.getLogger(__name__)

DEFAULT_POINTS = ("0", "100", "0")


def _package_version() -> str:
    try:
        return metadata.version("crspline")
    except metadata.PackageNotFoundError:
        return "0.1.0"


def _configure_logging(log_level: str) -> None:
    level_name = (log_level or "INFO").upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        raise ValueError(
            f"Invalid --log-level: {log_level!r}. "
            "Allowed values: DEBUG, INFO, WARNING, ERROR, CRITICAL."
        )
    logging.basicConfig(level=level, format="%(message)s", force=True)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="crspline",
        description=(
            "Sample a uniform Catmull-Rom spline through the given control points "
            "and print one value per line."
        ),
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"crspline {_package_version()}",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Python logging level.",
    )
    parser.add_argument(
        "samples",
        type=int,
        nargs="?",
        default=None,
        help="Number of sampling intervals (num_samples + 1 values are printed). Defaults to 100.",
    )
    parser.add_argument(
        "--points",
        type=str,
        nargs="+",
        default=None,
        help="Control points; use comma-separated coordinates (e.g. 1,2,3) with --dtype vector.",
    )
    parser.add_argument(
        "--dtype",
        type=str,
        default=None,
        help=f"Control point type: {' | '.join(SUPPORTED_DTYPES)}.",
    )
    parser.add_argument(
        "--config-json",
        type=Path,
        default=None,
        help="Optional JSON file serialized from SplineRunConfig.",
    )
    parser.add_argument(
        "--plot-output",
        type=Path,
        default=None,
        help="Optional PNG path for a plot of the sampled curve.",
    )
    return parser


def _parse_point(token: str, dtype: str) -> Any:
    if dtype == "vector":
        return [float(part) for part in token.split(",")]
    if dtype == "int":
        return int(token)
    return float(token)


def build_config(args: argparse.Namespace) -> SplineRunConfig:
    if args.config_json is not None:
        config = SplineRunConfig.from_json(args.config_json)
    else:
        config = SplineRunConfig(dtype=args.dtype or "float")
        tokens = args.points or list(DEFAULT_POINTS)
        config.points = [_parse_point(token, config.dtype) for token in tokens]

    if args.dtype is not None and args.config_json is not None:
        config.dtype = args.dtype
    if args.samples is not None:
        config.sampling = SamplingConfig(num_samples=args.samples)
    if args.plot_output is not None:
        config.plot_output = args.plot_output
    config.__post_init__()
    return config


def run(config: SplineRunConfig) -> list[Any]:
    """Build the spline described by `config` and return its samples."""
    points = config.control_points()
    spline = CatmullRomSpline(points)
    logger.info("Sampling %d control points (%s) at %d intervals.", len(points), config.dtype, config.sampling.num_samples)
    samples = [spline.get_point(t) for t in config.sampling.parameters()]

    if config.plot_output is not None:
        from .visualization import plot_spline

        plot_spline(
            spline,
            num_samples=config.sampling.num_samples,
            plot_config=config.plot,
            output_path=config.plot_output,
        )
    return samples


def _format_value(value: Any) -> str:
    if isinstance(value, np.ndarray):
        return " ".join(f"{v:g}" for v in value.tolist())
    if isinstance(value, (int, np.integer)):
        return str(int(value))
    return f"{float(value):g}"


def main(argv: list[str] | None = None) -> None:
    args = _build_parser().parse_args(argv)
    try:
        _configure_logging(getattr(args, "log_level", "WARNING"))
        config = build_config(args)
        for value in run(config):
            print(_format_value(value))
    except KeyboardInterrupt:
        print("Interrupted.", file=sys.stderr)
        raise SystemExit(130) from None
    except Exception as exc:  # noqa: BLE001
        if logging.getLogger().handlers:
            logger.error("Error: %s", exc)
            if logger.isEnabledFor(logging.DEBUG):
                logger.exception("Detailed traceback")
        else:
            print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(2) from None


if __name__ == "__main__":
    main()
