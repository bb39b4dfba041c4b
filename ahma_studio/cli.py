"""Command line entry point: compute HMA/AHMA for a price series file."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from ahma_studio.compute.frame import indicator_frame, write_indicator_frame
from ahma_studio.configuration import load_runtime_config, validate_runtime_config
from ahma_studio.indicators.ahma import (
    BACKENDS,
    AhmaOptions,
    calculate_ahma,
    options_as_dict,
    resolve_options,
)
from ahma_studio.metrics import build_snapshot, format_snapshot, resolve_labels
from ahma_studio.parsing import ParsedSeries, parse_series, read_series_file
from ahma_studio.sample_data import sample_series_text
from ahma_studio.utils.logging_utils import setup_logging


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ahma-studio",
        description="Compute the Adaptive Hull Moving Average for a price series.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        help="Text file with 'label, value' or whitespace-delimited rows ('-' for stdin).",
    )
    parser.add_argument("--sample", action="store_true", help="Use the built-in sample series.")
    parser.add_argument("--sample-days", type=int, default=180, help="Length of the sample series.")
    parser.add_argument("--config", default=None, help="YAML config path (default: config.yaml).")
    parser.add_argument("--hull-length", type=float, default=None, help="Hull window length.")
    parser.add_argument(
        "--adaptive-window", type=float, default=None, help="Efficiency-ratio lookback."
    )
    parser.add_argument("--fast-period", type=float, default=None, help="Fast smoothing period.")
    parser.add_argument("--slow-period", type=float, default=None, help="Slow smoothing period.")
    parser.add_argument("--backend", choices=list(BACKENDS), default=None, help="HMA backend.")
    parser.add_argument("--output", default=None, help="Write label/close/hma/ahma to CSV or Parquet.")
    parser.add_argument("--json", action="store_true", help="Print JSON instead of text.")
    return parser


def _pick(cli_value, config_value):
    return config_value if cli_value is None else cli_value


def _load_series(args, logger) -> ParsedSeries | None:
    if args.sample:
        return parse_series(sample_series_text(args.sample_days))
    if args.input == "-":
        return parse_series(sys.stdin.read())
    try:
        return read_series_file(args.input)
    except OSError as exc:
        logger.error("Failed to read price series %s: %s", args.input, exc)
        return None


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if not args.input and not args.sample:
        parser.error("an input file or --sample is required")

    runtime = load_runtime_config(config_path=args.config)
    try:
        validate_runtime_config(runtime)
    except ValueError as exc:
        parser.error(str(exc))

    logger = setup_logging("ahma_studio", level=runtime.system.log_level)

    parsed = _load_series(args, logger)
    if parsed is None:
        return 1
    if parsed.error:
        logger.warning(parsed.error)

    options = AhmaOptions(
        hull_length=_pick(args.hull_length, runtime.indicator.hull_length),
        adaptive_window=_pick(args.adaptive_window, runtime.indicator.adaptive_window),
        fast_period=_pick(args.fast_period, runtime.indicator.fast_period),
        slow_period=_pick(args.slow_period, runtime.indicator.slow_period),
        backend=_pick(args.backend, runtime.indicator.backend),
    )
    resolved = resolve_options(options)
    logger.debug("Resolved AHMA options: %s", options_as_dict(resolved))

    result = calculate_ahma(parsed.values, options)
    labels = resolve_labels(parsed.labels, len(parsed.values))
    snapshot = build_snapshot(labels, parsed.values, result.ahma)
    logger.info("Computed AHMA over %d samples", len(parsed.values))

    if args.json:
        payload = {
            "options": options_as_dict(resolved),
            "labels": labels,
            "close": parsed.values,
            **result.to_dict(),
            "snapshot": snapshot.to_dict(),
            "skipped": parsed.skipped,
        }
        print(json.dumps(payload))
    else:
        for line in format_snapshot(snapshot, decimals=runtime.output.price_decimals):
            print(line)

    if args.output:
        target = Path(args.output)
        if not target.suffix:
            target = target.with_suffix(f".{runtime.output.format}")
        try:
            written = write_indicator_frame(indicator_frame(labels, parsed.values, result), target)
        except OSError as exc:
            logger.error("Failed to write indicator frame %s: %s", target, exc)
            return 1
        logger.info("Wrote %d rows to %s", len(parsed.values), written)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
