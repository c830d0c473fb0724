#!/usr/bin/env python3
from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from perspective.feeds import FeedError, convert_csv_to_binary, generate_png_from_binlog
from perspective.utils.configs import VisualizationConfig, time_range_default
from perspective.visualizers import VISUALIZER_NAMES, make_visualizer

CSV_CONVERT = "csv-convert"
VIS_PREFIX = "vis-"
ACTIONS = (CSV_CONVERT,) + tuple(VIS_PREFIX + name for name in VISUALIZER_NAMES)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="perspective",
        description="Render diagnostic images from event logs of an event-driven system",
    )
    parser.add_argument("action", help=f"One of: {', '.join(ACTIONS)}")
    parser.add_argument("input", help="Input path (CSV for csv-convert, binary event log otherwise)")
    parser.add_argument("output", help="Output path (binary event log for csv-convert, PNG otherwise)")
    parser.add_argument("--error-reason-filter", type=str, default=None, help="Error reason filter configuration")
    parser.add_argument("--event-type-id", type=int, default=None, help="Event type ID to filter for")
    parser.add_argument("--region-id", type=int, default=None, help="Event region ID to filter for")
    parser.add_argument("--status", type=int, default=None, help="Event status to filter for")
    parser.add_argument("--min-time", type=int, default=0, help="Least recent time to show, in Unix epoch seconds")
    parser.add_argument("--max-time", type=int, default=None, help="Most recent time to show, in Unix epoch seconds (default: now)")
    parser.add_argument("--x-grid", type=int, default=0, help="Number of divisions separated by vertical grid lines")
    parser.add_argument("--run-time-scale", type=float, default=16.0, help="Pixels along y-axis for every doubling of run time")
    parser.add_argument("--width", type=int, default=256, help="Width of the rendered graph, in pixels")
    parser.add_argument("--height", type=int, default=128, help="Height of the rendered graph, in pixels")
    parser.add_argument("--color-steps", type=int, default=1, help="Number of color steps before clipping")
    return parser


def config_from_args(args: argparse.Namespace) -> VisualizationConfig:
    return VisualizationConfig(
        width=args.width,
        height=args.height,
        min_time=args.min_time,
        max_time=args.max_time if args.max_time is not None else time_range_default(),
        x_grid=args.x_grid,
        y_log2=args.run_time_scale,
        color_steps=args.color_steps,
        event_type=args.event_type_id,
        region=args.region_id,
        status=args.status,
        error_reason_filter=args.error_reason_filter,
    )


def run(args: argparse.Namespace) -> int:
    cfg = config_from_args(args)
    if args.action == CSV_CONVERT:
        written = convert_csv_to_binary(
            args.input,
            args.output,
            min_time=cfg.min_time,
            max_time=cfg.max_time,
            event_type=cfg.event_type,
            region=cfg.region,
            status=cfg.status,
            error_reason_filter=cfg.error_reason_filter,
        )
        print(f"Wrote {written} events to {args.output}")
        return 0

    name = args.action[len(VIS_PREFIX):] if args.action.startswith(VIS_PREFIX) else None
    if name not in VISUALIZER_NAMES:
        print("Unrecognized action.", file=sys.stderr)
        return 1
    vis = make_visualizer(name, cfg)
    recorded = generate_png_from_binlog(
        args.input,
        args.output,
        vis,
        min_time=cfg.min_time,
        max_time=cfg.max_time,
        event_type=cfg.event_type,
        region=cfg.region,
        status=cfg.status,
    )
    print(f"Rendered {recorded} events with {name} to {args.output}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        return run(args)
    except (FeedError, ValueError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
