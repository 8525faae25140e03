#!/usr/bin/env python3
"""Quick perf benchmark for serializer layout and source map encoding."""

from __future__ import annotations

import argparse
import cProfile
import io
import pstats
import statistics
import time

from _demo import demo_buffer, emit_demo
from tqdm import tqdm

from jsemit import FormatOptions, LayoutMode


def _run_once(
    units: int,
    *,
    options: FormatOptions,
    label: str,
    show_progress: bool,
) -> tuple[float, int, int]:
    buffer = demo_buffer()
    start = time.perf_counter()
    total_chars = 0
    total_mapping_chars = 0
    iterator = tqdm(range(units), desc=label, unit="unit") if show_progress else range(units)
    for _ in iterator:
        serializer = emit_demo(buffer, options)
        total_chars += len(serializer.render())
        total_mapping_chars += len(serializer.source_map().mappings)
    duration = time.perf_counter() - start
    return duration, total_chars, total_mapping_chars


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark serializer throughput")
    parser.add_argument("--units", type=int, default=2000, help="Output units per run")
    parser.add_argument("--runs", type=int, default=5, help="Measured runs")
    parser.add_argument("--warmups", type=int, default=1, help="Warmup runs")
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in LayoutMode],
        default=LayoutMode.PRETTY.value,
        help="Layout mode (default: pretty)",
    )
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable tqdm progress bars (useful for pure timing)",
    )
    parser.add_argument(
        "--profile",
        action="store_true",
        help="Run cProfile and print top hotspots",
    )
    parser.add_argument(
        "--profile-top",
        type=int,
        default=30,
        help="Number of cProfile rows to print (default: 30)",
    )
    parser.add_argument(
        "--profile-sort",
        type=str,
        default="tottime",
        help="cProfile sort key (default: tottime, common: cumulative)",
    )
    args = parser.parse_args()

    if args.units <= 0:
        raise SystemExit(f"Invalid --units: {args.units}")

    options = FormatOptions.for_mode(LayoutMode(args.mode))
    show_progress = not args.no_progress

    def _benchmark() -> tuple[list[float], int, int]:
        for warmup_idx in range(max(args.warmups, 0)):
            _run_once(
                args.units,
                options=options,
                label=f"warmup {warmup_idx + 1}/{max(args.warmups, 0)}",
                show_progress=show_progress,
            )

        timings: list[float] = []
        chars = 0
        mapping_chars = 0
        for run_idx in range(max(args.runs, 1)):
            duration, chars, mapping_chars = _run_once(
                args.units,
                options=options,
                label=f"run {run_idx + 1}/{max(args.runs, 1)}",
                show_progress=show_progress,
            )
            timings.append(duration)
        return timings, chars, mapping_chars

    if args.profile:
        profiler = cProfile.Profile()
        profiler.enable()
        timings, chars, mapping_chars = _benchmark()
        profiler.disable()
        stream = io.StringIO()
        stats = pstats.Stats(profiler, stream=stream)
        stats.sort_stats(args.profile_sort).print_stats(max(args.profile_top, 1))
        print("\n[cProfile top functions]")
        print(stream.getvalue())
    else:
        timings, chars, mapping_chars = _benchmark()

    mean = statistics.mean(timings)

    print(f"Mode: {options.mode}")
    print(f"Units: {args.units}")
    print(f"Output chars: {chars}")
    print(f"Mapping chars: {mapping_chars}")
    print(f"Runs: {len(timings)} (warmups={max(args.warmups, 0)})")
    print(f"Best:   {min(timings):.4f}s")
    print(f"Median: {statistics.median(timings):.4f}s")
    print(f"Mean:   {mean:.4f}s")
    print(f"Worst:  {max(timings):.4f}s")
    print(f"Units/s (mean): {args.units / mean:.1f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
