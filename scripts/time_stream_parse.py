#!/usr/bin/env python3
"""Quick perf benchmark for stream parsing."""

from __future__ import annotations

import argparse
import cProfile
import io
from pathlib import Path
import pstats
import statistics
import time

from tqdm import tqdm

from garbagestream.ast import garbage_length, score
from garbagestream.parser import parse

DEFAULT_INPUT = Path("data/input-9.txt")
PROFILE_TOP = 20


def _run_once(
    text: str,
    *,
    repeat: int,
    label: str,
    show_progress: bool,
) -> tuple[float, int, int]:
    start = time.perf_counter()
    total_score = 0
    total_garbage = 0
    iterator = (
        tqdm(range(repeat), desc=label, unit="parse")
        if show_progress
        else range(repeat)
    )
    for _ in iterator:
        parsed = parse(text)
        if parsed.ast is None:
            raise SystemExit(f"syntax error: {parsed.diagnostics[0].message}")
        total_score = score(parsed.ast)
        total_garbage = garbage_length(parsed.ast)
    duration = time.perf_counter() - start
    return duration, total_score, total_garbage


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark stream parsing throughput")
    parser.add_argument(
        "--input",
        type=Path,
        default=DEFAULT_INPUT,
        help=f"Path to the stream file (default: {DEFAULT_INPUT})",
    )
    parser.add_argument("--repeat", type=int, default=100, help="Parses per run")
    parser.add_argument("--runs", type=int, default=5, help="Measured runs")
    parser.add_argument("--warmups", type=int, default=1, help="Warmup runs")
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
    args = parser.parse_args()

    input_path: Path = args.input
    if not input_path.is_file():
        raise SystemExit(f"Invalid --input: {input_path}")

    text = input_path.read_text(encoding="utf-8")
    repeat = max(args.repeat, 1)
    show_progress = not args.no_progress

    def _benchmark() -> tuple[list[float], int, int]:
        for warmup_idx in range(max(args.warmups, 0)):
            _run_once(
                text,
                repeat=repeat,
                label=f"warmup {warmup_idx + 1}/{max(args.warmups, 0)}",
                show_progress=show_progress,
            )

        timings: list[float] = []
        last_score = 0
        last_garbage = 0
        for run_idx in range(max(args.runs, 1)):
            duration, last_score, last_garbage = _run_once(
                text,
                repeat=repeat,
                label=f"run {run_idx + 1}/{max(args.runs, 1)}",
                show_progress=show_progress,
            )
            timings.append(duration)
        return timings, last_score, last_garbage

    if args.profile:
        profiler = cProfile.Profile()
        profiler.enable()
        timings, last_score, last_garbage = _benchmark()
        profiler.disable()
        stream = io.StringIO()
        stats = pstats.Stats(profiler, stream=stream)
        stats.sort_stats("cumulative").print_stats(PROFILE_TOP)
        print("\n[cProfile top functions]")
        print(stream.getvalue())
    else:
        timings, last_score, last_garbage = _benchmark()

    mean = statistics.mean(timings)

    print(f"Input: {input_path} ({len(text)} chars)")
    print(f"Score: {last_score}")
    print(f"Garbage length: {last_garbage}")
    print(f"Runs: {len(timings)} x {repeat} parses (warmups={max(args.warmups, 0)})")
    print(f"Best:   {min(timings):.4f}s")
    print(f"Median: {statistics.median(timings):.4f}s")
    print(f"Mean:   {mean:.4f}s")
    print(f"Worst:  {max(timings):.4f}s")
    print(f"Chars/s (mean): {len(text) * repeat / mean:.1f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
