#!/usr/bin/env python3
"""Quick perf benchmark for statement formatting."""

from __future__ import annotations

import argparse
import cProfile
import io
import pstats
import statistics
import time

from tqdm import tqdm

from vclpy.ast import (
    BlockStatement,
    CaseStatement,
    Comment,
    Ident,
    IfStatement,
    InfixExpression,
    Meta,
    RemoveStatement,
    ReturnStatement,
    SetStatement,
    SourceFile,
    String,
    SubroutineDeclaration,
    SwitchStatement,
)
from vclpy.format import FormatOptions, format_source


def _build_subroutine(index: int) -> SubroutineDeclaration:
    condition = InfixExpression(
        InfixExpression(Ident("req.http.Host"), "==", String(f"example-{index}.com")),
        "&&",
        InfixExpression(Ident("req.url"), "~", String("^/static/")),
    )
    consequence = BlockStatement(
        statements=(
            SetStatement(
                Ident("req.http.X-Backend"),
                "=",
                String("static"),
                meta=Meta(nest=2, trailing=(Comment("# route"),)),
            ),
            RemoveStatement(Ident("req.http.Cookie"), meta=Meta(nest=2)),
        ),
        meta=Meta(nest=2),
    )
    switch = SwitchStatement(
        Ident("req.http.X-Tier"),
        cases=(
            CaseStatement(
                InfixExpression(Ident("req.http.X-Tier"), "==", String("gold")),
                statements=(ReturnStatement(Ident("pass"), meta=Meta(nest=2)),),
                meta=Meta(nest=2),
            ),
            CaseStatement(None, meta=Meta(nest=2)),
        ),
        meta=Meta(nest=1, previous_empty_lines=1),
    )
    body = BlockStatement(
        statements=(
            IfStatement("if", condition, consequence, meta=Meta(nest=1)),
            switch,
            ReturnStatement(Ident("lookup"), meta=Meta(nest=1, previous_empty_lines=1)),
        ),
        meta=Meta(nest=1),
    )
    return SubroutineDeclaration(Ident(f"vcl_recv_{index}"), body)


def _run_once(
    sources: list[SourceFile],
    options: FormatOptions,
    *,
    label: str,
    show_progress: bool,
) -> tuple[float, int]:
    start = time.perf_counter()
    total_lines = 0
    iterator = tqdm(sources, desc=label, unit="file") if show_progress else sources
    for source in iterator:
        total_lines += format_source(source, options).count("\n")
    duration = time.perf_counter() - start
    return duration, total_lines


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark VCL statement formatting throughput")
    parser.add_argument("--files", type=int, default=200, help="Synthetic files per run")
    parser.add_argument("--subroutines", type=int, default=20, help="Subroutines per file")
    parser.add_argument("--runs", type=int, default=5, help="Measured runs")
    parser.add_argument("--warmups", type=int, default=1, help="Warmup runs")
    parser.add_argument(
        "--preset",
        type=str,
        default="default",
        help="Format preset (default, compact, expanded)",
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
    args = parser.parse_args()

    options = FormatOptions.for_preset(args.preset)
    sources = [
        SourceFile(tuple(_build_subroutine(index) for index in range(max(args.subroutines, 1))))
        for _ in range(max(args.files, 1))
    ]
    show_progress = not args.no_progress

    def _benchmark() -> tuple[list[float], int]:
        for warmup_idx in range(max(args.warmups, 0)):
            _run_once(
                sources,
                options,
                label=f"warmup {warmup_idx + 1}/{max(args.warmups, 0)}",
                show_progress=show_progress,
            )

        timings: list[float] = []
        lines_count = 0
        for run_idx in range(max(args.runs, 1)):
            duration, lines_count = _run_once(
                sources,
                options,
                label=f"run {run_idx + 1}/{max(args.runs, 1)}",
                show_progress=show_progress,
            )
            timings.append(duration)
        return timings, lines_count

    if args.profile:
        profiler = cProfile.Profile()
        profiler.enable()
        timings, lines_count = _benchmark()
        profiler.disable()
        stream = io.StringIO()
        stats = pstats.Stats(profiler, stream=stream)
        stats.sort_stats("tottime").print_stats(max(args.profile_top, 1))
        print("\n[cProfile top functions]")
        print(stream.getvalue())
    else:
        timings, lines_count = _benchmark()

    mean = statistics.mean(timings)
    print(f"Files: {len(sources)}")
    print(f"Lines per run: {lines_count}")
    print(f"Runs: {len(timings)} (warmups={max(args.warmups, 0)})")
    print(f"Best:   {min(timings):.4f}s")
    print(f"Median: {statistics.median(timings):.4f}s")
    print(f"Mean:   {mean:.4f}s")
    print(f"Worst:  {max(timings):.4f}s")
    print(f"Files/s (mean): {len(sources) / mean:.1f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
