#!/usr/bin/env python3
"""Quick perf benchmark for TLP document parsing."""

from __future__ import annotations

import argparse
import cProfile
import io
from pathlib import Path
import pstats
import statistics
import time

from tqdm import tqdm

from graphtlp import load_document


def _collect_tlp_files(root: Path) -> list[Path]:
    if root.is_file():
        return [root]
    files = sorted(root.rglob("*.tlp"))
    return [path for path in files if path.is_file()]


def _run_once(
    files: list[Path],
    *,
    label: str,
    show_progress: bool,
) -> tuple[float, int, int, int, int]:
    start = time.perf_counter()
    total_nodes = 0
    total_edges = 0
    total_diagnostics = 0
    iterator = (
        tqdm(files, desc=label, unit="file")
        if show_progress
        else files
    )
    for path in iterator:
        parsed = load_document(path)
        total_nodes += parsed.document.node_count
        total_edges += parsed.document.edge_count
        total_diagnostics += len(parsed.diagnostics)
    duration = time.perf_counter() - start
    return duration, len(files), total_nodes, total_edges, total_diagnostics


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark TLP parsing throughput")
    parser.add_argument("root", type=Path, help="A .tlp file or a directory searched for .tlp files")
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

    root: Path = args.root
    if not root.exists():
        raise SystemExit(f"Invalid root: {root}")

    files = _collect_tlp_files(root)
    if not files:
        raise SystemExit(f"No .tlp files found under {root}")

    show_progress = not args.no_progress

    def _benchmark() -> tuple[list[float], int, int, int, int]:
        for warmup_idx in range(max(args.warmups, 0)):
            _run_once(
                files,
                label=f"warmup {warmup_idx + 1}/{max(args.warmups, 0)}",
                show_progress=show_progress,
            )

        timings: list[float] = []
        counts = (0, 0, 0, 0)
        for run_idx in range(max(args.runs, 1)):
            duration, *rest = _run_once(
                files,
                label=f"run {run_idx + 1}/{max(args.runs, 1)}",
                show_progress=show_progress,
            )
            timings.append(duration)
            counts = tuple(rest)
        return timings, *counts

    if args.profile:
        profiler = cProfile.Profile()
        profiler.enable()
        timings, files_count, nodes_count, edges_count, diagnostics_count = _benchmark()
        profiler.disable()
        stream = io.StringIO()
        stats = pstats.Stats(profiler, stream=stream)
        stats.sort_stats(args.profile_sort).print_stats(max(args.profile_top, 1))
        print("\n[cProfile top functions]")
        print(stream.getvalue())
    else:
        timings, files_count, nodes_count, edges_count, diagnostics_count = _benchmark()

    mean = statistics.mean(timings)

    print(f"Dataset: {root}")
    print(f"Files: {files_count}")
    print(f"Nodes: {nodes_count}")
    print(f"Edges: {edges_count}")
    print(f"Diagnostics: {diagnostics_count}")
    print(f"Runs: {len(timings)} (warmups={max(args.warmups, 0)})")
    print(f"Best:   {min(timings):.4f}s")
    print(f"Median: {statistics.median(timings):.4f}s")
    print(f"Mean:   {mean:.4f}s")
    print(f"Worst:  {max(timings):.4f}s")
    print(f"Files/s (mean): {files_count / mean:.1f}")
    print(f"Edges/s (mean): {edges_count / mean:.1f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
