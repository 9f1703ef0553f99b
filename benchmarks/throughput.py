#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import math
import statistics
import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "python"))

from aiterx import filter_map, for_each  # noqa: E402


def _percentile(sorted_values: list[float], percentile: float) -> float:
    if not sorted_values:
        raise ValueError("no values to summarize")
    if percentile <= 0.0:
        return sorted_values[0]
    if percentile >= 1.0:
        return sorted_values[-1]
    index = (len(sorted_values) - 1) * percentile
    low = int(math.floor(index))
    high = int(math.ceil(index))
    if low == high:
        return sorted_values[low]
    weight = index - low
    return sorted_values[low] + (sorted_values[high] - sorted_values[low]) * weight


async def _source(count: int):
    for i in range(count):
        yield (i,)


async def _plain(count: int) -> None:
    async for _ in _source(count):
        pass


async def _for_each(count: int) -> None:
    await for_each(_source(count), lambda value: None)


async def _filter_map(count: int) -> None:
    async for _ in filter_map(_source(count), lambda x: x if x % 2 else None):
        pass


_SCENARIOS = {
    "plain": _plain,
    "for_each": _for_each,
    "filter_map": _filter_map,
}


def _run_once(scenario, count: int) -> float:
    start = time.perf_counter()
    asyncio.run(scenario(count))
    end = time.perf_counter()
    return (end - start) * 1000.0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Benchmark helper overhead against a plain async for loop.",
    )
    parser.add_argument("--iterations", type=int, default=30)
    parser.add_argument("--warmup", type=int, default=5)
    parser.add_argument("--items", type=int, default=10_000)
    parser.add_argument(
        "scenarios",
        nargs="*",
        help="Scenarios to run (" + ", ".join(_SCENARIOS) + "); default: all",
    )
    args = parser.parse_args(argv)

    if args.iterations <= 0:
        parser.error("--iterations must be positive")
    if args.warmup < 0:
        parser.error("--warmup cannot be negative")
    unknown = [name for name in args.scenarios if name not in _SCENARIOS]
    if unknown:
        parser.error(f"unknown scenario: {unknown[0]}")

    for name in args.scenarios or list(_SCENARIOS):
        scenario = _SCENARIOS[name]
        for _ in range(args.warmup):
            _run_once(scenario, args.items)

        samples: list[float] = []
        for _ in range(args.iterations):
            samples.append(_run_once(scenario, args.items))

        samples.sort()
        print(f"scenario: {name} items: {args.items}")
        print(f"warmup: {args.warmup} iterations: {args.iterations}")
        print(f"mean: {statistics.fmean(samples):.3f} ms")
        print(f"median: {statistics.median(samples):.3f} ms")
        print(f"p95: {_percentile(samples, 0.95):.3f} ms")
        print(f"stdev: {statistics.pstdev(samples):.3f} ms")
        print(f"min: {samples[0]:.3f} ms")
        print(f"max: {samples[-1]:.3f} ms")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
