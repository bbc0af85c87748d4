#!/usr/bin/env python3

# This file performs multiple runs of dungeon generation, collecting and reporting metrics.
# Used for testing both performance of the algorithm and quality of resulting dungeons.

from __future__ import annotations

import argparse
import datetime
from dataclasses import dataclass
import json
import math
import os
import random
import statistics
from typing import Any, Dict, List, Sequence, Tuple

import networkx as nx

from dungeon_config import DungeonConfig
from dungeon_constants import DEFAULT_RETRY_BUDGET, DEFAULT_TARGET_ROOMS
from dungeon_generator import DungeonGenerator
from dungeon_models import Room, TileType

PERCENTILES = [5.0, 25.0, 50.0, 75.0, 95.0]


@dataclass
class GenerationRunResult:
    seed: int
    duration: float
    total_rooms: int
    room_target: int
    completed: bool
    bounding_box_area: int
    floor_area: int
    is_linear_chain: bool
    graph_diameter: int
    generation_metrics: Dict[str, float | int | bool]


def door_points(room: Room):
    return [room.tile_at(row, column).point for row, column in room.find(TileType.DOOR)]


def build_room_graph(rooms: Sequence[Room]) -> nx.Graph:
    """Link two rooms when one's door sits on the other's border."""
    graph = nx.Graph()
    covered = [set(room.tile_points()) for room in rooms]
    for index in range(len(rooms)):
        graph.add_node(index)
    for index, room in enumerate(rooms):
        for point in door_points(room):
            for other, points in enumerate(covered):
                if other != index and point in points:
                    graph.add_edge(index, other)
    return graph


def is_linear_chain(graph: nx.Graph) -> bool:
    """True when the rooms form a single path in chain order."""
    count = graph.number_of_nodes()
    if count <= 1:
        return True
    if graph.number_of_edges() != count - 1:
        return False
    return all(graph.has_edge(index, index + 1) for index in range(count - 1))


def bounding_box_area(rooms: Sequence[Room]) -> int:
    points = [point for room in rooms for point in room.tile_points()]
    if not points:
        return 0
    width = max(p.x for p in points) - min(p.x for p in points) + 1
    height = max(p.y for p in points) - min(p.y for p in points) + 1
    return width * height


def run_single_generation(seed: int, target_rooms: int, retry_budget: int) -> GenerationRunResult:
    """Run one dungeon generation with the provided seed and collect metrics."""
    config = DungeonConfig(
        target_rooms=target_rooms,
        retry_budget=retry_budget,
        random_seed=seed,
        collect_metrics=True,
    )
    generator = DungeonGenerator(config)
    rooms = generator.generate()

    graph = build_room_graph(rooms)
    linear = is_linear_chain(graph)
    diameter = 0
    if graph.number_of_nodes() > 1 and nx.is_connected(graph):
        diameter = int(nx.diameter(graph))

    metrics = generator.metrics.snapshot() if generator.metrics else {}
    return GenerationRunResult(
        seed=seed,
        duration=float(metrics.get("total_time", 0.0)),
        total_rooms=len(rooms),
        room_target=target_rooms,
        completed=len(rooms) == target_rooms,
        bounding_box_area=bounding_box_area(rooms),
        floor_area=sum(room.width * room.height for room in rooms),
        is_linear_chain=linear,
        graph_diameter=diameter,
        generation_metrics=metrics,
    )


def run_benchmark(
    num_runs: int, seed: int | None, target_rooms: int, retry_budget: int
) -> List[GenerationRunResult]:
    """Run the generator multiple times and collect run-level metrics."""
    rng = random.Random(seed)
    results: List[GenerationRunResult] = []
    for _ in range(num_runs):
        run_seed = rng.randint(0, 1_000_000)
        results.append(run_single_generation(run_seed, target_rooms, retry_budget))
    return results


def percentile(values: List[float], pct: float) -> float:
    if not values:
        return float("nan")
    if pct <= 0:
        return min(values)
    if pct >= 100:
        return max(values)
    ordered = sorted(values)
    rank = (len(ordered) - 1) * (pct / 100.0)
    lower = math.floor(rank)
    upper = math.ceil(rank)
    if lower == upper:
        return ordered[int(rank)]
    fraction = rank - lower
    return ordered[lower] + (ordered[upper] - ordered[lower]) * fraction


def format_seconds(value: float) -> str:
    if value >= 1.0:
        return f"{value:.3f}s"
    return f"{value * 1000:.1f}ms"


def summarize(values: List[float]) -> Dict[str, float]:
    summary = {
        "mean": statistics.fmean(values) if values else float("nan"),
        "min": min(values) if values else float("nan"),
        "max": max(values) if values else float("nan"),
    }
    for pct in PERCENTILES:
        summary[f"p{pct:g}"] = percentile(values, pct)
    return summary


def json_safe_number(value: float) -> float | None:
    if isinstance(value, float) and (math.isnan(value) or math.isinf(value)):
        return None
    return value


def summarize_results(results: List[GenerationRunResult]) -> Dict[str, Any]:
    durations = [result.duration for result in results]
    rooms = [float(result.total_rooms) for result in results]
    collisions = [float(result.generation_metrics.get("collisions", 0)) for result in results]
    worst_index, worst_duration = max(enumerate(durations), key=lambda item: item[1])
    return {
        "generation_time": {k: json_safe_number(v) for k, v in summarize(durations).items()},
        "rooms_placed": {k: json_safe_number(v) for k, v in summarize(rooms).items()},
        "collisions": {k: json_safe_number(v) for k, v in summarize(collisions).items()},
        "completion_fraction": sum(1 for r in results if r.completed) / len(results),
        "linear_chain_fraction": sum(1 for r in results if r.is_linear_chain) / len(results),
        "worst_case_run": {
            "duration_seconds": json_safe_number(worst_duration),
            "seed": results[worst_index].seed,
            "run_id": worst_index + 1,
        },
    }


def write_report(data: Dict[str, Any]) -> str:
    timestamp = datetime.datetime.now(datetime.timezone.utc)
    filename_stamp = timestamp.strftime("%Y%m%dT%H%M%SZ")
    script_dir = os.path.dirname(os.path.abspath(__file__))
    benchmarks_dir = os.path.abspath(os.path.join(script_dir, "..", "benchmarks"))
    os.makedirs(benchmarks_dir, exist_ok=True)
    output_path = os.path.join(benchmarks_dir, f"benchmark-{filename_stamp}.json")
    with open(output_path, "w", encoding="utf-8") as handle:
        json.dump(data, handle, indent=2, sort_keys=True)
        handle.write("\n")
    return output_path


def main(argv: List[str] | None = None) -> Tuple[List[GenerationRunResult], Dict[str, Any]]:
    parser = argparse.ArgumentParser(
        description=(
            "Run the dungeon generator multiple times and report timing and quality statistics."
        )
    )
    parser.add_argument(
        "-n",
        "--runs",
        type=int,
        default=50,
        help="Number of dungeon generations to execute (default: 50)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Optional seed for the benchmark harness RNG; keeps run seeds reproducible",
    )
    parser.add_argument(
        "--rooms",
        type=int,
        default=DEFAULT_TARGET_ROOMS,
        help=f"Target rooms per dungeon (default: {DEFAULT_TARGET_ROOMS})",
    )
    parser.add_argument(
        "--retries",
        type=int,
        default=DEFAULT_RETRY_BUDGET,
        help=f"Retry budget per anchor (default: {DEFAULT_RETRY_BUDGET})",
    )
    parser.add_argument(
        "--no-report",
        action="store_true",
        help="Skip writing the JSON report under benchmarks/",
    )
    args = parser.parse_args(argv)

    if args.runs <= 0:
        raise SystemExit("Number of runs must be a positive integer")
    if args.rooms <= 0:
        raise SystemExit("Number of rooms must be a positive integer")
    if args.retries < 0:
        raise SystemExit("Retry budget must be non-negative")

    results = run_benchmark(args.runs, args.seed, args.rooms, args.retries)

    for idx, result in enumerate(results, start=1):
        print(
            "Run {idx:02d}: {time} (seed {seed}) | rooms {rooms}/{target} | "
            "collisions {collisions} | bbox {bbox} | chain {chain}".format(
                idx=idx,
                time=format_seconds(result.duration),
                seed=result.seed,
                rooms=result.total_rooms,
                target=result.room_target,
                collisions=result.generation_metrics.get("collisions", 0),
                bbox=result.bounding_box_area,
                chain="ok" if result.is_linear_chain else "BROKEN",
            )
        )

    summary = summarize_results(results)
    print()
    print(f"Config runs: {args.runs}")
    print(f"Completed chains: {summary['completion_fraction']:.1%}")
    print(f"Linear chains: {summary['linear_chain_fraction']:.1%}")
    worst = summary["worst_case_run"]
    print(
        f"Worst-case generation time: {format_seconds(worst['duration_seconds'] or 0.0)}"
        f" (seed {worst['seed']})"
    )

    if not args.no_report:
        data = {
            "benchmark_run_info": {
                "timestamp": datetime.datetime.now(datetime.timezone.utc)
                .replace(microsecond=0)
                .isoformat(),
                "num_iterations": args.runs,
                "parameters": {
                    "seed": args.seed,
                    "rooms": args.rooms,
                    "retries": args.retries,
                },
            },
            "aggregated_results": summary,
            "results": [
                {
                    "run_id": idx,
                    "seed": result.seed,
                    "total_rooms": result.total_rooms,
                    "completed": result.completed,
                    "total_time_seconds": result.duration,
                    "bounding_box_area": result.bounding_box_area,
                    "floor_area": result.floor_area,
                    "is_linear_chain": result.is_linear_chain,
                    "graph_diameter": result.graph_diameter,
                    "generation_metrics": result.generation_metrics,
                }
                for idx, result in enumerate(results, start=1)
            ],
        }
        output_path = write_report(data)
        print(f"\nSaved benchmark results to {os.path.relpath(output_path)}")

    return results, summary


if __name__ == "__main__":
    main()
