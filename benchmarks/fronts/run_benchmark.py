"""Benchmark runner comparing hvcore strategies and pymoo on sampled fronts.

For every front shape, dimension and size, this script times the total
hypervolume with each applicable hvcore strategy and with pymoo, checks that
all values agree, and times the least-contributor query of the default
strategy.

Usage:
    uv run python benchmarks/fronts/run_benchmark.py
"""

import json
import logging
import sys
import time
from collections import defaultdict
from datetime import UTC, datetime
from pathlib import Path

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import numpy as np

from benchmarks.fronts.problems import FRONTS
from benchmarks.metrics import reference_hypervolume
from hvcore import Hypervolume, expected_operations

# Configure logging
logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)


# Experiment parameters
SIZES = {2: [100, 1000], 3: [100, 500], 4: [25, 50], 5: [15, 30]}
STRATEGIES = {2: ["native2d", "wfg"], 3: ["beume3d", "wfg"], 4: ["wfg"], 5: ["wfg"]}
REFERENCE_OFFSET = 0.1
N_RUNS = 3
SEEDS = list(range(N_RUNS))
REL_TOLERANCE = 1e-9


def run_hvcore(points: np.ndarray, reference: np.ndarray, algorithm: str) -> tuple[float, float]:
    """Time one hypervolume computation with hvcore.

    Args:
        points: (n, d) front.
        reference: Reference point (d,).
        algorithm: Registered strategy name.

    Returns:
        Tuple of (hypervolume, elapsed_time_seconds).
    """
    hv = Hypervolume(points)
    start_time = time.perf_counter()
    value = hv.compute(reference, algorithm=algorithm)
    elapsed = time.perf_counter() - start_time
    return value, elapsed


def run_pymoo(points: np.ndarray, reference: np.ndarray) -> tuple[float, float]:
    """Time one hypervolume computation with pymoo."""
    start_time = time.perf_counter()
    value = reference_hypervolume(points, reference)
    elapsed = time.perf_counter() - start_time
    return value, elapsed


def run_least_contributor(points: np.ndarray, reference: np.ndarray) -> float:
    """Time the least-contributor query with the default strategy.

    Returns:
        Elapsed time in seconds.
    """
    hv = Hypervolume(points)
    start_time = time.perf_counter()
    hv.least_contributor(reference)
    return time.perf_counter() - start_time


def run_benchmark() -> dict:
    """Run the full benchmark suite.

    Returns:
        Dictionary containing metadata and results.
    """
    timestamp = datetime.now(UTC).isoformat()

    metadata = {
        "timestamp": timestamp,
        "parameters": {
            "sizes": {str(d): sizes for d, sizes in SIZES.items()},
            "strategies": {str(d): names for d, names in STRATEGIES.items()},
            "reference_offset": REFERENCE_OFFSET,
            "n_runs": N_RUNS,
            "seeds": SEEDS,
        },
    }

    results = []
    mismatches = 0

    for front_name, sampler in FRONTS.items():
        for d, sizes in SIZES.items():
            for n in sizes:
                for seed in SEEDS:
                    points = sampler(np.random.default_rng(seed), n, d)
                    reference = np.full(d, 1.0 + REFERENCE_OFFSET)
                    logger.info(
                        f"Running {front_name} front, d={d}, n={points.shape[0]} (seed={seed}), "
                        f"expected operations: {expected_operations(points.shape[0], d)}"
                    )

                    expected, elapsed = run_pymoo(points, reference)
                    results.append(
                        {
                            "library": "pymoo",
                            "front": front_name,
                            "dimension": d,
                            "n_points": int(points.shape[0]),
                            "seed": seed,
                            "hypervolume": expected,
                            "time_seconds": elapsed,
                        }
                    )

                    for algorithm in STRATEGIES[d]:
                        value, elapsed = run_hvcore(points, reference, algorithm)
                        if not np.isclose(value, expected, rtol=REL_TOLERANCE, atol=0.0):
                            mismatches += 1
                            logger.warning(f"  {algorithm} disagrees with pymoo: {value!r} vs {expected!r}")
                        results.append(
                            {
                                "library": f"hvcore-{algorithm}",
                                "front": front_name,
                                "dimension": d,
                                "n_points": int(points.shape[0]),
                                "seed": seed,
                                "hypervolume": value,
                                "time_seconds": elapsed,
                            }
                        )
                        logger.info(f"  {algorithm}: HV {value:.6f}, Time: {elapsed:.4f}s")

                    elapsed = run_least_contributor(points, reference)
                    results.append(
                        {
                            "library": "hvcore-least-contributor",
                            "front": front_name,
                            "dimension": d,
                            "n_points": int(points.shape[0]),
                            "seed": seed,
                            "hypervolume": None,
                            "time_seconds": elapsed,
                        }
                    )

    metadata["mismatches"] = mismatches
    return {"metadata": metadata, "results": results}


def print_summary(results: dict) -> None:
    """Print a summary table of mean run times.

    Args:
        results: The benchmark results dictionary.
    """
    time_data = defaultdict(lambda: defaultdict(list))
    for r in results["results"]:
        key = (r["front"], r["dimension"], r["n_points"])
        time_data[key][r["library"]].append(r["time_seconds"])

    libraries = sorted({r["library"] for r in results["results"]})

    print("\n" + "=" * 100)
    print("BENCHMARK SUMMARY")
    print("=" * 100)
    print(f"\nRuns per configuration: {N_RUNS}, mismatches: {results['metadata']['mismatches']}")
    print("\nTiming (mean seconds per run):")

    header = f"{'Front':<14}{'d':>3}{'n':>6}"
    for lib in libraries:
        header += f"{lib:>26}"
    print(header)
    print("-" * len(header))

    for key in sorted(time_data):
        front, d, n = key
        row = f"{front:<14}{d:>3}{n:>6}"
        for lib in libraries:
            times = time_data[key][lib]
            if times:
                row += f"{np.mean(times):>26.4f}"
            else:
                row += f"{'N/A':>26}"
        print(row)

    print()


def main() -> None:
    """Main entry point for the benchmark."""
    logger.info("Starting hypervolume benchmark suite")
    logger.info(f"Parameters: fronts={list(FRONTS)}, runs={N_RUNS}")

    results = run_benchmark()

    # Save results to JSON
    output_path = Path(__file__).parent / "results" / "benchmark_results.json"
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w") as f:
        json.dump(results, f, indent=2)

    logger.info(f"Results saved to {output_path}")

    print_summary(results)


if __name__ == "__main__":
    main()
