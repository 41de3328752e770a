"""Sampled Pareto fronts for hypervolume benchmarking.

Every sampler returns n mutually non-dominated points in [0, 1]^d, drawn from
the true Pareto front of a DTLZ-style problem. The shapes stress the
strategies differently: linear and spherical fronts spread points evenly,
while the disconnected front puts many points close to each other.

References:
    Deb, K., Thiele, L., Laumanns, M., & Zitzler, E. (2005). Scalable test
    problems for evolutionary multiobjective optimization. In Evolutionary
    Multiobjective Optimization (pp. 105-145). Springer.
"""

from collections.abc import Callable

import numpy as np

from hvcore import pareto_front_indices


def _simplex(rng: np.random.Generator, n: int, d: int) -> np.ndarray:
    # uniform on the unit simplex
    return rng.dirichlet(np.ones(d), size=n)


def linear_front(rng: np.random.Generator, n: int, d: int) -> np.ndarray:
    """DTLZ1 front: the simplex sum(f) = 0.5, rescaled to sum(f) = 1.

    Args:
        rng: Random number generator.
        n: Number of points.
        d: Number of objectives.

    Returns:
        Points (n, d) to minimize
    """
    return _simplex(rng, n, d)


def spherical_front(rng: np.random.Generator, n: int, d: int) -> np.ndarray:
    """DTLZ2 front: the positive orthant of the unit sphere (concave)."""
    points = np.abs(rng.standard_normal((n, d)))
    return points / np.linalg.norm(points, axis=1, keepdims=True)


def convex_front(rng: np.random.Generator, n: int, d: int) -> np.ndarray:
    """Convex front: the spherical front mirrored through the center of the unit cube."""
    return 1.0 - spherical_front(rng, n, d)


def disconnected_front(rng: np.random.Generator, n: int, d: int) -> np.ndarray:
    """DTLZ7 front: 2^(d-1) disconnected regions.

    The first d-1 objectives are sampled in [0, 1]; the last one follows
    h = d - sum(f_i / 2 * (1 + sin(3 pi f_i))) with g = 1, then everything is
    rescaled to [0, 1] and the dominated samples are dropped.
    """
    head = rng.uniform(0.0, 1.0, size=(n, d - 1))
    tail = 2.0 * (d - np.sum(head / 2.0 * (1.0 + np.sin(3.0 * np.pi * head)), axis=1))
    points = np.column_stack([head, tail])
    points = (points - points.min(axis=0)) / np.ptp(points, axis=0)
    return points[pareto_front_indices(points)]


# Registry of all front samplers
FRONTS: dict[str, Callable[[np.random.Generator, int, int], np.ndarray]] = {
    "linear": linear_front,
    "spherical": spherical_front,
    "convex": convex_front,
    "disconnected": disconnected_front,
}
