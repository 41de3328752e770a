"""Shared test fixtures for hvcore tests.

This module provides common fixtures and helpers used across test modules:
- rng: Seeded random number generator
- Fronts in 2, 3 and 4 objectives
- brute_force_hypervolume: inclusion-exclusion oracle for small sets
- random_front: mutually non-dominated points sampled on a sphere
"""

from itertools import combinations

import numpy as np
import pytest


def brute_force_hypervolume(points: np.ndarray, reference_point: np.ndarray) -> float:
    """Exact hypervolume by inclusion-exclusion over every subset.

    Exponential in the number of points; only for sets of about a dozen points.
    """
    points = np.asarray(points, dtype=np.float64)
    reference_point = np.asarray(reference_point, dtype=np.float64)
    total = 0.0
    for size in range(1, points.shape[0] + 1):
        sign = 1.0 if size % 2 == 1 else -1.0
        for subset in combinations(range(points.shape[0]), size):
            corner = points[list(subset)].max(axis=0)
            total += sign * float(np.prod(np.clip(reference_point - corner, 0.0, None)))
    return total


def brute_force_contributions(points: np.ndarray, reference_point: np.ndarray) -> np.ndarray:
    """Exclusive contributions as total minus the total without each point."""
    points = np.asarray(points, dtype=np.float64)
    total = brute_force_hypervolume(points, reference_point)
    return np.array(
        [total - brute_force_hypervolume(np.delete(points, i, axis=0), reference_point) for i in range(len(points))]
    )


def random_front(rng: np.random.Generator, n: int, d: int) -> np.ndarray:
    """Sample n mutually non-dominated points on the positive unit sphere."""
    raw = np.abs(rng.standard_normal((n, d)))
    return raw / np.linalg.norm(raw, axis=1, keepdims=True)


@pytest.fixture
def rng() -> np.random.Generator:
    """Provide a seeded random number generator for deterministic tests."""
    return np.random.default_rng(42)


@pytest.fixture
def front_2d() -> np.ndarray:
    """A four-point staircase; with reference (5, 5) every step owns a unit square.

    Returns:
        Array of shape (4, 2).
    """
    return np.array(
        [
            [1.0, 4.0],
            [2.0, 3.0],
            [3.0, 2.0],
            [4.0, 1.0],
        ]
    )


@pytest.fixture
def front_3d() -> np.ndarray:
    """Three-objective points, mutually non-dominated.

    Returns:
        Array of shape (4, 3).
    """
    return np.array(
        [
            [1.0, 2.0, 3.0],
            [2.0, 1.0, 3.0],
            [3.0, 3.0, 1.0],
            [2.0, 2.0, 2.0],
        ]
    )


@pytest.fixture
def front_4d() -> np.ndarray:
    """Four-objective points, mutually non-dominated.

    Returns:
        Array of shape (5, 4).
    """
    return np.array(
        [
            [1.0, 2.0, 3.0, 4.0],
            [4.0, 3.0, 2.0, 1.0],
            [2.0, 2.0, 2.0, 2.0],
            [3.0, 1.0, 4.0, 2.0],
            [2.5, 3.5, 1.0, 3.0],
        ]
    )


@pytest.fixture
def mixed_3d() -> np.ndarray:
    """Three-objective points including a dominated point and a duplicate.

    Returns:
        Array of shape (6, 3).
    """
    return np.array(
        [
            [1.0, 3.0, 2.0],
            [3.0, 1.0, 2.0],
            [2.0, 2.0, 1.0],
            [2.5, 3.0, 2.5],  # dominated by [1, 3, 2]
            [2.0, 2.0, 1.0],  # duplicate of index 2
            [0.5, 3.5, 3.5],
        ]
    )
