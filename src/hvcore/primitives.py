"""Geometric primitives shared by the hypervolume algorithms.

This module provides the pure functions the strategies are built from:
- dominates: scalar Pareto dominance check
- dominates_matrix: vectorized pairwise dominance
- pareto_front_indices: indices of the first (non-dominated) front
- nondominated_mask: duplicate-aware weak non-dominance filter
- box_volume: volume of the box between a point and the reference point
- limit_set: the remaining points clipped against one point

All functions assume minimization.
"""

import numpy as np


def dominates(a: np.ndarray, b: np.ndarray) -> bool:
    """Check if point a Pareto-dominates point b (minimization).

    A point a dominates b if and only if:
      - a[i] <= b[i] for ALL objectives
      - a[i] < b[i] for AT LEAST ONE objective

    Args:
        a: Objective values for point a. Shape (n_obj,).
        b: Objective values for point b. Shape (n_obj,).

    Returns:
        True if a dominates b, False otherwise.

    Examples:
        >>> dominates(np.array([1.0, 2.0]), np.array([2.0, 3.0]))
        True
        >>> dominates(np.array([1.0, 2.0]), np.array([1.0, 2.0]))
        False
    """
    return bool(np.all(a <= b) and np.any(a < b))


def dominates_matrix(objectives: np.ndarray) -> np.ndarray:
    """Compute pairwise dominance for all points (vectorized).

    Args:
        objectives: Objective values for all points. Shape (n, n_obj).

    Returns:
        Boolean array of shape (n, n) where result[i, j] = True iff
        point i dominates point j.

    Examples:
        >>> dom = dominates_matrix(np.array([[1.0, 1.0], [2.0, 2.0], [1.0, 2.0]]))
        >>> bool(dom[0, 1]), bool(dom[1, 0])
        (True, False)
    """
    a = objectives[:, np.newaxis, :]  # (n, 1, n_obj)
    b = objectives[np.newaxis, :, :]  # (1, n, n_obj)
    return np.all(a <= b, axis=2) & np.any(a < b, axis=2)


def pareto_front_indices(objectives: np.ndarray) -> np.ndarray:
    """Return the indices of the first Pareto front, in input order.

    A point belongs to the first front when no other point dominates it.
    Duplicated non-dominated points are all kept.

    Args:
        objectives: Objective values. Shape (n, n_obj).

    Returns:
        Integer array of indices into ``objectives``.

    Examples:
        >>> pareto_front_indices(np.array([[1.0, 4.0], [2.0, 2.0], [3.0, 3.0]]))
        array([0, 1])
    """
    if objectives.shape[0] == 0:
        return np.array([], dtype=np.intp)
    dominated = dominates_matrix(objectives).any(axis=0)
    return np.flatnonzero(~dominated)


def nondominated_mask(points: np.ndarray) -> np.ndarray:
    """Mask of points that are neither dominated nor repeats of an earlier point.

    This is the pruning step of the limit-set recursion: a point that is
    weakly dominated by another one adds nothing to the union of boxes. Of a
    group of identical points only the first occurrence survives.

    Args:
        points: Point coordinates. Shape (n, d).

    Returns:
        Boolean array of shape (n,).

    Examples:
        >>> nondominated_mask(np.array([[1.0, 2.0], [1.0, 2.0], [2.0, 3.0], [2.0, 1.0]]))
        array([ True, False, False,  True])
    """
    n = points.shape[0]
    if n < 2:
        return np.ones(n, dtype=bool)

    a = points[:, np.newaxis, :]
    b = points[np.newaxis, :, :]
    # covers[i, j]: point i is no worse than point j everywhere
    covers = np.all(a <= b, axis=2)
    strictly = np.any(a < b, axis=2)
    earlier = np.tri(n, k=-1, dtype=bool).T  # earlier[i, j] = i < j
    beaten = covers & (strictly | earlier)
    return ~beaten.any(axis=0)


def box_volume(point: np.ndarray, reference_point: np.ndarray) -> float:
    """Volume of the axis-aligned box spanned by a point and the reference point.

    Args:
        point: Point coordinates. Shape (d,).
        reference_point: Reference point. Shape (d,).

    Returns:
        Product of the per-objective distances to the reference point.
    """
    return float(np.prod(reference_point - point))


def limit_set(others: np.ndarray, point: np.ndarray, reference_point: np.ndarray) -> np.ndarray:
    """Clip every other point against ``point`` and prune the result.

    Each point q becomes max(q, point), which is the corner of the
    intersection of q's box with point's box. Limited points with zero volume
    and limited points that are dominated or duplicated are dropped.

    Args:
        others: Remaining points. Shape (m, d).
        point: The point whose box bounds the limit set. Shape (d,).
        reference_point: Reference point. Shape (d,).

    Returns:
        New array of shape (k, d), k <= m.

    Examples:
        >>> others = np.array([[0.0, 3.0], [3.0, 0.0], [2.0, 3.5]])
        >>> limit_set(others, np.array([1.0, 1.0]), np.array([4.0, 4.0]))
        array([[1., 3.],
               [3., 1.]])
    """
    limited = np.maximum(others, point)
    limited = limited[np.all(limited < reference_point, axis=1)]
    return limited[nondominated_mask(limited)]
