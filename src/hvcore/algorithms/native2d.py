"""Native2D: closed-form hypervolume for two objectives.

Sorting the points by the first objective turns the dominated region into a
staircase. Every point that lowers the running minimum of the second
objective adds one rectangle; every other point is dominated (or repeated)
and adds nothing.

Both the total and all exclusive contributions cost O(n log n).
"""

from typing import ClassVar

import numpy as np

from hvcore.algorithms.base import HypervolumeAlgorithm


def _staircase_order(points: np.ndarray) -> np.ndarray:
    # by first objective, then second; dominated points follow their dominator
    return np.lexsort((points[:, 1], points[:, 0]))


def hypervolume_2d(points: np.ndarray, reference_point: np.ndarray) -> float:
    """Compute the hypervolume of a two-dimensional point set.

    Args:
        points: Point coordinates, shape (n, 2), in any order.
        reference_point: Reference point, shape (2,).

    Returns:
        Area of the union of the boxes between each point and the reference point.

    Examples:
        >>> hypervolume_2d(np.array([[1.0, 5.0], [5.0, 1.0]]), np.array([6.0, 6.0]))
        9.0
        >>> hypervolume_2d(np.array([[2.0, 2.0], [3.0, 3.0]]), np.array([4.0, 4.0]))
        4.0
    """
    if points.shape[0] == 0:
        return 0.0
    ordered = points[_staircase_order(points)]
    ceiling = np.minimum.accumulate(np.concatenate(([reference_point[1]], ordered[:-1, 1])))
    heights = np.clip(ceiling - ordered[:, 1], 0.0, None)
    widths = reference_point[0] - ordered[:, 0]
    return float(widths @ heights)


def contributions_2d(points: np.ndarray, reference_point: np.ndarray) -> np.ndarray:
    """Compute the exclusive contribution of every point of a two-dimensional set.

    A staircase point owns the rectangle between its own corner, the first
    objective of the next staircase point, and the second objective of the
    previous one, less whatever the points it alone dominates still cover
    inside that rectangle. Dominated points and points that appear more than
    once own nothing.

    Args:
        points: Point coordinates, shape (n, 2), in any order.
        reference_point: Reference point, shape (2,).

    Returns:
        Array of shape (n,) aligned with ``points``.

    Examples:
        >>> contributions_2d(np.array([[1.0, 3.0], [2.0, 2.0], [3.0, 1.0]]), np.array([4.0, 4.0]))
        array([1., 1., 1.])
        >>> contributions_2d(np.array([[2.0, 2.0], [3.0, 3.0]]), np.array([4.0, 4.0]))
        array([3., 0.])
    """
    n = points.shape[0]
    result = np.zeros(n, dtype=np.float64)
    if n == 0:
        return result

    order = _staircase_order(points)
    ordered = points[order]

    ceiling = np.minimum.accumulate(np.concatenate(([reference_point[1]], ordered[:-1, 1])))
    on_staircase = ordered[:, 1] < ceiling
    steps = np.flatnonzero(on_staircase)
    if steps.shape[0] == 0:
        return result

    step_points = ordered[steps]
    right = np.append(step_points[1:, 0], reference_point[0])
    upper = np.insert(step_points[:-1, 1], 0, reference_point[1])
    areas = (right - step_points[:, 0]) * (upper - step_points[:, 1])

    # a hidden point below the previous step lies in exactly one step's rectangle
    hidden = ordered[~on_staircase]
    owner = np.searchsorted(step_points[:, 0], hidden[:, 0], side="right") - 1
    valid = owner >= 0
    valid[valid] = hidden[valid, 1] < upper[owner[valid]]
    hidden, owner = hidden[valid], owner[valid]

    # hidden is in staircase order, so each owner's points are contiguous
    groups, starts = np.unique(owner, return_index=True)
    stops = np.append(starts[1:], owner.shape[0])
    for k, lo, hi in zip(groups, starts, stops):
        areas[k] -= hypervolume_2d(hidden[lo:hi], np.array([right[k], upper[k]]))

    result[order[steps]] = areas
    return result


class Native2D(HypervolumeAlgorithm):
    """Sort-and-sweep strategy for exactly two objectives.

    ``compute`` leaves the point list sorted by (f1, f2). ``exclusive`` and
    the contributor queries leave it untouched and cost one sort each.

    Ties in ``least_contributor`` and ``greatest_contributor`` go to the
    lowest index of the list as passed in.

    Example:
        >>> points = [np.array([1.0, 5.0]), np.array([5.0, 1.0])]
        >>> Native2D().compute(points, np.array([6.0, 6.0]))
        9.0
    """

    name: ClassVar[str] = "native2d"
    dimension: ClassVar[int | None] = 2

    def exclusive(self, index: int, points: list[np.ndarray], reference_point: np.ndarray) -> float:
        return float(self.contributions(points, reference_point)[index])

    def contributions(self, points: list[np.ndarray], reference_point: np.ndarray) -> np.ndarray:
        return contributions_2d(np.vstack(points), reference_point)

    def _volume(self, points: np.ndarray, reference_point: np.ndarray) -> float:
        return hypervolume_2d(points, reference_point)
