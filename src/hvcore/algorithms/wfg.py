"""WFG: hypervolume in any dimension by recursive limit-set slicing.

The points are sorted by their last objective, worst first. For point k,
every later point is at least as good in that objective, so the part of k's
box that no later point covers is a prism: the height of k in the last
objective times the (d-1)-dimensional volume of k's box not covered by the
later points clipped against k (their *limit set*). Summing the prisms gives
the total. The (d-1)-dimensional problem is solved the same way until two
objectives remain, where the closed-form staircase sweep takes over.

Limit sets are pruned before recursing: clipped points with zero volume,
dominated points and repeated points are dropped. This keeps the recursion
fed with small non-dominated sets; it does not change the exponential
worst case, which is inherent to the problem.

References:
    While, L., Bradstreet, L., & Barone, L. (2012). A fast way of calculating
    exact hypervolumes. IEEE Transactions on Evolutionary Computation, 16(1),
    86-95.
"""

from typing import ClassVar

import numpy as np

from hvcore.algorithms.base import HypervolumeAlgorithm
from hvcore.algorithms.native2d import hypervolume_2d
from hvcore.exceptions import InvalidInputError
from hvcore.primitives import box_volume, nondominated_mask


class LimitArena:
    """Preallocated limit-set buffers, one per dimension.

    The recursion never holds two live limit sets of the same dimension: a
    limit set built at dimension k is consumed by the recursion into
    dimension k before the next one is built. One (capacity, k) buffer per
    dimension is therefore enough for a whole computation.

    Attributes:
        capacity: Largest number of points a limit set can hold.

    Example:
        >>> arena = LimitArena(capacity=10, dimension=4)
        >>> arena.buffer(3).shape
        (10, 3)
    """

    def __init__(self, capacity: int, dimension: int) -> None:
        self.capacity = capacity
        self._buffers = {k: np.empty((capacity, k), dtype=np.float64) for k in range(2, dimension + 1)}

    def buffer(self, dimension: int) -> np.ndarray:
        return self._buffers[dimension]

    def limit(self, others: np.ndarray, point: np.ndarray, reference_point: np.ndarray) -> np.ndarray:
        """Write the pruned limit set of ``others`` against ``point`` into the arena.

        Args:
            others: Remaining points, shape (m, k).
            point: Bounding point, shape (k,).
            reference_point: Reference point, shape (k,).

        Returns:
            View into the dimension-k buffer holding the surviving limited points.
        """
        m, k = others.shape
        scratch = self._buffers[k][:m]
        np.maximum(others, point, out=scratch)

        inside = np.all(scratch < reference_point, axis=1)
        count = int(np.count_nonzero(inside))
        if count < m:
            scratch[:count] = scratch[inside]
        limited = scratch[:count]

        keep = nondominated_mask(limited)
        kept = int(np.count_nonzero(keep))
        if kept < count:
            limited[:kept] = limited[keep]
        return limited[:kept]


class SlicingEngine:
    """One WFG computation: the recursion plus the arena it writes into.

    Engines are created per call and discarded afterwards, so WFG instances
    stay stateless.
    """

    def __init__(self, capacity: int, dimension: int) -> None:
        self.arena = LimitArena(capacity, dimension)

    def volume(self, points: np.ndarray, reference_point: np.ndarray) -> float:
        """Hypervolume of ``points``; may reorder the rows of ``points`` in place."""
        n, d = points.shape
        if n == 0:
            return 0.0
        if n == 1:
            return max(box_volume(points[0], reference_point), 0.0)
        if d == 2:
            return hypervolume_2d(points, reference_point)

        points[:] = points[np.argsort(-points[:, -1], kind="stable")]

        base_reference = reference_point[:-1]
        total = 0.0
        for k in range(n):
            height = reference_point[-1] - points[k, -1]
            if height <= 0.0:
                continue
            total += height * self.uncovered(points[k, :-1], points[k + 1 :, :-1], base_reference)
        return total

    def uncovered(self, point: np.ndarray, others: np.ndarray, reference_point: np.ndarray) -> float:
        """Volume of ``point``'s box that no box of ``others`` covers."""
        volume = box_volume(point, reference_point)
        if volume <= 0.0:
            return 0.0
        if others.shape[0] == 0:
            return volume
        limited = self.arena.limit(others, point, reference_point)
        if limited.shape[0] == 0:
            return volume
        return volume - self.volume(limited, reference_point)


class WFG(HypervolumeAlgorithm):
    """Recursive slicing strategy for any number of objectives (>= 2).

    ``compute`` leaves the point list sorted by the last objective, worst
    first. A contributor query evaluates every exclusive contribution in a
    single pass that shares one arena.

    Ties in ``least_contributor`` and ``greatest_contributor`` go to the
    lowest index of the list as passed in.

    Example:
        >>> points = [np.array([1.0, 2.0, 3.0, 4.0]), np.array([4.0, 3.0, 2.0, 1.0])]
        >>> WFG().compute(points, np.array([5.0, 5.0, 5.0, 5.0]))
        44.0
    """

    name: ClassVar[str] = "wfg"

    def verify_before_compute(self, points: list[np.ndarray], reference_point: np.ndarray) -> None:
        if reference_point.shape[0] < 2:
            raise InvalidInputError(f"WFG requires at least 2 objectives, got {reference_point.shape[0]}")
        super().verify_before_compute(points, reference_point)

    @staticmethod
    def _sweep_key(point: np.ndarray) -> tuple[float, ...]:
        return (-float(point[-1]),)

    def contributions(self, points: list[np.ndarray], reference_point: np.ndarray) -> np.ndarray:
        array = np.vstack(points)
        n, d = array.shape
        engine = SlicingEngine(n, d)
        result = np.empty(n, dtype=np.float64)
        for i in range(n):
            result[i] = engine.uncovered(array[i], np.delete(array, i, axis=0), reference_point)
        return result

    def _exclusive_of(self, points: np.ndarray, index: int, reference_point: np.ndarray) -> float:
        n, d = points.shape
        engine = SlicingEngine(n, d)
        return engine.uncovered(points[index], np.delete(points, index, axis=0), reference_point)

    def _volume(self, points: np.ndarray, reference_point: np.ndarray) -> float:
        n, d = points.shape
        # the caller's array is left in slicing order
        return SlicingEngine(n, d).volume(points, reference_point)
