"""Shared behaviour of the hypervolume strategies.

HypervolumeAlgorithm implements the parts of the HypervolumeStrategy protocol
that every strategy can share, on top of a single array-level hook:

    _volume(points, reference_point) -> float

Subclasses provide ``_volume`` and a ``_sweep_key`` that fixes the order the
point list is left in after ``compute``. Exclusive contributions default to
the limit-set formulation: the volume of a point's box minus the hypervolume
of every other point clipped against it.
"""

from typing import ClassVar

import numpy as np

from hvcore.exceptions import GeometryPreconditionError, InvalidInputError
from hvcore.primitives import box_volume, limit_set


class HypervolumeAlgorithm:
    """Base class for hypervolume strategies.

    Strategies hold no state between calls, so one instance can serve any
    number of computations as long as every call gets its own point list.

    Class Attributes:
        name: Registry name of the strategy.
        dimension: Number of objectives the strategy is restricted to, or
            None if it works for any dimension >= 2.
    """

    name: ClassVar[str] = "base"
    dimension: ClassVar[int | None] = None

    def compute(self, points: list[np.ndarray], reference_point: np.ndarray) -> float:
        """Compute the hypervolume of the point set.

        The list is sorted in place into the strategy's sweep order.

        Args:
            points: Mutable list of fitness vectors, each of shape (d,).
            reference_point: Reference point of shape (d,).

        Returns:
            Hypervolume of the union of the points' boxes.
        """
        points.sort(key=self._sweep_key)
        return self._volume(np.vstack(points), reference_point)

    def exclusive(self, index: int, points: list[np.ndarray], reference_point: np.ndarray) -> float:
        """Compute the hypervolume contributed only by ``points[index]``.

        The target point is swapped to the front of the list.

        Args:
            index: Position of the point in ``points``.
            points: Mutable list of fitness vectors.
            reference_point: Reference point of shape (d,).

        Returns:
            Volume lost if the point were removed from the set.
        """
        points[0], points[index] = points[index], points[0]
        return self._exclusive_of(np.vstack(points), 0, reference_point)

    def contributions(self, points: list[np.ndarray], reference_point: np.ndarray) -> np.ndarray:
        """Compute every exclusive contribution, aligned with the list order.

        Args:
            points: List of fitness vectors. Left untouched.
            reference_point: Reference point of shape (d,).

        Returns:
            Array of shape (n,) with the contribution of each point.
        """
        array = np.vstack(points)
        return np.array([self._exclusive_of(array, i, reference_point) for i in range(array.shape[0])])

    def least_contributor(self, points: list[np.ndarray], reference_point: np.ndarray) -> int:
        """Index of the smallest exclusive contribution; the lowest index wins ties."""
        return int(np.argmin(self.contributions(points, reference_point)))

    def greatest_contributor(self, points: list[np.ndarray], reference_point: np.ndarray) -> int:
        """Index of the largest exclusive contribution; the lowest index wins ties."""
        return int(np.argmax(self.contributions(points, reference_point)))

    def verify_before_compute(self, points: list[np.ndarray], reference_point: np.ndarray) -> None:
        """Check the strategy's dimension and that the reference point bounds every point.

        A point equal to the reference point in some objective is accepted;
        its box simply has zero volume.

        Raises:
            InvalidInputError: If the strategy is restricted to another dimension.
            GeometryPreconditionError: If some point exceeds the reference point.
        """
        if self.dimension is not None and reference_point.shape[0] != self.dimension:
            raise InvalidInputError(
                f"{type(self).__name__} works only for {self.dimension}-dimensional points, "
                f"got dimension {reference_point.shape[0]}"
            )
        outside = np.any(np.vstack(points) > reference_point, axis=1)
        if np.any(outside):
            first = int(np.flatnonzero(outside)[0])
            raise GeometryPreconditionError(
                f"Reference point {reference_point.tolist()} does not bound point {first} "
                f"{points[first].tolist()}; every point must be <= the reference point in all objectives"
            )

    def _exclusive_of(self, points: np.ndarray, index: int, reference_point: np.ndarray) -> float:
        point = points[index]
        volume = box_volume(point, reference_point)
        if volume <= 0.0:
            return 0.0
        others = np.delete(points, index, axis=0)
        if others.shape[0] == 0:
            return volume
        limited = limit_set(others, point, reference_point)
        if limited.shape[0] == 0:
            return volume
        return volume - self._volume(limited, reference_point)

    @staticmethod
    def _sweep_key(point: np.ndarray) -> tuple[float, ...]:
        return tuple(point.tolist())

    def _volume(self, points: np.ndarray, reference_point: np.ndarray) -> float:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
