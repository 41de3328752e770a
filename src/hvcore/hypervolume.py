"""Hypervolume facade: one point set, many queries.

The Hypervolume class owns a point set, validates it, picks a strategy by
dimension when the caller does not name one, and forwards every query to the
strategy. Strategies may reorder the list they receive, so by default each
call works on a private copy of the stored list.

Example:
    >>> from hvcore import Hypervolume
    >>> hv = Hypervolume([[1.0, 5.0], [5.0, 1.0], [3.0, 3.0]])
    >>> hv.compute([6.0, 6.0])
    13.0
    >>> hv.exclusive(2, [6.0, 6.0])
    4.0
    >>> hv.least_contributor([6.0, 6.0])
    0
"""

import logging
import math
from collections.abc import Iterable

import numpy as np

from hvcore.algorithms import WFG, Beume3D, Native2D
from hvcore.exceptions import IndexOutOfRangeError, InvalidInputError
from hvcore.primitives import pareto_front_indices
from hvcore.protocols import HypervolumeStrategy, ObjectiveSource
from hvcore.registry import AlgorithmRegistry

logger = logging.getLogger(__name__)

AlgorithmLike = HypervolumeStrategy | str | None


def default_algorithm(reference_point: Iterable[float]) -> HypervolumeStrategy:
    """Pick the strategy used when the caller does not name one.

    Depends only on the number of objectives: Native2D for 2, Beume3D for 3,
    WFG otherwise.

    Args:
        reference_point: Reference point; only its length is used.

    Returns:
        A new strategy instance.

    Examples:
        >>> default_algorithm([1.0, 1.0, 1.0])
        Beume3D()
    """
    dimension = len(np.atleast_1d(np.asarray(reference_point)))
    if dimension == 2:
        return Native2D()
    if dimension == 3:
        return Beume3D()
    return WFG()


def expected_operations(n: int, d: int) -> int:
    """Coarse operation count of the default strategy for n points in d objectives.

    Meant for comparing problem sizes, not as a bound: 2*n*ln(n) for two
    objectives, 3*n*ln(n) for three, and n*ln(n)*n**(d // 2) above that.

    Args:
        n: Number of points.
        d: Number of objectives.

    Returns:
        Estimated number of elementary operations, truncated to int.

    Examples:
        >>> expected_operations(100, 2)
        921
    """
    if n <= 1:
        return 0
    if d == 2:
        return int(2.0 * n * math.log(n))
    if d == 3:
        return int(3.0 * n * math.log(n))
    return int(n * math.log(n) * math.pow(n, d // 2))


def _as_fitness_vector(point: Iterable[float]) -> np.ndarray:
    vector = np.array(point, dtype=np.float64)
    vector.setflags(write=False)
    return vector


class Hypervolume:
    """Hypervolume indicator of a fixed point set.

    Attributes:
        copy_points: If True (default), each query runs on a private copy of
            the point list. If False, the strategy gets the stored list itself
            and may reorder it, so only the first query is guaranteed to see
            the original order. Later queries still return valid results for
            the same set of points, but indices may refer to the new order.
        verify: If True (default), the point set is checked at construction
            and the reference point (plus any strategy-specific precondition)
            before every query.

    Example:
        >>> hv = Hypervolume(np.array([[1.0, 2.0, 3.0], [3.0, 2.0, 1.0]]))
        >>> hv.compute([4.0, 4.0, 4.0])
        10.0
        >>> hv.compute([4.0, 4.0, 4.0], algorithm="wfg")
        10.0
    """

    def __init__(self, points: Iterable[Iterable[float]], verify: bool = True) -> None:
        """Create a hypervolume object from a sequence of points.

        Args:
            points: Sequence of fitness vectors (list of lists, 2-D array, ...).
            verify: Whether to check the points now and before every query.

        Raises:
            InvalidInputError: If verifying and the set is empty, a point has
                dimension <= 1, or the dimensions differ.
        """
        self._points: list[np.ndarray] = [_as_fitness_vector(p) for p in points]
        self._copy_points = True
        self._verify = verify
        if verify:
            self._verify_after_construct()

    @classmethod
    def from_population(cls, population: ObjectiveSource, verify: bool = True) -> "Hypervolume":
        """Create a hypervolume object from a population's first Pareto front.

        The non-dominated individuals are taken in population order.

        Args:
            population: Object exposing ``objectives`` of shape (n, n_obj).
            verify: Whether to check the points now and before every query.

        Raises:
            InvalidInputError: If the population has no objectives, or if
                verifying and the front is invalid.
        """
        objectives = population.objectives
        if objectives is None:
            raise InvalidInputError("Population must have objectives computed to build a point set")
        objectives = np.asarray(objectives, dtype=np.float64)
        if objectives.ndim != 2:
            raise InvalidInputError(f"objectives must be 2D, got shape {objectives.shape}")
        front = pareto_front_indices(objectives)
        logger.debug("Extracted %d of %d individuals as the first front", front.shape[0], objectives.shape[0])
        return cls(objectives[front], verify=verify)

    # ------------------------------------------------------------------ #
    # Configuration
    # ------------------------------------------------------------------ #

    @property
    def copy_points(self) -> bool:
        return self._copy_points

    @copy_points.setter
    def copy_points(self, value: bool) -> None:
        self._copy_points = bool(value)

    @property
    def verify(self) -> bool:
        return self._verify

    @verify.setter
    def verify(self, value: bool) -> None:
        self._verify = bool(value)

    @property
    def points(self) -> tuple[np.ndarray, ...]:
        """Read-only view of the stored points."""
        return tuple(self._points)

    @property
    def dimension(self) -> int:
        """Number of objectives of the first point."""
        if not self._points:
            raise InvalidInputError("Point set is empty")
        return int(self._points[0].shape[0])

    def __len__(self) -> int:
        return len(self._points)

    # ------------------------------------------------------------------ #
    # Queries
    # ------------------------------------------------------------------ #

    def compute(self, reference_point: Iterable[float], algorithm: AlgorithmLike = None) -> float:
        """Compute the hypervolume of the point set.

        Args:
            reference_point: Reference point, one value per objective.
            algorithm: Strategy instance, registered strategy name, or None
                to choose by dimension.

        Returns:
            Hypervolume of the point set.

        Raises:
            InvalidInputError: If verifying and the reference point dimension
                differs from the points'.
            GeometryPreconditionError: If verifying and some point exceeds the
                reference point.
        """
        reference, strategy = self._prepare(reference_point, algorithm)
        return float(strategy.compute(self._working_points(), reference))

    def exclusive(self, index: int, reference_point: Iterable[float], algorithm: AlgorithmLike = None) -> float:
        """Compute the hypervolume contributed only by the point at ``index``.

        Args:
            index: Position of the point in the stored set.
            reference_point: Reference point, one value per objective.
            algorithm: Strategy instance, registered strategy name, or None.

        Returns:
            Hypervolume lost if the point were removed.

        Raises:
            IndexOutOfRangeError: If ``index`` is outside the stored set. This
                is checked even when verification is off.
            InvalidInputError: See ``compute``.
            GeometryPreconditionError: See ``compute``.
        """
        reference, strategy = self._prepare(reference_point, algorithm)
        if not 0 <= index < len(self._points):
            raise IndexOutOfRangeError(f"index {index} is out of bounds for point set with {len(self._points)} points")
        return float(strategy.exclusive(index, self._working_points(), reference))

    def contributions(self, reference_point: Iterable[float], algorithm: AlgorithmLike = None) -> np.ndarray:
        """Compute the exclusive contribution of every point.

        Returns:
            Array of shape (n,) aligned with ``points``.
        """
        reference, strategy = self._prepare(reference_point, algorithm)
        return np.asarray(strategy.contributions(self._working_points(), reference), dtype=np.float64)

    def least_contributor(self, reference_point: Iterable[float], algorithm: AlgorithmLike = None) -> int:
        """Index of the point with the smallest exclusive contribution.

        Ties are resolved by the strategy; every built-in strategy returns the
        lowest index.
        """
        reference, strategy = self._prepare(reference_point, algorithm)
        return int(strategy.least_contributor(self._working_points(), reference))

    def greatest_contributor(self, reference_point: Iterable[float], algorithm: AlgorithmLike = None) -> int:
        """Index of the point with the largest exclusive contribution.

        Ties are resolved by the strategy; every built-in strategy returns the
        lowest index.
        """
        reference, strategy = self._prepare(reference_point, algorithm)
        return int(strategy.greatest_contributor(self._working_points(), reference))

    def nadir_point(self, epsilon: float = 0.0) -> np.ndarray:
        """Worst value of every objective over the set, plus ``epsilon``.

        With a positive epsilon the result is a reference point that every
        stored point strictly dominates.

        Args:
            epsilon: Offset added to every objective.

        Returns:
            New array of shape (d,).

        Raises:
            InvalidInputError: If the point set is empty.

        Examples:
            >>> Hypervolume([[1.0, 4.0], [3.0, 2.0]]).nadir_point(0.5)
            array([3.5, 4.5])
        """
        if not self._points:
            raise InvalidInputError("Cannot compute the nadir point of an empty point set")
        return np.max(np.vstack(self._points), axis=0) + epsilon

    best_algorithm = staticmethod(default_algorithm)
    expected_operations = staticmethod(expected_operations)

    # ------------------------------------------------------------------ #
    # Copying
    # ------------------------------------------------------------------ #

    def clone(self) -> "Hypervolume":
        """Return an independent copy of the point set and both flags."""
        other = Hypervolume.__new__(Hypervolume)
        other._points = [_as_fitness_vector(p) for p in self._points]
        other._copy_points = self._copy_points
        other._verify = self._verify
        return other

    def __copy__(self) -> "Hypervolume":
        return self.clone()

    def __deepcopy__(self, memo: dict) -> "Hypervolume":
        return self.clone()

    def __repr__(self) -> str:
        dimension = self._points[0].shape[0] if self._points else 0
        return (
            f"Hypervolume(n_points={len(self._points)}, dimension={dimension}, "
            f"copy_points={self._copy_points}, verify={self._verify})"
        )

    # ------------------------------------------------------------------ #
    # Internals
    # ------------------------------------------------------------------ #

    def _verify_after_construct(self) -> None:
        if len(self._points) == 0:
            raise InvalidInputError("Point set cannot be empty")
        first = self._points[0]
        if first.ndim != 1 or first.shape[0] <= 1:
            raise InvalidInputError(f"Points of dimension > 1 required, got shape {first.shape}")
        for idx, point in enumerate(self._points[1:], start=1):
            if point.shape != first.shape:
                raise InvalidInputError(
                    f"All point set dimensions must be equal: point 0 has shape {first.shape}, "
                    f"point {idx} has shape {point.shape}"
                )

    def _verify_before_compute(self, reference_point: np.ndarray, strategy: HypervolumeStrategy) -> None:
        if not self._points:
            raise InvalidInputError("Point set cannot be empty")
        if reference_point.ndim != 1 or reference_point.shape[0] != self._points[0].shape[0]:
            raise InvalidInputError(
                f"Point set dimensions and reference point dimension must be equal: "
                f"points have dimension {self._points[0].shape[0]}, reference point has shape {reference_point.shape}"
            )
        strategy.verify_before_compute(self._points, reference_point)

    def _resolve_algorithm(self, reference_point: np.ndarray, algorithm: AlgorithmLike) -> HypervolumeStrategy:
        if algorithm is None:
            strategy = default_algorithm(reference_point)
            logger.debug("Selected %s for dimension %d", type(strategy).__name__, reference_point.shape[0])
            return strategy
        if isinstance(algorithm, str):
            return AlgorithmRegistry.get(algorithm)
        if isinstance(algorithm, HypervolumeStrategy):
            return algorithm
        raise TypeError(
            f"algorithm must be a strategy instance, a registered name or None, got {type(algorithm).__name__}"
        )

    def _prepare(
        self, reference_point: Iterable[float], algorithm: AlgorithmLike
    ) -> tuple[np.ndarray, HypervolumeStrategy]:
        reference = np.array(reference_point, dtype=np.float64)
        reference.setflags(write=False)
        strategy = self._resolve_algorithm(reference, algorithm)
        if self._verify:
            self._verify_before_compute(reference, strategy)
        return reference, strategy

    def _working_points(self) -> list[np.ndarray]:
        if self._copy_points:
            return list(self._points)
        logger.debug("Handing the stored point list to the strategy without copying")
        return self._points
