"""Protocol definitions for hypervolume strategies and their inputs.

This module defines the interfaces the facade talks to. They enable a
pluggable architecture where hypervolume strategies can be swapped without
changing the facade, and where any population type can feed a point set as
long as it exposes an objective matrix.

1. **HypervolumeStrategy**: the capability set every algorithm implements:
   total hypervolume, exclusive contribution of one point, all contributions,
   least/greatest contributor, and a strategy-specific precondition check.

2. **ObjectiveSource**: anything with an ``objectives`` array of shape
   (n, n_obj), such as an evolutionary algorithm's population. Only its first
   Pareto front is used.

Example usage:
    ```python
    from hvcore import WFG, Hypervolume

    strategy = WFG()
    assert isinstance(strategy, HypervolumeStrategy)

    hv = Hypervolume([[1.0, 2.0], [2.0, 1.0]])
    hv.compute([3.0, 3.0], algorithm=strategy)  # 3.0
    ```
"""

from typing import Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class HypervolumeStrategy(Protocol):
    """Protocol for hypervolume computation strategies.

    Every method receives the point set as a mutable list of 1-D arrays and
    the reference point as a read-only array. Implementations may reorder the
    list in place (this is why the facade copies it by default) but must not
    write into the point arrays themselves.

    All methods assume the caller has already checked that every point and
    the reference point share one dimension. ``verify_before_compute`` covers
    only what is specific to the strategy.

    Parameters:
        points: Mutable list of fitness vectors, each of shape (d,).
        reference_point: Reference point of shape (d,).

    Example implementations:
        - Native2D: sort-and-sweep over two objectives
        - Beume3D: z-sweep over a 2-D staircase
        - WFG: recursive limit-set slicing in any dimension
    """

    name: str

    def compute(self, points: list[np.ndarray], reference_point: np.ndarray) -> float:
        """Return the hypervolume of the point set."""
        ...

    def exclusive(self, index: int, points: list[np.ndarray], reference_point: np.ndarray) -> float:
        """Return the hypervolume contributed only by ``points[index]``."""
        ...

    def contributions(self, points: list[np.ndarray], reference_point: np.ndarray) -> np.ndarray:
        """Return the exclusive contribution of every point, in list order."""
        ...

    def least_contributor(self, points: list[np.ndarray], reference_point: np.ndarray) -> int:
        """Return the index of the point with the smallest exclusive contribution."""
        ...

    def greatest_contributor(self, points: list[np.ndarray], reference_point: np.ndarray) -> int:
        """Return the index of the point with the largest exclusive contribution."""
        ...

    def verify_before_compute(self, points: list[np.ndarray], reference_point: np.ndarray) -> None:
        """Raise if the strategy cannot handle this point set and reference point."""
        ...


@runtime_checkable
class ObjectiveSource(Protocol):
    """Protocol for populations a point set can be extracted from.

    Attributes:
        objectives: Objective values of every individual, shape (n, n_obj),
            or None if the population has not been evaluated.
    """

    objectives: np.ndarray | None
