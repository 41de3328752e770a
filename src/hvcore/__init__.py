"""hvcore: exact hypervolume indicator for multi-objective fronts.

A pure numpy implementation of the hypervolume indicator and its derived
queries (exclusive contributions, least and greatest contributor), with
strategies specialized by the number of objectives.

Example (two objectives):
    >>> from hvcore import Hypervolume
    >>> hv = Hypervolume([[1.0, 5.0], [5.0, 1.0]])
    >>> hv.compute([6.0, 6.0])
    9.0
    >>> hv.contributions([6.0, 6.0])
    array([4., 4.])

Example (any dimension, explicit strategy):
    >>> from hvcore import WFG
    >>> hv = Hypervolume([[1.0, 2.0, 3.0, 4.0], [4.0, 3.0, 2.0, 1.0]])
    >>> hv.compute([5.0, 5.0, 5.0, 5.0], algorithm=WFG())
    44.0
"""

from hvcore.algorithms import WFG, Beume3D, HypervolumeAlgorithm, Native2D
from hvcore.exceptions import (
    GeometryPreconditionError,
    HypervolumeError,
    IndexOutOfRangeError,
    InvalidInputError,
)
from hvcore.hypervolume import Hypervolume, default_algorithm, expected_operations
from hvcore.primitives import (
    box_volume,
    dominates,
    dominates_matrix,
    limit_set,
    nondominated_mask,
    pareto_front_indices,
)
from hvcore.protocols import HypervolumeStrategy, ObjectiveSource
from hvcore.registry import AlgorithmRegistry, list_algorithms

__all__ = [
    # Facade
    "Hypervolume",
    "default_algorithm",
    "expected_operations",
    # Strategies
    "HypervolumeAlgorithm",
    "Native2D",
    "Beume3D",
    "WFG",
    # Primitives
    "dominates",
    "dominates_matrix",
    "pareto_front_indices",
    "nondominated_mask",
    "box_volume",
    "limit_set",
    # Registry system
    "AlgorithmRegistry",
    "list_algorithms",
    # Protocols
    "HypervolumeStrategy",
    "ObjectiveSource",
    # Errors
    "HypervolumeError",
    "InvalidInputError",
    "IndexOutOfRangeError",
    "GeometryPreconditionError",
]
