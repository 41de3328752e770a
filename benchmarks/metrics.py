"""Reference hypervolume values for benchmarking.

This module wraps pymoo's hypervolume indicator so that hvcore results can be
checked against an independent implementation on the same fronts.
"""

import numpy as np
from pymoo.indicators.hv import HV


def reference_hypervolume(objectives: np.ndarray, ref_point: np.ndarray | None = None) -> float:
    """Compute the hypervolume indicator with pymoo.

    Args:
        objectives: (n, n_obj) objective values of the front.
        ref_point: Reference point. Defaults to 1.1 in every objective, which
            is slightly worse than the nadir point of the normalized fronts in
            ``benchmarks.fronts.problems``.

    Returns:
        Hypervolume value (higher is better for minimization problems)

    Raises:
        ValueError: If objectives array is empty or has wrong shape
    """
    if objectives.size == 0:
        raise ValueError("objectives array cannot be empty")

    if objectives.ndim != 2:
        raise ValueError(f"objectives must be 2D array, got shape {objectives.shape}")

    if ref_point is None:
        ref_point = np.full(objectives.shape[1], 1.1)

    indicator = HV(ref_point=ref_point)
    return float(indicator(objectives))
