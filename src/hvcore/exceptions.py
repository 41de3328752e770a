"""Exception types raised by hypervolume computations.

All errors derive from HypervolumeError so callers can catch the whole family
at once. Each concrete error also subclasses the built-in exception it
refines (ValueError or IndexError), so code written against plain built-in
errors keeps working.

- InvalidInputError: malformed point set or reference point
- IndexOutOfRangeError: point index outside the stored set
- GeometryPreconditionError: a strategy-specific geometric requirement failed
"""


class HypervolumeError(Exception):
    """Base class for all hypervolume errors."""


class InvalidInputError(HypervolumeError, ValueError):
    """Raised for empty sets, bad dimensions, or mismatched reference points.

    Example:
        >>> from hvcore import Hypervolume
        >>> Hypervolume([])
        Traceback (most recent call last):
            ...
        hvcore.exceptions.InvalidInputError: Point set cannot be empty
    """


class IndexOutOfRangeError(HypervolumeError, IndexError):
    """Raised when a contribution query references a point that does not exist."""


class GeometryPreconditionError(HypervolumeError, ValueError):
    """Raised when some point exceeds the reference point in any objective.

    Strategies raise this from ``verify_before_compute``. Offending points are
    never clamped or dropped; invalid geometry is the caller's error.
    """
