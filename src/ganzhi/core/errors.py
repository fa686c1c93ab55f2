class GanZhiError(Exception):
    """Base error."""

class OutOfRangeError(GanZhiError, ValueError):
    """Raised when a year or date falls outside the tabulated 1900-2100 range."""

class MalformedReferenceError(GanZhiError, ValueError):
    """Raised when a reference string is not four stem/branch fields."""

class AmbiguousTermBoundaryError(GanZhiError, RuntimeError):
    """Raised when no pair of Jie terms brackets a date."""
