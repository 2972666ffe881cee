"""
Errors - Exception types raised by the track builder.

Defines:
- InvalidParameterError: arguments outside their declared range
- DegenerateGeometryError: a computed piece of track has no length
- WorldMutationError: the world refused a block operation
"""


class CoasterBuilderError(Exception):
    """Base class for all track builder errors."""


class InvalidParameterError(CoasterBuilderError, ValueError):
    """Raised when an argument falls outside its declared range.
    
    Generators validate before touching the world, so a raised
    InvalidParameterError never leaves partially built track behind.
    """


class DegenerateGeometryError(CoasterBuilderError):
    """Raised when a generator computes a zero-length step."""


class WorldMutationError(CoasterBuilderError, RuntimeError):
    """Raised by the world when a block operation cannot be applied."""


def require_range(
    name: str,
    value: int,
    minimum: int | None = None,
    maximum: int | None = None,
) -> int:
    """Check that an integer argument lies in [minimum, maximum].
    
    Args:
        name: Argument name used in the error message
        value: Value to check
        minimum: Inclusive lower bound (None = unbounded)
        maximum: Inclusive upper bound (None = unbounded)
        
    Returns:
        The value, unchanged
        
    Raises:
        InvalidParameterError: If the value is not an int or is out of range
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidParameterError(f"{name} must be an integer, got {value!r}")
    if minimum is not None and value < minimum:
        raise InvalidParameterError(f"{name} must be >= {minimum}, got {value}")
    if maximum is not None and value > maximum:
        raise InvalidParameterError(f"{name} must be <= {maximum}, got {value}")
    return value


def require_member(name: str, value, enum_cls):
    """Check that an argument is a member of an enumeration.
    
    Raises:
        InvalidParameterError: If `value` is not an `enum_cls` member
    """
    if not isinstance(value, enum_cls):
        raise InvalidParameterError(
            f"{name} must be a {enum_cls.__name__}, got {value!r}"
        )
    return value
