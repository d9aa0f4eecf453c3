"""
fixedvec: fixed-dimension numeric vectors.

    >>> from fixedvec import Vector
    >>> print(Vector([1, 2, 3]) + Vector([4, 5, 6]))
    [5, 7, 9]
"""
import logging

from .vector import (
    Vector,
    vec2,
    vec3,
    allclose,
    lerp,
    linear_combination,
)

# Library default: stay silent unless the application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Vector",
    "vec2", "vec3",
    "allclose",
    "lerp",
    "linear_combination",
]
