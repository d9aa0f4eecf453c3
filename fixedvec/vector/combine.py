from __future__ import annotations

import logging
from typing import Iterable, TypeVar

from fixedvec.utils.linalg import check_compatible
from fixedvec.utils.types import Scalar
from fixedvec.vector.vector import Vector

logger = logging.getLogger(__name__)

T = TypeVar("T")


def lerp(x: T, y: T, t: float) -> T:
    """
    Linear interpolation x + (y - x) * t.

    Works for plain numbers and for float Vectors. `t` is not clamped,
    values outside [0, 1] extrapolate.
    """
    t = float(t)
    return x + (y - x) * t


def linear_combination(vectors: Iterable[Vector], scalars: Iterable[Scalar]) -> Vector:
    """
    Weighted sum sum_i scalars[i] * vectors[i].

    Parameters
    ----------
    vectors : iterable of Vector
        Non-empty, all with the same dimension and dtype.
    scalars : iterable of scalars
        One coefficient per vector, representable as the vectors' dtype.

    Returns
    -------
    Vector
        The combination, accumulated from an all-zero vector.

    Raises
    ------
    ValueError
        If `vectors` is empty, the two inputs differ in length, or the
        vectors differ in dimension.
    TypeError
        If an item is not a Vector or the dtypes differ.
    """
    vectors = list(vectors)
    scalars = list(scalars)

    if not vectors:
        raise ValueError("linear_combination() requires a non-empty vector list.")
    if len(vectors) != len(scalars):
        raise ValueError(
            f"linear_combination() got {len(vectors)} vectors but {len(scalars)} scalars."
        )

    first = vectors[0]
    for k, v in enumerate(vectors):
        if not isinstance(v, Vector):
            raise TypeError(f"linear_combination(): item {k} is {type(v).__name__}, not Vector.")
        check_compatible(first, v, "linear_combination")

    logger.debug("linear_combination: %d vectors of dimension %d", len(vectors), first.dim)

    result = Vector.zeros(first.dim, dtype=first.dtype)
    for s, v in zip(scalars, vectors):
        result = result + v * s
    return result
