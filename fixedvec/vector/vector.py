from __future__ import annotations

import logging
from typing import Iterator

import numpy as np

from fixedvec.config import ACCUMULATOR_DTYPE, ATOL, DEFAULT_DTYPE, RTOL
from fixedvec.utils.linalg import (
    as_elements,
    as_scalar,
    check_compatible,
    check_dim,
    check_index,
    element_dtype,
    require_signed,
)
from fixedvec.utils.types import ArrayLike, DTypeLike, FloatArray, Scalar

logger = logging.getLogger(__name__)


def _require_vector(other, op: str) -> None:
    if not isinstance(other, Vector):
        raise TypeError(f"{op}: expected a Vector operand, got {type(other).__name__}.")


class Vector:
    """
    Fixed-dimension numeric vector.

    Parameters
    ----------
    data : array_like or Vector
        Ordered 1-D sequence of N numbers. It is copied; the vector never
        aliases the caller's buffer.
    dtype : dtype-like, optional
        Element type (signed/unsigned integer or float). Inferred from
        `data` when omitted.

    Notes
    -----
    - The dimension N is fixed at construction. Elements can be replaced
      one at a time through ``v[i] = x`` but never added or removed.
    - Every operation between two vectors requires equal dimension and
      equal dtype. There is no broadcasting.
    - ``+``, ``-``, ``*`` and ``-v`` return new vectors; operands are
      left untouched.
    - Dot products and norms are computed in float64 and returned as
      Python floats.
    """
    __slots__ = ("_data",)
    __hash__ = None  # mutable through __setitem__
    __array_ufunc__ = None  # numpy operands defer to our operators

    def __init__(self, data: ArrayLike | "Vector", dtype: DTypeLike | None = None):
        if isinstance(data, Vector):
            data = data._data
        self._data = as_elements(data, dtype)

    @classmethod
    def _wrap(cls, arr: np.ndarray) -> "Vector":
        # arr must be a fresh, already validated 1-D element array
        v = cls.__new__(cls)
        v._data = arr
        return v

    @classmethod
    def zeros(cls, n: int, dtype: DTypeLike = DEFAULT_DTYPE) -> "Vector":
        """All-zero vector of dimension `n`."""
        if not isinstance(n, (int, np.integer)) or n < 0:
            raise ValueError(f"Vector dimension must be a non-negative int, got {n!r}.")
        return cls._wrap(np.zeros(int(n), dtype=element_dtype(dtype)))

    # --- basic protocol ------------------------------------------------------
    @property
    def dim(self) -> int:
        """Dimension N."""
        return self._data.shape[0]

    @property
    def shape(self) -> tuple[int]:
        return self._data.shape

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    @property
    def data(self) -> np.ndarray:
        """Copy of the elements as a (N,) ndarray."""
        return self._data.copy()

    def __len__(self) -> int:
        return self.dim

    def __iter__(self) -> Iterator[np.generic]:
        return iter(self._data)

    def __getitem__(self, i: int) -> np.generic:
        return self._data[check_index(i, self.dim)]

    def __setitem__(self, i: int, value: Scalar) -> None:
        idx = check_index(i, self.dim)
        self._data[idx] = as_scalar(value, self.dtype)

    def copy(self) -> "Vector":
        return self._wrap(self._data.copy())

    def __copy__(self) -> "Vector":
        return self.copy()

    def __deepcopy__(self, memo) -> "Vector":
        return self.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        if self.shape != other.shape:
            return False
        return bool(np.array_equal(self._data, other._data))

    def isclose(self, other: "Vector", *, rtol: float = RTOL, atol: float = ATOL) -> bool:
        """
        Tolerance comparison of two vectors of the same dimension.

        Returns False (rather than raising) when the dimensions differ.
        """
        _require_vector(other, "isclose")
        if self.shape != other.shape:
            return False
        return bool(np.allclose(self._as_float(), other._as_float(), rtol=rtol, atol=atol))

    def __str__(self) -> str:
        return "[" + ", ".join(str(x) for x in self._data) + "]"

    def __repr__(self) -> str:
        return f"Vector({self}, dtype={self.dtype})"

    # --- elementwise arithmetic ---------------------------------------------
    def add(self, other: "Vector") -> "Vector":
        _require_vector(other, "add")
        check_compatible(self, other, "add")
        return self._wrap(self._data + other._data)

    def sub(self, other: "Vector") -> "Vector":
        _require_vector(other, "sub")
        check_compatible(self, other, "sub")
        return self._wrap(self._data - other._data)

    def scale(self, scalar: Scalar) -> "Vector":
        """Multiply every element by `scalar`, which must be representable as the element type."""
        s = as_scalar(scalar, self.dtype)
        return self._wrap(self._data * s)

    def __add__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other):
        if isinstance(other, Vector):
            return NotImplemented
        return self.scale(other)

    __rmul__ = __mul__

    def __neg__(self) -> "Vector":
        require_signed(self.dtype, "negation")
        return self._wrap(-self._data)

    # --- products and norms --------------------------------------------------
    def _as_float(self) -> FloatArray:
        return self._data.astype(ACCUMULATOR_DTYPE)

    def dot(self, other: "Vector") -> float:
        """Sum of elementwise products, accumulated in float64."""
        _require_vector(other, "dot")
        check_compatible(self, other, "dot")
        return float(np.dot(self._as_float(), other._as_float()))

    def norm_1(self) -> float:
        """L1 norm: sum of absolute values."""
        require_signed(self.dtype, "norm_1")
        return float(np.sum(np.abs(self._as_float())))

    def norm(self) -> float:
        """L2 (Euclidean) norm."""
        require_signed(self.dtype, "norm")
        return float(np.linalg.norm(self._as_float()))

    def norm_inf(self) -> float:
        """L-infinity norm: largest absolute value (0.0 for an empty vector)."""
        require_signed(self.dtype, "norm_inf")
        return float(np.max(np.abs(self._as_float()), initial=0.0))

    def cosine(self, other: "Vector") -> float:
        """
        Cosine similarity dot(a, b) / (|a| |b|).

        Zero-norm operands are not rejected: the division follows IEEE
        rules and yields nan (0/0) or +/-inf.
        """
        d = self.dot(other)
        nu, nv = self.norm(), other.norm()
        if nu == 0.0 or nv == 0.0:
            logger.debug("cosine: zero-norm operand (|a|=%g, |b|=%g)", nu, nv)
        with np.errstate(divide="ignore", invalid="ignore"):
            return float(np.float64(d) / (np.float64(nu) * np.float64(nv)))

    def cross(self, other: "Vector") -> "Vector":
        """
        Cross product of two 3-vectors.

        Returns
        -------
        Vector
            [a1*b2 - a2*b1, a2*b0 - a0*b2, a0*b1 - a1*b0], same dtype as the operands.
        """
        _require_vector(other, "cross")
        check_dim(self.dim, 3, "vector for cross product")
        check_compatible(self, other, "cross")
        a, b = self._data, other._data
        # array ops so integer overflow wraps like + - *
        out = a[[1, 2, 0]] * b[[2, 0, 1]] - a[[2, 0, 1]] * b[[1, 2, 0]]
        return self._wrap(out)


############################
# CONSTRUCTORS
############################

def vec2(v, dtype: DTypeLike | None = None) -> Vector:
    v = Vector(v, dtype)
    check_dim(v.dim, 2)
    return v


def vec3(v, dtype: DTypeLike | None = None) -> Vector:
    v = Vector(v, dtype)
    check_dim(v.dim, 3)
    return v


def allclose(a: Vector, b: Vector, *, rtol: float = RTOL, atol: float = ATOL) -> bool:
    return a.isclose(b, rtol=rtol, atol=atol)
