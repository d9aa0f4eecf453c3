from __future__ import annotations

import operator
from typing import Any

import numpy as np

from fixedvec.config import DEFAULT_DTYPE, ELEMENT_KINDS, SIGNED_KINDS
from fixedvec.utils.types import ArrayLike, DTypeLike

############################
# ELEMENT VALIDATION
############################

def element_dtype(dtype: DTypeLike) -> np.dtype:
    dt = np.dtype(dtype)
    if dt.kind not in ELEMENT_KINDS:
        raise TypeError(f"Vector elements must be integer or float, got dtype {dt}.")
    return dt


def _check_fits(src: np.ndarray, dt: np.dtype) -> None:
    """Reject values that would change kind or overflow when stored as `dt`."""
    if src.size == 0:
        return
    if src.dtype.kind not in ELEMENT_KINDS:
        raise TypeError(f"Vector elements must be integer or float, got dtype {src.dtype}.")
    if dt.kind in ("i", "u"):
        if src.dtype.kind == "f":
            raise TypeError(f"Cannot store floating values in an integer vector of dtype {dt}.")
        info = np.iinfo(dt)
        lo, hi = int(src.min()), int(src.max())
        if lo < info.min or hi > info.max:
            raise OverflowError(f"Values in [{lo}, {hi}] do not fit dtype {dt}.")


def as_elements(data: ArrayLike, dtype: DTypeLike | None = None) -> np.ndarray:
    """
    Copy `data` into a fresh 1-D element array.

    Parameters
    ----------
    data : array_like
        Ordered one-dimensional sequence of numbers.
    dtype : dtype-like, optional
        Element type. Inferred from `data` when omitted (float64 for an
        empty sequence).

    Returns
    -------
    np.ndarray
        Contiguous array of shape (N,) that shares no memory with `data`.

    Raises
    ------
    ValueError
        If `data` is not one-dimensional.
    TypeError
        If the elements or `dtype` are not integer/float, or floats would
        be stored in an integer dtype.
    OverflowError
        If an integer value does not fit `dtype`.
    """
    src = np.asarray(data)
    if src.ndim != 1:
        raise ValueError(f"Expected a 1-D sequence of elements, got shape {src.shape}.")

    if dtype is not None:
        dt = element_dtype(dtype)
    elif src.size == 0:
        dt = np.dtype(DEFAULT_DTYPE)
    else:
        dt = element_dtype(src.dtype)

    _check_fits(src, dt)
    return np.array(src, dtype=dt, copy=True)


def as_scalar(value: Any, dtype: DTypeLike) -> np.generic:
    """
    Convert a real number to a scalar of `dtype`.

    Booleans, arrays and non-numbers raise TypeError, as does a floating
    value paired with an integer dtype. Python ints of any size are
    accepted; one that does not fit an integer dtype raises OverflowError.
    """
    dt = element_dtype(dtype)
    if isinstance(value, (bool, np.bool_)):
        raise TypeError("Booleans are not valid vector scalars.")

    # arbitrary-precision ints would become object arrays below
    if isinstance(value, int):
        if dt.kind == "f":
            return dt.type(float(value))
        info = np.iinfo(dt)
        if not info.min <= value <= info.max:
            raise OverflowError(f"Scalar {value} does not fit dtype {dt}.")
        return dt.type(value)

    v = np.asarray(value)
    if v.ndim != 0:
        raise TypeError(f"Expected a scalar, got an array of shape {v.shape}.")
    _check_fits(v.reshape(1), dt)
    return dt.type(v)

############################
# STRUCTURAL CHECKS
############################

def check_index(i: Any, n: int) -> int:
    """Return `i` as an int in [0, n); negative indices are out of range."""
    idx = operator.index(i)
    if idx < 0 or idx >= n:
        raise IndexError(f"Index {idx} out of range for vector of dimension {n}.")
    return idx


def check_compatible(a, b, op: str) -> None:
    """
    Require two operands with the same shape and dtype.

    Only `shape` and `dtype` are compared; callers that go on to read the
    operands' elements must check the operand type themselves
    (Vector methods do so before calling this).
    """
    if a.shape != b.shape:
        raise ValueError(f"{op}: dimension mismatch, {a.shape[0]} vs {b.shape[0]}.")
    if a.dtype != b.dtype:
        raise TypeError(f"{op}: element type mismatch, {a.dtype} vs {b.dtype}.")


def check_dim(n: int, expected: int, name: str = "vector") -> None:
    if n != expected:
        raise ValueError(f"Expected a {expected}-dimensional {name}, got dimension {n}.")


def require_signed(dtype: DTypeLike, op: str) -> None:
    dt = np.dtype(dtype)
    if dt.kind not in SIGNED_KINDS:
        raise TypeError(f"{op} requires a signed element type, got {dt}.")
