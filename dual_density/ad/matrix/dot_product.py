# ad/matrix/dot_product.py
"""
Reduction kernels over sequences whose entries may be plain floats or FVars.

One implementation covers every plain/dual operand combination: the
products go through FVar's operators, which lift plain operands as
constants. Summation is strictly left to right.
"""
from __future__ import annotations
from typing import Any, Optional
import numpy as np

from ..core.fvar import FVar
from ..core.seeds import is_constant
from .validate import as_vector, validate_matching_sizes
from ...errors import ShapeError, SizeMismatchError


def _zero(*operands):
    # Dual accumulator only if some operand carries a tangent
    if all(is_constant(v) for v in operands):
        return np.float64(0.0)
    return FVar(0.0, 0.0)


def dot_product(v1: Any, v2: Any, length: Optional[int] = None):
    """
    Sum of v1[i] * v2[i].

    Args:
        v1, v2: Vectors (list, tuple, 1-D array, or 2-D array with one row/column)
        length: If given, only the first `length` entries are used and the
                sizes of v1 and v2 are not compared.

    Returns:
        np.float64 if neither operand holds an FVar, otherwise FVar.

    Raises:
        ShapeError: an operand is not vector-shaped
        SizeMismatchError: sizes differ and `length` was not given
    """
    a = as_vector(v1, "dot_product")
    b = as_vector(v2, "dot_product")
    if length is None:
        validate_matching_sizes(a, b, "dot_product")
        length = len(a)
    elif length < 0:
        raise ValueError(f"dot_product: length must be non-negative, got {length}")

    ret = _zero(a, b)
    for i in range(length):
        ret = ret + a[i] * b[i]
    return ret


def dot_self(v: Any):
    """Sum of squares v[i] * v[i]."""
    return dot_product(v, v)


def _as_matrix(m: Any, function: str) -> np.ndarray:
    arr = np.asarray(m) if isinstance(m, np.ndarray) else np.array(m, dtype=object)
    if arr.ndim != 2:
        raise ShapeError(f"{function}: expecting a matrix, got shape {arr.shape}")
    return arr


def _check_same_shape(a: np.ndarray, b: np.ndarray, function: str) -> None:
    if a.shape != b.shape:
        raise SizeMismatchError(
            f"{function}: shapes of the arguments differ, {a.shape} vs {b.shape}"
        )


def columns_dot_product(m1: Any, m2: Any) -> np.ndarray:
    """Dot product of each column pair; returns an array with one entry per column."""
    a = _as_matrix(m1, "columns_dot_product")
    b = _as_matrix(m2, "columns_dot_product")
    _check_same_shape(a, b, "columns_dot_product")
    out = [dot_product(a[:, j], b[:, j]) for j in range(a.shape[1])]
    return _pack(out)


def rows_dot_product(m1: Any, m2: Any) -> np.ndarray:
    """Dot product of each row pair; returns an array with one entry per row."""
    a = _as_matrix(m1, "rows_dot_product")
    b = _as_matrix(m2, "rows_dot_product")
    _check_same_shape(a, b, "rows_dot_product")
    out = [dot_product(a[i, :], b[i, :]) for i in range(a.shape[0])]
    return _pack(out)


def _pack(values: list) -> np.ndarray:
    if any(isinstance(v, FVar) for v in values):
        packed = np.empty(len(values), dtype=object)
        packed[:] = values
        return packed
    return np.array(values, dtype=np.float64)
