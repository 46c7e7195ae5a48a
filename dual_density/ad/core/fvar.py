# ad/core/fvar.py
from __future__ import annotations
import numpy as np
from typing import Any


class FVar:
    """
    Forward-mode dual number: v = val + dot * eps, eps^2 = 0.

    Attributes
    ----------
    val : np.float64
        Primal value.
    dot : np.float64
        Tangent, i.e. the derivative of `val` along the single direction
        being differentiated. 0 for constants, 1 for a seeded variable.

    Instances are never mutated by arithmetic; every primitive in
    `ad.ops` returns a new FVar.
    """

    __slots__ = ("val", "dot")

    # numpy scalars/arrays return NotImplemented for binary ops with FVar,
    # so Python falls through to our reflected operators.
    __array_ufunc__ = None

    def __init__(self, val: Any, dot: Any = 0.0):
        if isinstance(val, FVar) or isinstance(dot, FVar):
            raise TypeError("FVar does not nest; pass plain numeric val/dot")
        self.val = np.float64(val)
        self.dot = np.float64(dot)

    def __repr__(self):
        return f"FVar({self.val!r}, {self.dot!r})"

    # Comparisons act on the value only
    def __eq__(self, other):
        return self.val == _val(other)

    def __ne__(self, other):
        return self.val != _val(other)

    def __lt__(self, other):
        return self.val < _val(other)

    def __le__(self, other):
        return self.val <= _val(other)

    def __gt__(self, other):
        return self.val > _val(other)

    def __ge__(self, other):
        return self.val >= _val(other)

    def __hash__(self):
        return hash(self.val)

    def __bool__(self):
        return bool(self.val)

    # Arithmetic operators (+ - * / ** unary-) are bound by ops/arithmetic.py
    def __pos__(self):
        return self

    def __abs__(self):
        from ..ops.transcendental import fabs
        return fabs(self)


def _val(x):
    return x.val if isinstance(x, FVar) else x
