# prob/operands.py
from __future__ import annotations
from typing import Any, List, Optional
import numpy as np

from ..ad.core.fvar import FVar
from ..ad.core.seeds import is_constant, tangent_of
from .views import is_vector, length


def include_summand(propto: bool, *args: Any) -> bool:
    """
    Whether a log-density term that depends on `args` must be computed.

    Under propto, terms whose arguments are all constants only shift the
    result by a constant and are dropped. With no args, this asks whether
    any constant term is needed at all.
    """
    if not propto:
        return True
    return any(not is_constant(x) for x in args)


class _Partials:
    """
    Partial-derivative accumulator for one operand.

    Length 1 for a scalar (or length-1, broadcast) operand, N otherwise;
    writes to index n land on index 0 when broadcast.
    """

    __slots__ = ("d", "_broadcast")

    def __init__(self, size: int):
        self.d = np.zeros(size, dtype=np.float64)
        self._broadcast = size == 1

    def __getitem__(self, n: int):
        return self.d[0 if self._broadcast else n]

    def __setitem__(self, n: int, v):
        self.d[0 if self._broadcast else n] = v


class OperandsAndPartials:
    """
    Per-call bookkeeping pairing each operand with its partials.

    Operands that are constant get no accumulator (`d_x[k] is None`), so a
    kernel can test `ops.d_x[k] is not None` before doing derivative work.
    The kernel writes the partials of its summed result with respect to each
    operand entry, then calls `to_fvar(value)` once at the end.
    """

    def __init__(self, *operands: Any):
        self.operands = operands
        self.d_x: List[Optional[_Partials]] = [
            None if is_constant(x) else _Partials(length(x)) for x in operands
        ]

    @property
    def d_x1(self):
        return self.d_x[0]

    @property
    def d_x2(self):
        return self.d_x[1]

    @property
    def d_x3(self):
        return self.d_x[2]

    def to_fvar(self, value: float):
        """
        Assemble the differentiable result.

        With every operand constant this is the plain float64 value.
        Otherwise the tangent is sum_k sum_i d_x[k][i] * tangent(operand_k[i]).
        """
        if all(d is None for d in self.d_x):
            return np.float64(value)
        dot = np.float64(0.0)
        for x, d in zip(self.operands, self.d_x):
            if d is None:
                continue
            t = tangent_of(x) if is_vector(x) else np.array([tangent_of(x)])
            dot += np.dot(d.d, t)
        return FVar(value, dot)
