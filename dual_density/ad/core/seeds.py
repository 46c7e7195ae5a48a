# ad/core/seeds.py

#-----------------------------------------------------------------------------
# We "plant" a seed (dx/dx = 1) on one input and let the tangent flow
# forward through every primitive to the output.
#-----------------------------------------------------------------------------
from __future__ import annotations
from typing import Any, Callable, Dict, Tuple
import numpy as np

from .fvar import FVar


def _is_sequence(x: Any) -> bool:
    return isinstance(x, (list, tuple, np.ndarray)) and np.ndim(x) > 0


def value_of(x: Any) -> Any:
    """
    Strip derivative information.

    FVar -> its value; sequence -> float64 array of values; plain number
    is passed through unchanged.
    """
    if isinstance(x, FVar):
        return x.val
    if _is_sequence(x):
        if isinstance(x, np.ndarray) and x.dtype != object:
            return x.astype(np.float64, copy=False)
        return np.array([value_of(e) for e in x], dtype=np.float64)
    return x


def tangent_of(x: Any) -> Any:
    """Tangent of an FVar (0.0 for plain numbers); arrays for sequences."""
    if isinstance(x, FVar):
        return x.dot
    if _is_sequence(x):
        return np.array([tangent_of(e) for e in x], dtype=np.float64)
    return np.float64(0.0)


def is_constant(x: Any) -> bool:
    """True when x (scalar or sequence) carries no FVar, i.e. needs no derivative."""
    if isinstance(x, FVar):
        return False
    if isinstance(x, np.ndarray):
        if x.dtype != object:
            return True
        return all(is_constant(e) for e in x.flat)
    if isinstance(x, (list, tuple)):
        return all(is_constant(e) for e in x)
    return True


def variable(x: Any) -> Any:
    """Seed x as the differentiation direction (dot = 1). Sequences seed every entry."""
    if _is_sequence(x):
        return [FVar(v, 1.0) for v in value_of(x)]
    return FVar(value_of(x), 1.0)


def constant(x: Any) -> Any:
    """Lift x into FVar(s) with zero tangent."""
    if _is_sequence(x):
        return [FVar(v, 0.0) for v in value_of(x)]
    return FVar(value_of(x), 0.0)


# ----------------------------- single-input derivative ----------------------------- #
def derivative(f: Callable[[FVar], Any], x0: float) -> Tuple[float, float]:
    """
    Value and first derivative of a scalar function y=f(x) at x0.
    Runs one forward pass with x seeded.
    """
    y = f(FVar(x0, 1.0))
    if not isinstance(y, FVar):
        # f did not depend on x
        return np.float64(y), np.float64(0.0)
    return y.val, y.dot


# ----------------------------- multi-input partials ----------------------------- #
def partials(f: Callable[[Dict[str, Any]], Any],
             inputs: Dict[str, float]) -> Tuple[float, Dict[str, float]]:
    """
    Value and all partials of a scalar-output function y=f(vars).

    Forward mode carries one direction per pass, so this performs one pass
    per input, seeding e_i each time.

    Parameters
    ----------
    f       : function taking a dict {name: FVar} and returning a scalar
    inputs  : dict {name: float}

    Returns
    -------
    (value, {name: df/dname}) with names in the same order as `inputs`
    """
    keys = list(inputs.keys())
    grad: Dict[str, float] = {}
    f0 = None
    for k in keys:
        vars_dict = {j: FVar(inputs[j], 1.0 if j == k else 0.0) for j in keys}
        y = f(vars_dict)
        f0 = value_of(y)
        grad[k] = tangent_of(y)
    if f0 is None:
        f0 = np.float64(f({}))
    return f0, grad
