"""
Central finite differences (bumping).

Reference derivatives for checking forward-mode tangents and hand-derived
partials:

    f'(x) ≈ [f(x+ε) - f(x-ε)] / (2ε)
"""

import numpy as np
from typing import Callable, Dict

from .seeds import value_of


def central_difference(f: Callable[[float], float], x0: float, eps: float = 1e-6) -> float:
    """Central difference of a scalar function at x0."""
    up = value_of(f(x0 + eps))
    down = value_of(f(x0 - eps))
    return (up - down) / (2.0 * eps)


def central_gradient(f: Callable[[Dict[str, float]], float],
                     inputs: Dict[str, float],
                     eps: float = 1e-6) -> Dict[str, float]:
    """
    Bump each input in turn, holding the rest fixed.

    Args:
        f: Function taking Dict[str, float] and returning a scalar
        inputs: Base point
        eps: Bump size

    Returns:
        Dict[str, float] of partial derivatives, in the order of `inputs`
    """
    grad = {}
    for k, x0 in inputs.items():
        up = dict(inputs)
        down = dict(inputs)
        up[k] = x0 + eps
        down[k] = x0 - eps
        grad[k] = (np.float64(value_of(f(up))) - np.float64(value_of(f(down)))) / (2.0 * eps)
    return grad
