# ad/core/__init__.py

"""
Core public API for forward-mode differentiation.

Exports:
    FVar               : Dual number (value, tangent) used by every kernel.
    value_of           : Strip an FVar (or sequence of them) to plain values.
    tangent_of         : Read the tangent slot(s).
    is_constant        : True if an argument needs no derivative work.
    variable, constant : Seed an input (dot = 1) or lift it as a constant (dot = 0).
    derivative         : One forward pass for f'(x0).
    partials           : One forward pass per input for all partials.
    central_difference, central_gradient : Bumping references.
"""

from .fvar import FVar
from .seeds import value_of, tangent_of, is_constant, variable, constant, derivative, partials
from .finite_diff import central_difference, central_gradient

__all__ = [
    "FVar",
    "value_of", "tangent_of", "is_constant",
    "variable", "constant",
    "derivative", "partials",
    "central_difference", "central_gradient",
]
