# ad/__init__.py
# Forward-mode automatic differentiation

from .core.fvar import FVar
from .core.seeds import value_of, tangent_of, is_constant, variable, constant, derivative, partials
from .core.finite_diff import central_difference, central_gradient

# Registers the FVar operator bindings
from . import ops
from .matrix import dot_product, dot_self, columns_dot_product, rows_dot_product

__all__ = [
    # Core
    'FVar',
    'value_of',
    'tangent_of',
    'is_constant',
    'variable',
    'constant',
    'derivative',
    'partials',
    'central_difference',
    'central_gradient',
    # Ops
    'ops',
    # Matrix
    'dot_product',
    'dot_self',
    'columns_dot_product',
    'rows_dot_product',
]
