# ad/ops/__init__.py

# Ensure operator overloading is registered
from . import arithmetic
from . import transcendental
from . import special

# Convenience re-exports so users can do: from dual_density.ad.ops import mul, exp, ...
from .arithmetic import add, sub, mul, div, neg, pow
from .transcendental import (
    exp, log, log10, sqrt, log1p, expm1, square, inv, inv_sqrt, fabs,
    sin, cos, tan, asin, acos, atan, sinh, cosh, tanh,
)
from .special import erf, erfc, Phi, lgamma, digamma, log1m

__all__ = [
    "add", "sub", "mul", "div", "neg", "pow",
    "exp", "log", "log10", "sqrt", "log1p", "expm1", "square", "inv", "inv_sqrt", "fabs",
    "sin", "cos", "tan", "asin", "acos", "atan", "sinh", "cosh", "tanh",
    "erf", "erfc", "Phi", "lgamma", "digamma", "log1m",
]
