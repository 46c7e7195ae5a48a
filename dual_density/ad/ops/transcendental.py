# ad/ops/transcendental.py
import numpy as np
from ..core.fvar import FVar


def _unary(x, f, dfdx):
    """
    Generic unary primitive.

    Plain input -> plain f(x). FVar input -> FVar(f(x.val), f'(x.val) * x.dot),
    where dfdx receives (x.val, f(x.val)) so rules like exp can reuse the value.
    """
    if not isinstance(x, FVar):
        return f(np.float64(x))
    v = f(x.val)
    return FVar(v, dfdx(x.val, v) * x.dot)


def exp(x):
    return _unary(x, np.exp, lambda a, v: v)


def log(x):
    return _unary(x, np.log, lambda a, v: 1.0 / a)


def log10(x):
    return _unary(x, np.log10, lambda a, v: 1.0 / (a * np.log(10.0)))


def sqrt(x):
    return _unary(x, np.sqrt, lambda a, v: 0.5 / v)


def log1p(x):
    return _unary(x, np.log1p, lambda a, v: 1.0 / (1.0 + a))


def expm1(x):
    return _unary(x, np.expm1, lambda a, v: v + 1.0)


def square(x):
    return _unary(x, np.square, lambda a, v: 2.0 * a)


def inv(x):
    """1 / x."""
    return _unary(x, lambda a: 1.0 / a, lambda a, v: -v * v)


def inv_sqrt(x):
    """1 / sqrt(x)."""
    return _unary(x, lambda a: 1.0 / np.sqrt(a), lambda a, v: -0.5 * v / a)


def fabs(x):
    # Derivative at 0 is taken as 0
    return _unary(x, np.fabs, lambda a, v: np.sign(a))


def sin(x):
    return _unary(x, np.sin, lambda a, v: np.cos(a))


def cos(x):
    return _unary(x, np.cos, lambda a, v: -np.sin(a))


def tan(x):
    return _unary(x, np.tan, lambda a, v: 1.0 + v * v)


def asin(x):
    return _unary(x, np.arcsin, lambda a, v: 1.0 / np.sqrt(1.0 - a * a))


def acos(x):
    return _unary(x, np.arccos, lambda a, v: -1.0 / np.sqrt(1.0 - a * a))


def atan(x):
    return _unary(x, np.arctan, lambda a, v: 1.0 / (1.0 + a * a))


def sinh(x):
    return _unary(x, np.sinh, lambda a, v: np.cosh(a))


def cosh(x):
    return _unary(x, np.cosh, lambda a, v: np.sinh(a))


def tanh(x):
    return _unary(x, np.tanh, lambda a, v: 1.0 - v * v)
