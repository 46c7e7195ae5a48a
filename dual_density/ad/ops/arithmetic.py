# ad/ops/arithmetic.py
import numpy as np
from ..core.fvar import FVar


def _as_fvar(x):
    """Ensure x is an FVar; otherwise wrap it as a constant (dot = 0)."""
    return x if isinstance(x, FVar) else FVar(x, 0.0)


def _binary(x, y, f, jvp):
    """
    Generic binary primitive:
      - plain (x, y): returns f(x, y) as a plain float64, no FVar is built
      - otherwise   : out.val = f(x.val, y.val), out.dot = jvp(x, y, out.val)
    """
    if not isinstance(x, FVar) and not isinstance(y, FVar):
        return f(np.float64(x), np.float64(y))
    x = _as_fvar(x)
    y = _as_fvar(y)
    v = f(x.val, y.val)
    return FVar(v, jvp(x, y, v))


def add(x, y):
    return _binary(x, y, lambda a, b: a + b,
                   lambda a, b, v: a.dot + b.dot)


def sub(x, y):
    return _binary(x, y, lambda a, b: a - b,
                   lambda a, b, v: a.dot - b.dot)


def mul(x, y):
    # d(x*y) = x.dot * y.val + x.val * y.dot
    return _binary(x, y, lambda a, b: a * b,
                   lambda a, b, v: a.dot * b.val + a.val * b.dot)


def div(x, y):
    # d(x/y) = (x.dot*y.val - x.val*y.dot) / y.val^2
    return _binary(x, y, lambda a, b: a / b,
                   lambda a, b, v: (a.dot * b.val - a.val * b.dot) / (b.val * b.val))


def neg(x):
    """
    Unary negation:
      out.val = -x.val
      JVP     : out.dot = -x.dot
    """
    if not isinstance(x, FVar):
        return -np.float64(x)
    return FVar(-x.val, -x.dot)


def pow(x, y):
    """
    Power:
      out.val = x.val ** y.val

    JVP:
      out.dot = y * x^(y-1) * x.dot + x^y * log(x) * y.dot

    Each term is only formed when that operand carries a nonzero tangent, so
    a constant exponent (plain or FVar with dot = 0) never touches log(x)
    and negative bases with integer exponents stay finite. Otherwise NaN
    propagates as in IEEE arithmetic.
    """
    if not isinstance(x, FVar) and not isinstance(y, FVar):
        return np.power(np.float64(x), np.float64(y))

    xv = x.val if isinstance(x, FVar) else np.float64(x)
    pv = y.val if isinstance(y, FVar) else np.float64(y)
    out_val = np.power(xv, pv)

    dot = np.float64(0.0)
    if isinstance(x, FVar):
        dot = dot + pv * np.power(xv, pv - 1.0) * x.dot
    if isinstance(y, FVar) and y.dot != 0:
        dot = dot + out_val * np.log(xv) * y.dot
    return FVar(out_val, dot)


# Bind Python operators to FVar
FVar.__add__      = lambda self, other: add(self, other)
FVar.__radd__     = lambda self, other: add(other, self)
FVar.__sub__      = lambda self, other: sub(self, other)
FVar.__rsub__     = lambda self, other: sub(other, self)
FVar.__mul__      = lambda self, other: mul(self, other)
FVar.__rmul__     = lambda self, other: mul(other, self)
FVar.__truediv__  = lambda self, other: div(self, other)
FVar.__rtruediv__ = lambda self, other: div(other, self)
FVar.__neg__      = lambda self: neg(self)
FVar.__pow__      = lambda self, other: pow(self, other)
FVar.__rpow__     = lambda self, other: pow(other, self)
