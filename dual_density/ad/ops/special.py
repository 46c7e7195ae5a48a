# ad/ops/special.py
import numpy as np
from scipy import special as sp

from .transcendental import _unary

SQRT_TWO_PI = np.sqrt(2.0 * np.pi)
TWO_OVER_SQRT_PI = 2.0 / np.sqrt(np.pi)


def norm_pdf(x):
    return np.exp(-0.5 * x * x) / SQRT_TWO_PI


def erf(x):
    """
    Error function: erf(x) = (2/√π) ∫₀ˣ e^(-t²) dt

    Derivative: d/dx erf(x) = (2/√π) * e^(-x²)
    """
    return _unary(x, sp.erf, lambda a, v: TWO_OVER_SQRT_PI * np.exp(-a * a))


def erfc(x):
    return _unary(x, sp.erfc, lambda a, v: -TWO_OVER_SQRT_PI * np.exp(-a * a))


def Phi(x):
    """Standard normal CDF; dPhi/dx = phi(x)."""
    return _unary(x, sp.ndtr, lambda a, v: norm_pdf(a))


def lgamma(x):
    return _unary(x, sp.gammaln, lambda a, v: sp.psi(a))


def digamma(x):
    return _unary(x, sp.psi, lambda a, v: sp.polygamma(1, a))


def log1m(x):
    """log(1 - x)."""
    return _unary(x, lambda a: np.log1p(-a), lambda a, v: -1.0 / (1.0 - a))
