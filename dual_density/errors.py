"""
Error taxonomy shared by the reduction kernels and the density kernels.

    ShapeError        : input is not vector-shaped where a vector is required
    SizeMismatchError : sequences have incompatible lengths
    DomainError       : NaN, non-finite or non-positive value outside the support

All three are ValueErrors. Which of them actually escape a density call is
decided by the active ErrorPolicy.
"""

from enum import Enum


class ShapeError(ValueError):
    """Argument is not a row or column vector."""


class SizeMismatchError(ValueError):
    """Argument lengths cannot be reconciled (no broadcast applies)."""


class DomainError(ValueError):
    """Argument value outside the domain a distribution accepts."""


class ValidationWarning(RuntimeWarning):
    """Emitted instead of raising when the policy is ErrorPolicy.NEUTRAL."""


class ErrorPolicy(Enum):
    RAISE = "raise"        # raise the error to the caller
    NEUTRAL = "neutral"    # warn, then return the neutral element (0 for sums, 1 for products)
