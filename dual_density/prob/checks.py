# prob/checks.py
"""
Argument checks run by every density kernel before any numeric work.

Each check takes the calling function's name, the argument, and a role label
used in the message ("Scale parameter", ...). It returns True when the
argument is valid. On failure it either raises (ErrorPolicy.RAISE) or warns
and returns False (ErrorPolicy.NEUTRAL) so the kernel can return its neutral
element.
"""
import logging
import warnings
from typing import Any, Callable, Sequence

import numpy as np

from ..ad.core.seeds import value_of
from ..errors import DomainError, SizeMismatchError, ValidationWarning, ErrorPolicy
from .views import is_vector, length

logger = logging.getLogger(__name__)


def _fail(error_cls, message: str, policy: ErrorPolicy, stacklevel: int) -> bool:
    # stacklevel counts up from this frame to the caller of the check_* function
    if policy is ErrorPolicy.RAISE:
        raise error_cls(message)
    logger.debug("check failed, returning neutral value: %s", message)
    warnings.warn(message, ValidationWarning, stacklevel=stacklevel)
    return False


def _check_each(function: str, x: Any, name: str, policy: ErrorPolicy,
                ok: Callable[[float], bool], requirement: str) -> bool:
    values = np.atleast_1d(value_of(x))
    for i, v in enumerate(values):
        if not ok(v):
            where = f"{name}[{i}]" if is_vector(x) else name
            return _fail(DomainError,
                         f"{function}: {where} is {v}, but must be {requirement}!",
                         policy, stacklevel=4)
    return True


def check_not_nan(function: str, x: Any, name: str,
                  policy: ErrorPolicy = ErrorPolicy.RAISE) -> bool:
    return _check_each(function, x, name, policy, lambda v: not np.isnan(v), "not nan")


def check_finite(function: str, x: Any, name: str,
                 policy: ErrorPolicy = ErrorPolicy.RAISE) -> bool:
    return _check_each(function, x, name, policy, np.isfinite, "finite")


def check_positive(function: str, x: Any, name: str,
                   policy: ErrorPolicy = ErrorPolicy.RAISE) -> bool:
    # NaN fails the comparison and is rejected too
    return _check_each(function, x, name, policy, lambda v: v > 0, "> 0")


def check_consistent_sizes(function: str, args: Sequence[Any], names: Sequence[str],
                           policy: ErrorPolicy = ErrorPolicy.RAISE) -> bool:
    """
    All sequence arguments must have length 1 (broadcast) or a common length N.
    Scalars always pass.
    """
    n = max(length(x) for x in args)
    for x, name in zip(args, names):
        if is_vector(x) and length(x) not in (1, n):
            return _fail(SizeMismatchError,
                         f"{function}: size of {name} ({length(x)}) "
                         f"must match the largest argument size ({n})",
                         policy, stacklevel=3)
    return True
