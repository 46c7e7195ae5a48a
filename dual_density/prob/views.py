# prob/views.py
"""
Broadcast views: index a scalar or a sequence uniformly as x[n].
"""
from typing import Any
import numpy as np


def is_vector(x: Any) -> bool:
    return isinstance(x, (list, tuple, np.ndarray)) and np.ndim(x) > 0


def length(x: Any) -> int:
    """1 for a scalar, len(x) for a sequence."""
    return len(x) if is_vector(x) else 1


def max_size(*args: Any) -> int:
    return max(length(x) for x in args)


class VectorView:
    """
    Read-only view over either a scalar or a sequence.

    A scalar, or a sequence of length 1, is broadcast: every index returns
    the same element.
    """

    __slots__ = ("_x", "_broadcast")

    def __init__(self, x: Any):
        self._x = x
        self._broadcast = length(x) == 1

    def __getitem__(self, n: int):
        if not is_vector(self._x):
            return self._x
        return self._x[0] if self._broadcast else self._x[n]

    def __len__(self):
        return length(self._x)
