# ad/matrix/validate.py
import numpy as np

from ...errors import ShapeError, SizeMismatchError


def as_vector(v, function: str) -> np.ndarray:
    """
    Return v as a 1-D array, accepting lists/tuples, 1-D arrays and 2-D arrays
    with a single row or a single column. Elements may be floats or FVars.
    """
    arr = np.asarray(v) if isinstance(v, np.ndarray) else np.array(v, dtype=object)
    if arr.ndim == 1:
        return arr
    if arr.ndim == 2 and (arr.shape[0] == 1 or arr.shape[1] == 1):
        return arr.reshape(-1)
    raise ShapeError(f"{function}: expecting vector (row or column), got shape {arr.shape}")


def validate_matching_sizes(v1, v2, function: str) -> None:
    if len(v1) != len(v2):
        raise SizeMismatchError(
            f"{function}: size of first argument ({len(v1)}) "
            f"must match size of second argument ({len(v2)})"
        )
