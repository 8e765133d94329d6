"""
Input validation utilities for pylinalg.

These validators follow the "fail fast, fail loud" principle. They are used
when descriptors and vectors are constructed, never inside the arithmetic
operations themselves (those report shape problems through a False return).

Design principles:
    - No silent precision conversion
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinalg.core.exceptions import DimensionError, PrecisionError, ValidationError
from pylinalg.core.precision import Precision, precision_of


def check_array(
    array: ArrayLike,
    name: str,
    precision: Precision | None = None,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a numpy array.

    Existing float64/float32 ndarrays are returned unchanged (no copy) when
    precision is None or matches. Other array-likes are converted, to
    precision if given, else to float64.

    Args:
        array: Input to validate
        name: Parameter name for error messages
        precision: Required precision, or None to keep/infer

    Returns:
        numpy.ndarray of a supported floating dtype

    Raises:
        ValidationError: If input cannot be converted to a numeric array
        PrecisionError: If an existing ndarray has a different precision
    """
    if isinstance(array, np.ndarray) and np.issubdtype(array.dtype, np.floating):
        check_precision(array, name)
        if precision is not None and array.dtype != precision.dtype:
            raise PrecisionError(
                f"{name}: dtype {array.dtype} does not match requested "
                f"precision {precision.name}",
                dtype=array.dtype,
            )
        return array

    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    target = precision.dtype if precision is not None else np.float64
    return result.astype(target)


def check_precision(array: NDArray[Any], name: str) -> Precision:
    """
    Verify array has a supported floating dtype.

    Raises:
        PrecisionError: If dtype is neither float64 nor float32
    """
    try:
        return precision_of(array.dtype)
    except PrecisionError as e:
        raise PrecisionError(f"{name}: {e}", dtype=array.dtype) from e


def check_1d(array: NDArray[Any], name: str) -> None:
    """
    Verify array is 1-dimensional.

    Raises:
        DimensionError: If array is not 1D
    """
    if array.ndim != 1:
        raise DimensionError(
            f"{name}: expected 1D array, got {array.ndim}D with shape {array.shape}",
            expected=1,
            actual=array.ndim,
        )


def check_length(array: NDArray[Any], length: int, name: str) -> None:
    """
    Verify a 1D array has exactly the given number of elements.

    Raises:
        DimensionError: If the length differs
    """
    if array.shape[0] != length:
        raise DimensionError(
            f"{name}: expected {length} elements, got {array.shape[0]}",
            expected=length,
            actual=array.shape[0],
        )


def check_contiguous(array: NDArray[Any], name: str) -> None:
    """
    Verify array is C-contiguous, so a flat row-major view is possible.

    Raises:
        ValidationError: If the array is strided
    """
    if not array.flags.c_contiguous:
        raise ValidationError(
            f"{name}: array must be C-contiguous, got strides {array.strides}"
        )


def check_writeable(array: NDArray[Any], name: str) -> None:
    """
    Verify array accepts writes, so it can serve as a destination.

    Raises:
        ValidationError: If the array is read-only
    """
    if not array.flags.writeable:
        raise ValidationError(
            f"{name}: array is read-only, matrix storage must be writeable"
        )


def check_non_negative_int(value: int, name: str) -> None:
    """
    Verify value is a non-negative integer (bool is rejected).

    Raises:
        ValidationError: If value is not integral or is negative
    """
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise ValidationError(f"{name}: expected integer, got {type(value).__name__}")
    if value < 0:
        raise ValidationError(f"{name}: must be non-negative, got {value}")


def check_dimensions(rows: int, cols: int) -> None:
    """
    Verify matrix dimensions are non-negative integers.

    Raises:
        ValidationError: If either dimension is negative or not integral
    """
    check_non_negative_int(rows, "rows")
    check_non_negative_int(cols, "cols")
