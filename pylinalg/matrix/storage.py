"""
Storage factories for Matrix descriptors.

A descriptor never owns a lifetime policy; these helpers pick one:

    allocate     - fresh zero-initialized storage owned by the descriptor
    from_buffer  - view over caller-owned storage (ndarray or writable buffer)
    embedded     - view over a slice of a larger aggregate buffer
    scratch      - scoped temporary, poisoned with NaN when the block exits
    from_rows    - copy of nested sequences (convenience for literals)
    identity     - fresh identity matrix
"""

from contextlib import contextmanager
from typing import Any, Iterator, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinalg.core.exceptions import DimensionError, ValidationError
from pylinalg.core.precision import Precision, resolve_precision
from pylinalg.core.validation import (
    check_array,
    check_contiguous,
    check_dimensions,
    check_non_negative_int,
    check_precision,
)
from pylinalg.matrix.descriptor import Matrix


def allocate(
    rows: int,
    cols: int,
    precision: Precision | str | None = None,
) -> Matrix:
    """
    Allocate a matrix, initializing its memory to zero.

    Args:
        rows: Number of rows
        cols: Number of columns
        precision: Element precision (default fp64)

    Returns:
        Matrix owning a new zeroed buffer
    """
    check_dimensions(rows, cols)
    prec = resolve_precision(precision)
    return Matrix(rows, cols, np.zeros(rows * cols, dtype=prec.dtype))


def identity(n: int, precision: Precision | str | None = None) -> Matrix:
    """Allocate an n x n identity matrix."""
    M = allocate(n, n, precision)
    M.data[:: n + 1] = 1
    return M


def from_buffer(
    buffer: Any,
    rows: int,
    cols: int,
    precision: Precision | str | None = None,
) -> Matrix:
    """
    Describe caller-owned storage as a matrix, without copying.

    An ndarray is used directly (a C-contiguous 2-D array is flattened as a
    view). Any other writable object exposing the buffer protocol (bytearray,
    array.array, memoryview) is reinterpreted as elements of precision.
    Read-only storage such as bytes is rejected.

    Args:
        buffer: Caller-owned storage of exactly rows*cols elements
        rows: Number of rows
        cols: Number of columns
        precision: Element precision; for ndarrays it must match if given

    Returns:
        Matrix viewing buffer

    Raises:
        ValidationError: If buffer cannot be viewed without a copy or is
            read-only
        PrecisionError: If an ndarray's dtype is unsupported or mismatched
        DimensionError: If the element count is not rows*cols
    """
    if isinstance(buffer, np.ndarray):
        check_precision(buffer, "buffer")
        array = check_array(
            buffer, "buffer",
            precision=None if precision is None else resolve_precision(precision),
        )
        if array.ndim > 1:
            check_contiguous(array, "buffer")
            array = array.reshape(-1)
        return Matrix(rows, cols, array)

    prec = resolve_precision(precision)
    try:
        array = np.frombuffer(buffer, dtype=prec.dtype)
    except (TypeError, ValueError) as e:
        raise ValidationError(
            f"buffer: cannot view {type(buffer).__name__} as {prec.name} elements: {e}"
        ) from e
    return Matrix(rows, cols, array)


def embedded(
    storage: NDArray[np.floating[Any]],
    offset: int,
    rows: int,
    cols: int,
) -> Matrix:
    """
    Describe a region of a larger aggregate buffer as a matrix.

    Several matrices can be laid out back to back in one flat buffer;
    each descriptor views rows*cols elements starting at offset.

    Raises:
        ValidationError: If offset is not a non-negative integer
        DimensionError: If the region does not fit inside storage
    """
    check_dimensions(rows, cols)
    check_non_negative_int(offset, "offset")
    if not isinstance(storage, np.ndarray):
        raise ValidationError(
            f"storage: expected numpy.ndarray, got {type(storage).__name__}"
        )
    check_precision(storage, "storage")
    storage = check_array(storage, "storage")
    if storage.ndim != 1:
        check_contiguous(storage, "storage")
        storage = storage.reshape(-1)
    end = offset + rows * cols
    if end > storage.shape[0]:
        raise DimensionError(
            f"storage: region [{offset}, {end}) exceeds buffer of {storage.shape[0]} elements",
            expected=end,
            actual=storage.shape[0],
        )
    return Matrix(rows, cols, storage[offset:end])


@contextmanager
def scratch(
    rows: int,
    cols: int,
    precision: Precision | str | None = None,
) -> Iterator[Matrix]:
    """
    Scoped temporary matrix.

    Yields a zeroed matrix valid only inside the with block. On exit the
    buffer is filled with NaN so any use after the scope is visible in the
    results instead of silently reading stale values.
    """
    M = allocate(rows, cols, precision)
    try:
        yield M
    finally:
        M.data.fill(np.nan)


def from_rows(
    values: Sequence[Sequence[float]] | ArrayLike,
    precision: Precision | str | None = None,
) -> Matrix:
    """
    Build a matrix from nested row sequences (copies the values).

    A float64/float32 ndarray keeps its precision when precision is None;
    if both are given they must agree. Nested sequences and integer arrays
    are converted to precision (default fp64).

    Raises:
        ValidationError: If values are not numeric or rows are ragged
        PrecisionError: If a floating ndarray does not match precision
        DimensionError: If values is not 2-D
    """
    if (
        precision is None
        and isinstance(values, np.ndarray)
        and np.issubdtype(values.dtype, np.floating)
    ):
        array = check_array(values, "values")
    else:
        array = check_array(values, "values", precision=resolve_precision(precision))
    if array.ndim != 2:
        raise DimensionError(
            f"values: expected 2D rows, got {array.ndim}D with shape {array.shape}",
            expected=2,
            actual=array.ndim,
        )
    rows, cols = array.shape
    return Matrix(rows, cols, np.array(array, order="C", copy=True).reshape(-1))
