"""
Row-major matrix descriptor.

A Matrix is a view: a flat buffer plus row/column metadata. It never copies
the buffer it is given and never decides where that buffer lives. See
pylinalg.matrix.storage for the factories that create buffers with a given
lifetime.

Element (r, c) is stored at data[r*cols + c].
"""

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pylinalg.core.exceptions import ValidationError
from pylinalg.core.precision import Precision, precision_of
from pylinalg.core.validation import (
    check_1d,
    check_contiguous,
    check_dimensions,
    check_length,
    check_precision,
    check_writeable,
)


@dataclass(frozen=True, eq=False)
class Matrix:
    """
    Row-major matrix descriptor over a caller-supplied buffer.

    Attributes:
        rows: Number of rows
        cols: Number of columns
        data: Flat C-contiguous float64 or float32 array of rows*cols elements

    The dimensions and the buffer are fixed for the descriptor's lifetime;
    element values are mutable through data or array.

    Raises:
        ValidationError: If data is not an ndarray, is read-only,
            or dimensions are invalid
        PrecisionError: If data is not float64/float32
        DimensionError: If len(data) != rows*cols
    """
    rows: int
    cols: int
    data: NDArray[np.floating[Any]]

    def __post_init__(self) -> None:
        check_dimensions(self.rows, self.cols)
        if not isinstance(self.data, np.ndarray):
            raise ValidationError(
                f"data: expected numpy.ndarray, got {type(self.data).__name__}; "
                f"use storage.from_buffer() for other buffer types"
            )
        check_precision(self.data, "data")
        check_1d(self.data, "data")
        check_contiguous(self.data, "data")
        check_length(self.data, self.rows * self.cols, "data")
        check_writeable(self.data, "data")

    @property
    def dtype(self) -> np.dtype:
        return self.data.dtype

    @property
    def precision(self) -> Precision:
        return precision_of(self.data.dtype)

    @property
    def shape(self) -> tuple[int, int]:
        return (self.rows, self.cols)

    @property
    def size(self) -> int:
        return self.rows * self.cols

    @property
    def is_square(self) -> bool:
        return self.rows == self.cols

    @property
    def array(self) -> NDArray[np.floating[Any]]:
        """(rows, cols) view sharing memory with data."""
        return self.data.reshape(self.rows, self.cols)

    def same_shape(self, other: "Matrix") -> bool:
        return self.rows == other.rows and self.cols == other.cols

    def same_precision(self, other: "Matrix") -> bool:
        return self.data.dtype == other.data.dtype

    def shares_memory(self, other: "Matrix") -> bool:
        """True if the two descriptors' buffers overlap."""
        return bool(np.shares_memory(self.data, other.data))

    def to_list(self) -> list[list[float]]:
        """Nested-list snapshot of the elements."""
        return self.array.tolist()

    def __repr__(self) -> str:
        return (
            f"Matrix(rows={self.rows}, cols={self.cols}, "
            f"precision={self.precision.name}, data={self.data.tolist()!r})"
        )
