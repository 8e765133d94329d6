"""
Numeric precision descriptors and utilities.

pylinalg supports exactly two element types: wide (float64) and narrow
(float32). Every operation runs in the precision of its operands and the
two never mix.
"""

from dataclasses import dataclass
from typing import Any

import numpy as np

from pylinalg.core.exceptions import PrecisionError, ValidationError


@dataclass(frozen=True)
class Precision:
    """
    A supported element precision.

    Attributes:
        name: Canonical short name ('fp64' or 'fp32')
        dtype: NumPy dtype used for storage and arithmetic
        eps: Machine epsilon of dtype
    """
    name: str
    dtype: np.dtype
    eps: float

    def cast(self, value: Any) -> np.floating:
        """Convert a Python or NumPy scalar to this precision."""
        return self.dtype.type(value)


# Wide precision (C double)
FP64 = Precision(
    name='fp64',
    dtype=np.dtype(np.float64),
    eps=float(np.finfo(np.float64).eps),  # ~2.22e-16
)

# Narrow precision (C float)
FP32 = Precision(
    name='fp32',
    dtype=np.dtype(np.float32),
    eps=float(np.finfo(np.float32).eps),  # ~1.19e-7
)

DEFAULT_PRECISION: Precision = FP64

_ALIASES: dict[str, Precision] = {
    'fp64': FP64,
    'float64': FP64,
    'double': FP64,
    'wide': FP64,
    'fp32': FP32,
    'float32': FP32,
    'single': FP32,
    'float': FP32,
    'narrow': FP32,
}


def resolve_precision(spec: Any = None) -> Precision:
    """
    Resolve a precision specification to a Precision.

    Args:
        spec: A Precision, a name ('fp64', 'double', 'fp32', 'single', ...),
              a NumPy dtype or scalar type, or None for the default.

    Returns:
        The matching Precision

    Raises:
        ValidationError: If spec is an unknown name
        PrecisionError: If spec is a dtype other than float64/float32
    """
    if spec is None:
        return DEFAULT_PRECISION
    if isinstance(spec, Precision):
        return spec
    if isinstance(spec, str) and spec.lower() in _ALIASES:
        return _ALIASES[spec.lower()]
    try:
        dtype = np.dtype(spec)
    except TypeError as e:
        raise ValidationError(
            f"unknown precision {spec!r}, expected one of {sorted(_ALIASES)}"
        ) from e
    return precision_of(dtype)


def precision_of(dtype: np.dtype | type) -> Precision:
    """
    Return the Precision whose dtype matches.

    Raises:
        PrecisionError: If dtype is neither float64 nor float32
    """
    dtype = np.dtype(dtype)
    if dtype == FP64.dtype:
        return FP64
    if dtype == FP32.dtype:
        return FP32
    raise PrecisionError(
        f"unsupported dtype {dtype}, expected float64 or float32",
        dtype=dtype,
    )


def machine_epsilon(spec: Any = None) -> float:
    """Machine epsilon for a precision specification."""
    return resolve_precision(spec).eps
