"""
Closed-form operations on three dimensional vectors.

A vector is a 1-D numpy array of exactly 3 float64 or float32 elements.
Every function that produces a vector writes into ``out`` and returns it, so
calls can be chained. ``out`` may be the same array as any input. When
``out`` is None a new array with the dtype of the first input is allocated.

Arithmetic stays in the precision of the inputs: scalars are cast to the
vector's dtype before use, so a float32 vector is never promoted. Mixing a
float64 and a float32 vector in one call is a caller error.

Shapes are not validated here; use vector3() to build checked vectors.
"""

from enum import IntEnum
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinalg.core.precision import Precision, precision_of, resolve_precision
from pylinalg.core.validation import check_1d, check_array, check_length


class Axis(IntEnum):
    """Component labels of a three dimensional vector."""
    X = 0
    Y = 1
    Z = 2


NVECTOR3 = 3

Vector3 = NDArray[np.floating[Any]]


def _out_like(template: Vector3, out: Vector3 | None) -> Vector3:
    if out is None:
        return np.empty_like(template)
    return out


def vector3(
    x: ArrayLike | float,
    y: float | None = None,
    z: float | None = None,
    precision: Precision | str | None = None,
) -> Vector3:
    """
    Build a validated vector.

    Accepts either three scalars or a single 3-element sequence.

    Args:
        x: X component, or a sequence holding all three components
        y: Y component
        z: Z component
        precision: Element precision (default fp64)

    Returns:
        New 1-D array of 3 elements

    Raises:
        DimensionError: If the input does not hold exactly 3 components
        ValidationError: If the input is not numeric
    """
    raw = x if y is None and z is None else [x, y, z]
    if precision is None and isinstance(raw, np.ndarray):
        # keep the caller's precision
        values = check_array(raw, "vector")
    else:
        values = check_array(raw, "vector", precision=resolve_precision(precision))
    check_1d(values, "vector")
    check_length(values, NVECTOR3, "vector")
    return np.array(values, copy=True)


def zeros(precision: Precision | str | None = None) -> Vector3:
    """Return a new zero vector."""
    return np.zeros(NVECTOR3, dtype=resolve_precision(precision).dtype)


def copy(source: Vector3, out: Vector3 | None = None) -> Vector3:
    """Copy one vector to another."""
    out = _out_like(source, out)
    out[:] = source
    return out


def multiply_accumulate(
    a: Vector3,
    b: Vector3,
    scale: float,
    out: Vector3 | None = None,
) -> Vector3:
    """Multiply and accumulate two vectors as out = a + b*scale."""
    out = _out_like(a, out)
    scaled = b * precision_of(a.dtype).cast(scale)
    np.add(a, scaled, out=out)
    return out


def add(a: Vector3, b: Vector3, out: Vector3 | None = None) -> Vector3:
    """Sum two vectors."""
    out = _out_like(a, out)
    np.add(a, b, out=out)
    return out


sum_ = add


def difference(left: Vector3, right: Vector3, out: Vector3 | None = None) -> Vector3:
    """Subtract right from left."""
    out = _out_like(left, out)
    np.subtract(left, right, out=out)
    return out


def dot(a: Vector3, b: Vector3) -> np.floating:
    """Dot product of two vectors, in their precision."""
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def cross(left: Vector3, right: Vector3, out: Vector3 | None = None) -> Vector3:
    """
    Cross left against right.

    Each output component reads two differently indexed inputs, so the
    components are formed before anything is written. This makes ``out``
    safe to alias ``left`` or ``right``.
    """
    out = _out_like(left, out)
    x = left[1] * right[2] - left[2] * right[1]
    y = left[2] * right[0] - left[0] * right[2]
    z = left[0] * right[1] - left[1] * right[0]
    out[0] = x
    out[1] = y
    out[2] = z
    return out


def length_squared(v: Vector3) -> np.floating:
    """Square of the length of a vector."""
    return v[0] * v[0] + v[1] * v[1] + v[2] * v[2]


def length(v: Vector3) -> np.floating:
    """Length of a vector."""
    return np.sqrt(length_squared(v))


def scale(v: Vector3, s: float, out: Vector3 | None = None) -> Vector3:
    """Multiply every component by s."""
    out = _out_like(v, out)
    np.multiply(v, precision_of(v.dtype).cast(s), out=out)
    return out


def unit(v: Vector3, out: Vector3 | None = None) -> Vector3:
    """
    Scale a vector to unit length.

    A zero vector divides by zero: the result is NaN and numpy emits its
    usual RuntimeWarning. Callers must avoid zero vectors.
    """
    out = _out_like(v, out)
    np.divide(v, length(v), out=out)
    return out
