"""
Three dimensional vector kernel.

Usage:
    from pylinalg import vector3 as v3

    a = v3.vector3(1.0, 0.0, 0.0)
    b = v3.vector3(0.0, 1.0, 0.0)
    n = v3.cross(a, b)          # [0, 0, 1]
    v3.unit(n, out=n)
"""

from pylinalg.vector3.kernel import (
    Axis,
    NVECTOR3,
    Vector3,
    vector3,
    zeros,
    copy,
    multiply_accumulate,
    add,
    sum_,
    difference,
    dot,
    cross,
    length_squared,
    length,
    scale,
    unit,
)

__all__ = [
    "Axis",
    "NVECTOR3",
    "Vector3",
    "vector3",
    "zeros",
    "copy",
    "multiply_accumulate",
    "add",
    "sum_",
    "difference",
    "dot",
    "cross",
    "length_squared",
    "length",
    "scale",
    "unit",
]
