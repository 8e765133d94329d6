"""
Row-major matrix engine.

Submodules:
    descriptor: Matrix view type
    storage: Factories for each buffer lifetime (allocate, from_buffer, ...)
    ops: Element access and arithmetic
    inversion: Closed-form inverse up to 3x3

Usage:
    from pylinalg.matrix import allocate, from_rows, multiply

    A = from_rows([[1, 2, 3], [4, 5, 6]])
    B = from_rows([[7, 8], [9, 10], [11, 12]])
    C = allocate(2, 2)
    if not multiply(A, B, C):
        ...  # shapes did not conform; C is unchanged
"""

from pylinalg.matrix.descriptor import Matrix
from pylinalg.matrix.storage import (
    allocate,
    identity,
    from_buffer,
    embedded,
    scratch,
    from_rows,
)
from pylinalg.matrix.ops import (
    get,
    set_element,
    add_to_element,
    set_row,
    set_column,
    zero,
    set_identity,
    copy,
    identity_error,
    test_for_identity,
    add,
    add_equals,
    average,
    scale,
    add_identity,
    minus_identity,
    identity_minus,
    dot_rows,
    transpose,
    transpose_in_place,
    multiply,
    multiply_trans_a,
    multiply_trans_b,
)
from pylinalg.matrix.inversion import MAX_INVERSE_DIMENSION, determinant, inverse

__all__ = [
    # Descriptor
    "Matrix",
    # Storage
    "allocate",
    "identity",
    "from_buffer",
    "embedded",
    "scratch",
    "from_rows",
    # Element access
    "get",
    "set_element",
    "add_to_element",
    "set_row",
    "set_column",
    # Reset, copy, compare
    "zero",
    "set_identity",
    "copy",
    "identity_error",
    "test_for_identity",
    # Elementwise
    "add",
    "add_equals",
    "average",
    "scale",
    # Identity composition
    "add_identity",
    "minus_identity",
    "identity_minus",
    # Rows and transpose
    "dot_rows",
    "transpose",
    "transpose_in_place",
    # Multiply family
    "multiply",
    "multiply_trans_a",
    "multiply_trans_b",
    # Inverse
    "MAX_INVERSE_DIMENSION",
    "determinant",
    "inverse",
]
