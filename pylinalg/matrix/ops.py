"""
Matrix engine: element access and arithmetic on Matrix descriptors.

Conventions:
    - Operations with a shape precondition return a bool. On False the
      destination is left exactly as it was; every precondition is checked
      before the first write.
    - Operands must share one precision. A float64/float32 mix is treated
      like a shape mismatch (False), never converted.
    - Element access performs no bounds checking of its own.
    - Nothing here raises, logs or warns for shape problems.

All arithmetic runs in the operands' dtype, so float32 inputs produce
float32 results with float32 rounding.
"""

import numpy as np

from pylinalg.matrix.descriptor import Matrix


def _conformant(*matrices: Matrix) -> bool:
    first = matrices[0]
    return all(first.same_precision(M) for M in matrices[1:])


def _diagonal(M: Matrix) -> np.ndarray:
    # Writable view of the main diagonal of a square matrix
    return M.data[:: M.cols + 1]


# ═══════════════════════════════════════════════════════════════════════
# Element access
# ═══════════════════════════════════════════════════════════════════════


def get(M: Matrix, row: int, col: int) -> np.floating:
    """Get a specific element of a matrix."""
    return M.data[row * M.cols + col]


def set_element(M: Matrix, row: int, col: int, value: float) -> None:
    """Set a specific element of a matrix."""
    M.data[row * M.cols + col] = value


def add_to_element(M: Matrix, row: int, col: int, value: float) -> None:
    """Add a scalar to a specific element of the matrix."""
    M.data[row * M.cols + col] += M.precision.cast(value)


def set_row(M: Matrix, row: int, value: float) -> None:
    """Set every element of a row to value."""
    start = row * M.cols
    M.data[start:start + M.cols] = value


def set_column(M: Matrix, col: int, value: float) -> None:
    """Set every element of a column to value."""
    if M.cols:
        M.data[col::M.cols] = value


# ═══════════════════════════════════════════════════════════════════════
# Reset and copy
# ═══════════════════════════════════════════════════════════════════════


def zero(M: Matrix) -> None:
    """Set all elements of a matrix to zero."""
    M.data.fill(0)


def set_identity(M: Matrix) -> bool:
    """Set a square matrix to identity."""
    if not M.is_square:
        return False
    M.data.fill(0)
    _diagonal(M)[:] = 1
    return True


def copy(A: Matrix, B: Matrix) -> bool:
    """Copy A into B; both must have the same shape and precision."""
    if not A.same_shape(B) or not _conformant(A, B):
        return False
    np.copyto(B.data, A.data)
    return True


def identity_error(M: Matrix) -> np.floating:
    """
    Sum of squared deviations of M from the identity pattern.

    The pattern is 1 where row == col and 0 elsewhere, so rectangular
    matrices are measured against the truncated identity. Zero means M is
    exactly identity; use it to check results that should be orthonormal
    (for example R·Rᵗ of a rotation) against a tolerance.
    """
    deviation = M.array - np.eye(M.rows, M.cols, dtype=M.dtype)
    return np.sum(deviation * deviation, dtype=M.dtype)


test_for_identity = identity_error
test_for_identity.__test__ = False  # type: ignore[attr-defined]


# ═══════════════════════════════════════════════════════════════════════
# Elementwise arithmetic
# ═══════════════════════════════════════════════════════════════════════


def add(A: Matrix, B: Matrix, C: Matrix) -> bool:
    """C = A + B."""
    if not (A.same_shape(B) and A.same_shape(C)) or not _conformant(A, B, C):
        return False
    np.add(A.data, B.data, out=C.data)
    return True


def add_equals(A: Matrix, B: Matrix) -> bool:
    """A += B."""
    if not A.same_shape(B) or not _conformant(A, B):
        return False
    A.data += B.data
    return True


def average(A: Matrix, B: Matrix, C: Matrix) -> bool:
    """C = (A + B) * 0.5."""
    if not (A.same_shape(B) and A.same_shape(C)) or not _conformant(A, B, C):
        return False
    np.multiply(A.data + B.data, C.precision.cast(0.5), out=C.data)
    return True


def scale(A: Matrix, scalar: float) -> None:
    """Multiply every element of A by scalar, in place."""
    A.data *= A.precision.cast(scalar)


# ═══════════════════════════════════════════════════════════════════════
# Identity composition
# ═══════════════════════════════════════════════════════════════════════


def add_identity(A: Matrix) -> bool:
    """A = A + I."""
    if not A.is_square:
        return False
    _diagonal(A)[:] += 1
    return True


def minus_identity(A: Matrix) -> bool:
    """A = A - I."""
    if not A.is_square:
        return False
    _diagonal(A)[:] -= 1
    return True


def identity_minus(A: Matrix) -> bool:
    """A = I - A."""
    if not A.is_square:
        return False
    np.negative(A.data, out=A.data)
    _diagonal(A)[:] += 1
    return True


# ═══════════════════════════════════════════════════════════════════════
# Row operations and transpose
# ═══════════════════════════════════════════════════════════════════════


def dot_rows(A: Matrix, row_a: int, row_b: int) -> np.floating:
    """Dot product of two rows of A."""
    rows = A.array
    return np.dot(rows[row_a], rows[row_b])


def transpose(A: Matrix, B: Matrix) -> bool:
    """
    B = Aᵗ.

    B must be A.cols x A.rows and must not share storage with A; use
    transpose_in_place() for a square matrix transposed onto itself.
    """
    if B.rows != A.cols or B.cols != A.rows or not _conformant(A, B):
        return False
    if A.shares_memory(B):
        return False
    B.array[...] = A.array.T
    return True


def transpose_in_place(A: Matrix) -> bool:
    """A = Aᵗ for a square matrix."""
    if not A.is_square:
        return False
    view = A.array
    view[...] = view.T.copy()
    return True


# ═══════════════════════════════════════════════════════════════════════
# Multiply family
# ═══════════════════════════════════════════════════════════════════════


def _product_target_ok(C: Matrix, *operands: Matrix) -> bool:
    # C is accumulated into, so it must be distinct from every operand
    if not _conformant(C, *operands):
        return False
    return not any(C.shares_memory(M) for M in operands)


def multiply(A: Matrix, B: Matrix, C: Matrix) -> bool:
    """
    C = A·B.

    Requires A.cols == B.rows, C.rows == A.rows and C.cols == B.cols, and
    C stored separately from A and B.
    """
    if A.cols != B.rows or C.rows != A.rows or C.cols != B.cols:
        return False
    if not _product_target_ok(C, A, B):
        return False
    np.matmul(A.array, B.array, out=C.array)
    return True


def multiply_trans_a(A: Matrix, B: Matrix, C: Matrix) -> bool:
    """
    C = Aᵗ·B, reading A through a transposed view.

    Requires A.rows == B.rows, C.rows == A.cols and C.cols == B.cols.
    """
    if A.rows != B.rows or C.rows != A.cols or C.cols != B.cols:
        return False
    if not _product_target_ok(C, A, B):
        return False
    np.matmul(A.array.T, B.array, out=C.array)
    return True


def multiply_trans_b(A: Matrix, B: Matrix, C: Matrix) -> bool:
    """
    C = A·Bᵗ, reading B through a transposed view.

    Requires A.cols == B.cols, C.rows == A.rows and C.cols == B.rows.
    """
    if A.cols != B.cols or C.rows != A.rows or C.cols != B.rows:
        return False
    if not _product_target_ok(C, A, B):
        return False
    np.matmul(A.array, B.array.T, out=C.array)
    return True
