"""
Closed-form matrix inverse for 1x1, 2x2 and 3x3 matrices.

The inverse is computed from the adjugate over the determinant:

    1x1:  B = [1/a]
    2x2:  B = [[d, -b], [-c, a]] / (ad - bc)
    3x3:  columns of B are r1×r2, r2×r0, r0×r1 over det = r0·(r1×r2)

where r0, r1, r2 are the rows of A. Larger matrices are not supported and
are rejected rather than approximated; there is no elimination fallback.

Only an exactly zero determinant is treated as singular. Nearly singular
input produces large, poorly conditioned results; callers that care should
test determinant() against their own threshold first.
"""

from typing import Any

import numpy as np
from numpy.typing import NDArray

from pylinalg.matrix.descriptor import Matrix
from pylinalg.vector3.kernel import cross, dot

MAX_INVERSE_DIMENSION = 3


def _supported(A: Matrix) -> bool:
    return A.is_square and 1 <= A.rows <= MAX_INVERSE_DIMENSION


def determinant(A: Matrix) -> np.floating | None:
    """
    Determinant of a 1x1, 2x2 or 3x3 matrix, in A's precision.

    Returns:
        The determinant, or None for any other shape
    """
    if not _supported(A):
        return None
    a = A.data
    if A.rows == 1:
        return a[0]
    if A.rows == 2:
        return a[0] * a[3] - a[1] * a[2]
    r0, r1, r2 = A.array
    return dot(r0, cross(r1, r2))


def _adjugate(A: Matrix) -> NDArray[np.floating[Any]]:
    a = A.data
    if A.rows == 1:
        return np.ones(1, dtype=A.dtype)
    if A.rows == 2:
        return np.array([a[3], -a[1], -a[2], a[0]], dtype=A.dtype)
    r0, r1, r2 = A.array
    columns = np.stack([cross(r1, r2), cross(r2, r0), cross(r0, r1)], axis=1)
    return columns.reshape(-1)


def inverse(A: Matrix, B: Matrix) -> bool:
    """
    Calculate the inverse of a square matrix A into B.

    Requirements:
        - A is square with 1, 2 or 3 rows
        - B has A's shape and precision and does not share storage with A
        - det(A) != 0

    Returns:
        True on success. False if any requirement fails, in which case B is
        left untouched.
    """
    if not _supported(A) or not A.same_shape(B) or not A.same_precision(B):
        return False
    if A.shares_memory(B):
        return False

    det = determinant(A)
    if det == 0:
        return False

    np.divide(_adjugate(A), det, out=B.data)
    return True
