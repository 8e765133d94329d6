"""
Tests for multiply, multiply_trans_a and multiply_trans_b.
"""

import numpy as np
import pytest

from pylinalg.core.precision import FP32, FP64
from pylinalg.matrix import allocate, embedded, from_rows, ops


@pytest.fixture
def A23(precision):
    return from_rows([[1, 2, 3], [4, 5, 6]], precision)


@pytest.fixture
def B32(precision):
    return from_rows([[7, 8], [9, 10], [11, 12]], precision)


# ═══════════════════════════════════════════════════════════════════════
# multiply
# ═══════════════════════════════════════════════════════════════════════


class TestMultiply:

    def test_concrete(self, A23, B32, precision):
        C = allocate(2, 2, precision)
        assert ops.multiply(A23, B32, C)
        np.testing.assert_array_equal(C.array, [[58, 64], [139, 154]])
        assert C.dtype == precision.dtype

    def test_overwrites_previous_contents(self, A23, B32, precision):
        C = from_rows([[100, 100], [100, 100]], precision)
        assert ops.multiply(A23, B32, C)
        np.testing.assert_array_equal(C.array, [[58, 64], [139, 154]])

    def test_matches_numpy(self, rng, precision, tol):
        a = rng.standard_normal((4, 3)).astype(precision.dtype)
        b = rng.standard_normal((3, 5)).astype(precision.dtype)
        A = from_rows(a, precision)
        B = from_rows(b, precision)
        C = allocate(4, 5, precision)
        assert ops.multiply(A, B, C)
        np.testing.assert_allclose(C.array, A.array @ B.array, rtol=tol.rtol, atol=tol.atol)

    def test_inner_dimension_mismatch(self, A23, precision):
        C = allocate(2, 2, precision)
        assert not ops.multiply(A23, A23, C)
        assert np.all(C.data == 0)

    def test_result_shape_mismatch(self, A23, B32, precision):
        C = allocate(3, 3, precision)
        assert not ops.multiply(A23, B32, C)
        assert np.all(C.data == 0)

    def test_result_aliasing_rejected(self):
        A = from_rows([[1, 2], [3, 4]])
        B = from_rows([[5, 6], [7, 8]])
        snapshot = A.data.copy()
        assert not ops.multiply(A, B, A)
        np.testing.assert_array_equal(A.data, snapshot)

    def test_result_overlapping_storage_rejected(self):
        storage = np.arange(8, dtype=np.float64)
        A = embedded(storage, 0, 2, 2)
        C = embedded(storage, 2, 2, 2)
        B = from_rows([[1, 0], [0, 1]])
        before = storage.copy()
        assert not ops.multiply(A, B, C)
        np.testing.assert_array_equal(storage, before)

    def test_disjoint_regions_of_one_buffer(self):
        storage = np.zeros(12)
        A = embedded(storage, 0, 2, 2)
        B = embedded(storage, 4, 2, 2)
        C = embedded(storage, 8, 2, 2)
        A.data[:] = [1, 2, 3, 4]
        ops.set_identity(B)
        assert ops.multiply(A, B, C)
        np.testing.assert_array_equal(C.data, [1, 2, 3, 4])

    def test_precision_mismatch(self):
        A = from_rows([[1, 2]], FP64)
        B = from_rows([[1], [2]], FP32)
        C = allocate(1, 1, FP64)
        assert not ops.multiply(A, B, C)
        assert C.data[0] == 0

    def test_vector_shapes(self, precision):
        row = from_rows([[1, 2, 3]], precision)
        col = from_rows([[4], [5], [6]], precision)
        inner = allocate(1, 1, precision)
        outer = allocate(3, 3, precision)
        assert ops.multiply(row, col, inner)
        assert ops.multiply(col, row, outer)
        assert inner.data[0] == 32
        np.testing.assert_array_equal(outer.array, np.outer([4, 5, 6], [1, 2, 3]))


# ═══════════════════════════════════════════════════════════════════════
# Transposed variants
# ═══════════════════════════════════════════════════════════════════════


class TestMultiplyTransA:

    def test_matches_explicit_transpose(self, rng, precision, tol):
        A = from_rows(rng.standard_normal((4, 3)).astype(precision.dtype), precision)
        B = from_rows(rng.standard_normal((4, 2)).astype(precision.dtype), precision)
        At = allocate(3, 4, precision)
        expected = allocate(3, 2, precision)
        C = allocate(3, 2, precision)
        assert ops.transpose(A, At)
        assert ops.multiply(At, B, expected)
        assert ops.multiply_trans_a(A, B, C)
        np.testing.assert_allclose(C.array, expected.array, rtol=tol.rtol, atol=tol.atol)

    def test_concrete(self, A23, precision):
        # AᵗA for A = [[1,2,3],[4,5,6]]
        C = allocate(3, 3, precision)
        assert ops.multiply_trans_a(A23, A23, C)
        np.testing.assert_array_equal(
            C.array, [[17, 22, 27], [22, 29, 36], [27, 36, 45]]
        )

    def test_dimension_mismatch(self, A23, B32, precision):
        C = allocate(3, 2, precision)
        assert not ops.multiply_trans_a(A23, B32, C)
        assert np.all(C.data == 0)

    def test_aliasing_rejected(self):
        A = from_rows([[1, 2], [3, 4]])
        snapshot = A.data.copy()
        assert not ops.multiply_trans_a(A, A, A)
        np.testing.assert_array_equal(A.data, snapshot)


class TestMultiplyTransB:

    def test_matches_explicit_transpose(self, rng, precision, tol):
        A = from_rows(rng.standard_normal((2, 5)).astype(precision.dtype), precision)
        B = from_rows(rng.standard_normal((3, 5)).astype(precision.dtype), precision)
        Bt = allocate(5, 3, precision)
        expected = allocate(2, 3, precision)
        C = allocate(2, 3, precision)
        assert ops.transpose(B, Bt)
        assert ops.multiply(A, Bt, expected)
        assert ops.multiply_trans_b(A, B, C)
        np.testing.assert_allclose(C.array, expected.array, rtol=tol.rtol, atol=tol.atol)

    def test_concrete(self, A23, precision):
        # AAᵗ, diagonal entries are the squared row norms
        C = allocate(2, 2, precision)
        assert ops.multiply_trans_b(A23, A23, C)
        np.testing.assert_array_equal(C.array, [[14, 32], [32, 77]])
        assert ops.get(C, 0, 1) == ops.dot_rows(A23, 0, 1)

    def test_dimension_mismatch(self, A23, B32, precision):
        C = allocate(2, 3, precision)
        assert not ops.multiply_trans_b(A23, B32, C)
        assert np.all(C.data == 0)

    def test_aliasing_rejected(self):
        A = from_rows([[1, 2], [3, 4]])
        B = from_rows([[1, 0], [0, 1]])
        snapshot = B.data.copy()
        assert not ops.multiply_trans_b(A, B, B)
        np.testing.assert_array_equal(B.data, snapshot)
