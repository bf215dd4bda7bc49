"""Unit tests for the Matrix type.

Tests cover:
- Construction, approximate equality and identity
- 4x4 product and homogeneous point/vector multiplication
- Transpose, submatrix, minor, cofactor and determinant
- Inversion, including the non-invertible error
"""

import pytest

from ray_caster.utils.matrix import Matrix, NotInvertibleError
from ray_caster.utils.transformations import translation
from ray_caster.utils.vector_operations import Vector3, approximately


class TestMatrixBasics:
    """Tests for construction and equality."""

    def test_create_4x4_matrix(self):
        matrix = Matrix([
            [1.0, 2.0, 3.0, 4.0],
            [5.5, 6.5, 7.5, 8.5],
            [9.0, 10.0, 11.0, 12.0],
            [13.5, 14.5, 15.5, 16.5],
        ])
        assert matrix.size == 4
        assert approximately(matrix[0, 0], 1.0)
        assert approximately(matrix[1, 2], 7.5)
        assert approximately(matrix[3, 2], 15.5)

    def test_create_smaller_matrices(self):
        assert Matrix([[-3.0, 5.0], [1.0, -2.0]]).size == 2
        assert Matrix([[-3.0, 5.0, 0.0], [1.0, -2.0, -7.0], [0.0, 1.0, 1.0]]).size == 3

    def test_rejects_non_square_input(self):
        with pytest.raises(ValueError):
            Matrix([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])

    def test_identical_matrices_are_equal(self):
        assert Matrix([[-3.0, 5.0], [1.0, -2.0]]) == Matrix([[-3.0, 5.0], [1.0, -2.0 + 1e-7]])

    def test_different_matrices_are_not_equal(self):
        assert Matrix([[-3.0, 5.0], [1.0, -2.0]]) != Matrix([[1.0, 2.0], [3.0, 4.0]])

    def test_different_sizes_are_not_equal(self):
        assert Matrix([[1.0, 0.0], [0.0, 1.0]]) != Matrix.identity()


class TestMultiplication:
    """Tests for matrix-matrix and matrix-tuple products."""

    def test_multiply_4x4(self):
        a = Matrix([[1, 2, 3, 4], [5, 6, 7, 8], [9, 8, 7, 6], [5, 4, 3, 2]])
        b = Matrix([[-2, 1, 2, 3], [3, 2, 1, -1], [4, 3, 6, 5], [1, 2, 7, 8]])
        expected = Matrix([[20, 22, 50, 48], [44, 54, 114, 108], [40, 58, 110, 102], [16, 26, 46, 42]])
        assert a.multiply(b) == expected
        assert a @ b == expected

    def test_multiply_point(self):
        a = Matrix([[1, 2, 3, 4], [2, 4, 4, 2], [8, 6, 4, 1], [0, 0, 0, 1]])
        assert a.multiply_point(Vector3(1.0, 2.0, 3.0)) == Vector3(18.0, 24.0, 33.0)

    def test_multiply_vector_ignores_translation_column(self):
        a = Matrix([[1, 2, 3, 4], [2, 4, 4, 2], [8, 6, 4, 1], [0, 0, 0, 1]])
        assert a.multiply_vector(Vector3(1.0, 2.0, 3.0)) == Vector3(14.0, 22.0, 32.0)

    def test_multiply_by_identity(self):
        a = Matrix([[0, 1, 2, 4], [1, 2, 4, 8], [2, 4, 8, 16], [4, 8, 16, 32]])
        assert a @ Matrix.identity() == a
        assert Matrix.identity().multiply_vector(Vector3(1.0, 2.0, 3.0)) == Vector3(1.0, 2.0, 3.0)

    def test_multiply_requires_4x4(self):
        small = Matrix([[1.0, 0.0], [0.0, 1.0]])
        with pytest.raises(ValueError):
            small.multiply(Matrix.identity())
        with pytest.raises(ValueError):
            Matrix.identity().multiply(small)
        with pytest.raises(ValueError):
            small.multiply_point(Vector3(1.0, 2.0, 3.0))


class TestTranspose:
    """Tests for transpose()."""

    def test_transpose(self):
        a = Matrix([[0, 9, 3, 0], [9, 8, 0, 8], [1, 8, 5, 3], [0, 0, 5, 8]])
        expected = Matrix([[0, 9, 1, 0], [9, 8, 8, 0], [3, 0, 5, 5], [0, 8, 3, 8]])
        assert a.transpose() == expected

    def test_transpose_identity(self):
        assert Matrix.identity().transpose() == Matrix.identity()


class TestDeterminant:
    """Tests for submatrix, minor, cofactor and determinant."""

    def test_determinant_2x2(self):
        assert approximately(Matrix([[1, 5], [-3, 2]]).determinant(), 17.0)

    def test_submatrix_of_3x3(self):
        a = Matrix([[1, 5, 0], [-3, 2, 7], [0, 6, -3]])
        assert a.submatrix(0, 2) == Matrix([[-3, 2], [0, 6]])

    def test_submatrix_of_4x4(self):
        a = Matrix([[-6, 1, 1, 6], [-8, 5, 8, 6], [-1, 0, 8, 2], [-7, 1, -1, 1]])
        sub = a.submatrix(2, 1)
        assert sub.size == 3
        assert sub == Matrix([[-6, 1, 6], [-8, 8, 6], [-7, -1, 1]])

    def test_submatrix_of_2x2_is_rejected(self):
        with pytest.raises(ValueError):
            Matrix([[1, 5], [-3, 2]]).submatrix(0, 0)

    def test_minor_of_3x3(self):
        a = Matrix([[3, 5, 0], [2, -1, -7], [6, -1, 5]])
        assert approximately(a.submatrix(1, 0).determinant(), 25.0)
        assert approximately(a.minor(1, 0), 25.0)

    def test_cofactor_of_3x3(self):
        a = Matrix([[3, 5, 0], [2, -1, -7], [6, -1, 5]])
        assert approximately(a.minor(0, 0), -12.0)
        assert approximately(a.cofactor(0, 0), -12.0)
        assert approximately(a.minor(1, 0), 25.0)
        assert approximately(a.cofactor(1, 0), -25.0)

    def test_determinant_3x3(self):
        a = Matrix([[1, 2, 6], [-5, 8, -4], [2, 6, 4]])
        assert approximately(a.cofactor(0, 0), 56.0)
        assert approximately(a.cofactor(0, 1), 12.0)
        assert approximately(a.cofactor(0, 2), -46.0)
        assert approximately(a.determinant(), -196.0)

    def test_determinant_4x4(self):
        a = Matrix([[-2, -8, 3, 5], [-3, 1, 7, 3], [1, 2, -9, 6], [-6, 7, 7, -9]])
        assert approximately(a.cofactor(0, 0), 690.0)
        assert approximately(a.cofactor(0, 1), 447.0)
        assert approximately(a.cofactor(0, 2), 210.0)
        assert approximately(a.cofactor(0, 3), 51.0)
        assert approximately(a.determinant(), -4071.0)


class TestInverse:
    """Tests for is_invertible() and inverse()."""

    def test_invertible_matrix(self):
        a = Matrix([[6, 4, 4, 4], [5, 5, 7, 6], [4, -9, 3, -7], [9, 1, 7, -6]])
        assert approximately(a.determinant(), -2120.0)
        assert a.is_invertible()

    def test_non_invertible_matrix(self):
        a = Matrix([[-4, 2, -2, -3], [9, 6, 2, 6], [0, -5, 1, -5], [0, 0, 0, 0]])
        assert approximately(a.determinant(), 0.0)
        assert not a.is_invertible()

    def test_inverse_of_non_invertible_matrix_raises(self):
        a = Matrix([[-4, 2, -2, -3], [9, 6, 2, 6], [0, -5, 1, -5], [0, 0, 0, 0]])
        with pytest.raises(NotInvertibleError):
            a.inverse()

    def test_not_invertible_error_is_a_value_error(self):
        assert issubclass(NotInvertibleError, ValueError)

    def test_inverse(self):
        a = Matrix([[-5, 2, 6, -8], [1, -5, 1, 8], [7, 7, -6, -7], [1, -3, 7, 4]])
        b = a.inverse()
        assert approximately(a.determinant(), 532.0)
        assert approximately(a.cofactor(2, 3), -160.0)
        assert approximately(b[3, 2], -160.0 / 532.0)
        assert approximately(a.cofactor(3, 2), 105.0)
        assert approximately(b[2, 3], 105.0 / 532.0)
        expected = Matrix([
            [0.21805, 0.45113, 0.24060, -0.04511],
            [-0.80827, -1.45677, -0.44361, 0.52068],
            [-0.07895, -0.22368, -0.05263, 0.19737],
            [-0.52256, -0.81391, -0.30075, 0.30639],
        ])
        assert b == expected

    def test_inverse_of_another_matrix(self):
        a = Matrix([[8, -5, 9, 2], [7, 5, 6, 1], [-6, 0, 9, 6], [-3, 0, -9, -4]])
        expected = Matrix([
            [-0.15385, -0.15385, -0.28205, -0.53846],
            [-0.07692, 0.12308, 0.02564, 0.03077],
            [0.35897, 0.35897, 0.43590, 0.92308],
            [-0.69231, -0.69231, -0.76923, -1.92308],
        ])
        assert a.inverse() == expected

    def test_matrix_times_its_inverse_is_identity(self):
        a = Matrix([[3, -9, 7, 3], [3, -8, 2, -9], [-4, 4, 4, 1], [-6, 5, -1, 1]])
        assert a @ a.inverse() == Matrix.identity()

    def test_product_times_inverse_recovers_factor(self):
        a = Matrix([[3, -9, 7, 3], [3, -8, 2, -9], [-4, 4, 4, 1], [-6, 5, -1, 1]])
        b = Matrix([[8, 2, 2, 2], [3, -1, 7, 0], [7, 0, 5, 4], [6, -2, 0, 5]])
        c = a @ b
        assert c @ b.inverse() == a

    def test_inverse_of_identity(self):
        assert Matrix.identity().inverse() == Matrix.identity()

    def test_inverse_of_translation_moves_back(self):
        inverse = translation(5.0, -3.0, 2.0).inverse()
        assert inverse.multiply_point(Vector3(-3.0, 4.0, 5.0)) == Vector3(-8.0, 7.0, 3.0)
