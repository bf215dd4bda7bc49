"""
Square matrices for homogeneous 3D transforms.

Transforms are 4x4; the 3x3 and 2x2 sizes only appear transiently while the
determinant is expanded by cofactors. Points and direction vectors are stored
as Vector3 and receive their fourth (w) coordinate when multiplied: 1 for a
point, so translation moves it, and 0 for a vector, so translation leaves it
untouched.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from ray_caster.utils.vector_operations import EPSILON, Vector3, approximately


class NotInvertibleError(ValueError):
    """Raised when inverting a matrix whose determinant is approximately zero."""


class Matrix:
    def __init__(self, rows: Sequence[Sequence[float]] | np.ndarray) -> None:
        data = np.array(rows, dtype=float)
        if data.ndim != 2 or data.shape[0] != data.shape[1] or not 2 <= data.shape[0] <= 4:
            raise ValueError(f"Matrix must be 2x2, 3x3 or 4x4, got shape {data.shape}")
        self.data: np.ndarray = data

    @classmethod
    def identity(cls) -> Matrix:
        return cls(np.identity(4))

    @property
    def size(self) -> int:
        return int(self.data.shape[0])

    def __getitem__(self, index: tuple[int, int]) -> float:
        return float(self.data[index])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.size != other.size:
            return False
        return bool(np.all(np.abs(self.data - other.data) < EPSILON))

    def __repr__(self) -> str:
        return f"Matrix({self.data.tolist()})"

    def _require_4x4(self, operation: str) -> None:
        if self.size != 4:
            raise ValueError(f"{operation} is only supported for 4x4 matrices, got {self.size}x{self.size}")

    def multiply(self, other: Matrix) -> Matrix:
        self._require_4x4("multiply")
        other._require_4x4("multiply")
        return Matrix(self.data @ other.data)

    def __matmul__(self, other: Matrix) -> Matrix:
        return self.multiply(other)

    def _multiply_homogeneous(self, v: Vector3, w: float) -> Vector3:
        # The bottom row of an affine transform only ever yields w back
        return Vector3.from_array(self.data[:3] @ np.append(v.data, w))

    def multiply_point(self, point: Vector3) -> Vector3:
        self._require_4x4("multiply_point")
        return self._multiply_homogeneous(point, 1.0)

    def multiply_vector(self, vector: Vector3) -> Vector3:
        self._require_4x4("multiply_vector")
        return self._multiply_homogeneous(vector, 0.0)

    def transpose(self) -> Matrix:
        self._require_4x4("transpose")
        return Matrix(self.data.T)

    def submatrix(self, remove_row: int, remove_col: int) -> Matrix:
        """Copy of the matrix with one row and one column removed."""
        if self.size not in (3, 4):
            raise ValueError(f"submatrix needs a 3x3 or 4x4 matrix, got {self.size}x{self.size}")
        reduced = np.delete(np.delete(self.data, remove_row, axis=0), remove_col, axis=1)
        return Matrix(reduced)

    def minor(self, row: int, col: int) -> float:
        return self.submatrix(row, col).determinant()

    def cofactor(self, row: int, col: int) -> float:
        minor = self.minor(row, col)
        return -minor if (row + col) % 2 == 1 else minor

    def determinant(self) -> float:
        if self.size == 2:
            m = self.data
            return float(m[0, 0] * m[1, 1] - m[0, 1] * m[1, 0])
        # Expansion along the first row
        return sum(float(self.data[0, col]) * self.cofactor(0, col) for col in range(self.size))

    def is_invertible(self) -> bool:
        return not approximately(self.determinant(), 0.0)

    def inverse(self) -> Matrix:
        self._require_4x4("inverse")
        determinant = self.determinant()
        if approximately(determinant, 0.0):
            raise NotInvertibleError(f"Matrix is not invertible (determinant {determinant})")

        inverted = np.zeros((4, 4), dtype=float)
        for row in range(4):
            for col in range(4):
                # [col, row] transposes the cofactor matrix into the adjugate
                inverted[col, row] = self.cofactor(row, col) / determinant
        return Matrix(inverted)
