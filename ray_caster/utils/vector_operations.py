from __future__ import annotations

import math

import numpy as np

EPSILON: float = 1e-5 # tolerance for every floating point comparison in the scene model
DEGREE_TO_RADIAN: float = math.pi / 180.0
RADIAN_TO_DEGREE: float = 180.0 / math.pi


def approximately(a: float, b: float) -> bool:
    return abs(a - b) < EPSILON


def degree_to_radian(degree: float) -> float:
    return degree * DEGREE_TO_RADIAN


def radian_to_degree(radian: float) -> float:
    return radian * RADIAN_TO_DEGREE


class Vector3:
    """Three spatial components used for both points and direction vectors.

    The components live in a read-only numpy array. Whether a value is a point
    or a vector only matters when it is multiplied by a matrix: see
    Matrix.multiply_point and Matrix.multiply_vector.
    """

    __slots__ = ("data",)
    __array_ufunc__ = None # numpy scalars defer to __rmul__

    def __init__(self, x: float, y: float, z: float) -> None:
        data = np.array((x, y, z), dtype=float)
        data.flags.writeable = False
        object.__setattr__(self, "data", data)

    @classmethod
    def from_array(cls, array: np.ndarray) -> Vector3:
        x, y, z = np.asarray(array, dtype=float)
        return cls(x, y, z)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (Vector3, (self.x, self.y, self.z))

    @property
    def x(self) -> float:
        return float(self.data[0])

    @property
    def y(self) -> float:
        return float(self.data[1])

    @property
    def z(self) -> float:
        return float(self.data[2])

    def __repr__(self) -> str:
        return f"Vector3(x={self.x}, y={self.y}, z={self.z})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return bool(np.all(np.abs(self.data - other.data) < EPSILON))

    __hash__ = None # equality is approximate

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3.from_array(self.data + other.data)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3.from_array(self.data - other.data)

    def __mul__(self, scalar: float) -> Vector3:
        return Vector3.from_array(self.data * scalar)

    def __rmul__(self, scalar: float) -> Vector3:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> Vector3:
        return Vector3.from_array(self.data / scalar)

    def __neg__(self) -> Vector3:
        return Vector3.from_array(-self.data)

    def magnitude(self) -> float: # Euclidean length
        return float(np.linalg.norm(self.data))

    def normalize(self) -> Vector3:
        magnitude = np.linalg.norm(self.data)
        if magnitude < EPSILON:
            raise ValueError("Cannot normalize near-zero vector")
        return Vector3.from_array(self.data / magnitude)

    def dot(self, other: Vector3) -> float:
        return float(np.dot(self.data, other.data))

    def cross(self, other: Vector3) -> Vector3:
        return Vector3.from_array(np.cross(self.data, other.data))


ORIGIN = Vector3(0.0, 0.0, 0.0)


def reflect_vector(I: Vector3, N: Vector3) -> Vector3:
    """Calculates the reflection vector R given the incident vector I and surface normal N.
       Assumes I points toward the surface"""
    return Vector3.from_array(I.data - 2.0 * np.dot(I.data, N.data) * N.data)
