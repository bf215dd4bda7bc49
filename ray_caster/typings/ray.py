from __future__ import annotations

from dataclasses import dataclass

from ray_caster.utils.matrix import Matrix
from ray_caster.utils.vector_operations import Vector3


@dataclass(frozen=True, slots=True)
class Ray:
    origin: Vector3
    direction: Vector3

    def position(self, t: float) -> Vector3:
        """Point at distance t along the ray."""
        return self.origin + self.direction * t

    def transform(self, matrix: Matrix) -> Ray:
        # The origin is a point (moved by translation), the direction is not
        return Ray(origin=matrix.multiply_point(self.origin), direction=matrix.multiply_vector(self.direction))
