from __future__ import annotations

from typing import List

from ray_caster.surfaces.shape import Shape
from ray_caster.typings.intersection import Intersection
from ray_caster.typings.ray import Ray
from ray_caster.utils.vector_operations import EPSILON, Vector3

PLANE_NORMAL = Vector3(0.0, 1.0, 0.0)


class Plane(Shape):
    """Infinite xz plane through the object-space origin."""

    def local_intersect(self, object_ray: Ray) -> List[Intersection]:
        if abs(object_ray.direction.y) < EPSILON:
            # Parallel or coplanar: nothing to hit
            return []

        hit_distance = -object_ray.origin.y / object_ray.direction.y
        return [Intersection(hit_distance, self)]

    def local_normal_at(self, object_point: Vector3) -> Vector3:
        return PLANE_NORMAL
