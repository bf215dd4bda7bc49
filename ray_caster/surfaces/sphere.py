from __future__ import annotations

import math
from typing import List

from ray_caster.surfaces.shape import Shape
from ray_caster.typings.intersection import Intersection
from ray_caster.typings.ray import Ray
from ray_caster.utils.vector_operations import ORIGIN, Vector3


class Sphere(Shape):
    """Unit sphere centred on the object-space origin."""

    def local_intersect(self, object_ray: Ray) -> List[Intersection]:
        ray_origin = object_ray.origin
        ray_direction = object_ray.direction

        sphere_to_ray = ray_origin - ORIGIN
        quadratic_a = ray_direction.dot(ray_direction)
        quadratic_b = 2.0 * ray_direction.dot(sphere_to_ray)
        quadratic_c = sphere_to_ray.dot(sphere_to_ray) - 1.0

        discriminant = quadratic_b * quadratic_b - 4.0 * quadratic_a * quadratic_c
        if discriminant < 0.0:
            return []

        sqrt_discriminant = math.sqrt(discriminant)
        inverse_2a = 1.0 / (2.0 * quadratic_a)

        t_near = (-quadratic_b - sqrt_discriminant) * inverse_2a
        t_far = (-quadratic_b + sqrt_discriminant) * inverse_2a
        if t_near > t_far:
            t_near, t_far = t_far, t_near
        return [Intersection(t_near, self), Intersection(t_far, self)]

    def local_normal_at(self, object_point: Vector3) -> Vector3:
        # On the unit sphere the point itself is the outward normal
        return object_point - ORIGIN
