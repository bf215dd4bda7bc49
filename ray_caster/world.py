"""
The scene: one point light and the ordered shapes it illuminates.

A World is assembled before rendering (see SceneBuilder) and is only read
while rendering, so the same instance can be shipped to worker processes.
"""

from __future__ import annotations

from typing import Iterable, List

from ray_caster.lighting import lighting
from ray_caster.surfaces.shape import Shape
from ray_caster.typings.color import BLACK, Color
from ray_caster.typings.intersection import Computations, Intersections, hit, prepare_computations
from ray_caster.typings.light import PointLight
from ray_caster.typings.ray import Ray
from ray_caster.utils.shadow_utils import intersect_shapes, is_occluded
from ray_caster.utils.vector_operations import Vector3


class MissingLightError(ValueError):
    """Raised when a world without a light is asked to shade anything."""


class World:
    def __init__(self, light: PointLight | None = None, shapes: Iterable[Shape] = ()) -> None:
        self.light: PointLight | None = light
        self.shapes: List[Shape] = list(shapes)

    def _require_light(self) -> PointLight:
        if self.light is None:
            raise MissingLightError("A light must be added to the world before it can be rendered")
        return self.light

    def intersect(self, ray: Ray) -> Intersections:
        return intersect_shapes(ray, self.shapes)

    def is_shadowed(self, point: Vector3) -> bool:
        light = self._require_light()
        return is_occluded(point, light.position, self.shapes)

    def shade_hit(self, computations: Computations) -> Color:
        # Only a single light is supported; more lights would sum one lighting() call each
        light = self._require_light()
        in_shadow = self.is_shadowed(computations.over_point)
        return lighting(
            computations.shape.material,
            light,
            computations.point,
            computations.eye_vector,
            computations.normal_vector,
            in_shadow,
        )

    def color_at(self, ray: Ray) -> Color:
        self._require_light()
        best_hit = hit(self.intersect(ray))
        if best_hit is None:
            return BLACK
        return self.shade_hit(prepare_computations(best_hit, ray))
