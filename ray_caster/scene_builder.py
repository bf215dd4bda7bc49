"""
Assembles worlds and hands every shape a unique identity.

Shape ids come from the builder's own counter rather than from global state,
so two builders never interfere and ids are reproducible per scene.
"""

from __future__ import annotations

import itertools
import math
from typing import List

from ray_caster.camera import Camera
from ray_caster.surfaces.plane import Plane
from ray_caster.surfaces.shape import Shape
from ray_caster.surfaces.sphere import Sphere
from ray_caster.typings.color import Color, WHITE
from ray_caster.typings.light import PointLight
from ray_caster.typings.material import Material
from ray_caster.utils.matrix import Matrix
from ray_caster.utils.transformations import scaling, translation, view_transform
from ray_caster.utils.vector_operations import Vector3
from ray_caster.world import World


class SceneBuilder:
    def __init__(self, first_id: int = 1) -> None:
        self._ids = itertools.count(first_id)
        self._light: PointLight | None = None
        self._shapes: List[Shape] = []

    @staticmethod
    def material(**overrides) -> Material:
        return Material(**overrides)

    def light(self, position: Vector3, intensity: Color = WHITE) -> PointLight:
        self._light = PointLight(position=position, intensity=intensity)
        return self._light

    def sphere(self, transform: Matrix | None = None, material: Material | None = None) -> Sphere:
        sphere = Sphere(transform, material, shape_id=next(self._ids))
        self._shapes.append(sphere)
        return sphere

    def plane(self, transform: Matrix | None = None, material: Material | None = None) -> Plane:
        plane = Plane(transform, material, shape_id=next(self._ids))
        self._shapes.append(plane)
        return plane

    def build(self) -> World:
        return World(light=self._light, shapes=self._shapes)


def default_world() -> World:
    """Two concentric spheres lit from the upper left front."""
    builder = SceneBuilder()
    builder.light(Vector3(-10.0, 10.0, -10.0), Color(1.0, 1.0, 1.0))
    builder.sphere(material=Material(color=Color(0.8, 1.0, 0.6), diffuse=0.7, specular=0.2))
    builder.sphere(transform=scaling(0.5, 0.5, 0.5))
    return builder.build()


def three_spheres_and_plane(hsize: int, vsize: int, field_of_view: float = math.pi / 3.0) -> tuple[Camera, World]:
    """Floor plane with three spheres of decreasing size, and a camera looking at them."""
    builder = SceneBuilder()
    builder.light(Vector3(-10.0, 10.0, -10.0), WHITE)
    builder.plane()
    builder.sphere(
        translation(-0.5, 1.0, 0.5),
        Material(color=Color(0.1, 1.0, 0.5), diffuse=0.7, specular=0.3),
    )
    builder.sphere(
        translation(1.5, 0.5, -0.5) @ scaling(0.5, 0.5, 0.5),
        Material(color=Color(0.5, 1.0, 0.1), diffuse=0.7, specular=0.3),
    )
    builder.sphere(
        translation(-1.5, 0.33, -0.75) @ scaling(0.33, 0.33, 0.33),
        Material(color=Color(1.0, 0.8, 0.1), diffuse=0.7, specular=0.3),
    )

    camera = Camera(
        hsize,
        vsize,
        field_of_view,
        view_transform(Vector3(0.0, 1.5, -5.0), Vector3(0.0, 1.0, 0.0), Vector3(0.0, 1.0, 0.0)),
    )
    return camera, builder.build()
