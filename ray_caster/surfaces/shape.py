"""
Common behaviour of every renderable surface.

A shape works in its own object space: the sphere is always the unit sphere at
the origin and the plane is always y = 0. The shape's transform places it in
the world. intersect() and normal_at() move rays and points into object space
with the cached inverse transform, let the variant do its local computation,
and bring the normal back with the transposed inverse so that non-uniform
scaling keeps normals perpendicular to the surface.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List

from ray_caster.typings.material import Material
from ray_caster.typings.ray import Ray
from ray_caster.utils.matrix import Matrix
from ray_caster.utils.vector_operations import Vector3

if TYPE_CHECKING:
    from ray_caster.typings.intersection import Intersection


class Shape(ABC):
    def __init__(
        self,
        transform: Matrix | None = None,
        material: Material | None = None,
        shape_id: int = 0,
    ) -> None:
        self.transform: Matrix = transform if transform is not None else Matrix.identity()
        # Computed once; a shape is never re-transformed after construction
        self.inverse_transform: Matrix = self.transform.inverse()
        self.normal_transform: Matrix = self.inverse_transform.transpose()
        self.material: Material = material if material is not None else Material()
        self.shape_id: int = int(shape_id)

    def __eq__(self, other: object) -> bool:
        # Loose structural match: one shared material or one shared transform is enough.
        # Use `is` or shape_id for identity.
        if not isinstance(other, Shape):
            return NotImplemented
        return type(self) is type(other) and (self.material == other.material or self.transform == other.transform)

    def __hash__(self) -> int:
        # Equal shapes always share a variant
        return hash(type(self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(shape_id={self.shape_id})"

    def intersect(self, world_ray: Ray) -> List[Intersection]:
        return self.local_intersect(world_ray.transform(self.inverse_transform))

    def normal_at(self, world_point: Vector3) -> Vector3:
        object_point = self.inverse_transform.multiply_point(world_point)
        object_normal = self.local_normal_at(object_point)
        world_normal = self.normal_transform.multiply_vector(object_normal)
        return world_normal.normalize()

    @abstractmethod
    def local_intersect(self, object_ray: Ray) -> List[Intersection]:
        """Intersection records for a ray already expressed in object space."""

    @abstractmethod
    def local_normal_at(self, object_point: Vector3) -> Vector3:
        """Surface normal at a point already expressed in object space."""
