"""
Intersection records and the state derived from the one a ray actually hits.

Intersection records hold a reference to the shape they were produced by; the
shape itself belongs to the World, so many records may point at one shape.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Iterator, List

from ray_caster.typings.ray import Ray
from ray_caster.utils.vector_operations import EPSILON, Vector3

if TYPE_CHECKING:
    from ray_caster.surfaces.shape import Shape


@dataclass(frozen=True, slots=True, eq=False)
class Computations:
    t: float
    shape: Shape
    point: Vector3
    eye_vector: Vector3
    normal_vector: Vector3
    inside: bool
    over_point: Vector3 # point lifted off the surface, origin for shadow rays


@dataclass(frozen=True, slots=True, eq=False)
class Intersection:
    t: float
    shape: Shape

    def prepare_computations(self, ray: Ray) -> Computations:
        return prepare_computations(self, ray)


class Intersections:
    """All intersection records a single ray produced against a scene."""

    def __init__(self, intersections: Iterable[Intersection] = ()) -> None:
        self.intersections: List[Intersection] = list(intersections)

    def __len__(self) -> int:
        return len(self.intersections)

    def __getitem__(self, index: int) -> Intersection:
        return self.intersections[index]

    def __iter__(self) -> Iterator[Intersection]:
        return iter(self.intersections)

    def hit(self) -> Intersection | None:
        return hit(self.intersections)


def hit(intersections: Iterable[Intersection]) -> Intersection | None:
    """The intersection with the smallest non-negative t, or None.
    Records behind the ray origin are skipped, not removed."""
    best: Intersection | None = None
    for intersection in intersections:
        if intersection.t < 0.0:
            continue
        if best is None or intersection.t < best.t:
            best = intersection
    return best


def prepare_computations(intersection: Intersection, ray: Ray) -> Computations:
    point = ray.position(intersection.t)
    eye_vector = -ray.direction
    normal_vector = intersection.shape.normal_at(point)

    inside = normal_vector.dot(eye_vector) < 0.0
    if inside:
        # Hit from within the shape: face the normal back toward the eye
        normal_vector = -normal_vector

    return Computations(
        t=intersection.t,
        shape=intersection.shape,
        point=point,
        eye_vector=eye_vector,
        normal_vector=normal_vector,
        inside=inside,
        over_point=point + normal_vector * EPSILON,
    )
