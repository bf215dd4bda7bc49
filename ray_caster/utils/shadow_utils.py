"""
Ray queries against a list of shapes, shared by primary and shadow rays.

Every query sweeps all shapes; there is no acceleration structure. The module
keeps process-wide profile counters that the command line reports after a
render. Parallel workers run in separate processes, so they hand their
counters back to the parent which merges them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Iterable, Mapping, Sequence

from ray_caster.typings.intersection import Intersection, Intersections, hit
from ray_caster.typings.ray import Ray
from ray_caster.utils.vector_operations import EPSILON, Vector3

if TYPE_CHECKING:
    from ray_caster.surfaces.shape import Shape

_PROFILE_COUNTER_NAMES = ("primary_rays", "shadow_rays", "intersection_tests")
_PROFILE_COUNTERS: Dict[str, int] = dict.fromkeys(_PROFILE_COUNTER_NAMES, 0)


def reset_profile_counters() -> None:
    for name in _PROFILE_COUNTER_NAMES:
        _PROFILE_COUNTERS[name] = 0


def get_profile_counters() -> Dict[str, int]:
    return dict(_PROFILE_COUNTERS)


def merge_profile_counters(counters: Mapping[str, int]) -> None:
    for name in _PROFILE_COUNTER_NAMES:
        _PROFILE_COUNTERS[name] += int(counters.get(name, 0))


def count_primary_ray() -> None:
    _PROFILE_COUNTERS["primary_rays"] += 1


def intersect_shapes(ray: Ray, shapes: Iterable[Shape]) -> Intersections:
    """Every intersection of the ray with every shape, ascending by t."""
    records: list[Intersection] = []
    for shape in shapes:
        _PROFILE_COUNTERS["intersection_tests"] += 1
        records.extend(shape.intersect(ray))
    records.sort(key=lambda intersection: intersection.t) # stable
    return Intersections(records)


def is_occluded(point: Vector3, light_position: Vector3, shapes: Sequence[Shape]) -> bool:
    """Check if a shadow ray from point toward the light is blocked by any shape.
    point must already be lifted off its surface (the over-point)."""
    _PROFILE_COUNTERS["shadow_rays"] += 1
    to_light = light_position - point
    distance_to_light = to_light.magnitude()
    if distance_to_light < EPSILON:
        # Nothing can lie between a point and a light on top of it
        return False
    shadow_ray = Ray(origin=point, direction=to_light.normalize())
    shadow_hit = hit(intersect_shapes(shadow_ray, shapes))
    return shadow_hit is not None and shadow_hit.t < distance_to_light
