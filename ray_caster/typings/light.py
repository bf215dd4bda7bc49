from __future__ import annotations

from dataclasses import dataclass

from ray_caster.typings.color import Color
from ray_caster.utils.vector_operations import Vector3


@dataclass(frozen=True, slots=True)
class PointLight:
    position: Vector3
    intensity: Color
