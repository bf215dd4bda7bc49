from __future__ import annotations

from dataclasses import dataclass, field

from ray_caster.typings.color import Color, WHITE
from ray_caster.utils.vector_operations import approximately


@dataclass(frozen=True, slots=True, eq=False)
class Material:
    """Solid color with the four Phong coefficients."""

    color: Color = field(default_factory=lambda: WHITE)
    ambient: float = 0.1
    diffuse: float = 0.9
    specular: float = 0.9
    shininess: float = 200.0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Material):
            return NotImplemented
        return (
            self.color == other.color
            and approximately(self.ambient, other.ambient)
            and approximately(self.diffuse, other.diffuse)
            and approximately(self.specular, other.specular)
            and approximately(self.shininess, other.shininess)
        )
