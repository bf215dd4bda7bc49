from __future__ import annotations

import math
from typing import TYPE_CHECKING

from ray_caster.canvas import Canvas
from ray_caster.renderer import render, render_parallel
from ray_caster.typings.ray import Ray
from ray_caster.utils.matrix import Matrix
from ray_caster.utils.vector_operations import ORIGIN, Vector3

if TYPE_CHECKING:
    from ray_caster.world import World


class Camera:
    """
    Pinhole camera looking down -z in its own space, with the canvas one unit in
    front of the eye. The view transform moves the world relative to the camera;
    its inverse is computed once here since every primary ray needs it.
    """

    def __init__(self, hsize: int, vsize: int, field_of_view: float, transform: Matrix | None = None) -> None:
        if hsize <= 0 or vsize <= 0:
            raise ValueError(f"Camera resolution must be positive, got {hsize}x{vsize}")
        if not 0.0 < field_of_view < math.pi:
            raise ValueError(f"Field of view must be between 0 and pi radians, got {field_of_view}")
        self.hsize: int = int(hsize)
        self.vsize: int = int(vsize)
        self.field_of_view: float = float(field_of_view)
        self.transform: Matrix = transform if transform is not None else Matrix.identity()
        self.inverse_transform: Matrix = self.transform.inverse()

        half_view = math.tan(self.field_of_view / 2.0)
        aspect_ratio = self.hsize / self.vsize
        if aspect_ratio >= 1.0:
            self.half_width: float = half_view
            self.half_height: float = half_view / aspect_ratio
        else:
            self.half_width = half_view * aspect_ratio
            self.half_height = half_view
        self.pixel_size: float = self.half_width * 2.0 / self.hsize

    def ray_for_pixel(self, px: int, py: int) -> Ray:
        # offset from the canvas edge to the pixel's center
        x_offset = (px + 0.5) * self.pixel_size
        y_offset = (py + 0.5) * self.pixel_size

        # untransformed pixel coordinates; the camera looks toward -z, so +x is to the left
        world_x = self.half_width - x_offset
        world_y = self.half_height - y_offset

        pixel = self.inverse_transform.multiply_point(Vector3(world_x, world_y, -1.0))
        origin = self.inverse_transform.multiply_point(ORIGIN)
        direction = (pixel - origin).normalize()
        return Ray(origin=origin, direction=direction)

    def render(self, world: World, workers: int = 1, rows_per_chunk: int = 0) -> Canvas:
        if workers <= 1:
            return render(self, world)
        return render_parallel(self, world, workers, rows_per_chunk)
