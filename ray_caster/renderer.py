"""
Render loops that turn a camera and a frozen world into a canvas.

render() walks the pixels in row-major order. render_parallel() splits the
rows into bands and renders each band in a worker process; every band maps
to its own rows of the canvas, so the results are copied in without locking.
Both produce identical pixels.
"""

from __future__ import annotations

import multiprocessing as mp
from typing import TYPE_CHECKING, Dict, List, Tuple

import numpy as np

from ray_caster.canvas import Canvas
from ray_caster.utils.shadow_utils import (
    count_primary_ray,
    get_profile_counters,
    merge_profile_counters,
    reset_profile_counters,
)

if TYPE_CHECKING:
    from ray_caster.camera import Camera
    from ray_caster.world import World

CHUNKS_PER_WORKER: int = 4 # more bands than workers keeps the pool balanced

# Scene handed to each worker process once by the pool initializer
_WORKER_CAMERA: Camera | None = None
_WORKER_WORLD: World | None = None


def render(camera: Camera, world: World) -> Canvas:
    image = Canvas(camera.hsize, camera.vsize)
    for y in range(camera.vsize):
        for x in range(camera.hsize):
            ray = camera.ray_for_pixel(x, y)
            count_primary_ray()
            image.write_pixel(x, y, world.color_at(ray))
    return image


def render_rows(camera: Camera, world: World, y_start: int, y_end: int) -> np.ndarray:
    """Colors of rows y_start (inclusive) to y_end (exclusive) as a (rows, hsize, 3) array."""
    colors = np.zeros((y_end - y_start, camera.hsize, 3), dtype=float)
    for y in range(y_start, y_end):
        for x in range(camera.hsize):
            ray = camera.ray_for_pixel(x, y)
            count_primary_ray()
            colors[y - y_start, x, :] = world.color_at(ray).data
    return colors


def split_rows(height: int, workers: int, rows_per_chunk: int = 0) -> List[Tuple[int, int]]:
    """Disjoint (y_start, y_end) bands covering every row exactly once."""
    if rows_per_chunk <= 0:
        rows_per_chunk = max(1, height // (workers * CHUNKS_PER_WORKER))
    return [(y_start, min(y_start + rows_per_chunk, height)) for y_start in range(0, height, rows_per_chunk)]


def _init_worker(camera: Camera, world: World) -> None:
    global _WORKER_CAMERA, _WORKER_WORLD
    _WORKER_CAMERA = camera
    _WORKER_WORLD = world


def _render_row_chunk(band: Tuple[int, int]) -> Tuple[int, np.ndarray, Dict[str, int]]:
    """
    Worker function to render a band of rows.
    Called by the multiprocessing pool.

    Returns:
        (y_start, colors, counters) - counters only cover this band
    """
    y_start, y_end = band
    reset_profile_counters()
    colors = render_rows(_WORKER_CAMERA, _WORKER_WORLD, y_start, y_end)
    return y_start, colors, get_profile_counters()


def render_parallel(camera: Camera, world: World, workers: int | None = None, rows_per_chunk: int = 0) -> Canvas:
    """Render the scene using multiprocessing (parallel row-based rendering)."""
    if workers is None:
        workers = mp.cpu_count()
    if workers <= 1:
        return render(camera, world)

    bands = split_rows(camera.vsize, workers, rows_per_chunk)
    image = Canvas(camera.hsize, camera.vsize)
    with mp.Pool(workers, initializer=_init_worker, initargs=(camera, world)) as pool:
        for y_start, colors, counters in pool.imap_unordered(_render_row_chunk, bands):
            image.write_rows(y_start, colors)
            merge_profile_counters(counters)
    return image
