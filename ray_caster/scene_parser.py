"""
Reads the plain-text scene format.

One object per line, blank lines and '#' comments ignored:

    cam hsize vsize fov_degrees  from_x from_y from_z  to_x to_y to_z  up_x up_y up_z
    set workers rows_per_chunk
    lgt x y z  r g b
    mtl r g b  ambient diffuse specular shininess
    sph material_index [op args]...
    pln material_index [op args]...

material_index counts the mtl lines from 1; 0 selects the default material.
Shape ops are translate x y z, scale x y z, rotate_x deg, rotate_y deg,
rotate_z deg and shear xy xz yx yz zx zy. They apply in the order written,
so the first op is the first to act on the shape.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Tuple

from ray_caster.camera import Camera
from ray_caster.scene_builder import SceneBuilder
from ray_caster.scene_settings import SceneSettings
from ray_caster.typings.color import Color
from ray_caster.typings.material import Material
from ray_caster.utils.matrix import Matrix
from ray_caster.utils.transformations import (
    rotation_x,
    rotation_y,
    rotation_z,
    scaling,
    shearing,
    translation,
    view_transform,
)
from ray_caster.utils.vector_operations import Vector3, degree_to_radian
from ray_caster.world import World

TRANSFORM_OPS: Dict[str, Tuple[int, Callable[..., Matrix]]] = {
    "translate": (3, translation),
    "scale": (3, scaling),
    "rotate_x": (1, lambda degrees: rotation_x(degree_to_radian(degrees))),
    "rotate_y": (1, lambda degrees: rotation_y(degree_to_radian(degrees))),
    "rotate_z": (1, lambda degrees: rotation_z(degree_to_radian(degrees))),
    "shear": (6, shearing),
}

PARAMETER_COUNTS: Dict[str, int] = {"cam": 12, "set": 2, "lgt": 6, "mtl": 7}


def _parse_floats(tokens: List[str], line_number: int) -> List[float]:
    try:
        return [float(token) for token in tokens]
    except ValueError as exc:
        raise ValueError(f"line {line_number}: expected numbers, got {' '.join(tokens)!r}") from exc


def parse_transform(tokens: List[str], line_number: int = 0) -> Matrix:
    """Compose a shape transform from 'op args...' tokens, first op applied first."""
    transform = Matrix.identity()
    position = 0
    while position < len(tokens):
        op = tokens[position]
        if op not in TRANSFORM_OPS:
            raise ValueError(f"line {line_number}: unknown transform {op!r}")
        arg_count, builder = TRANSFORM_OPS[op]
        args = tokens[position + 1:position + 1 + arg_count]
        if len(args) != arg_count:
            raise ValueError(f"line {line_number}: {op} takes {arg_count} values, got {len(args)}")
        transform = builder(*_parse_floats(args, line_number)) @ transform
        position += 1 + arg_count
    return transform


def parse_scene_lines(lines) -> Tuple[Camera | None, SceneSettings | None, World]:
    builder = SceneBuilder()
    materials: List[Material] = []
    camera: Camera | None = None
    scene_settings: SceneSettings | None = None

    for line_number, line in enumerate(lines, start=1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        parts = line.split()
        obj_type = parts[0]

        if obj_type in PARAMETER_COUNTS:
            if len(parts) - 1 != PARAMETER_COUNTS[obj_type]:
                raise ValueError(
                    f"line {line_number}: {obj_type} takes {PARAMETER_COUNTS[obj_type]} values, got {len(parts) - 1}"
                )
            params = _parse_floats(parts[1:], line_number)
            if obj_type == "cam":
                camera = Camera(
                    int(params[0]),
                    int(params[1]),
                    degree_to_radian(params[2]),
                    view_transform(Vector3(*params[3:6]), Vector3(*params[6:9]), Vector3(*params[9:12])),
                )
            elif obj_type == "set":
                scene_settings = SceneSettings(int(params[0]), int(params[1]))
            elif obj_type == "lgt":
                builder.light(Vector3(*params[:3]), Color(*params[3:6]))
            else:
                materials.append(Material(Color(*params[:3]), *params[3:7]))
        elif obj_type in ("sph", "pln"):
            if len(parts) < 2:
                raise ValueError(f"line {line_number}: {obj_type} needs a material index")
            material_index = int(_parse_floats(parts[1:2], line_number)[0])
            if not 0 <= material_index <= len(materials):
                raise ValueError(f"line {line_number}: material index {material_index} is not defined")
            material = materials[material_index - 1] if material_index else None
            transform = parse_transform(parts[2:], line_number)
            if obj_type == "sph":
                builder.sphere(transform, material)
            else:
                builder.plane(transform, material)
        else:
            raise ValueError(f"line {line_number}: unknown object type: {obj_type}")

    return camera, scene_settings, builder.build()


def parse_scene_file(file_path: str) -> Tuple[Camera | None, SceneSettings | None, World]:
    with open(file_path, 'r') as f:
        return parse_scene_lines(f)
