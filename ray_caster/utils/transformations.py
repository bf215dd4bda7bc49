"""
Builders for 4x4 affine transforms.

Transforms compose by left multiplication: for C @ B @ A the point is
transformed by A first, then B, then C.
"""

from __future__ import annotations

import math

from ray_caster.utils.matrix import Matrix
from ray_caster.utils.vector_operations import Vector3


def translation(x: float, y: float, z: float) -> Matrix:
    return Matrix([
        [1.0, 0.0, 0.0, x],
        [0.0, 1.0, 0.0, y],
        [0.0, 0.0, 1.0, z],
        [0.0, 0.0, 0.0, 1.0],
    ])


def scaling(x: float, y: float, z: float) -> Matrix:
    return Matrix([
        [x, 0.0, 0.0, 0.0],
        [0.0, y, 0.0, 0.0],
        [0.0, 0.0, z, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])


def rotation_x(radians: float) -> Matrix:
    cos_r, sin_r = math.cos(radians), math.sin(radians)
    return Matrix([
        [1.0, 0.0, 0.0, 0.0],
        [0.0, cos_r, -sin_r, 0.0],
        [0.0, sin_r, cos_r, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])


def rotation_y(radians: float) -> Matrix:
    cos_r, sin_r = math.cos(radians), math.sin(radians)
    return Matrix([
        [cos_r, 0.0, sin_r, 0.0],
        [0.0, 1.0, 0.0, 0.0],
        [-sin_r, 0.0, cos_r, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])


def rotation_z(radians: float) -> Matrix:
    cos_r, sin_r = math.cos(radians), math.sin(radians)
    return Matrix([
        [cos_r, -sin_r, 0.0, 0.0],
        [sin_r, cos_r, 0.0, 0.0],
        [0.0, 0.0, 1.0, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])


def shearing(xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> Matrix:
    """Each component moves in proportion to another, e.g. xy moves x in proportion to y."""
    return Matrix([
        [1.0, xy, xz, 0.0],
        [yx, 1.0, yz, 0.0],
        [zx, zy, 1.0, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])


def view_transform(from_point: Vector3, to_point: Vector3, up: Vector3) -> Matrix:
    """Orients the world relative to an eye at from_point looking at to_point.
    up only needs to be roughly upward; the true up axis is recomputed from it."""
    forward = (to_point - from_point).normalize()
    left = forward.cross(up.normalize()) # horizontal axis
    true_up = left.cross(forward) # vertical axis

    orientation = Matrix([
        [left.x, left.y, left.z, 0.0],
        [true_up.x, true_up.y, true_up.z, 0.0],
        [-forward.x, -forward.y, -forward.z, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])
    return orientation @ translation(-from_point.x, -from_point.y, -from_point.z)
