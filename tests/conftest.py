"""Pytest configuration for ray caster tests.

Provides the canonical two-sphere world and resets the process-wide profile
counters around every test so counter assertions are isolated.
"""

import math

import pytest

from ray_caster.camera import Camera
from ray_caster.scene_builder import default_world
from ray_caster.utils.shadow_utils import reset_profile_counters
from ray_caster.utils.transformations import view_transform
from ray_caster.utils.vector_operations import Vector3


@pytest.fixture(autouse=True)
def clear_profile_counters():
    """Zero the profile counters before and after each test."""
    reset_profile_counters()
    yield
    reset_profile_counters()


@pytest.fixture
def world():
    """Outer sphere (0.8, 1, 0.6) and an inner sphere scaled by 0.5, light at (-10, 10, -10)."""
    return default_world()


@pytest.fixture
def small_camera():
    """11x11 camera with a 90 degree field of view looking from (0, 0, -5) at the origin."""
    transform = view_transform(Vector3(0.0, 0.0, -5.0), Vector3(0.0, 0.0, 0.0), Vector3(0.0, 1.0, 0.0))
    return Camera(11, 11, math.pi / 2.0, transform)
