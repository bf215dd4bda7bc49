"""Ray casting renderer for scenes of spheres and planes lit by a point light."""

__version__ = "0.1.0"
