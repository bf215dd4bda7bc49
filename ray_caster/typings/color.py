from __future__ import annotations

import numpy as np

from ray_caster.utils.vector_operations import EPSILON


class Color:
    """Linear RGB color in a read-only numpy array.
    Channels are nominally 0.0 - 1.0 but never clamped here."""

    __slots__ = ("data",)
    __array_ufunc__ = None # numpy scalars defer to __rmul__

    def __init__(self, r: float, g: float, b: float) -> None:
        data = np.array((r, g, b), dtype=float)
        data.flags.writeable = False
        object.__setattr__(self, "data", data)

    @classmethod
    def from_array(cls, array: np.ndarray) -> Color:
        r, g, b = np.asarray(array, dtype=float)
        return cls(r, g, b)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (Color, (self.r, self.g, self.b))

    @property
    def r(self) -> float:
        return float(self.data[0])

    @property
    def g(self) -> float:
        return float(self.data[1])

    @property
    def b(self) -> float:
        return float(self.data[2])

    def __repr__(self) -> str:
        return f"Color(r={self.r}, g={self.g}, b={self.b})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return bool(np.all(np.abs(self.data - other.data) < EPSILON))

    __hash__ = None

    def __add__(self, other: Color) -> Color:
        return Color.from_array(self.data + other.data)

    def __sub__(self, other: Color) -> Color:
        return Color.from_array(self.data - other.data)

    def __mul__(self, other: Color | float) -> Color:
        if isinstance(other, Color): # Hadamard product
            return Color.from_array(self.data * other.data)
        return Color.from_array(self.data * other)

    def __rmul__(self, scalar: float) -> Color:
        return Color.from_array(self.data * scalar)


BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
RED = Color(1.0, 0.0, 0.0)
GREEN = Color(0.0, 1.0, 0.0)
BLUE = Color(0.0, 0.0, 1.0)
