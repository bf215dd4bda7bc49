"""
Pixel storage for a rendered image and its encoders.

Colors are kept as linear floats in a (height, width, 3) array. Conversion to
bytes clamps each channel to [0, 1] and rounds up after scaling to 255. Plain
text P3 PPM is written directly; every other format goes through Pillow.
"""

from __future__ import annotations

from pathlib import Path

import numpy as np
from PIL import Image

from ray_caster.typings.color import Color

PPM_MAX_COLOR_VALUE: int = 255


def clamp_color01(color_rgb: np.ndarray) -> np.ndarray:
    """Clamps an RGB color array to the range [0.0, 1.0]."""
    color_array = np.asarray(color_rgb, dtype=float)
    return np.clip(color_array, 0.0, 1.0)


def color_to_uint8(color_rgb: np.ndarray) -> np.ndarray:
    """Converts a floating-point RGB color array (clamped to [0, 1]) to 8-bit integer [0, 255]."""
    clamped_color = clamp_color01(color_rgb)
    return np.ceil(clamped_color * 255.0).astype(np.uint8)


class Canvas:
    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas dimensions must be positive, got {width}x{height}")
        self.width: int = int(width)
        self.height: int = int(height)
        self.pixels: np.ndarray = np.zeros((self.height, self.width, 3), dtype=float)

    def write_pixel(self, x: int, y: int, color: Color) -> None:
        self.pixels[y, x, :] = color.data

    def pixel_at(self, x: int, y: int) -> Color:
        return Color.from_array(self.pixels[y, x, :])

    def write_rows(self, y_start: int, rows: np.ndarray) -> None:
        """Copy a band of whole rows, as produced by one parallel render worker."""
        rows = np.asarray(rows, dtype=float)
        y_end = y_start + rows.shape[0]
        if rows.shape[1:] != (self.width, 3) or y_start < 0 or y_end > self.height:
            raise ValueError(f"Row band {y_start}:{y_end} with shape {rows.shape} does not fit a {self.width}x{self.height} canvas")
        self.pixels[y_start:y_end, :, :] = rows

    def to_uint8(self) -> np.ndarray:
        return color_to_uint8(self.pixels)

    def to_ppm(self) -> str:
        header = f"P3\n{self.width} {self.height}\n{PPM_MAX_COLOR_VALUE}\n"
        pixel_lines = [f"{r} {g} {b}" for r, g, b in self.to_uint8().reshape(-1, 3).tolist()]
        return header + "".join(line + "\n" for line in pixel_lines)

    def save(self, output_path: str | Path) -> None:
        path = Path(output_path)
        if path.suffix.lower() == ".ppm":
            path.write_text(self.to_ppm())
            return
        image = Image.fromarray(self.to_uint8())
        image.save(path)
