"""An 8-bit grayscale image with disc and ring drawing."""

from __future__ import annotations

import math

from circlepick.geometry import in_circle


class GrayImage:
    """A width x height grid of 8-bit gray values, initially black."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("image dimensions must be positive")
        self.width = width
        self.height = height
        self.pixels = bytearray(width * height)

    def __getitem__(self, pos: tuple[int, int]) -> int:
        x, y = pos
        if not self._contains(x, y):
            raise IndexError(f"pixel ({x}, {y}) is outside the image")
        return self.pixels[y * self.width + x]

    def _contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _set(self, x: int, y: int, color: int) -> None:
        if self._contains(x, y):
            self.pixels[y * self.width + x] = color & 0xFF

    def clear(self, value: int = 255) -> None:
        """Fill every pixel with ``value``."""
        self.pixels[:] = bytes([value & 0xFF]) * len(self.pixels)

    def fill_disc_from_corner(self, x: int, y: int, radius: float, color: int) -> None:
        """Fill a disc whose bounding box has its top-left corner at (x, y)."""
        center_x = int(x + radius)
        center_y = int(y + radius)
        stop_x = math.ceil(x + radius * 2)
        stop_y = math.ceil(y + radius * 2)
        for j in range(y, stop_y):
            for i in range(x, stop_x):
                if in_circle(i, j, center_x, center_y, radius):
                    self._set(i, j, color)

    def fill_disc(self, x: int, y: int, radius: float, color: int) -> None:
        """Fill a disc centred on (x, y), clipped to the image."""
        for j in range(int(y - radius), int(y + radius) + 1):
            for i in range(int(x - radius), int(x + radius) + 1):
                if self._contains(i, j) and in_circle(i, j, x, y, radius):
                    self._set(i, j, color)

    def draw_ring(self, x: float, y: float, radius: float, thickness: int, color: int) -> None:
        """Draw a ring of the given thickness centred on (x, y), clipped to the image."""
        half = int(int(thickness) / 2)
        r_min = max(0, int(radius - half))
        r_max = int(radius + half)
        for j in range(int(y - r_max), int(y + r_max) + 1):
            for i in range(int(x - r_max), int(x + r_max) + 1):
                if not self._contains(i, j):
                    continue
                dist = math.hypot(i - x, j - y)
                if r_min <= dist <= r_max:
                    self._set(i, j, color)

    def to_pgm(self) -> bytes:
        """Encode the image as a binary PGM file."""
        header = f"P5\n{self.width} {self.height}\n255\n".encode("ascii")
        return header + bytes(self.pixels)