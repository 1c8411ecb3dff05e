"""Interactive state for placing, dragging and randomising three points."""

from __future__ import annotations

import random
import time
from typing import Callable, Optional

from circlepick.geometry import CircleInfo, Point, circumscribed_circle
from circlepick.raster import GrayImage


class CircleEditor:
    """Places up to three points on a canvas and draws the circle through them.

    Coordinates passed to the mouse handlers are window coordinates; the
    canvas starts ``offset_y`` pixels below the top of the window.
    """

    def __init__(
        self,
        width: int = 1920,
        height: int = 1080,
        offset_y: int = 50,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.width = width
        self.height = height
        self.offset_y = offset_y
        self.rng = rng if rng is not None else random.Random()

        self.image: Optional[GrayImage] = None
        self.rect: Optional[tuple[int, int, int, int]] = None

        self.now_x = 0
        self.now_y = 0
        self.hover_x = 0
        self.hover_y = 0
        self.color = 100
        self.thickness = 5.0
        self.circle_thickness = 3.0
        self.circle_color = 100

        self.points: list[Point] = []
        self.sizes: list[int] = []
        self.colors: list[int] = []
        self.circle: Optional[CircleInfo] = None

        self.started = False
        self.dragging = False
        self.drag_index = -1
        self.drag_start = Point(0, 0)
        self.running = False

    def _in_rect(self, x: int, y: int) -> bool:
        if self.rect is None:
            return False
        left, top, right, bottom = self.rect
        return left <= x < right and top <= y < bottom

    def _require_image(self) -> GrayImage:
        if self.image is None:
            raise RuntimeError("the editor has not been reset yet")
        return self.image

    def _hit_index(self, click: Point) -> int:
        radius = int(self.thickness)
        return next(
            (
                index
                for index, p in enumerate(self.points)
                if (p.x - click.x) ** 2 + (p.y - click.y) ** 2 <= radius * radius
            ),
            -1,
        )

    def _draw_outline(self, color: int) -> None:
        info = circumscribed_circle(self.points)
        self.circle = info
        self._require_image().draw_ring(
            info.cx, info.cy, info.radius, int(self.circle_thickness), color
        )

    def _draw_points(self) -> None:
        image = self._require_image()
        for p, size, color in zip(self.points, self.sizes, self.colors):
            image.fill_disc(p.x, p.y, size, color)

    def reset(self) -> None:
        """Clear the canvas and forget all points; ignored while randomising."""
        if self.running:
            return
        if self.image is None:
            self.image = GrayImage(self.width, self.height)
        self.image.clear(255)
        self.rect = (0, self.offset_y, self.width, self.height + self.offset_y)
        self.points.clear()
        self.sizes.clear()
        self.colors.clear()
        self.circle = None
        self.drag_index = -1
        self.started = True

    def drag_reset(self) -> None:
        """Drop the points and clear the canvas, keeping sizes and colours."""
        self.drag_index = -1
        self._require_image().clear(255)
        self.points.clear()

    def mouse_move(self, x: int, y: int) -> None:
        """Track the cursor, report a hovered point and move a dragged point."""
        if self.image is None:
            return

        if self._in_rect(x, y):
            hit = self._hit_index(Point(x, y - self.offset_y))
            if hit != -1:
                self.hover_x, self.hover_y = self.points[hit].x, self.points[hit].y
            elif self.points:
                self.hover_x, self.hover_y = 0, 0

        if self.started:
            now_x, now_y = x, y - self.offset_y
            if now_x < 0 or now_y < 0:
                return
            self.now_x, self.now_y = now_x, now_y

        if self.dragging and 0 <= self.drag_index < len(self.points):
            current = Point(x, y - self.offset_y)
            dx = current.x - self.drag_start.x
            dy = current.y - self.drag_start.y
            moved = self.points[self.drag_index]
            self.points[self.drag_index] = Point(moved.x + dx, moved.y + dy)
            self.drag_start = current

            self.image.clear(255)
            if len(self.points) == 3:
                self._draw_outline(self.color)
            self._draw_points()

    def button_down(self, x: int, y: int) -> None:
        """Start dragging a point under the cursor, or place a new one."""
        if x < 0 or y < self.offset_y or x >= self.width or y >= self.offset_y + self.height:
            return
        if not self._in_rect(x, y):
            return

        click = Point(x, y - self.offset_y)
        self.drag_index = self._hit_index(click)
        if self.drag_index != -1:
            self.dragging = True
            self.drag_start = click
        elif len(self.points) < 3:
            self._require_image().fill_disc(click.x, click.y, self.thickness, self.color)
            self.points.append(click)
            self.sizes.append(int(self.thickness))
            self.colors.append(self.color)
            if len(self.points) == 3:
                self._draw_outline(self.color)

    def button_up(self, x: int, y: int) -> None:
        """End a drag."""
        if self.dragging:
            self.dragging = False
            self.drag_index = -1

    def random_position(self) -> Point:
        """Return a random point in the top-left quarter of the canvas."""
        return Point(
            self.rng.randrange(self.width // 2),
            self.rng.randrange(self.height // 2),
        )

    def random_int(self, start: int, end: int) -> int:
        """Return a random integer in [start, end]."""
        return self.rng.randint(start, end)

    def can_randomize(self) -> bool:
        """True when three points are placed and no run is in progress."""
        return not self.running and len(self.points) == 3

    def randomize(self) -> CircleInfo:
        """Move the three points to random places with random sizes and colours."""
        image = self._require_image()
        for j in range(3):
            self.points[j] = self.random_position()
            self.sizes[j] = self.random_int(5, 30)
            self.colors[j] = self.random_int(0, 250)
        self.circle_color = self.random_int(0, 250)

        info = circumscribed_circle(self.points)
        self.circle = info
        image.clear(255)
        self._draw_points()
        image.draw_ring(
            info.cx, info.cy, info.radius, int(self.circle_thickness), self.circle_color
        )
        return info

    def run_random(
        self,
        repeat: int = 10,
        delay: float = 0.5,
        on_update: Optional[Callable[["CircleEditor"], None]] = None,
    ) -> bool:
        """Randomise ``repeat`` times, pausing ``delay`` seconds after each step.

        Returns False without doing anything if a run cannot start.
        """
        if not self.can_randomize():
            return False
        self.running = True
        try:
            for _ in range(repeat):
                self.randomize()
                if on_update is not None:
                    on_update(self)
                if delay > 0:
                    time.sleep(delay)
        finally:
            self.running = False
        return True