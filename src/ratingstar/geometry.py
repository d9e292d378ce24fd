"""Star polygon geometry: the ten-vertex ring behind every rating star.

Standard coordinate system
--------------------------
x grows to the right, y grows upwards, the origin is the star centre and
the circumradius is 1.  The five outer vertices, clockwise from the top:

- A (0, 1)
- B (cos 18°, sin 18°)
- C (cos 54°, -sin 54°)
- D (-cos 54°, -sin 54°)
- E (-cos 18°, sin 18°)

The ring is stored starting from E, the leftmost vertex, and alternates
outer (even index) / inner (odd index) vertices.  Inner vertices start at
the midpoint of their two outer neighbours and are pulled towards the
centre by the thickness factor.

After construction the ring is flipped into the drawing frame (y grows
downwards, bounding box top-left at the origin, width ~0.95).  All later
scale and translate operations happen in that frame.

The bounding box is read from four fixed vertices (E, A, B, D) rather
than a min/max scan.  That only holds for uniform scaling and pure
translation; no rotation is offered.  :meth:`StarGeometry.validate`
checks the cached box against a full scan.
"""

from __future__ import annotations

from typing import List

import numpy as np

from .models import RING_SIZE, BoundingBox, Vertex

DEFAULT_THICKNESS = 0.5
MIN_THICKNESS = 0.3
MAX_THICKNESS = 0.9

# E, A, B, C, D in the standard coordinate system.
CANONICAL_OUTER = (
    (-0.9511, 0.3090),
    (0.0000, 1.0000),
    (0.9511, 0.3090),
    (0.5878, -0.8090),
    (-0.5878, -0.8090),
)

# height / width of the outer rect.
ASPECT_RATIO = (CANONICAL_OUTER[1][1] - CANONICAL_OUTER[3][1]) / (
    CANONICAL_OUTER[2][0] - CANONICAL_OUTER[0][0]
)

# Scale of a freshly reset star; it equals the star's width.
DEFAULT_SCALE_FACTOR = (CANONICAL_OUTER[2][0] - CANONICAL_OUTER[0][0]) / 2.0

_LEFT_INDEX = 0
_TOP_INDEX = 2
_RIGHT_INDEX = 4
_BOTTOM_INDEX = 8


def clamp_thickness(factor: float) -> float:
    """Clamp *factor* into ``[MIN_THICKNESS, MAX_THICKNESS]``."""
    return float(min(MAX_THICKNESS, max(MIN_THICKNESS, factor)))


def outer_rect_aspect_ratio() -> float:
    """Return height / width of a star's bounding box."""
    return ASPECT_RATIO


def star_width_for_height(height: float) -> float:
    """Width of a star whose bounding box is *height* tall."""
    return height / ASPECT_RATIO


class StarGeometry:
    """The ten vertices of one star plus its cached bounding box.

    A new instance is already reset to the canonical shape with the given
    *thickness*; call :meth:`fit_to_box` to size and place it.
    """

    def __init__(self, thickness: float = DEFAULT_THICKNESS) -> None:
        self._xy = np.zeros((RING_SIZE, 2), dtype=float)
        self._scale_factor = DEFAULT_SCALE_FACTOR
        self._thickness = DEFAULT_THICKNESS
        self._bbox = BoundingBox(0.0, 0.0, 0.0, 0.0)
        self.reset(thickness)

    def __repr__(self) -> str:
        box = self._bbox
        return (
            f"StarGeometry(thickness={self._thickness:.3f}, "
            f"box=({box.left:.2f}, {box.top:.2f}, {box.right:.2f}, {box.bottom:.2f}))"
        )

    @property
    def scale_factor(self) -> float:
        return self._scale_factor

    @property
    def thickness(self) -> float:
        return self._thickness

    # ── Mutation ────────────────────────────────────────────────────

    def reset(self, thickness: float = DEFAULT_THICKNESS) -> None:
        """Rebuild the ring from the canonical coordinates.

        The thickness is clamped and applied in the standard frame, then
        the ring is moved into the drawing frame.
        """
        self._scale_factor = DEFAULT_SCALE_FACTOR
        self._init_standard_vertices()
        self._update_bounds()
        self._apply_thickness(thickness)
        self._adjust_coordinate()

    def set_thickness(self, factor: float) -> None:
        """Change point sharpness while keeping the star's size and position."""
        factor = clamp_thickness(factor)
        if factor == self._thickness:
            return
        old_scale = self._scale_factor
        left, top = self._bbox.left, self._bbox.top

        self.reset(factor)

        self._change_scale_factor(old_scale)
        self.move_to(left, top)

    def fit_to_box(self, left: float, top: float, height: float) -> None:
        """Scale the star to *height* and put its top-left corner at (left, top).

        *height* must be positive; zero or negative heights give a
        degenerate star rather than an error.
        """
        if self._scale_factor == 0.0:
            # a collapsed ring cannot be rescaled
            self.reset(self._thickness)
        self.translate(-self._bbox.left, -self._bbox.top, update_bounds=False)
        self._change_scale_factor(star_width_for_height(height))
        self.translate(left, top)

    def translate(self, dx: float, dy: float, update_bounds: bool = True) -> None:
        self._xy += (dx, dy)
        if update_bounds:
            self._update_bounds()

    def move_to(self, left: float, top: float) -> None:
        """Translate so the bounding box's top-left corner is at (left, top)."""
        self.translate(left - self._bbox.left, top - self._bbox.top)

    # ── Queries ─────────────────────────────────────────────────────

    def bounding_box(self) -> BoundingBox:
        return self._bbox

    def vertex(self, index: int) -> Vertex:
        """Return the vertex at ring position *index* (taken modulo 10)."""
        i = index % RING_SIZE
        return Vertex(i, float(self._xy[i, 0]), float(self._xy[i, 1]))

    def vertices(self) -> List[Vertex]:
        return [self.vertex(i) for i in range(RING_SIZE)]

    def outer_vertices(self) -> List[Vertex]:
        return [self.vertex(i) for i in range(0, RING_SIZE, 2)]

    def inner_vertices(self) -> List[Vertex]:
        return [self.vertex(i) for i in range(1, RING_SIZE, 2)]

    def as_array(self) -> np.ndarray:
        """Copy of the ring as a (10, 2) array."""
        return self._xy.copy()

    def signed_area(self) -> float:
        """Shoelace area of the ring.

        Positive when the ring runs clockwise on screen (y down).
        """
        x = self._xy[:, 0]
        y = self._xy[:, 1]
        return float(np.sum(x * np.roll(y, -1) - np.roll(x, -1) * y) / 2.0)

    def validate(self) -> List[str]:
        errors: List[str] = []
        if self._xy.shape != (RING_SIZE, 2):
            errors.append(f"Ring has shape {self._xy.shape}, expected ({RING_SIZE}, 2)")
            return errors
        if not np.all(np.isfinite(self._xy)):
            errors.append("Ring has non-finite coordinates")
            return errors

        box = self._bbox
        if box.width <= 0 or box.height <= 0:
            errors.append(f"Degenerate bounding box {box.as_tuple()}")
            return errors

        xs = self._xy[:, 0]
        ys = self._xy[:, 1]
        scanned = (xs.min(), ys.min(), xs.max(), ys.max())
        if not np.allclose(scanned, box.as_tuple(), rtol=0.0, atol=1e-9 * max(1.0, box.width)):
            errors.append(
                f"Cached bounding box {box.as_tuple()} disagrees with vertex scan {scanned}"
            )

        centre = self._xy[0::2].mean(axis=0)
        outer_r = np.hypot(*(self._xy[0::2] - centre).T)
        inner_r = np.hypot(*(self._xy[1::2] - centre).T)
        if inner_r.max() >= outer_r.min():
            errors.append("Inner vertices are not inside the outer vertices")
        return errors

    # ── Internals ───────────────────────────────────────────────────

    def _init_standard_vertices(self) -> None:
        outer = np.array(CANONICAL_OUTER, dtype=float)
        self._xy[0::2] = outer
        self._xy[1::2] = (outer + np.roll(outer, -1, axis=0)) / 2.0

    def _apply_thickness(self, factor: float) -> None:
        factor = clamp_thickness(factor)
        self._xy[1::2] *= factor
        self._thickness = factor

    def _adjust_coordinate(self) -> None:
        """Flip y, move the box to the origin and halve (diameter 2 → 1)."""
        left = self._bbox.left
        top = self._bbox.top
        self._xy[:, 0] = (self._xy[:, 0] - left) / 2.0
        self._xy[:, 1] = (top - self._xy[:, 1]) / 2.0
        self._update_bounds()

    def _change_scale_factor(self, new_factor: float) -> None:
        scale = new_factor / self._scale_factor
        if scale == 1.0:
            return
        self._xy *= scale
        self._scale_factor = new_factor

    def _update_bounds(self) -> None:
        self._bbox = BoundingBox(
            left=float(self._xy[_LEFT_INDEX, 0]),
            top=float(self._xy[_TOP_INDEX, 1]),
            right=float(self._xy[_RIGHT_INDEX, 0]),
            bottom=float(self._xy[_BOTTOM_INDEX, 1]),
        )
