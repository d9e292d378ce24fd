"""Turn star geometry plus a fill state into ordered draw operations.

Nothing here touches pixels.  Each function returns a list of draw ops
that a paint surface replays in order (see :mod:`ratingstar.visualize`).

Architecture
------------
- A *draw op* is one of :class:`FillPath`, :class:`StrokePath`,
  :class:`PushClip` or :class:`PopClip`.
- A solid star is five rounded tip triangles plus an unrounded patch over
  the inner pentagon.  Without the patch the rounded tips leave a visible
  hole in the middle of the star.
- A partial star is the empty fill, then the full fill clipped to the
  left part of the bounding box, then an optional outline.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple, Union

from .geometry import StarGeometry
from .models import FILL_FULL, FILL_PARTIAL, FillState, StarStyle
from .paths import StarPath, round_corners

logger = logging.getLogger(__name__)

# Outward offsets (px) for the inner vertices 1, 3, 5, 7, 9 of the centre
# patch.  Rounded tips leave a ~1px seam along the inner pentagon.
CENTER_PATCH_OFFSETS: Tuple[Tuple[float, float], ...] = (
    (-1.0, -1.0),
    (1.5, -0.5),
    (1.5, 1.0),
    (0.0, 1.0),
    (-1.0, 1.0),
)


# ═══════════════════════════════════════════════════════════════════
# Draw op model
# ═══════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class FillPath:
    """Fill *path* with *color*."""
    path: StarPath
    color: str
    kind: str = "fill"

    def to_dict(self) -> Dict[str, object]:
        return {"kind": self.kind, "color": self.color, "path": self.path.to_dict()}


@dataclass(frozen=True)
class StrokePath:
    """Outline *path* with *color* at *width* pixels."""
    path: StarPath
    color: str
    width: float
    kind: str = "stroke"

    def to_dict(self) -> Dict[str, object]:
        return {
            "kind": self.kind,
            "color": self.color,
            "width": self.width,
            "path": self.path.to_dict(),
        }


@dataclass(frozen=True)
class PushClip:
    """Restrict following ops to a rectangle until the matching :class:`PopClip`."""
    left: float
    top: float
    right: float
    bottom: float
    kind: str = "push_clip"

    def to_dict(self) -> Dict[str, object]:
        return {
            "kind": self.kind,
            "rect": [self.left, self.top, self.right, self.bottom],
        }


@dataclass(frozen=True)
class PopClip:
    kind: str = "pop_clip"

    def to_dict(self) -> Dict[str, object]:
        return {"kind": self.kind}


DrawOp = Union[FillPath, StrokePath, PushClip, PopClip]


def op_from_dict(data: Dict[str, object]) -> DrawOp:
    kind = data.get("kind")
    if kind == "fill":
        return FillPath(StarPath.from_dict(data["path"]), str(data["color"]))
    if kind == "stroke":
        return StrokePath(
            StarPath.from_dict(data["path"]), str(data["color"]), float(data["width"])
        )
    if kind == "push_clip":
        left, top, right, bottom = (float(v) for v in data["rect"])
        return PushClip(left, top, right, bottom)
    if kind == "pop_clip":
        return PopClip()
    raise ValueError(f"Unknown draw op kind {kind!r}")


# ═══════════════════════════════════════════════════════════════════
# Star outlines
# ═══════════════════════════════════════════════════════════════════

def tip_paths(star: StarGeometry, corner_radius: float) -> List[StarPath]:
    """The five star points, each ``inner → outer tip → next inner``.

    The walk starts at ring index 1 (the inner vertex between the left
    and top points) and moves two steps per tip.
    """
    paths: List[StarPath] = []
    for i in range(1, 11, 2):
        a = star.vertex(i)
        tip = star.vertex(i + 1)
        b = star.vertex(i + 2)
        paths.append(round_corners([(a.x, a.y), (tip.x, tip.y), (b.x, b.y)], corner_radius))
    return paths


def center_patch_path(star: StarGeometry) -> StarPath:
    """Closed, unrounded path over the inner pentagon, nudged outwards."""
    path = StarPath()
    for n, (ring_index, (dx, dy)) in enumerate(zip(range(1, 10, 2), CENTER_PATCH_OFFSETS)):
        v = star.vertex(ring_index)
        if n == 0:
            path.move_to(v.x + dx, v.y + dy)
        else:
            path.line_to(v.x + dx, v.y + dy)
    return path.close()


def solid_star_ops(star: StarGeometry, color: str, corner_radius: float) -> List[DrawOp]:
    ops: List[DrawOp] = [FillPath(p, color) for p in tip_paths(star, corner_radius)]
    ops.append(FillPath(center_patch_path(star), color))
    return ops


def stroke_star_ops(star: StarGeometry, style: StarStyle) -> List[DrawOp]:
    return [
        StrokePath(p, style.stroke_color, style.stroke_width)
        for p in tip_paths(star, style.corner_radius)
    ]


# ═══════════════════════════════════════════════════════════════════
# Fill states
# ═══════════════════════════════════════════════════════════════════

def full_star_ops(star: StarGeometry, style: StarStyle) -> List[DrawOp]:
    ops = solid_star_ops(star, style.fill_color_full, style.corner_radius)
    if style.stroke_on_full:
        ops += stroke_star_ops(star, style)
    return ops


def empty_star_ops(star: StarGeometry, style: StarStyle) -> List[DrawOp]:
    ops = solid_star_ops(star, style.fill_color_empty, style.corner_radius)
    if style.stroke_on_empty:
        ops += stroke_star_ops(star, style)
    return ops


def divider_x(star: StarGeometry, fraction: float) -> float:
    """x of the vertical line separating the filled and empty parts."""
    box = star.bounding_box()
    return box.left + box.width * fraction


def partial_star_ops(star: StarGeometry, fraction: float, style: StarStyle) -> List[DrawOp]:
    """Fill the left *fraction* of the star's width, the rest stays empty."""
    logger.debug("partial star fraction = %s", fraction)
    if fraction <= 0:
        return empty_star_ops(star, style)
    if fraction >= 1:
        return full_star_ops(star, style)

    box = star.bounding_box()
    ops = solid_star_ops(star, style.fill_color_empty, style.corner_radius)
    ops.append(PushClip(box.left, box.top, divider_x(star, fraction), box.bottom))
    ops += solid_star_ops(star, style.fill_color_full, style.corner_radius)
    ops.append(PopClip())
    if style.stroke_on_partial:
        ops += stroke_star_ops(star, style)
    return ops


def render_star(star: StarGeometry, fill: FillState, style: StarStyle) -> List[DrawOp]:
    if fill.kind == FILL_FULL:
        return full_star_ops(star, style)
    if fill.kind == FILL_PARTIAL:
        return partial_star_ops(star, fill.fraction, style)
    return empty_star_ops(star, style)


def render_row(
    stars: Sequence[StarGeometry], rating: float, style: StarStyle
) -> List[DrawOp]:
    """Draw ops for a whole row, star *i* filled according to *rating*."""
    ops: List[DrawOp] = []
    for i, star in enumerate(stars):
        ops += render_star(star, FillState.for_star(rating, i), style)
    return ops
