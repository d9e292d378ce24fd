"""Vector paths handed to a paint surface.

A :class:`StarPath` is a flat list of commands in drawing coordinates:

- ``M`` move to one point
- ``L`` line to one point
- ``Q`` quadratic curve: control point, end point
- ``Z`` close the current contour

:func:`round_corners` turns a polyline into a path whose interior corners
are smoothed by quadratic curves, the way a corner-path effect softens
the star's horns.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, List, Sequence, Tuple

Point = Tuple[float, float]

PATH_OPS = ("M", "L", "Q", "Z")
_POINT_COUNT = {"M": 1, "L": 1, "Q": 2, "Z": 0}


@dataclass(frozen=True)
class PathCommand:
    op: str
    points: Tuple[Point, ...] = ()

    def __post_init__(self) -> None:
        if self.op not in _POINT_COUNT:
            raise ValueError(f"Unknown path op {self.op!r}")
        if len(self.points) != _POINT_COUNT[self.op]:
            raise ValueError(
                f"Path op {self.op!r} takes {_POINT_COUNT[self.op]} points, got {len(self.points)}"
            )


@dataclass
class StarPath:
    commands: List[PathCommand] = field(default_factory=list)

    def move_to(self, x: float, y: float) -> "StarPath":
        self.commands.append(PathCommand("M", ((x, y),)))
        return self

    def line_to(self, x: float, y: float) -> "StarPath":
        self.commands.append(PathCommand("L", ((x, y),)))
        return self

    def quad_to(self, cx: float, cy: float, x: float, y: float) -> "StarPath":
        self.commands.append(PathCommand("Q", ((cx, cy), (x, y))))
        return self

    def close(self) -> "StarPath":
        self.commands.append(PathCommand("Z"))
        return self

    def is_closed(self) -> bool:
        return bool(self.commands) and self.commands[-1].op == "Z"

    def points(self) -> List[Point]:
        """All points referenced by the path, control points included."""
        return [pt for cmd in self.commands for pt in cmd.points]

    def end_points(self) -> List[Point]:
        """Points the pen actually passes through (control points skipped)."""
        return [cmd.points[-1] for cmd in self.commands if cmd.points]

    def to_dict(self) -> Dict[str, object]:
        return {
            "commands": [
                {"op": cmd.op, "points": [list(pt) for pt in cmd.points]}
                for cmd in self.commands
            ]
        }

    @classmethod
    def from_dict(cls, data: Dict[str, object]) -> "StarPath":
        commands = [
            PathCommand(item["op"], tuple((float(x), float(y)) for x, y in item["points"]))
            for item in data["commands"]
        ]
        return cls(commands)


def _dedupe(points: Sequence[Point]) -> List[Point]:
    out: List[Point] = []
    for pt in points:
        if not out or out[-1] != pt:
            out.append(pt)
    return out


def round_corners(points: Sequence[Point], radius: float) -> StarPath:
    """Polyline through *points* with its interior corners rounded.

    Each interior corner is cut back by ``min(radius, half the adjacent
    segment)`` on both sides and bridged with a quadratic curve whose
    control point is the corner itself.  The first and last points are
    kept as they are; repeated consecutive points are dropped.
    """
    pts = _dedupe([(float(x), float(y)) for x, y in points])
    path = StarPath()
    if not pts:
        return path

    path.move_to(*pts[0])
    if radius <= 0 or len(pts) < 3:
        for pt in pts[1:]:
            path.line_to(*pt)
        return path

    for i in range(1, len(pts) - 1):
        px, py = pts[i - 1]
        cx, cy = pts[i]
        nx, ny = pts[i + 1]
        len_in = math.hypot(cx - px, cy - py)
        len_out = math.hypot(nx - cx, ny - cy)
        cut_in = min(radius, len_in / 2.0)
        cut_out = min(radius, len_out / 2.0)
        ax = cx - (cx - px) / len_in * cut_in
        ay = cy - (cy - py) / len_in * cut_in
        bx = cx + (nx - cx) / len_out * cut_out
        by = cy + (ny - cy) / len_out * cut_out
        path.line_to(ax, ay)
        path.quad_to(cx, cy, bx, by)

    path.line_to(*pts[-1])
    return path
