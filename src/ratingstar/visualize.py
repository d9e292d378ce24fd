"""Rasterize draw ops with matplotlib.

This is a reference paint surface: it replays the ops produced by
:mod:`ratingstar.render` onto an Agg canvas whose data coordinates are
pixels with the origin at the top-left.  matplotlib is imported lazily to
keep the geometry core lightweight.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .paths import StarPath
from .render import DrawOp, FillPath, PopClip, PushClip, StrokePath

Rect = Tuple[float, float, float, float]


def _ensure_mpl():
    """Lazy-import matplotlib; raise helpful error if missing."""
    try:
        from matplotlib.backends.backend_agg import FigureCanvasAgg
        from matplotlib.figure import Figure
        from matplotlib.patches import PathPatch, Polygon
        from matplotlib.path import Path as MplPath
    except ImportError as exc:  # pragma: no cover - requires optional dep
        raise RuntimeError(
            "matplotlib is required for rendering. Install with `pip install matplotlib`."
        ) from exc
    return Figure, FigureCanvasAgg, PathPatch, Polygon, MplPath


def to_mpl_path(path: StarPath, mpl_path_cls=None):
    """Convert a :class:`StarPath` to a ``matplotlib.path.Path``."""
    if mpl_path_cls is None:
        mpl_path_cls = _ensure_mpl()[4]

    verts: List[Tuple[float, float]] = []
    codes: List[int] = []
    start = (0.0, 0.0)
    for cmd in path.commands:
        if cmd.op == "M":
            start = cmd.points[0]
            verts.append(start)
            codes.append(mpl_path_cls.MOVETO)
        elif cmd.op == "L":
            verts.append(cmd.points[0])
            codes.append(mpl_path_cls.LINETO)
        elif cmd.op == "Q":
            verts.extend(cmd.points)
            codes.extend([mpl_path_cls.CURVE3, mpl_path_cls.CURVE3])
        elif cmd.op == "Z":
            verts.append(start)
            codes.append(mpl_path_cls.CLOSEPOLY)
    return mpl_path_cls(verts, codes)


def _intersect(a: Rect, b: Rect) -> Rect:
    left = max(a[0], b[0])
    top = max(a[1], b[1])
    right = max(left, min(a[2], b[2]))
    bottom = max(top, min(a[3], b[3]))
    return (left, top, right, bottom)


def _draw_ops(ax, ops: Sequence[DrawOp], dpi: int, mpl) -> None:
    _, _, PathPatch, Polygon, MplPath = mpl
    clips: List[Rect] = []

    for op in ops:
        if isinstance(op, PushClip):
            rect = (op.left, op.top, op.right, op.bottom)
            clips.append(_intersect(clips[-1], rect) if clips else rect)
            continue
        if isinstance(op, PopClip):
            if not clips:
                raise ValueError("PopClip without a matching PushClip")
            clips.pop()
            continue

        if not op.path.commands:
            continue
        mpl_path = to_mpl_path(op.path, MplPath)
        if isinstance(op, FillPath):
            patch = PathPatch(mpl_path, facecolor=op.color, edgecolor="none", linewidth=0)
        elif isinstance(op, StrokePath):
            patch = PathPatch(
                mpl_path,
                facecolor="none",
                edgecolor=op.color,
                # matplotlib widths are in points
                linewidth=op.width * 72.0 / dpi,
                joinstyle="round",
                capstyle="round",
            )
        else:
            raise TypeError(f"Unsupported draw op {op!r}")

        ax.add_patch(patch)
        if clips:
            left, top, right, bottom = clips[-1]
            clip_patch = Polygon(
                [(left, top), (right, top), (right, bottom), (left, bottom)],
                closed=True,
                transform=ax.transData,
            )
            patch.set_clip_path(clip_patch)


def _build_figure(
    ops: Sequence[DrawOp],
    width: int,
    height: int,
    dpi: int,
    background: Optional[str],
):
    mpl = _ensure_mpl()
    Figure, FigureCanvasAgg = mpl[0], mpl[1]

    fig = Figure(figsize=(width / dpi, height / dpi), dpi=dpi)
    canvas = FigureCanvasAgg(fig)
    fig.patch.set_facecolor(background if background is not None else (0, 0, 0, 0))

    ax = fig.add_axes((0, 0, 1, 1))
    ax.set_xlim(0, width)
    ax.set_ylim(height, 0)
    ax.set_facecolor("none")
    ax.axis("off")

    _draw_ops(ax, ops, dpi, mpl)
    return fig, canvas


def rasterize(
    ops: Sequence[DrawOp],
    width: int,
    height: int,
    dpi: int = 100,
    background: Optional[str] = None,
) -> np.ndarray:
    """Paint *ops* onto a *width* x *height* pixel canvas.

    Returns an ``(height, width, 4)`` uint8 RGBA array.
    """
    _, canvas = _build_figure(ops, width, height, dpi, background)
    canvas.draw()
    return np.asarray(canvas.buffer_rgba()).copy()


def render_png(
    ops: Sequence[DrawOp],
    output_path: str | Path,
    width: int,
    height: int,
    dpi: int = 100,
    background: Optional[str] = None,
) -> Path:
    """Paint *ops* and save the result as a PNG."""
    fig, _ = _build_figure(ops, width, height, dpi, background)
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=dpi, facecolor=fig.get_facecolor())
    return output_path
