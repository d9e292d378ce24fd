"""ratingstar: geometry and draw ops for rows of rating stars.

Public API is organised into layers:

- **Core** - value models, star geometry, vector paths
- **Rendering** - draw ops for empty / full / partial stars
- **Layout** - row layout, measurement, click-to-rate state
- **Config & I/O** - config dataclass, validation, JSON files
- **Rasterizing** - matplotlib paint surface (``ratingstar.visualize``)
"""

# ── Core ────────────────────────────────────────────────────────────
from .models import BoundingBox, FillState, StarStyle, Vertex
from .geometry import (
    ASPECT_RATIO,
    DEFAULT_THICKNESS,
    MAX_THICKNESS,
    MIN_THICKNESS,
    StarGeometry,
    clamp_thickness,
    outer_rect_aspect_ratio,
    star_width_for_height,
)
from .paths import PathCommand, StarPath, round_corners

# ── Rendering ───────────────────────────────────────────────────────
from .render import (
    DrawOp,
    FillPath,
    PopClip,
    PushClip,
    StrokePath,
    divider_x,
    empty_star_ops,
    full_star_ops,
    partial_star_ops,
    render_row,
    render_star,
    solid_star_ops,
    stroke_star_ops,
)

# ── Layout ──────────────────────────────────────────────────────────
from .layout import (
    MeasureSpec,
    RatingBar,
    RowLayout,
    fit_star_count,
    layout_row,
    measure,
    measure_row,
    rating_after_click,
    star_index_at,
)

# ── Config & I/O ────────────────────────────────────────────────────
from .config import CONFIG_SCHEMA, RatingStarConfig, setup_logging, validate_config
from .io import load_config, load_ops, save_config, save_ops

__all__ = [
    # Core
    "BoundingBox",
    "FillState",
    "StarStyle",
    "Vertex",
    "ASPECT_RATIO",
    "DEFAULT_THICKNESS",
    "MAX_THICKNESS",
    "MIN_THICKNESS",
    "StarGeometry",
    "clamp_thickness",
    "outer_rect_aspect_ratio",
    "star_width_for_height",
    "PathCommand",
    "StarPath",
    "round_corners",
    # Rendering
    "DrawOp",
    "FillPath",
    "PopClip",
    "PushClip",
    "StrokePath",
    "divider_x",
    "empty_star_ops",
    "full_star_ops",
    "partial_star_ops",
    "render_row",
    "render_star",
    "solid_star_ops",
    "stroke_star_ops",
    # Layout
    "MeasureSpec",
    "RatingBar",
    "RowLayout",
    "fit_star_count",
    "layout_row",
    "measure",
    "measure_row",
    "rating_after_click",
    "star_index_at",
    # Config & I/O
    "CONFIG_SCHEMA",
    "RatingStarConfig",
    "setup_logging",
    "validate_config",
    "load_config",
    "load_ops",
    "save_config",
    "save_ops",
]
