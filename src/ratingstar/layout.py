"""Row layout, measurement and click-to-rate for a row of stars.

This is the glue around the geometry core: it decides how many stars fit
in a content box, creates one :class:`StarGeometry` per star, maps
pointer positions back to stars, and keeps the row's rating.
:class:`RatingBar` bundles all of it into one state object that a host
widget can own.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from .config import RatingStarConfig
from .geometry import StarGeometry, star_width_for_height
from .models import FillState, StarStyle
from .render import DrawOp, render_row

logger = logging.getLogger(__name__)

DEFAULT_STAR_HEIGHT = 32

# Extra horizontal advance between laid-out stars, absorbs rounding.
_ADVANCE_NUDGE = 0.5

EXACTLY = "exactly"
AT_MOST = "at_most"
UNSPECIFIED = "unspecified"

Padding = Tuple[float, float, float, float]


@dataclass
class RowLayout:
    stars: List[StarGeometry] = field(default_factory=list)
    star_width: float = 0.0
    star_height: float = 0.0


@dataclass(frozen=True)
class MeasureSpec:
    """Size constraint from a parent layout: *mode* is one of
    ``"exactly"``, ``"at_most"`` or ``"unspecified"``."""
    mode: str = UNSPECIFIED
    size: int = 0


def fit_star_count(
    content_width: float, star_width: float, margin: float, star_num: int
) -> int:
    """How many stars of *star_width* fit, *margin* apart, capped at *star_num*.

    Solves ``n * star_width + (n - 1) * margin <= content_width``.
    """
    if star_width + margin <= 0:
        return 0
    count = int((content_width + margin) / (star_width + margin))
    return max(0, min(count, star_num))


def layout_row(
    content_left: float,
    content_top: float,
    content_width: float,
    content_height: float,
    star_num: int,
    margin: float,
    thickness: float,
) -> RowLayout:
    """Create and place the stars of one row inside the content box.

    The star height is the smaller content dimension.  A non-positive
    height yields an empty row, so the geometry is never fitted to a
    degenerate box.
    """
    star_height = min(content_height, content_width)
    if star_height <= 0:
        return RowLayout()

    star_width = star_width_for_height(star_height)
    count = fit_star_count(content_width, star_width, margin, star_num)
    logger.debug(
        "drawing star count = %d, content width = %s, star width = %s, star height = %s",
        count, content_width, star_width, star_height,
    )

    stars: List[StarGeometry] = []
    left = content_left
    for _ in range(count):
        star = StarGeometry(thickness)
        star.fit_to_box(left, content_top, star_height)
        stars.append(star)
        left += star_width + _ADVANCE_NUDGE + margin
    return RowLayout(stars, star_width, star_height)


def measure_row(
    star_num: int,
    star_height: float,
    margin: float,
    padding_left: float = 0.0,
    padding_right: float = 0.0,
) -> int:
    """Preferred width of a row of *star_num* stars, rounded up."""
    width = padding_left + padding_right
    if star_num > 0 and star_height > 0:
        width += margin * (star_num - 1)
        width += star_width_for_height(star_height) * star_num
    return int(math.ceil(width))


def measure(
    width_spec: MeasureSpec,
    height_spec: MeasureSpec,
    star_num: int,
    margin: float,
    padding: Padding = (0.0, 0.0, 0.0, 0.0),
) -> Tuple[int, int]:
    """Resolve the row's (width, height) against the parent's constraints."""
    pad_left, pad_top, pad_right, pad_bottom = padding

    if height_spec.mode == EXACTLY:
        height = height_spec.size
    else:
        height = DEFAULT_STAR_HEIGHT
        if height_spec.mode == AT_MOST:
            height = min(height, height_spec.size)

    star_height = height - pad_bottom - pad_top

    if width_spec.mode == EXACTLY:
        width = width_spec.size
    else:
        width = measure_row(star_num, star_height, margin, pad_left, pad_right)
        if width_spec.mode == AT_MOST:
            width = min(width_spec.size, width)

    logger.debug(
        "measured width = %s, height = %s, star height = %s", width, height, star_height
    )
    return int(width), int(height)


def star_index_at(stars: Sequence[StarGeometry], x: float, y: float) -> Optional[int]:
    """Index of the star whose bounding box contains (x, y), else ``None``."""
    for i, star in enumerate(stars):
        if star.bounding_box().contains(x, y):
            return i
    return None


def rating_after_click(rating: float, star_index: int) -> int:
    """Rating after clicking *star_index*: fill up to it, or clear if already there."""
    clicked = star_index + 1
    if rating == clicked:
        return 0
    return clicked


class RatingBar:
    """State of one rating row: config, laid-out stars and current rating.

    The stars are rebuilt wholesale whenever the count or content box
    changes; a thickness change mutates them in place.
    """

    def __init__(self, config: Optional[RatingStarConfig] = None) -> None:
        self.config = config or RatingStarConfig()
        self.stars: List[StarGeometry] = []
        self.star_width = 0.0
        self.star_height = 0.0
        self._width = 0.0
        self._height = 0.0
        self._padding: Padding = (0.0, 0.0, 0.0, 0.0)
        self._rating = 0.0
        self.set_rating(self.config.rating)

    @property
    def rating(self) -> float:
        return self._rating

    @property
    def star_count(self) -> int:
        """Number of stars actually laid out (may be below ``star_num``)."""
        return len(self.stars)

    @property
    def style(self) -> StarStyle:
        return self.config.to_style()

    def layout(self, width: float, height: float, padding: Padding = (0.0, 0.0, 0.0, 0.0)) -> None:
        self._width = width
        self._height = height
        self._padding = padding
        self._calc_stars()

    def _calc_stars(self) -> None:
        pad_left, pad_top, pad_right, pad_bottom = self._padding
        row = layout_row(
            pad_left,
            pad_top,
            self._width - pad_left - pad_right,
            self._height - pad_top - pad_bottom,
            self.config.star_num,
            self.config.star_margin,
            self.config.thickness,
        )
        self.stars = row.stars
        self.star_width = row.star_width
        self.star_height = row.star_height

    def set_rating(self, rating: float) -> bool:
        """Set the rating, clamped to ``[0, star_num]``; return whether it changed."""
        rating = float(min(max(rating, 0.0), self.config.star_num))
        if rating == self._rating:
            return False
        self._rating = rating
        self.config.rating = rating
        return True

    def set_thickness(self, factor: float) -> None:
        self.config.thickness = factor
        for star in self.stars:
            star.set_thickness(factor)

    def set_star_num(self, count: int) -> None:
        if count == self.config.star_num:
            return
        self.config.star_num = count
        self._calc_stars()
        if self._rating > count:
            self.set_rating(count)

    def set_star_margin(self, margin: float) -> None:
        self.config.star_margin = margin
        self._calc_stars()

    def set_padding(self, padding: Padding) -> None:
        """Apply new padding; stars are moved when the content size is unchanged."""
        old_left, old_top, old_right, old_bottom = self._padding
        left, top, right, bottom = padding
        self._padding = padding
        if left + right != old_left + old_right or top + bottom != old_top + old_bottom:
            self._calc_stars()
            return
        for star in self.stars:
            box = star.bounding_box()
            star.move_to(box.left + left - old_left, box.top + top - old_top)

    def fill_states(self) -> List[FillState]:
        return [FillState.for_star(self._rating, i) for i in range(len(self.stars))]

    def render(self) -> List[DrawOp]:
        if not self.stars:
            return []
        return render_row(self.stars, self._rating, self.style)

    def click(self, x: float, y: float) -> Optional[float]:
        """Rate by clicking at (x, y).

        Returns the new rating, or ``None`` when rating by click is
        disabled or the point misses every star.
        """
        if not self.config.enable_select_rating:
            return None
        index = star_index_at(self.stars, x, y)
        if index is None:
            return None
        self.set_rating(rating_after_click(self._rating, index))
        return self._rating
