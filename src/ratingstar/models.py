from __future__ import annotations

from dataclasses import dataclass

RING_SIZE = 10

FILL_EMPTY = "empty"
FILL_FULL = "full"
FILL_PARTIAL = "partial"


@dataclass(frozen=True)
class Vertex:
    index: int
    x: float
    y: float

    def is_outer(self) -> bool:
        return self.index % 2 == 0

    @property
    def next_index(self) -> int:
        return (self.index + 1) % RING_SIZE


@dataclass(frozen=True)
class BoundingBox:
    left: float
    top: float
    right: float
    bottom: float

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.left, self.top, self.right, self.bottom)

    def contains(self, x: float, y: float) -> bool:
        return self.left <= x <= self.right and self.top <= y <= self.bottom


@dataclass(frozen=True)
class FillState:
    """How much of one star is painted in the foreground colour.

    *kind* is ``"empty"``, ``"full"`` or ``"partial"``; *fraction* is only
    meaningful for partial fills.
    """

    kind: str
    fraction: float = 0.0

    @classmethod
    def empty(cls) -> "FillState":
        return cls(FILL_EMPTY, 0.0)

    @classmethod
    def full(cls) -> "FillState":
        return cls(FILL_FULL, 1.0)

    @classmethod
    def partial(cls, fraction: float) -> "FillState":
        return cls(FILL_PARTIAL, float(fraction))

    @classmethod
    def for_star(cls, rating: float, star_index: int) -> "FillState":
        """Fill state of the star at *star_index* for a row showing *rating*."""
        if rating >= star_index + 1:
            return cls.full()
        decimal = rating - star_index
        if decimal > 0:
            return cls.partial(decimal)
        return cls.empty()


@dataclass(frozen=True)
class StarStyle:
    """Colours, corner rounding and stroke toggles for painting stars.

    Colours are any matplotlib colour string, typically ``#RRGGBB`` or
    ``#RRGGBBAA``.
    """

    fill_color_full: str = "#ED4A4B"
    fill_color_empty: str = "#FFFFFF"
    stroke_color: str = "#ED4A4B"
    corner_radius: float = 4.0
    stroke_width: float = 2.0
    stroke_on_full: bool = False
    stroke_on_empty: bool = True
    stroke_on_partial: bool = True
