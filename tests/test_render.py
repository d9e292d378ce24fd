"""Tests for the draw ops emitted for each fill state."""

from dataclasses import replace

import pytest

from ratingstar.geometry import StarGeometry
from ratingstar.layout import layout_row
from ratingstar.models import FillState, StarStyle
from ratingstar.render import (
    CENTER_PATCH_OFFSETS,
    FillPath,
    PopClip,
    PushClip,
    StrokePath,
    center_patch_path,
    divider_x,
    op_from_dict,
    partial_star_ops,
    render_row,
    render_star,
    solid_star_ops,
    stroke_star_ops,
    tip_paths,
)


@pytest.fixture
def star():
    s = StarGeometry()
    s.fit_to_box(10.0, 5.0, 40.0)
    return s


@pytest.fixture
def style():
    return StarStyle(
        fill_color_full="#ff0000",
        fill_color_empty="#ffffff",
        stroke_color="#000000",
        corner_radius=3.0,
        stroke_width=1.5,
        stroke_on_full=False,
        stroke_on_empty=True,
        stroke_on_partial=True,
    )


def _kinds(ops):
    return [op.kind for op in ops]


class TestSolid:
    def test_five_tips_and_patch(self, star):
        ops = solid_star_ops(star, "#123456", 2.0)
        assert len(ops) == 6
        assert all(isinstance(op, FillPath) for op in ops)
        assert {op.color for op in ops} == {"#123456"}
        assert [op.path.is_closed() for op in ops] == [False] * 5 + [True]

    def test_tips_walk_from_inner_vertex(self, star):
        paths = tip_paths(star, 0.0)
        assert len(paths) == 5
        for n, path in enumerate(paths):
            i = 1 + 2 * n
            expected = [star.vertex(i), star.vertex(i + 1), star.vertex(i + 2)]
            assert path.end_points() == [(v.x, v.y) for v in expected]

    def test_tips_are_rounded(self, star):
        for path in tip_paths(star, 3.0):
            assert [cmd.op for cmd in path.commands] == ["M", "L", "Q", "L"]

    def test_center_patch_offsets(self, star):
        path = center_patch_path(star)
        points = path.end_points()
        assert len(points) == 5
        for (x, y), v, (dx, dy) in zip(points, star.inner_vertices(), CENTER_PATCH_OFFSETS):
            assert (x, y) == pytest.approx((v.x + dx, v.y + dy))
        assert all(cmd.op != "Q" for cmd in path.commands)

    def test_patch_covers_inner_pentagon(self, star):
        points = center_patch_path(star).end_points()
        cx = sum(v.x for v in star.inner_vertices()) / 5
        cy = sum(v.y for v in star.inner_vertices()) / 5
        for (x, y), v in zip(points, star.inner_vertices()):
            assert (x - cx) ** 2 + (y - cy) ** 2 >= (v.x - cx) ** 2 + (v.y - cy) ** 2


class TestStroke:
    def test_outline_only(self, star, style):
        ops = stroke_star_ops(star, style)
        assert len(ops) == 5
        assert all(isinstance(op, StrokePath) for op in ops)
        assert all(op.color == "#000000" and op.width == 1.5 for op in ops)
        assert not any(op.path.is_closed() for op in ops)


class TestFillStates:
    def test_full_without_stroke(self, star, style):
        ops = render_star(star, FillState.full(), style)
        assert _kinds(ops) == ["fill"] * 6
        assert {op.color for op in ops} == {"#ff0000"}

    def test_full_with_stroke(self, star, style):
        style = replace(style, stroke_on_full=True)
        ops = render_star(star, FillState.full(), style)
        assert _kinds(ops) == ["fill"] * 6 + ["stroke"] * 5

    def test_empty_with_stroke(self, star, style):
        ops = render_star(star, FillState.empty(), style)
        assert _kinds(ops) == ["fill"] * 6 + ["stroke"] * 5
        assert {op.color for op in ops[:6]} == {"#ffffff"}

    def test_partial_layers(self, star, style):
        ops = render_star(star, FillState.partial(0.5), style)
        assert _kinds(ops) == (
            ["fill"] * 6 + ["push_clip"] + ["fill"] * 6 + ["pop_clip"] + ["stroke"] * 5
        )
        assert {op.color for op in ops[:6]} == {"#ffffff"}
        assert {op.color for op in ops[7:13]} == {"#ff0000"}

    def test_partial_divider_at_midpoint(self, star, style):
        box = star.bounding_box()
        clip = next(op for op in partial_star_ops(star, 0.5, style) if isinstance(op, PushClip))
        assert clip.left == box.left
        assert clip.top == box.top
        assert clip.bottom == box.bottom
        assert clip.right == pytest.approx(box.left + box.width / 2)
        assert divider_x(star, 0.5) == pytest.approx((box.left + box.right) / 2)

    def test_partial_without_stroke(self, star, style):
        style = replace(style, stroke_on_partial=False)
        ops = partial_star_ops(star, 0.25, style)
        assert isinstance(ops[-1], PopClip)

    @pytest.mark.parametrize("fraction", [0.0, -0.4])
    def test_partial_collapses_to_empty(self, star, style, fraction):
        assert partial_star_ops(star, fraction, style) == render_star(star, FillState.empty(), style)

    @pytest.mark.parametrize("fraction", [1.0, 1.7])
    def test_partial_collapses_to_full(self, star, style, fraction):
        assert partial_star_ops(star, fraction, style) == render_star(star, FillState.full(), style)


class TestFillStateForStar:
    @pytest.mark.parametrize("rating, index, kind", [
        (0.0, 0, "empty"),
        (1.0, 0, "full"),
        (1.0, 1, "empty"),
        (1.5, 1, "partial"),
        (5.0, 4, "full"),
        (2.0, 4, "empty"),
    ])
    def test_kind(self, rating, index, kind):
        assert FillState.for_star(rating, index).kind == kind

    def test_fraction(self):
        assert FillState.for_star(3.25, 3).fraction == pytest.approx(0.25)


class TestRow:
    def test_rating_one_and_a_half(self, style):
        row = layout_row(0.0, 0.0, 400.0, 32.0, 5, 8.0, 0.5)
        assert len(row.stars) == 5
        states = [FillState.for_star(1.5, i) for i in range(5)]
        assert [s.kind for s in states] == ["full", "partial", "empty", "empty", "empty"]
        assert states[1].fraction == pytest.approx(0.5)

        ops = render_row(row.stars, 1.5, style)
        clips = [op for op in ops if isinstance(op, PushClip)]
        assert len(clips) == 1
        box = row.stars[1].bounding_box()
        assert clips[0].right == pytest.approx(box.left + 0.5 * box.width)

        expected = []
        for star, state in zip(row.stars, states):
            expected += render_star(star, state, style)
        assert ops == expected

    def test_empty_row(self, style):
        assert render_row([], 3.0, style) == []


class TestOpDicts:
    def test_round_trip(self, star, style):
        ops = partial_star_ops(star, 0.3, style)
        assert [op_from_dict(op.to_dict()) for op in ops] == ops

    def test_unknown_kind(self):
        with pytest.raises(ValueError):
            op_from_dict({"kind": "blur"})
