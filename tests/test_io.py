"""Tests for JSON config and draw-op files."""

import json

import pytest

from ratingstar.config import RatingStarConfig
from ratingstar.io import load_config, load_ops, ops_to_json, save_config, save_ops
from ratingstar.layout import RatingBar


def test_config_file_round_trip(tmp_path):
    config = RatingStarConfig(star_num=4, rating=1.25, stroke_on_full=True)
    path = tmp_path / "config.json"
    save_config(config, path)
    assert load_config(path) == config


def test_load_invalid_config(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"corner_radius": -2}), encoding="utf-8")
    with pytest.raises(ValueError, match="corner_radius"):
        load_config(path)


def test_ops_file_round_trip(tmp_path):
    bar = RatingBar(RatingStarConfig(rating=2.5))
    bar.layout(300, 32)
    ops = bar.render()
    path = tmp_path / "frames" / "row.json"
    save_ops(ops, path)
    assert load_ops(path) == ops


def test_ops_json_shape():
    bar = RatingBar(RatingStarConfig(star_num=1, rating=0.5))
    bar.layout(100, 20)
    data = json.loads(ops_to_json(bar.render()))
    kinds = [op["kind"] for op in data["ops"]]
    assert kinds[6] == "push_clip"
    assert kinds[13] == "pop_clip"
    assert data["ops"][6]["rect"][2] == pytest.approx(bar.stars[0].bounding_box().left + bar.star_width / 2)
