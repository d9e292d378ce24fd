"""ratingstar command-line interface."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Optional, Sequence

from .config import RatingStarConfig, setup_logging, validate_config
from .io import load_config, save_ops
from .layout import EXACTLY, UNSPECIFIED, MeasureSpec, RatingBar, measure

logger = logging.getLogger(__name__)


def _add_row_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--config", dest="config_path", help="JSON config file")
    parser.add_argument("--rating", type=float)
    parser.add_argument("--star-num", dest="star_num", type=int)
    parser.add_argument("--thickness", type=float)
    parser.add_argument("--width", type=int, default=200)
    parser.add_argument("--height", type=int, default=32)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Rating star CLI")
    parser.add_argument("-v", "--verbose", action="store_true")
    sub = parser.add_subparsers(dest="command", required=True)

    render = sub.add_parser("render", help="Render a row of stars to PNG")
    _add_row_args(render)
    render.add_argument("--out", dest="output_path", required=True)
    render.add_argument("--dpi", type=int, default=100)
    render.add_argument("--background", default=None)

    ops = sub.add_parser("ops", help="Write the row's draw ops as JSON")
    _add_row_args(ops)
    ops.add_argument("--out", dest="output_path", required=True)

    measure_cmd = sub.add_parser("measure", help="Print the preferred row size")
    measure_cmd.add_argument("--config", dest="config_path", help="JSON config file")
    measure_cmd.add_argument("--star-num", dest="star_num", type=int)
    measure_cmd.add_argument("--height", type=int, help="Exact height; default star height otherwise")

    validate = sub.add_parser("validate", help="Validate a config file")
    validate.add_argument("--in", dest="input_path", required=True)

    return parser


def _load_config(args) -> RatingStarConfig:
    config = load_config(args.config_path) if args.config_path else RatingStarConfig()
    if getattr(args, "star_num", None) is not None:
        config.star_num = args.star_num
    if getattr(args, "thickness", None) is not None:
        config.thickness = args.thickness
    if getattr(args, "rating", None) is not None:
        config.rating = args.rating
    return config


def _build_bar(args) -> RatingBar:
    bar = RatingBar(_load_config(args))
    bar.layout(args.width, args.height)
    logger.info("laid out %d of %d stars", bar.star_count, bar.config.star_num)
    return bar


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(verbose=args.verbose)

    try:
        if args.command == "render":
            from .visualize import render_png
            bar = _build_bar(args)
            render_png(
                bar.render(), args.output_path, args.width, args.height,
                dpi=args.dpi, background=args.background,
            )
            print(f"Saved {args.output_path}")

        elif args.command == "ops":
            bar = _build_bar(args)
            save_ops(bar.render(), args.output_path)
            print(f"Saved {args.output_path}")

        elif args.command == "measure":
            _cmd_measure(args)

        elif args.command == "validate":
            _cmd_validate(args)
    except ValueError as exc:
        print(exc)
        raise SystemExit(1)


def _cmd_measure(args) -> None:
    config = _load_config(args)
    height_spec = MeasureSpec(EXACTLY, args.height) if args.height else MeasureSpec(UNSPECIFIED)
    width, height = measure(MeasureSpec(UNSPECIFIED), height_spec, config.star_num, config.star_margin)
    print(f"{width} x {height}")


def _cmd_validate(args) -> None:
    data = json.loads(Path(args.input_path).read_text(encoding="utf-8"))
    errors = validate_config(data)
    if errors:
        for error in errors:
            print(error)
        raise SystemExit(1)
    print("OK")


if __name__ == "__main__":
    main()
