"""Configuration and logging setup for rating-star rows."""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, fields
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import jsonschema

from .geometry import DEFAULT_THICKNESS
from .models import StarStyle

LOGGER_NAME = "ratingstar"

_COLOR_PATTERN = "^#([0-9A-Fa-f]{6}|[0-9A-Fa-f]{8})$"

CONFIG_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "ratingstar config",
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "star_num": {"type": "integer", "minimum": 0},
        "rating": {"type": "number", "minimum": 0},
        "thickness": {"type": "number"},
        "corner_radius": {"type": "number", "minimum": 0},
        "stroke_width": {"type": "number", "minimum": 0},
        "star_margin": {"type": "number"},
        "foreground_color": {"type": "string", "pattern": _COLOR_PATTERN},
        "background_color": {"type": "string", "pattern": _COLOR_PATTERN},
        "stroke_color": {"type": "string", "pattern": _COLOR_PATTERN},
        "stroke_on_full": {"type": "boolean"},
        "stroke_on_half": {"type": "boolean"},
        "stroke_on_empty": {"type": "boolean"},
        "enable_select_rating": {"type": "boolean"},
    },
}


@dataclass
class RatingStarConfig:
    """Everything a rating row needs besides its content box.

    *thickness* is clamped when applied to geometry, so values outside
    ``[0.3, 0.9]`` are accepted here.
    """

    star_num: int = 5
    rating: float = 0.0
    thickness: float = DEFAULT_THICKNESS
    corner_radius: float = 4.0
    stroke_width: float = 2.0
    star_margin: float = 8.0
    foreground_color: str = "#ED4A4B"
    background_color: str = "#FFFFFF"
    stroke_color: str = "#ED4A4B"
    stroke_on_full: bool = False
    stroke_on_half: bool = True
    stroke_on_empty: bool = True
    enable_select_rating: bool = False

    def to_style(self) -> StarStyle:
        return StarStyle(
            fill_color_full=self.foreground_color,
            fill_color_empty=self.background_color,
            stroke_color=self.stroke_color,
            corner_radius=self.corner_radius,
            stroke_width=self.stroke_width,
            stroke_on_full=self.stroke_on_full,
            stroke_on_empty=self.stroke_on_empty,
            stroke_on_partial=self.stroke_on_half,
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RatingStarConfig":
        """Build a config from *data*; missing keys keep their defaults.

        Raises ``ValueError`` if *data* does not match :data:`CONFIG_SCHEMA`.
        """
        errors = validate_config(data)
        if errors:
            raise ValueError("Invalid rating star config:\n" + "\n".join(errors))
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})


def validate_config(payload: Dict[str, Any]) -> List[str]:
    """Validate *payload* against :data:`CONFIG_SCHEMA`.

    Returns a list of error messages (empty = valid).
    """
    validator = jsonschema.Draft7Validator(CONFIG_SCHEMA)
    errors: List[str] = []
    for error in sorted(validator.iter_errors(payload), key=lambda e: list(e.path)):
        where = ".".join(str(p) for p in error.path) or "<root>"
        errors.append(f"{where}: {error.message}")
    return errors


def setup_logging(
    verbose: bool = False,
    log_file: Optional[Union[str, Path]] = None,
) -> None:
    """Configure the ``ratingstar`` logger namespace.

    Adds a console handler and, if *log_file* is given, a rotating file
    handler that always captures DEBUG.  Child loggers such as
    ``ratingstar.layout`` inherit both.  Repeated calls are no-ops.
    """
    level = logging.DEBUG if verbose else logging.INFO

    root = logging.getLogger(LOGGER_NAME)
    root.setLevel(logging.DEBUG)

    if root.handlers:
        return

    log_format = "%(asctime)s %(name)s %(levelname)s %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(logging.Formatter(log_format, datefmt=date_format))
    root.addHandler(console)

    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=1024 * 1024,
            backupCount=3,
            encoding="utf-8",
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(log_format, datefmt=date_format))
        root.addHandler(file_handler)
