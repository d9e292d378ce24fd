from __future__ import annotations

import json
from pathlib import Path
from typing import List, Sequence, Union

from .config import RatingStarConfig
from .render import DrawOp, op_from_dict


PathLike = Union[str, Path]


def load_config(path: PathLike) -> RatingStarConfig:
    """Read a config file; raises ``ValueError`` if it fails validation."""
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    return RatingStarConfig.from_dict(data)


def save_config(config: RatingStarConfig, path: PathLike) -> None:
    Path(path).write_text(json.dumps(config.to_dict(), indent=2), encoding="utf-8")


def ops_to_json(ops: Sequence[DrawOp], indent: int | None = None) -> str:
    return json.dumps({"ops": [op.to_dict() for op in ops]}, indent=indent)


def save_ops(ops: Sequence[DrawOp], path: PathLike) -> None:
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(ops_to_json(ops, indent=2), encoding="utf-8")


def load_ops(path: PathLike) -> List[DrawOp]:
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    return [op_from_dict(item) for item in data["ops"]]
