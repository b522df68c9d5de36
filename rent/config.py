"""Runtime configuration loader."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

from .models.config import ViewerConfig


def _require_file(path: Path, label: str) -> None:
    if not path.exists():
        raise FileNotFoundError(f"Missing {label}: {path}")


def load_config(config_path: Optional[Path] = None, **overrides) -> ViewerConfig:
    """Load viewer configuration; defaults apply when no file is given.

    Keyword overrides that are not None replace values from the file.
    """
    data = {}
    if config_path is not None:
        _require_file(config_path, "config")
        with open(config_path, "r", encoding="utf-8") as handle:
            data = json.load(handle)
    data.update({key: value for key, value in overrides.items() if value is not None})
    return ViewerConfig.model_validate(data)
