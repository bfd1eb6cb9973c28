"""Loading plot styles from configuration files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Union

import yaml
from omegaconf import DictConfig

from pca_plots.core.plot_types import PlotStyle

StyleSpec = Union[None, PlotStyle, Dict[str, Any], DictConfig, str, Path]


def _load_config(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        if path.suffix in {".yaml", ".yml"}:
            return yaml.safe_load(f) or {}
        if path.suffix == ".json":
            return json.load(f)
        raise ValueError(f"Unsupported config format: {path.suffix}")


def load_style(path: Union[str, Path]) -> PlotStyle:
    """Read a PlotStyle from a YAML or JSON file.

    The file may hold the style keys at top level or under a ``style`` section.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Style file not found: {path}")
    cfg = _load_config(path)
    if not isinstance(cfg, dict):
        raise ValueError(f"Style file must contain a mapping, got {type(cfg).__name__}: {path}")
    return PlotStyle.from_cfg(cfg.get("style", cfg))


def resolve_style(style: StyleSpec = None) -> PlotStyle:
    """Turn any accepted style specification into a PlotStyle."""
    if style is None:
        return PlotStyle()
    if isinstance(style, PlotStyle):
        return style
    if isinstance(style, (str, Path)):
        return load_style(style)
    if isinstance(style, (dict, DictConfig)):
        return PlotStyle.from_cfg(style)
    raise TypeError(f"Unsupported style specification: {type(style).__name__}")
