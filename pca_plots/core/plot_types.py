"""Core types for PCA plotting.

``PlotKind`` is derived from the coordinate matrix on every call; ``PlotStyle``
holds the cosmetic settings shared by both chart layouts.
"""

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Dict, Tuple

from omegaconf import DictConfig, OmegaConf


class PlotKind(Enum):
    """Which of the two chart layouts a matrix is drawn with."""

    VARIABLES = "variables"
    INDIVIDUALS = "individuals"

    @property
    def default_title(self) -> str:
        if self is PlotKind.VARIABLES:
            return "PCA: Variables (Correlation Circle)"
        return "PCA: Individuals"

    @property
    def default_basename(self) -> str:
        return f"pca_{self.value}"

    @property
    def label_prefix(self) -> str:
        return "X" if self is PlotKind.VARIABLES else "Ind"


@dataclass
class PlotStyle:
    """Cosmetic settings for both PCA chart layouts.

    Attributes:
        figsize: Figure size in inches
        dpi: Resolution used when saving to PNG
        circle_color: Unit circle line color
        circle_linewidth: Unit circle line width
        circle_resolution: Number of points on the unit circle path
        circle_limit: Fixed axis half-width of the correlation circle
        arrow_color: Loading arrow and label color
        arrow_linewidth: Loading arrow shaft width
        arrow_head_width: Arrow head width in data units
        label_scale: Arrow labels sit at ``label_scale`` times the tip
        variable_fontsize: Font size of arrow labels
        marker_color: Individuals marker color
        marker_size: Individuals marker size in points
        individual_label_color: Individuals label color
        individual_fontsize: Font size of individuals labels
        label_offset: Vertical offset of individuals labels in data units
        axis_padding: Margin added around the individuals data range
        reference_color: Color of the dashed lines through the origin
        reference_linewidth: Width of the dashed lines through the origin
    """

    figsize: Tuple[float, float] = (6.0, 6.0)
    dpi: int = 300

    # Correlation circle
    circle_color: str = "black"
    circle_linewidth: float = 2.0
    circle_resolution: int = 629
    circle_limit: float = 1.1
    arrow_color: str = "blue"
    arrow_linewidth: float = 2.0
    arrow_head_width: float = 0.03
    label_scale: float = 1.1
    variable_fontsize: float = 10.0

    # Individuals scatter
    marker_color: str = "blue"
    marker_size: float = 6.0
    individual_label_color: str = "red"
    individual_fontsize: float = 9.0
    label_offset: float = 0.15
    axis_padding: float = 0.5

    # Shared
    reference_color: str = "gray"
    reference_linewidth: float = 1.0

    @classmethod
    def from_cfg(cls, cfg: Any) -> "PlotStyle":
        """Create PlotStyle from a config mapping.

        Args:
            cfg: Dict or omegaconf DictConfig with any subset of the fields

        Returns:
            PlotStyle instance
        """
        if isinstance(cfg, DictConfig):
            cfg = OmegaConf.to_container(cfg, resolve=True)
        section: Dict[str, Any] = dict(cfg or {})

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(section) - known)
        if unknown:
            raise ValueError(f"Unknown plot style keys: {unknown}. Available: {sorted(known)}")

        if "figsize" in section:
            width, height = section["figsize"]
            section["figsize"] = (float(width), float(height))
        if "dpi" in section:
            section["dpi"] = int(section["dpi"])
        if "circle_resolution" in section:
            section["circle_resolution"] = int(section["circle_resolution"])
        return cls(**section)
