"""Shared plotting configuration (style, palette, font sizes)."""

from __future__ import annotations

from collections.abc import Generator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any

import matplotlib as mpl
import plotly.io as pio
import seaborn as sns


_SPINE_KEYS = ("axes.spines.left", "axes.spines.right", "axes.spines.top", "axes.spines.bottom")


@dataclass
class PlottingConfig:
    """Reusable plotting style that can be applied across figures."""

    style: str = "whitegrid"
    palette: str | list[str] = "tab10"
    font_scale: float = 1.0
    title_size: int = 14
    label_size: int = 12
    tick_size: int = 10
    figure_dpi: int = 100
    context: str = "notebook"
    despine: bool = False
    """Remove all four axis spines (ggplot-like minimal look)."""
    plotly_template: str = "plotly_white"
    seaborn_kwargs: dict[str, Any] = field(default_factory=dict)

    def rc(self) -> dict[str, Any]:
        """Return the matplotlib rcParams this configuration sets on top of the seaborn theme."""
        palette_colors = sns.color_palette(self.palette)
        params: dict[str, Any] = {
            "axes.titlesize": self.title_size,
            "axes.labelsize": self.label_size,
            "xtick.labelsize": self.tick_size,
            "ytick.labelsize": self.tick_size,
            "figure.dpi": self.figure_dpi,
            "axes.prop_cycle": mpl.cycler(color=palette_colors),
        }
        if self.despine:
            params.update(dict.fromkeys(_SPINE_KEYS, False))
        return params

    def _set_theme(self) -> None:
        sns.set_theme(
            style=self.style,
            palette=sns.color_palette(self.palette),
            context=self.context,
            font_scale=self.font_scale,
            **self.seaborn_kwargs,
        )
        mpl.rcParams.update(self.rc())

    def apply_global(self) -> None:
        """Apply plotting style globally (no automatic restore).

        This is intended for notebooks where a consistent global plotting
        style is set once at the top of the document.

        For temporary styling (with automatic restoration), use
        :meth:`apply` instead.
        """
        self._set_theme()
        pio.templates.default = self.plotly_template

    @contextmanager
    def apply(self) -> Generator[None]:
        """Apply style within a context, restoring previous rcParams afterwards.

        Figures and axes must be created inside the context to pick up the style.
        """
        prev_plotly_template = pio.templates.default
        with mpl.rc_context():
            self._set_theme()
            pio.templates.default = self.plotly_template
            try:
                yield
            finally:
                pio.templates.default = prev_plotly_template


# Default configuration used across plotting functions
DEFAULT_PLOT_CFG = PlottingConfig()

# White background, light grid, no spines and no tick marks
MINIMAL_PLOT_CFG = PlottingConfig(style="whitegrid", despine=True, plotly_template="plotly_white")


__all__ = ["DEFAULT_PLOT_CFG", "MINIMAL_PLOT_CFG", "PlottingConfig"]
