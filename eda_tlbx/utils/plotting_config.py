"""Shared plotting configuration (style, palette, font sizes)."""

from __future__ import annotations

from collections.abc import Generator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any

import matplotlib as mpl
import plotly.io as pio
import seaborn as sns


@dataclass
class PlottingConfig:
    """Reusable plotting style for the frequency and collapse charts.

    Defaults are tuned for pages of nine small bar charts: compact tick labels
    and a page title slightly larger than panel labels.
    """

    style: str = "whitegrid"
    palette: str | list[str] = "tab10"
    font_family: str = "DejaVu Sans"
    font_scale: float = 1.0
    title_size: int = 12
    page_title_size: int = 14
    label_size: int = 11
    tick_size: int = 9
    figure_dpi: int = 100
    context: str = "notebook"
    plotly_template: str = "plotly_white"
    seaborn_kwargs: dict[str, Any] = field(default_factory=dict)

    def rc_params(self) -> dict[str, Any]:
        """Matplotlib rcParams implied by this configuration."""
        return {
            "axes.titlesize": self.title_size,
            "axes.labelsize": self.label_size,
            "xtick.labelsize": self.tick_size,
            "ytick.labelsize": self.tick_size,
            "figure.dpi": self.figure_dpi,
            "figure.titlesize": self.page_title_size,
            "axes.prop_cycle": mpl.cycler(color=sns.color_palette(self.palette)),
            "font.family": [self.font_family],
        }

    def _set_theme(self) -> None:
        sns.set_theme(
            style=self.style,
            palette=sns.color_palette(self.palette),
            context=self.context,
            font_scale=self.font_scale,
            **self.seaborn_kwargs,
        )
        mpl.rcParams.update(self.rc_params())
        pio.templates.default = self.plotly_template

    def apply_global(self) -> None:
        """Apply plotting style globally (no automatic restore).

        Intended for notebooks where one style is set once at the top.
        For temporary styling use :meth:`apply` instead.
        """
        self._set_theme()

    @contextmanager
    def apply(self) -> Generator[None]:
        """Apply style within a context, restoring previous rcParams afterwards."""
        prev_plotly_template = pio.templates.default
        with mpl.rc_context():
            self._set_theme()
            try:
                yield
            finally:
                pio.templates.default = prev_plotly_template


# Default configuration used across plotting functions
DEFAULT_PLOT_CFG = PlottingConfig()


__all__ = ["DEFAULT_PLOT_CFG", "PlottingConfig"]
