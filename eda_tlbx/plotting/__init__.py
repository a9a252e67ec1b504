"""Plotting utilities for data visualization."""

from .discrete_plots import (
    plot_bar_discrete,
    plot_collapse_distribution,
    plot_frequency_plotly,
)


__all__ = [
    "plot_bar_discrete",
    "plot_collapse_distribution",
    "plot_frequency_plotly",
]
