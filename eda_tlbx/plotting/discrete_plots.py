"""Frequency bar charts for discrete features."""

import logging
import math

import matplotlib.pyplot as plt
import pandas as pd
import plotly.graph_objects as go
import seaborn as sns
from matplotlib.axes import Axes
from matplotlib.figure import Figure
from matplotlib.ticker import FuncFormatter

from eda_tlbx.analysis.category_collapser import CollapseResult
from eda_tlbx.analysis.frequency_analyzer import FrequencyResult
from eda_tlbx.utils.plotting_config import DEFAULT_PLOT_CFG, PlottingConfig


logger = logging.getLogger(__name__)

GRID_ROWS = 3
GRID_COLS = 3
NA_LABEL = "NA"

_thousands = FuncFormatter(lambda x, _pos: f"{x:,.0f}")


def _display_labels(labels: pd.Series) -> list[str]:
    """Render labels as strings, showing missing values as ``NA``."""
    return labels.astype(str).where(labels.notna(), NA_LABEL).tolist()


def _grid_shape(n_panels: int, n_pages: int) -> tuple[int, int]:
    """Fixed 3x3 grid when paging, otherwise the smallest near-square grid."""
    if n_pages > 1:
        return GRID_ROWS, GRID_COLS
    ncols = math.ceil(math.sqrt(n_panels))
    nrows = math.ceil(n_panels / ncols)
    return nrows, ncols


def _bar_panel(
    ax: Axes,
    table: pd.DataFrame,
    label: str,
    color: str,
    alpha: float,
    edgecolor: str,
) -> None:
    """Draw one horizontal frequency chart; the first table row is the bottom bar."""
    positions = range(len(table))
    ax.barh(positions, table.iloc[:, 1], color=color, alpha=alpha, edgecolor=edgecolor)
    ax.set_yticks(list(positions))
    ax.set_yticklabels(_display_labels(table.iloc[:, 0]))
    ax.xaxis.set_major_formatter(_thousands)
    ax.set_xlabel("Frequency")
    ax.set_ylabel(label)


def plot_bar_discrete(
    result: FrequencyResult,
    figsize: tuple[float, float] | None = None,
    color: str = "grey",
    alpha: float = 0.4,
    edgecolor: str = "black",
    config: PlottingConfig | None = None,
) -> list[Figure]:
    """Plot frequency bar charts, one figure per page of ``result.pages``.

    With more than one page every figure is a 3x3 grid and unused panels are
    removed; a single page uses the smallest near-square grid that fits.

    Args:
        result: FrequencyResult from DiscreteFrequencyAnalyzer.
        figsize: Figure size per page; defaults to 5x4 inches per panel.
        color: Bar fill color.
        alpha: Bar fill transparency.
        edgecolor: Bar outline color.
        config: Plot style applied while drawing (defaults to ``DEFAULT_PLOT_CFG``).

    Returns:
        List of matplotlib Figures (empty if no column qualified).
    """
    config = config or DEFAULT_PLOT_CFG
    figures: list[Figure] = []

    with config.apply():
        for page_no, page in enumerate(result.pages, start=1):
            nrows, ncols = _grid_shape(len(page), result.n_pages)
            fig, axes = plt.subplots(
                nrows,
                ncols,
                figsize=figsize or (5 * ncols, 4 * nrows),
                squeeze=False,
            )
            flat_axes = axes.ravel()
            for ax, column in zip(flat_axes, page):
                _bar_panel(
                    ax,
                    result.tables[column],
                    result.pretty_by_col.get(column, column),
                    color=color,
                    alpha=alpha,
                    edgecolor=edgecolor,
                )
            for ax in flat_axes[len(page) :]:
                ax.remove()

            if result.n_pages > 1:
                fig.suptitle(f"Page {page_no} of {result.n_pages}")
            fig.tight_layout()
            figures.append(fig)

    logger.debug("Rendered %d page(s) of bar charts", len(figures))
    return figures


def plot_frequency_plotly(
    result: FrequencyResult,
    column: str,
    *,
    color: str = "grey",
    height: int = 500,
    width: int = 700,
) -> go.Figure:
    """Interactive horizontal bar chart for a single discrete column.

    Implemented with Plotly's [:class:`plotly.graph_objects.Bar`](https://plotly.com/python/bar-charts/).
    """
    if column not in result.tables:
        msg = f"Column '{column}' has no frequency table (ignored columns: {list(result.ignored)})."
        raise ValueError(msg)

    table = result.tables[column]
    label = result.pretty_by_col.get(column, column)

    fig = go.Figure(
        go.Bar(
            x=table.iloc[:, 1],
            y=_display_labels(table.iloc[:, 0]),
            orientation="h",
            marker=dict(color=color, line=dict(color="black", width=1)),
            opacity=0.6,
            hovertemplate=f"{label}: %{{y}}<br>Frequency: %{{x:,}}<extra></extra>",
        ),
    )
    fig.update_yaxes(title=label, type="category")
    fig.update_xaxes(title="Frequency", tickformat=",")
    fig.update_layout(
        title=f"{label} Frequencies",
        width=width,
        height=height,
        template="plotly_white",
    )
    return fig


def plot_collapse_distribution(
    result: CollapseResult,
    figsize: tuple[int, int] = (10, 6),
) -> Figure:
    """Plot per-label shares, highlighting labels selected for collapsing.

    The running cumulative share is drawn as a line and the ``1 - threshold``
    boundary as a dashed horizontal line.
    """
    dist = result.distribution
    plot_df = pd.DataFrame(
        {
            "label": _display_labels(dist[result.feature]),
            "pct": dist["pct"],
            "status": (dist["tail_pct"] < result.threshold).map({True: "collapsed", False: "kept"}),
        },
    )

    fig, ax = plt.subplots(figsize=figsize)
    sns.barplot(
        data=plot_df,
        x="label",
        y="pct",
        hue="status",
        hue_order=["kept", "collapsed"],
        palette={"kept": "tab:blue", "collapsed": "tab:red"},
        dodge=False,
        ax=ax,
    )
    ax.plot(range(len(plot_df)), dist["cum_pct"], color="black", marker="o", label="Cumulative share")
    ax.axhline(1 - result.threshold, color="tab:orange", linewidth=2, linestyle="--")

    ax.set_xticklabels(ax.get_xticklabels(), rotation=45, ha="right", rotation_mode="anchor")
    ax.set_xlabel(result.feature)
    ax.set_ylabel(f"Share of {result.measure}" if result.measure else "Share of rows")
    ax.set_ylim(0, 1.05)
    ax.set_title(f"Collapsing '{result.feature}' at threshold {result.threshold:g}")
    ax.legend()
    fig.tight_layout()

    return fig
