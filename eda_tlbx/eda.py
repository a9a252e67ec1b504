"""Functional entry points for discrete-feature EDA.

Both helpers accept a :class:`pandas.DataFrame` (or anything the DataFrame
constructor accepts for read-only use) and delegate to the analyzer and
plotting layers.
"""

import logging
from typing import Any

import matplotlib.pyplot as plt
import pandas as pd
from matplotlib.figure import Figure

from eda_tlbx.analysis.category_collapser import DEFAULT_BUCKET_LABEL, CategoryCollapser
from eda_tlbx.analysis.frequency_analyzer import DiscreteFrequencyAnalyzer
from eda_tlbx.data.views import DatasetView
from eda_tlbx.plotting.discrete_plots import plot_bar_discrete


logger = logging.getLogger(__name__)


def _as_frame(data: Any) -> pd.DataFrame:
    return data if isinstance(data, pd.DataFrame) else pd.DataFrame(data)


def bar_discrete(
    data: Any,
    drop_na: bool = True,
    max_categories: int = 50,
    order_bars: bool = True,
    figsize: tuple[float, float] | None = None,
    show: bool = False,
) -> list[Figure]:
    """Create frequency bar charts for each discrete feature.

    Discrete features with more than ``max_categories`` distinct values are not
    plotted; they are reported through logging at INFO level. More than nine
    qualifying features are spread over several 3x3 pages.

    Args:
        data: Input data, a DataFrame or anything :class:`pandas.DataFrame` accepts.
        drop_na: Remove missing values from each feature's counts.
        max_categories: Maximum categories allowed for each feature.
        order_bars: Order bars by frequency.
        figsize: Figure size per page.
        show: Call :func:`matplotlib.pyplot.show` after building the pages.

    Returns:
        One matplotlib Figure per page.

    Raises:
        ValueError: If ``data`` has no discrete features.

    Example:
        >>> import seaborn as sns
        >>> diamonds = sns.load_dataset("diamonds")
        >>> pages = bar_discrete(diamonds)
        >>> pages = bar_discrete(diamonds, max_categories=5)
    """
    view = DatasetView.from_frame(_as_frame(data))
    result = (
        DiscreteFrequencyAnalyzer(
            view,
            drop_na=drop_na,
            max_categories=max_categories,
            order_bars=order_bars,
        )
        .fit()
        .result()
    )
    figures = plot_bar_discrete(result, figsize=figsize)
    if show:
        plt.show()
    return figures


def collapse_category(
    data: Any,
    feature: str,
    threshold: float,
    measure: str | None = None,
    update: bool = False,
    bucket_label: str = DEFAULT_BUCKET_LABEL,
) -> pd.DataFrame | None:
    """Collapse sparse categories of a discrete feature.

    Labels are ranked by frequency (or by the sum of ``measure``) and the rarest
    labels whose combined share stays strictly below ``threshold`` are selected,
    e.g. with ``threshold=0.2`` the bottom categories holding less than 20% of
    the rows. Non-string values of ``feature`` are treated as string labels.

    Args:
        data: Input data. Must be a DataFrame when ``update`` is True.
        feature: Name of the discrete feature to be collapsed.
        threshold: Bottom share of the distribution to collapse, in ``[0, 1]``.
        measure: Numeric column summed per label instead of counting rows.
        update: Modify ``data`` in place instead of returning the selection.
        bucket_label: Label given to the collapsed categories when updating.

    Returns:
        With ``update=False`` a DataFrame of the collapsed labels with columns
        ``<feature>``, ``cnt``, ``pct``, ``cum_pct`` and ``tail_pct``. ``cum_pct``
        runs from the most frequent label of the whole distribution; the share
        of the collapsed labels is the first ``tail_pct`` (or the sum of ``pct``).
        Empty input gives an empty table. With ``update=True`` None.

    Raises:
        TypeError: If ``update`` is True and ``data`` is not a DataFrame.
        ValueError: If ``feature``/``measure`` are missing, ``threshold`` is out of range
            or ``feature`` is named like a distribution column (``cnt``, ``pct``, ...).
    """
    if update and not isinstance(data, pd.DataFrame):
        msg = f"Please convert your input to a pandas DataFrame to update in place (got {type(data).__name__})."
        raise TypeError(msg)

    frame = _as_frame(data)
    result = CategoryCollapser(frame, feature=feature, threshold=threshold, measure=measure).fit().result()

    if update:
        result.apply(frame, bucket_label=bucket_label)
        return None

    logger.debug(
        "%d of %d categories of '%s' fall below threshold %s",
        len(result.collapsed),
        len(result.distribution),
        feature,
        threshold,
    )
    return result.collapsed_table
