"""Frequency tables for discrete features."""

import logging
import math
from dataclasses import dataclass
from typing import Self

import pandas as pd

from eda_tlbx.data.views import DatasetView

from .base_analyser import BaseAnalyser


logger = logging.getLogger(__name__)

PAGE_SIZE = 9
"""Number of bar charts per page (3x3 grid)."""

FREQUENCY_COL = "frequency"


@dataclass(frozen=True)
class FrequencyResult:
    """Frequency tables of discrete features, grouped into plotting pages.

    Attributes:
        tables: Mapping from column name to a DataFrame with columns ``<column>``
            (the label, position 0) and ``frequency`` (the count, position 1); row
            order is the bar order.
        cardinality: Number of distinct values (missing included) for every
            discrete column in the view.
        ignored: Columns skipped because their cardinality exceeds ``max_categories``.
        pages: Column names per page, at most ``PAGE_SIZE`` per page.
        pretty_by_col: Mapping from column names to presentation labels.
        max_categories: Category cap used during fitting.
    """

    tables: dict[str, pd.DataFrame]
    cardinality: dict[str, int]
    ignored: dict[str, int]
    pages: list[list[str]]
    pretty_by_col: dict[str, str]
    max_categories: int

    @property
    def columns(self) -> list[str]:
        """Columns that will be plotted, in page order."""
        return [col for page in self.pages for col in page]

    @property
    def n_pages(self) -> int:
        return len(self.pages)

    # ------------------------------------------------------------------ plotting shortcuts
    def plot(self, **kwargs: object):
        """Plot one bar-chart page per entry of ``pages``."""
        from eda_tlbx.plotting.discrete_plots import plot_bar_discrete  # noqa: PLC0415

        return plot_bar_discrete(self, **kwargs)

    def plot_interactive(self, column: str, **kwargs: object):
        """Plot a single frequency table with plotly."""
        from eda_tlbx.plotting.discrete_plots import plot_frequency_plotly  # noqa: PLC0415

        return plot_frequency_plotly(self, column, **kwargs)


class DiscreteFrequencyAnalyzer(BaseAnalyser):
    """Count label frequencies for every discrete feature of a dataset view.

    Columns with more than ``max_categories`` distinct values are left out and
    reported through the module logger at INFO level.

    Example:
        >>> from eda_tlbx.data import TabularDataset
        >>> ds = TabularDataset.from_csv("diamonds.csv")
        >>> res = ds.make_frequency_analyzer(max_categories=5).fit().result()
        >>> res.ignored
        {'clarity': 8, 'color': 7}
    """

    def __init__(
        self,
        view: DatasetView,
        drop_na: bool = True,
        max_categories: int = 50,
        order_bars: bool = True,
        page_size: int = PAGE_SIZE,
    ) -> None:
        """Initialize the frequency analyzer.

        Args:
            view: Dataset view whose discrete columns are analyzed
            drop_na: Remove the missing-value bar from each table
            max_categories: Maximum number of distinct values for a column to be kept
            order_bars: Order rows by ascending frequency (largest bar on top when drawn horizontally)
            page_size: Number of columns per plotting page
        """
        if max_categories < 1:
            raise ValueError(f"max_categories must be positive, got {max_categories}.")
        if page_size < 1:
            raise ValueError(f"page_size must be positive, got {page_size}.")

        self._view = view
        self.drop_na = drop_na
        self.max_categories = max_categories
        self.order_bars = order_bars
        self.page_size = page_size
        self._result: FrequencyResult | None = None

    def get_cardinality(self) -> pd.Series:
        """Return the number of distinct values per discrete column (missing counts as a value)."""
        if not self._view.discrete_cols:
            raise ValueError("No discrete features found in data.")
        return self._view.discrete.nunique(dropna=False)

    def get_frequency_table(self, column: str) -> pd.DataFrame:
        """Count rows per label of ``column`` via :meth:`pandas.Series.value_counts`."""
        counts = self._view.df[column].value_counts(dropna=False, sort=False)
        # unused categorical levels
        counts = counts[counts > 0]
        if self.drop_na:
            counts = counts[counts.index.notna()]
        if self.order_bars:
            counts = counts.sort_values(ascending=True, kind="stable")

        table = pd.DataFrame({"label": counts.index, "count": counts.to_numpy()})
        # a column named "frequency" yields two columns of that name; read by position
        table.columns = [column, FREQUENCY_COL]
        return table

    def fit(self) -> Self:
        """Compute frequency tables for all discrete columns within the category cap."""
        cardinality = self.get_cardinality()

        ignored = cardinality[cardinality > self.max_categories]
        if not ignored.empty:
            details = "".join(f"{col}: {n} categories\n" for col, n in ignored.items())
            logger.info(
                "%d columns ignored with more than %d categories.\n%s",
                len(ignored),
                self.max_categories,
                details,
            )

        kept = [col for col in self._view.discrete_cols if col not in ignored.index]
        tables = {col: self.get_frequency_table(col) for col in kept}

        n_pages = math.ceil(len(kept) / self.page_size)
        pages = [kept[i * self.page_size : (i + 1) * self.page_size] for i in range(n_pages)]
        logger.debug("Paged %d discrete columns into %d page(s)", len(kept), n_pages)

        self._result = FrequencyResult(
            tables=tables,
            cardinality={col: int(n) for col, n in cardinality.items()},
            ignored={col: int(n) for col, n in ignored.items()},
            pages=pages,
            pretty_by_col={col: self._view.pretty_by_col.get(col, col) for col in kept},
            max_categories=self.max_categories,
        )
        return self

    def result(self) -> FrequencyResult:
        """Return packaged frequency tables.

        Raises:
            ValueError: If fit() has not been called yet.
        """
        if self._result is None:
            raise ValueError("Must call fit() before result()")
        return self._result
