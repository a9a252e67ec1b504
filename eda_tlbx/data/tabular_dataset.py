"""Dataset wrapper that hands out views and analyzers for EDA."""

import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import TYPE_CHECKING

import pandas as pd


if TYPE_CHECKING:
    from eda_tlbx.analysis.category_collapser import CategoryCollapser, CollapseResult
    from eda_tlbx.analysis.frequency_analyzer import DiscreteFrequencyAnalyzer

from .column_types import ColumnTypes, split_column_types
from .views import DatasetView, default_pretty_name


logger = logging.getLogger(__name__)


class TabularDataset:
    """Tabular dataset handler used throughout the EDA toolbox.

    Example:
        >>> ds = TabularDataset.from_csv("diamonds.csv")
        >>> freq_res = ds.make_frequency_analyzer(max_categories=5).fit().result()
        >>> pages = freq_res.plot()
        >>> ds.collapse_category("clarity", threshold=0.2)
    """

    def __init__(
        self,
        df: pd.DataFrame | None = None,
        pretty_by_col: Mapping[str, str] | None = None,
    ) -> None:
        """Initialize the dataset.

        Args:
            df: Pre-loaded DataFrame (optional)
            pretty_by_col: Optional display labels per column
        """
        self._df: pd.DataFrame | None = df
        self._pretty_by_col: dict[str, str] = dict(pretty_by_col or {})

    @classmethod
    def from_csv(cls, filepath: str | Path, **kwargs: object) -> "TabularDataset":
        """Load dataset from CSV file.

        Args:
            filepath: Path to the CSV file
            **kwargs: Forwarded to :func:`pandas.read_csv`

        Returns:
            Dataset instance with loaded data
        """
        df = pd.read_csv(filepath, **kwargs)  # type: ignore[arg-type]
        logger.debug("Loaded %d rows x %d columns from %s", len(df), df.shape[1], filepath)
        return cls(df=df)

    @property
    def df(self) -> pd.DataFrame:
        """Get the underlying DataFrame.

        Raises:
            ValueError: If dataset not loaded
        """
        if self._df is None:
            raise ValueError("Dataset not loaded. Use from_csv() to load data.")
        return self._df

    @property
    def column_types(self) -> ColumnTypes:
        return split_column_types(self.df)

    @property
    def discrete_cols(self) -> list[str]:
        return self.column_types.discrete

    @property
    def continuous_cols(self) -> list[str]:
        return self.column_types.continuous

    def get_pretty_name(self, column_name: str) -> str:
        """Return the display label for ``column_name``."""
        return self._pretty_by_col.get(column_name, default_pretty_name(column_name))

    def view(self, columns: Iterable[str] | None = None) -> DatasetView:
        """Build an immutable dataset view for analyzers and plotting layers.

        Args:
            columns: Columns to include in the view (defaults to all)

        Returns:
            DatasetView containing selected data and metadata
        """
        selected_cols = list(columns) if columns is not None else self.df.columns.to_list()
        missing = [col for col in selected_cols if col not in self.df.columns]
        if missing:
            raise ValueError(f"Columns not found in data: {missing}")

        return DatasetView.from_frame(
            self.df.loc[:, selected_cols],
            pretty_by_col={col: self.get_pretty_name(col) for col in selected_cols},
        )

    def make_frequency_analyzer(
        self,
        columns: Iterable[str] | None = None,
        drop_na: bool = True,
        max_categories: int = 50,
        order_bars: bool = True,
    ) -> "DiscreteFrequencyAnalyzer":
        """Instantiate a frequency analyzer over the discrete columns of this dataset."""
        from eda_tlbx.analysis.frequency_analyzer import DiscreteFrequencyAnalyzer

        return DiscreteFrequencyAnalyzer(
            self.view(columns=columns),
            drop_na=drop_na,
            max_categories=max_categories,
            order_bars=order_bars,
        )

    def make_category_collapser(
        self,
        feature: str,
        threshold: float,
        measure: str | None = None,
    ) -> "CategoryCollapser":
        """Instantiate a category collapser for one discrete feature."""
        from eda_tlbx.analysis.category_collapser import CategoryCollapser

        return CategoryCollapser(self.df, feature=feature, threshold=threshold, measure=measure)

    def collapse_category(
        self,
        feature: str,
        threshold: float,
        measure: str | None = None,
        bucket_label: str = "OTHER",
    ) -> "CollapseResult":
        """Collapse sparse categories of ``feature`` in place.

        Returns:
            The CollapseResult computed before relabeling.
        """
        result = self.make_category_collapser(feature, threshold, measure=measure).fit().result()
        result.apply(self.df, bucket_label=bucket_label)
        return result
