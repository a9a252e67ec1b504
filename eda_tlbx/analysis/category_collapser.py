"""Collapse sparse categories of a discrete feature into a single bucket."""

import logging
from dataclasses import dataclass
from typing import Self

import pandas as pd

from .base_analyser import BaseAnalyser


logger = logging.getLogger(__name__)

DEFAULT_BUCKET_LABEL = "OTHER"
STAT_COLUMNS = ("cnt", "pct", "cum_pct", "tail_pct")


def as_labels(series: pd.Series) -> pd.Series:
    """Coerce ``series`` to string labels, keeping missing values missing.

    Labels are ``str(value)``, so float-coded categories keep their decimal
    point (``1.0`` becomes ``"1.0"``, not ``"1"``).
    """
    return series.astype(str).where(series.notna())


@dataclass(frozen=True)
class CollapseResult:
    """Category distribution of one feature and the labels selected for collapsing.

    Attributes:
        feature: Name of the discrete feature.
        threshold: Share of the distribution, counted from the rarest label upwards,
            that may be collapsed.
        measure: Column summed per label instead of counting rows, if any.
        distribution: One row per label, sorted by ``cnt`` descending, with columns
            ``<feature>``, ``cnt``, ``pct``, ``cum_pct`` (running share from the most
            frequent label) and ``tail_pct`` (share of the label plus all rarer labels).
        kept: Labels that survive collapsing, most frequent first.
        collapsed: Labels replaced by the bucket label, most frequent first.
    """

    feature: str
    threshold: float
    measure: str | None
    distribution: pd.DataFrame
    kept: list
    collapsed: list

    @property
    def collapsed_table(self) -> pd.DataFrame:
        """Rows of ``distribution`` for the collapsed labels.

        ``cum_pct`` still counts from the most frequent label and therefore ends
        near 1.0; the share held by the collapsed labels is ``tail_pct`` of the
        first row (equivalently the sum of ``pct``), which is below ``threshold``.
        """
        return self.distribution.loc[self.distribution["tail_pct"] < self.threshold].reset_index(drop=True)

    @property
    def collapsed_share(self) -> float:
        """Combined share of the collapsed labels (strictly below ``threshold`` unless empty)."""
        table = self.collapsed_table
        return float(table["tail_pct"].iloc[0]) if not table.empty else 0.0

    def apply(self, df: pd.DataFrame, bucket_label: str = DEFAULT_BUCKET_LABEL) -> None:
        """Relabel ``df[feature]`` in place, mapping every label not in ``kept`` to ``bucket_label``.

        The column is coerced to string labels first.

        Raises:
            TypeError: If ``df`` is not a pandas DataFrame (cannot be updated in place).
            ValueError: If ``feature`` is not a column of ``df``.
        """
        if not isinstance(df, pd.DataFrame):
            msg = f"In-place update requires a pandas DataFrame, got {type(df).__name__}. Convert the input first."
            raise TypeError(msg)
        if self.feature not in df.columns:
            raise ValueError(f"Feature '{self.feature}' not found in data")

        labels = as_labels(df[self.feature])
        to_collapse = ~labels.isin(self.kept)
        df[self.feature] = labels.mask(to_collapse, bucket_label)

        logger.info(
            "Collapsed %d categories of '%s' (%d rows) into '%s'",
            len(self.collapsed),
            self.feature,
            int(to_collapse.sum()),
            bucket_label,
        )

    # ------------------------------------------------------------------ plotting shortcuts
    def plot(self, **kwargs: object):
        """Plot label shares with the collapsed labels highlighted."""
        from eda_tlbx.plotting.discrete_plots import plot_collapse_distribution  # noqa: PLC0415

        return plot_collapse_distribution(self, **kwargs)


class CategoryCollapser(BaseAnalyser):
    r"""Select the rarest labels of a discrete feature for collapsing.

    Labels are ranked by frequency (row count, or the sum of ``measure``). Walking
    up from the rarest label, a label is collapsed while its tail share, i.e. its
    own share plus that of every rarer label, stays strictly below ``threshold``.
    A tail share exactly equal to ``threshold`` is kept.

    With counts ``{A: 50, B: 30, C: 15, D: 5}`` and ``threshold=0.2`` the tail
    shares are ``D: 0.05, C: 0.20, B: 0.50, A: 1.0``, so only ``D`` is collapsed.

    Example:
        >>> collapser = CategoryCollapser(df, "cut", threshold=0.2)
        >>> res = collapser.fit().result()
        >>> res.collapsed_table
        >>> res.apply(df)  # in place
    """

    def __init__(
        self,
        df: pd.DataFrame,
        feature: str,
        threshold: float,
        measure: str | None = None,
    ) -> None:
        """Initialize the collapser.

        Args:
            df: Input data (read only)
            feature: Name of the discrete feature to collapse; non-string values are coerced to labels
            threshold: Bottom share of the distribution to collapse, in ``[0, 1]``
            measure: Optional numeric column summed per label instead of counting rows
        """
        if not 0 <= threshold <= 1:
            raise ValueError(f"threshold must be within [0, 1], got {threshold}.")
        if feature not in df.columns:
            raise ValueError(f"Feature '{feature}' not found in data")
        if feature in STAT_COLUMNS:
            msg = f"Feature name '{feature}' clashes with the distribution columns {STAT_COLUMNS}; rename the column first."
            raise ValueError(msg)
        if measure is not None:
            if measure not in df.columns:
                raise ValueError(f"Measure column '{measure}' not found in data")
            if not pd.api.types.is_numeric_dtype(df[measure]):
                raise TypeError(f"Measure column '{measure}' must be numeric, got {df[measure].dtype}.")

        self._df = df
        self.feature = feature
        self.threshold = threshold
        self.measure = measure
        self._distribution: pd.DataFrame | None = None

    def get_distribution(self) -> pd.DataFrame:
        """Aggregate per label and compute ``pct``, ``cum_pct`` and ``tail_pct``.

        Shares are computed as running sums divided by the total, so ties at the
        threshold compare exactly for count data.
        """
        if self._distribution is not None:
            return self._distribution

        labels = as_labels(self._df[self.feature])
        if self.measure is None:
            cnt = labels.groupby(labels, dropna=False, sort=False).size()
        else:
            cnt = self._df[self.measure].groupby(labels, dropna=False, sort=False).sum()

        total = cnt.sum()
        # an empty table has nothing to collapse
        if not cnt.empty and not total > 0:
            msg = f"Cannot compute shares for '{self.feature}': total {'of ' + self.measure if self.measure else 'count'} is {total}."
            raise ValueError(msg)

        self._distribution = (
            cnt.rename("cnt")
            .rename_axis(self.feature)
            .sort_values(ascending=False, kind="stable")
            .reset_index()
            .assign(
                pct=lambda d: d["cnt"] / total,
                cum_pct=lambda d: d["cnt"].cumsum() / total,
                tail_pct=lambda d: d["cnt"][::-1].cumsum() / total,
            )
        )
        logger.debug("Distribution of '%s' has %d categories", self.feature, len(self._distribution))
        return self._distribution

    def fit(self) -> Self:
        """Compute the label distribution."""
        self.get_distribution()
        return self

    def result(self) -> CollapseResult:
        """Return the distribution together with kept and collapsed labels.

        Raises:
            ValueError: If fit() has not been called yet.
        """
        if self._distribution is None:
            raise ValueError("Must call fit() before result()")

        dist = self._distribution
        collapse_mask = dist["tail_pct"] < self.threshold

        return CollapseResult(
            feature=self.feature,
            threshold=self.threshold,
            measure=self.measure,
            distribution=dist,
            kept=dist.loc[~collapse_mask, self.feature].tolist(),
            collapsed=dist.loc[collapse_mask, self.feature].tolist(),
        )
