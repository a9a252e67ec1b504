"""Task-specific views over dataset content."""

from collections.abc import Mapping
from dataclasses import dataclass

import pandas as pd

from .column_types import split_column_types


def default_pretty_name(column_name: str) -> str:
    """Capitalize and replace underscores for plot labels."""
    return str(column_name).replace("_", " ").title()


@dataclass(frozen=True)
class DatasetView:
    """Immutable snapshot of dataset data and related metadata.

    Attributes:
        df: Dataframe slice containing the relevant columns.
        pretty_by_col: Mapping from column names to display-friendly labels.
        discrete_cols: Ordered list of discrete (categorical) feature names present in ``df``.
        continuous_cols: Ordered list of numeric feature names present in ``df``.
    """

    df: pd.DataFrame
    """Dataframe slice containing the relevant columns."""
    pretty_by_col: Mapping[str, str]
    """Mapping from column names to display-friendly labels."""
    discrete_cols: list[str]
    continuous_cols: list[str]

    @classmethod
    def from_frame(
        cls,
        df: pd.DataFrame,
        pretty_by_col: Mapping[str, str] | None = None,
    ) -> "DatasetView":
        """Build a view over ``df``, splitting its column types.

        Args:
            df: Source frame (not copied).
            pretty_by_col: Optional display labels; missing entries fall back to
                :func:`default_pretty_name`.
        """
        types = split_column_types(df)
        pretty = {col: default_pretty_name(col) for col in df.columns}
        if pretty_by_col:
            pretty.update(pretty_by_col)
        return cls(
            df=df,
            pretty_by_col=pretty,
            discrete_cols=types.discrete,
            continuous_cols=types.continuous,
        )

    @property
    def discrete(self) -> pd.DataFrame:
        """Return view over discrete feature columns (may have no columns)."""
        return self.df.loc[:, self.discrete_cols]
