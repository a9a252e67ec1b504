"""Split dataset columns into discrete and continuous features."""

from dataclasses import dataclass, field

import pandas as pd


@dataclass(frozen=True)
class ColumnTypes:
    """Column names grouped by how they are treated during EDA.

    Attributes:
        discrete: Columns whose values are categorical labels (object, string,
            category and boolean dtypes), in frame order.
        continuous: Numeric columns, in frame order.
    """

    discrete: list[str] = field(default_factory=list)
    continuous: list[str] = field(default_factory=list)

    @property
    def num_discrete(self) -> int:
        return len(self.discrete)

    @property
    def num_continuous(self) -> int:
        return len(self.continuous)


def is_discrete(series: pd.Series) -> bool:
    """Return True if ``series`` should be treated as categorical labels.

    Booleans are numeric for pandas but are labels for frequency analysis.
    """
    if pd.api.types.is_bool_dtype(series):
        return True
    return not pd.api.types.is_numeric_dtype(series)


def split_column_types(df: pd.DataFrame) -> ColumnTypes:
    """Classify every column of ``df`` as discrete or continuous.

    Args:
        df: Input frame.

    Returns:
        ColumnTypes preserving the column order of ``df``.
    """
    discrete: list[str] = []
    continuous: list[str] = []
    for col in df.columns:
        (discrete if is_discrete(df[col]) else continuous).append(col)
    return ColumnTypes(discrete=discrete, continuous=continuous)
