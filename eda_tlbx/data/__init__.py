"""Data module for dataset classes."""

from .column_types import ColumnTypes, split_column_types
from .tabular_dataset import TabularDataset
from .views import DatasetView


__all__ = ["ColumnTypes", "DatasetView", "TabularDataset", "split_column_types"]
