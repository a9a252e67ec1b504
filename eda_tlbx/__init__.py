"""EDA helpers for discrete features of tabular data.

Modules:
- eda_tlbx.data: column-type split, dataset views and the TabularDataset wrapper
- eda_tlbx.analysis: frequency tables and category collapsing (pure computation)
- eda_tlbx.plotting: bar charts built from analysis results
- eda_tlbx.eda: functional entry points
"""

from .eda import bar_discrete, collapse_category


__all__ = ["bar_discrete", "collapse_category"]
