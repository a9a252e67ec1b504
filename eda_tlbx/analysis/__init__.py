"""Analysis modules for discrete-feature statistics."""

from .category_collapser import CategoryCollapser, CollapseResult
from .frequency_analyzer import DiscreteFrequencyAnalyzer, FrequencyResult


__all__ = [
    "CategoryCollapser",
    "CollapseResult",
    "DiscreteFrequencyAnalyzer",
    "FrequencyResult",
]
