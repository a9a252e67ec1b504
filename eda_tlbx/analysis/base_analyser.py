"""Base analyzer class for all analysis components in the EDA toolbox."""

from abc import ABC, abstractmethod
from typing import Any


class BaseAnalyser(ABC):
    """Abstract base class for data analysis components.

    All analyzers must:
    1. Accept their input data (a DatasetView or a DataFrame) in the constructor
    2. Implement fit() to perform the aggregation and return self for chaining
    3. Implement result() to return a frozen dataclass with results

    Analyzers never draw. Plotting helpers in ``eda_tlbx.plotting`` accept the
    ``*Result`` dataclasses and return matplotlib ``Figure`` objects.


    ---


    ### Adding a New Analyzer

    ```python
    from dataclasses import dataclass
    from eda_tlbx.data.views import DatasetView

    @dataclass(frozen=True)
    class MyAnalysisResult:
        '''Results package for MyAnalyzer.'''
        summary: pd.DataFrame

    class MyAnalyzer(BaseAnalyser):
        def __init__(self, view: DatasetView):
            self._view = view
            self._fitted = False

        def fit(self) -> "MyAnalyzer":
            # ... aggregation via pandas ...
            self._fitted = True
            return self

        def result(self) -> MyAnalysisResult:
            if not self._fitted:
                raise ValueError("Call fit() first")
            return MyAnalysisResult(...)
    ```

    Then add a ``make_my_analyzer`` factory to ``TabularDataset``.
    """

    @abstractmethod
    def fit(self) -> "BaseAnalyser":
        """Fit the analyzer to the data.

        Returns:
            Self for method chaining.
        """
        ...

    @abstractmethod
    def result(self) -> Any:
        """Return analysis results as a frozen dataclass instance.

        Raises:
            ValueError: If fit() has not been called yet.
        """
        ...
