"""Tests for the functional entry points bar_discrete and collapse_category."""

import pandas as pd
import pytest
from matplotlib.figure import Figure

from eda_tlbx import bar_discrete, collapse_category


class TestBarDiscrete:
    """Test bar_discrete end to end."""

    def test_eleven_columns_render_two_pages(self, eleven_discrete_df: pd.DataFrame) -> None:
        """11 discrete columns give a full 3x3 page and a page with two panels."""
        pages = bar_discrete(eleven_discrete_df)

        assert len(pages) == 2
        assert all(isinstance(fig, Figure) for fig in pages)
        assert len(pages[0].axes) == 9
        assert len(pages[1].axes) == 2

    def test_panels_are_labelled_with_columns(self, mixed_df: pd.DataFrame) -> None:
        """Each panel's y label is the pretty column name."""
        (page,) = bar_discrete(mixed_df)
        assert [ax.get_ylabel() for ax in page.axes] == ["Color", "Size", "Flag"]
        assert all(ax.get_xlabel() == "Frequency" for ax in page.axes)

    def test_high_cardinality_column_not_rendered(self) -> None:
        """A column over the cap is not among the rendered panels."""
        df = pd.DataFrame({"low": ["a", "b"] * 5, "high": [str(i) for i in range(10)]})
        (page,) = bar_discrete(df, max_categories=5)
        assert [ax.get_ylabel() for ax in page.axes] == ["Low"]

    def test_no_discrete_columns_raises(self) -> None:
        """Numeric-only input is a hard stop."""
        with pytest.raises(ValueError, match=r"No discrete features"):
            bar_discrete(pd.DataFrame({"x": [1, 2, 3]}))

    def test_accepts_dict_input(self) -> None:
        """Anything the DataFrame constructor accepts can be plotted."""
        pages = bar_discrete({"c": ["a", "b", "a"]})
        assert len(pages) == 1

    def test_column_named_frequency_is_plotted(self) -> None:
        """A column sharing the name of the count column renders one panel."""
        (page,) = bar_discrete(pd.DataFrame({"frequency": ["low", "high", "low"]}))
        (ax,) = page.axes
        assert [t.get_text() for t in ax.get_yticklabels()] == ["high", "low"]
        assert [bar.get_width() for bar in ax.patches] == [1, 2]


class TestCollapseCategory:
    """Test collapse_category end to end."""

    def test_inspect_returns_collapsed_labels(self, abcd_df: pd.DataFrame) -> None:
        """The non-update path returns only the collapsed labels and leaves data untouched."""
        before = abcd_df.copy()
        table = collapse_category(abcd_df, "grade", 0.2)

        assert table is not None
        assert table["grade"].tolist() == ["D"]
        assert table["pct"].sum() <= 0.2
        pd.testing.assert_frame_equal(abcd_df, before)

    def test_update_relabels_in_place(self, abcd_df: pd.DataFrame) -> None:
        """update=True replaces collapsed labels with the bucket label."""
        collapsed = collapse_category(abcd_df, "grade", 0.21)
        returned = collapse_category(abcd_df, "grade", 0.21, update=True)

        counts = abcd_df["grade"].value_counts()
        assert returned is None
        assert counts.to_dict() == {"A": 50, "B": 30, "OTHER": 20}
        assert counts["OTHER"] / len(abcd_df) == pytest.approx(collapsed["pct"].sum())

    def test_update_custom_bucket_label(self, abcd_df: pd.DataFrame) -> None:
        """bucket_label names the collapsed bucket."""
        collapse_category(abcd_df, "grade", 0.2, update=True, bucket_label="misc")
        assert set(abcd_df["grade"]) == {"A", "B", "C", "misc"}

    def test_update_on_non_dataframe_raises(self) -> None:
        """update=True with a plain dict is a usage error."""
        data = {"grade": ["A", "A", "B"]}
        with pytest.raises(TypeError, match=r"pandas DataFrame"):
            collapse_category(data, "grade", 0.5, update=True)
        assert data == {"grade": ["A", "A", "B"]}

    def test_inspect_accepts_dict_input(self) -> None:
        """Read-only use accepts non-DataFrame input."""
        table = collapse_category({"g": ["a"] * 9 + ["b"]}, "g", 0.2)
        assert table["g"].tolist() == ["b"]

    def test_measure_weighted(self) -> None:
        """Shares follow the measure rather than row counts."""
        df = pd.DataFrame({"shop": ["a"] * 5 + ["b"], "sales": [1.0] * 5 + [95.0]})
        table = collapse_category(df, "shop", 0.1, measure="sales")
        assert table["shop"].tolist() == ["a"]

    def test_inspect_table_stays_below_threshold(self, abcd_df: pd.DataFrame) -> None:
        """tail_pct of the returned rows is below the threshold even though cum_pct is not."""
        table = collapse_category(abcd_df, "grade", 0.21)

        assert table["tail_pct"].max() < 0.21
        assert table["tail_pct"].iloc[0] == pytest.approx(table["pct"].sum())
        assert table["cum_pct"].iloc[-1] == pytest.approx(1.0)

    @pytest.mark.parametrize("name", ["cnt", "pct", "cum_pct", "tail_pct"])
    def test_feature_named_like_stat_column_raises(self, name: str) -> None:
        """A feature named like a distribution column is rejected before any update."""
        df = pd.DataFrame({name: ["a"] * 9 + ["b"]})
        with pytest.raises(ValueError, match=r"clashes with the distribution columns"):
            collapse_category(df, name, 0.2, update=True)
        assert df[name].tolist() == ["a"] * 9 + ["b"]

    def test_empty_frame(self) -> None:
        """An empty frame has nothing to collapse in either mode."""
        df = pd.DataFrame({"g": pd.Series([], dtype=object)})

        table = collapse_category(df, "g", 0.2)
        assert table.empty
        assert list(table.columns) == ["g", "cnt", "pct", "cum_pct", "tail_pct"]

        assert collapse_category(df, "g", 0.2, update=True) is None
        assert df.empty
