"""Command line interface for the discrete-feature EDA helpers.

Modes
-----
- bars    : Save frequency bar-chart pages for every discrete column of a CSV file
- collapse: Show (or apply) the collapsing of sparse categories of one column
"""

import argparse
import logging
from collections.abc import Iterable
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pandas as pd  # noqa: E402

from eda_tlbx.eda import bar_discrete, collapse_category  # noqa: E402


logger = logging.getLogger(__name__)


def _run_bars(args: argparse.Namespace) -> int:
    df = pd.read_csv(args.csv)
    out_dir = Path(args.out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    pages = bar_discrete(
        df,
        drop_na=not args.keep_na,
        max_categories=args.max_categories,
        order_bars=not args.no_order,
    )
    for page_no, fig in enumerate(pages, start=1):
        path = out_dir / f"bar_discrete_page_{page_no}.png"
        fig.savefig(path)
        plt.close(fig)
        logger.info("Saved %s", path)
    logger.info("Done. Pages written: %d", len(pages))
    return 0


def _run_collapse(args: argparse.Namespace) -> int:
    df = pd.read_csv(args.csv)

    if not args.update:
        table = collapse_category(df, args.feature, args.threshold, measure=args.measure)
        print(table.to_string(index=False))
        return 0

    if args.output is None:
        logger.error("--output is required together with --update")
        return 2
    collapse_category(
        df,
        args.feature,
        args.threshold,
        measure=args.measure,
        update=True,
        bucket_label=args.bucket_label,
    )
    df.to_csv(args.output, index=False)
    logger.info("Wrote collapsed data to %s", args.output)
    return 0


def _build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="eda-tlbx", description="EDA helpers for discrete features of CSV data")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="mode", required=True)

    bars = sub.add_parser("bars", help="Save frequency bar charts for discrete columns")
    bars.add_argument("csv", help="Input CSV file")
    bars.add_argument("--out-dir", default=".", help="Directory for the PNG pages")
    bars.add_argument("--keep-na", action="store_true", help="Keep missing values as their own bar")
    bars.add_argument("--max-categories", type=int, default=50, help="Skip columns with more categories")
    bars.add_argument("--no-order", action="store_true", help="Keep bars in order of appearance")
    bars.set_defaults(func=_run_bars)

    collapse = sub.add_parser("collapse", help="Collapse sparse categories of one column")
    collapse.add_argument("csv", help="Input CSV file")
    collapse.add_argument("feature", help="Discrete column to collapse")
    collapse.add_argument("threshold", type=float, help="Bottom share to collapse, e.g. 0.2")
    collapse.add_argument("--measure", default=None, help="Numeric column summed per category instead of counts")
    collapse.add_argument("--update", action="store_true", help="Relabel the data and write it to --output")
    collapse.add_argument("--bucket-label", default="OTHER", help="Label for collapsed categories")
    collapse.add_argument("--output", default=None, help="Output CSV for --update")
    collapse.set_defaults(func=_run_collapse)
    return p


def main(argv: Iterable[str] | None = None) -> int:
    args = _build_arg_parser().parse_args(list(argv) if argv is not None else None)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    try:
        return args.func(args)
    except (ValueError, TypeError) as exc:
        logger.error("%s", exc)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
