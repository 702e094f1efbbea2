# trade_returns.py
# Annualized time-weighted return per ticker from a broker activity report.
# Reads the "Trades" section, joins each trade with a current quote and prints
# a share-weighted summary per ticker (sells are ignored).

from __future__ import annotations

import argparse
import json
import logging
from datetime import date
from typing import Dict, List

from clients import FixedDateSource, StaticPriceSource, SystemDateSource, YFinancePriceSource
from constants import SECTION_LABEL, SUMMARY_SHEET, WORKING_SHEET
from domain import ReportError
from persistence import Workbook, load_activity_report
from services import compute_ticker_returns
from utils import frame_payload


def parse_price_overrides(values: List[str]) -> Dict[str, float]:
    prices: Dict[str, float] = {}
    for value in values:
        symbol, sep, price = value.partition("=")
        if not sep or not symbol.strip():
            raise argparse.ArgumentTypeError(f"Expected SYMBOL=PRICE, got '{value}'")
        try:
            prices[symbol.strip().upper()] = float(price)
        except ValueError:
            raise argparse.ArgumentTypeError(f"Price for {symbol} is not a number: '{price}'") from None
    return prices


def main(argv: List[str] | None = None) -> None:
    p = argparse.ArgumentParser(description="Annualized per-ticker returns from a broker activity report")
    p.add_argument("report", type=str, help="Activity report CSV (stacked sections)")
    p.add_argument(
        "--section",
        type=str,
        default=SECTION_LABEL,
        help=f"Section label holding the trades (default: {SECTION_LABEL}).",
    )
    p.add_argument(
        "--as-of",
        type=date.fromisoformat,
        help="As-of date (YYYY-MM-DD) used for holding periods (default: today).",
    )
    p.add_argument(
        "--price",
        action="append",
        default=[],
        metavar="SYMBOL=PRICE",
        help="Override the current price of a symbol; may be repeated.",
    )
    p.add_argument(
        "--offline",
        action="store_true",
        help="Do not query yfinance; symbols without --price are unresolved.",
    )
    p.add_argument(
        "--output-dir",
        type=str,
        help="Write the working and summary sheets as CSV files into this directory.",
    )
    p.add_argument(
        "--json-output",
        action="store_true",
        help="Dump the ticker summaries and annotated rows as JSON after the summary table.",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    args = p.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        overrides = parse_price_overrides(args.price)
    except argparse.ArgumentTypeError as exc:
        p.error(str(exc))

    live_source = None if args.offline else YFinancePriceSource()
    price_source = StaticPriceSource(overrides, fallback=live_source) if (overrides or args.offline) else live_source
    date_source = FixedDateSource(args.as_of) if args.as_of else SystemDateSource()

    try:
        raw = load_activity_report(args.report)
    except (OSError, ValueError) as exc:
        raise SystemExit(f"Could not read {args.report}: {exc}")

    workbook = Workbook()
    try:
        report = compute_ticker_returns(raw, price_source, date_source, workbook, section=args.section)
    except ReportError as exc:
        raise SystemExit(str(exc))

    for issue in report.issues:
        print(f"row {issue.row} {issue.symbol or '-'}: {issue.stage} -> {issue.message}")

    summary_df = workbook.get_sheet(SUMMARY_SHEET)
    print(f"\n=== Summary table (as of {report.as_of}) ===")
    if summary_df.empty:
        print("No ticker groups with resolvable prices were found.")
    else:
        print(summary_df.to_string(index=False))

    if args.output_dir:
        for path in workbook.export_csv(args.output_dir):
            print(f"Wrote {path}")

    if args.json_output:
        print("\n=== JSON summaries ===")
        payload = {
            "section": report.section,
            "as_of": report.as_of,
            "summaries": report.to_records(),
            "issues": [issue.model_dump() for issue in report.issues],
            "rows": frame_payload(workbook.get_sheet(WORKING_SHEET)),
        }
        print(json.dumps(payload, indent=2))


if __name__ == "__main__":
    main()
