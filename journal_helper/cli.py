#!/usr/bin/env python3
"""
journal-helper command line

Reports:
- balance  : net change per month for one account (or every account)
- register : every debit/credit of one account with running totals
- print    : the balanced journal in canonical text form

    $ journal-helper balance -j money.journal -a assets:savings
    $ journal-helper register -j money.journal -a assets:savings --csv out.csv
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from journal_helper.controllers import (
    account_balance_changes,
    balance_changes,
    balance_frame,
    format_register_line,
    load_journal,
    register,
    register_frame,
    save_journal,
)
from journal_helper.data_model import Journal, MonthYear, ParseJournalError
from journal_helper.data_model.parsers_emitters import JournalParserEmitter
from journal_helper.utilities import configure_logging

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="journal-helper",
        description="Run reports over a plain-text double-entry journal.",
    )
    ap.add_argument("report", choices=["balance", "register", "print"], help="The report to run")
    ap.add_argument("-j", "--journal", type=Path, required=True, metavar="JOURNAL",
                    help="Path to the journal file")
    ap.add_argument("-a", "--account", metavar="ACCOUNT",
                    help="Account name (required for register)")
    ap.add_argument("--month", type=MonthYear.parse, metavar="YYYY-MM",
                    help="balance only: show a single month (one column without -a)")
    ap.add_argument("--csv", type=Path, metavar="OUT",
                    help="Also write the report to a CSV file")
    ap.add_argument("-o", "--output", type=Path,
                    help="print only: write the journal here instead of stdout")
    ap.add_argument("--encoding", default="utf-8",
                    help="Text encoding of the journal (default: utf-8)")
    ap.add_argument("--log-dir", type=Path, default=None,
                    help="Directory for the rotating log file (default: console only)")
    return ap


def _balance(journal: Journal, account: Optional[str], month: Optional[MonthYear],
             csv_path: Optional[Path]) -> int:
    if not journal.transactions:
        print("No transactions in journal")
        return 0

    grid = balance_changes(journal)
    if month is not None and not grid.start_month <= month <= grid.final_month:
        raise SystemExit(
            f"Month {month} is outside the journal ({grid.start_month} to {grid.final_month})"
        )

    frame = balance_frame(grid)
    if account is None:
        if month is not None:
            frame = frame[[str(month)]]
        print(frame.to_string())
    elif month is not None:
        change = grid[month, account]
        shown = "none" if change is None else str(change)
        print(f"Balance changes for {account} in {month}: {shown}")
        frame = frame.loc[[account], [str(month)]] if account in grid else frame.iloc[0:0]
    else:
        print(f"Balance changes for {account}:")
        for m, change in account_balance_changes(grid, account):
            print(f"{m}  {'' if change is None else change}".rstrip())
        frame = frame.loc[[account]] if account in grid else frame.iloc[0:0]

    if csv_path is not None:
        frame.to_csv(csv_path)
        log.info("Wrote balance report to %s", csv_path)
    return 0


def _register(journal: Journal, account: str, csv_path: Optional[Path]) -> int:
    lines = register(journal, account)
    print(f"Register report for account {account}:")
    for line in lines:
        print(format_register_line(line))
    if csv_path is not None:
        register_frame(lines).to_csv(csv_path, index=False)
        log.info("Wrote register report to %s", csv_path)
    return 0


def _print(journal: Journal, output: Optional[Path]) -> int:
    if output is not None:
        save_journal(journal, output)
    else:
        sys.stdout.write(JournalParserEmitter().emit(journal))
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)

    if args.report == "register" and not args.account:
        ap.error("Need an account name for the register report")

    configure_logging(args.log_dir)

    if not args.journal.exists():
        raise SystemExit(f"Journal not found: {args.journal}")
    if not args.journal.is_file():
        raise SystemExit(f"Journal path is not a file: {args.journal}")

    try:
        journal = load_journal(args.journal, encoding=args.encoding)
    except ParseJournalError as e:
        raise SystemExit(f"Error reading journal: {e}") from e

    if args.report == "balance":
        return _balance(journal, args.account, args.month, args.csv)
    if args.report == "register":
        return _register(journal, args.account, args.csv)
    return _print(journal, args.output)


if __name__ == "__main__":
    sys.exit(main())
