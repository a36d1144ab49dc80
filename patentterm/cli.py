"""
patentterm.cli
==============

Command-line front end.

Examples
--------
$ python -m patentterm.cli --type utility --filing 2020-01-01 --grant 2022-01-01
$ python -m patentterm.cli --type design --filing 2016-01-01 --grant 2017-01-01 --json
$ python -m patentterm.cli --filing 2020-01-01 --grant 2022-01-01 \\
      --td-expiration 2035-06-01 --as-of 2030-01-01
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import textwrap
from datetime import datetime
from typing import List, Optional

from .dates import DateOutOfRange, format_long_date, parse_date
from .engine import MissingRequiredField, compute_term
from .maintenance import fee_schedule, next_fee
from .models import PatentType, TermInput, TermResult
from .settings import configure_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m patentterm.cli",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description=textwrap.dedent(
            """\
            Patent term calculator
            ----------------------
            Estimate a U.S. patent's expiration date and maintenance fee
            deadlines.  Dates are YYYY-MM-DD.  Patent Term Adjustment and
            Extension are not included.
            """
        ),
    )
    parser.add_argument("--type", dest="patent_type", default="utility",
                        choices=[t.value for t in PatentType], help="patent type")
    parser.add_argument("--filing", help="filing date (U.S. or 371 international)")
    parser.add_argument("--grant", help="grant (issue) date")
    parser.add_argument("--eefd", help="earliest effective filing date; implies domestic benefit")
    parser.add_argument("--td-expiration", help="terminal disclaimer expiration date")
    parser.add_argument("--as-of", help="evaluate as of this date instead of now")
    parser.add_argument("--json", action="store_true", help="print machine-readable JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def result_as_dict(res: TermResult) -> dict:
    """JSON-ready view of *res* using the camelCase keys of the HTTP API."""
    fees = res.maintenance_fees
    return {
        "expirationDate": res.expiration_date.isoformat(),
        "termBasis": res.term_basis,
        "maintenanceFees": None if fees is None else {
            "first": fees.first.isoformat(),
            "second": fees.second.isoformat(),
            "third": fees.third.isoformat(),
        },
        "daysUntilExpiration": res.days_until_expiration,
        "yearsUntilExpiration": res.years_until_expiration,
        "isExpired": res.is_expired,
    }


def render(res: TermResult, today) -> str:
    """Human-readable summary, laid out like the calculator's result card."""
    lines = [
        "Patent Has Expired" if res.is_expired else "Patent Expiration Date",
        f"  {format_long_date(res.expiration_date)}",
        f"  Term Basis: {res.term_basis}",
    ]
    if res.is_expired:
        return "\n".join(lines)
    lines.append(
        f"  Time Remaining: {res.days_until_expiration} days "
        f"({res.years_until_expiration:.1f} years)"
    )
    if res.maintenance_fees is not None:
        lines.append("Maintenance Fee Deadlines")
        upcoming = next_fee(res.maintenance_fees, today)
        for window in fee_schedule(res.maintenance_fees):
            line = f"  {'Fee (' + window.label + ')':<20} {format_long_date(window.due)}"
            if window == upcoming:
                phase = window.status(today).name.replace("_", " ").lower()
                line += f"  <- next ({phase})"
            lines.append(line)
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging("DEBUG" if args.verbose else None)

    now = parse_date(args.as_of) if args.as_of else datetime.now()
    if now is None:
        print(f"invalid --as-of date: {args.as_of}", file=sys.stderr)
        return 2

    inp = TermInput(
        patent_type=args.patent_type,
        filing_date=args.filing,
        grant_date=args.grant,
        has_domestic_benefit=args.eefd is not None,
        eefd=args.eefd,
        has_terminal_disclaimer=args.td_expiration is not None,
        td_expiration_date=args.td_expiration,
    )
    try:
        res = compute_term(inp, now)
        output = json.dumps(result_as_dict(res), indent=2) if args.json else render(res, now)
    except MissingRequiredField as exc:
        logger.debug(f"validation failed for {exc.fields}")
        print(f"Please enter both filing date and grant date ({exc})", file=sys.stderr)
        return 2
    except DateOutOfRange as exc:
        print(f"date out of range: {exc}", file=sys.stderr)
        return 2

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
