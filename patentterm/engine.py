"""
patentterm.engine
=================

The term calculator.  :func:`compute_term` validates one
:class:`~patentterm.models.TermInput`, selects the governing rule, applies
an optional terminal-disclaimer cap and derives maintenance-fee due dates
and the time remaining relative to an explicit *now*.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence

from .dates import DateOutOfRange, Moment, add_years, days_until, is_before, parse_date
from .models import MaintenanceFees, TermInput, TermResult
from .rules import MAINTENANCE_FEE_YEARS, RuleDates, apply_rule, classify

logger = logging.getLogger(__name__)

TD_SUFFIX = " (limited by terminal disclaimer)"
DAYS_PER_YEAR = 365.25


class MissingRequiredField(ValueError):
    """Filing date or grant date is absent or not a valid date."""

    def __init__(self, fields: Sequence[str]):
        self.fields = tuple(fields)
        super().__init__(f"missing or invalid required field(s): {', '.join(self.fields)}")


def _optional_date(name: str, raw) -> Optional[date]:
    parsed = parse_date(raw)
    if parsed is None and isinstance(raw, str) and raw.strip():
        logger.warning(f"Ignoring unparseable {name} {raw!r}")
    return parsed


def maintenance_fees(grant: date) -> MaintenanceFees:
    """Fee due dates at 4, 8 and 12 years after *grant*."""
    return MaintenanceFees(*(add_years(grant, y) for y in MAINTENANCE_FEE_YEARS))


def compute_term(inp: TermInput, now: Moment) -> TermResult:
    """
    Compute expiration, basis, fee dates and time remaining for *inp*.

    *now* may be a date or a naive datetime; it is never read from the
    system clock here.

    Raises
    ------
    MissingRequiredField
        When ``filing_date`` or ``grant_date`` is absent or unparseable.
    DateOutOfRange
        When a valid date is so late that its term or fee dates pass year 9999.
    """
    filing = parse_date(inp.filing_date)
    grant = parse_date(inp.grant_date)
    missing = [name for name, value in (("filing_date", filing), ("grant_date", grant))
               if value is None]
    if missing:
        raise MissingRequiredField(missing)

    if grant < filing:
        logger.warning(f"Grant date {grant} precedes filing date {filing}")

    eefd = _optional_date("eefd", inp.eefd) if inp.has_domestic_benefit else None
    if eefd is not None and eefd > filing:
        logger.warning(f"EEFD {eefd} is later than filing date {filing}; using it as given")

    rule = classify(inp.patent_type, filing)
    try:
        expiration, basis = apply_rule(rule, RuleDates(filing=filing, grant=grant, eefd=eefd))
        fees = maintenance_fees(grant) if inp.patent_type.pays_maintenance_fees else None
    except DateOutOfRange as exc:
        raise DateOutOfRange(f"cannot compute term for filing {filing}, grant {grant}: {exc}") from exc
    logger.debug(f"{inp.patent_type} patent filed {filing}: rule {rule} gives {expiration}")

    if inp.has_terminal_disclaimer:
        td = _optional_date("td_expiration_date", inp.td_expiration_date)
        if td is not None and td < expiration:
            logger.info(f"Terminal disclaimer caps term at {td} (was {expiration})")
            expiration = td
            basis += TD_SUFFIX

    days = days_until(expiration, now)

    return TermResult(
        expiration_date=expiration,
        term_basis=basis,
        maintenance_fees=fees,
        days_until_expiration=days,
        years_until_expiration=round(days / DAYS_PER_YEAR, 1),
        is_expired=is_before(expiration, now),
    )
