"""
patentterm.rules
================

Statutory term rules, one per variant.

Every calculation is first classified into exactly one :class:`TermRule`
from the patent type and filing date; the matching transform in
:data:`RULES` then turns the parsed dates into an expiration date and a
human-readable basis.  Terminal disclaimers are applied afterwards by the
engine because they cut across all four variants.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum, auto
from typing import Callable, Dict, Optional, Tuple

from .dates import add_years
from .models import PatentType

# ---------------------------------------------------------------------
# Thresholds and term lengths
# ---------------------------------------------------------------------
GATT_DATE = date(1995, 6, 8)
DESIGN_15_YEAR_DATE = date(2015, 5, 13)

POST_GATT_YEARS = 20
PRE_GATT_YEARS = 17
DESIGN_POST_2015_YEARS = 15
DESIGN_PRE_2015_YEARS = 14

MAINTENANCE_FEE_YEARS = (4, 8, 12)


class TermRule(Enum):
    """Which statutory rule governs a patent's term."""
    DESIGN_PRE_2015 = auto()
    DESIGN_POST_2015 = auto()
    UTILITY_PRE_GATT = auto()
    UTILITY_POST_GATT = auto()

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class RuleDates:
    """Parsed dates a rule transform may read."""
    filing: date
    grant: date
    eefd: Optional[date] = None


def classify(patent_type: PatentType, filing: date) -> TermRule:
    """Pick the rule variant for *patent_type* filed on *filing*."""
    if patent_type is PatentType.DESIGN:
        if filing >= DESIGN_15_YEAR_DATE:
            return TermRule.DESIGN_POST_2015
        return TermRule.DESIGN_PRE_2015
    if filing >= GATT_DATE:
        return TermRule.UTILITY_POST_GATT
    return TermRule.UTILITY_PRE_GATT


def _design(years: int) -> Callable[[RuleDates], Tuple[date, str]]:
    def apply(d: RuleDates) -> Tuple[date, str]:
        return add_years(d.grant, years), f"{years} years from grant date"
    return apply


def _utility_pre_gatt(d: RuleDates) -> Tuple[date, str]:
    return (
        add_years(d.grant, PRE_GATT_YEARS),
        f"{PRE_GATT_YEARS} years from grant date (pre-GATT)",
    )


def _utility_post_gatt(d: RuleDates) -> Tuple[date, str]:
    if d.eefd is not None:
        return (
            add_years(d.eefd, POST_GATT_YEARS),
            f"{POST_GATT_YEARS} years from Earliest Effective Filing Date",
        )
    return add_years(d.filing, POST_GATT_YEARS), f"{POST_GATT_YEARS} years from filing date"


# ---------------------------------------------------------------------
# Rule table: variant → pure transform (dates → expiration, basis)
# ---------------------------------------------------------------------
RULES: Dict[TermRule, Callable[[RuleDates], Tuple[date, str]]] = {
    TermRule.DESIGN_PRE_2015:   _design(DESIGN_PRE_2015_YEARS),
    TermRule.DESIGN_POST_2015:  _design(DESIGN_POST_2015_YEARS),
    TermRule.UTILITY_PRE_GATT:  _utility_pre_gatt,
    TermRule.UTILITY_POST_GATT: _utility_post_gatt,
}


def apply_rule(rule: TermRule, dates: RuleDates) -> Tuple[date, str]:
    """
    Run the transform registered for *rule*.

    Examples
    --------
    >>> apply_rule(TermRule.DESIGN_POST_2015,
    ...            RuleDates(date(2016, 1, 1), date(2017, 1, 1)))
    (datetime.date(2032, 1, 1), '15 years from grant date')
    """
    return RULES[rule](dates)
