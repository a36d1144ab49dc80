"""
patentterm.models
=================

Dataclasses and enums describing one patent-term calculation: the
caller-supplied inputs and the derived result.  These objects carry
**no** external-library dependencies so that importing `patentterm`
stays fast even in constrained environments.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional, Union

DateLike = Union[date, str, None]


class PatentType(Enum):
    """Kinds of U.S. patent with their own term rules."""
    UTILITY = "utility"
    DESIGN = "design"
    PLANT = "plant"

    def __str__(self) -> str:        # nicer REPL display
        return self.value

    @property
    def pays_maintenance_fees(self) -> bool:
        return self is not PatentType.DESIGN


@dataclass
class TermInput:
    """
    Everything the engine needs for one calculation.

    Parameters
    ----------
    patent_type : PatentType | str
        ``utility``, ``design`` or ``plant``.
    filing_date : datetime.date | str | None
        U.S. (or 371 international) filing date.  Required.
    grant_date : datetime.date | str | None
        Issue date.  Required.
    has_domestic_benefit : bool, default=False
        Application claims benefit of an earlier domestic application
        (continuation, CIP or divisional).
    eefd : datetime.date | str | None
        Earliest effective filing date of the priority chain.  Only read
        when *has_domestic_benefit* is set.
    has_terminal_disclaimer : bool, default=False
        A terminal disclaimer was filed.
    td_expiration_date : datetime.date | str | None
        Expiration of the patent the disclaimer ties this one to.  Only
        read when *has_terminal_disclaimer* is set.

    Dates may be given as ISO ``YYYY-MM-DD`` strings; the engine parses them.
    """
    patent_type: Union[PatentType, str]
    filing_date: DateLike
    grant_date: DateLike
    has_domestic_benefit: bool = False
    eefd: DateLike = None
    has_terminal_disclaimer: bool = False
    td_expiration_date: DateLike = None

    def __post_init__(self):
        self.patent_type = PatentType(self.patent_type)


@dataclass(frozen=True)
class MaintenanceFees:
    """Due dates of the three utility/plant maintenance fees."""
    first: date
    second: date
    third: date

    def __iter__(self):
        return iter((self.first, self.second, self.third))


@dataclass(frozen=True)
class TermResult:
    """
    Output of :func:`patentterm.engine.compute_term`.

    All dates are raw :class:`datetime.date` objects; rendering them for
    display is left to the caller.
    """
    expiration_date: date
    term_basis: str
    maintenance_fees: Optional[MaintenanceFees]
    days_until_expiration: int
    years_until_expiration: float
    is_expired: bool
