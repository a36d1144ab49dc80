"""
patentterm.maintenance
======================

Payment windows around each maintenance-fee due date.

A fee may be paid without surcharge during the window that opens
``fee_window_months`` before the due date, and with a surcharge during a
grace period of the same length after it.  :class:`FeeStatus` names the
phase a fee is in on a given day.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum, auto
from typing import List, Optional

from .dates import add_months, parse_date
from .models import MaintenanceFees
from .settings import settings

STAGE_LABELS = ("3.5 years", "7.5 years", "11.5 years")


class FeeStatus(Enum):
    """Where a fee stands relative to its payment window."""
    NOT_YET_OPEN = auto()
    OPEN = auto()
    GRACE_PERIOD = auto()
    LAPSED = auto()

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class FeeWindow:
    label: str
    due: date
    window_opens: date
    grace_ends: date

    def status(self, today) -> FeeStatus:
        """Phase of this fee on *today* (date, datetime or ISO string)."""
        parsed = parse_date(today)
        if parsed is None:
            raise ValueError(f"not a date: {today!r}")
        today = parsed
        if today < self.window_opens:
            return FeeStatus.NOT_YET_OPEN
        if today <= self.due:
            return FeeStatus.OPEN
        if today <= self.grace_ends:
            return FeeStatus.GRACE_PERIOD
        return FeeStatus.LAPSED


def fee_schedule(fees: MaintenanceFees, months: Optional[int] = None) -> List[FeeWindow]:
    """Expand the three due dates into labelled payment windows."""
    months = settings.fee_window_months if months is None else months
    return [
        FeeWindow(
            label=label,
            due=due,
            window_opens=add_months(due, -months),
            grace_ends=add_months(due, months),
        )
        for label, due in zip(STAGE_LABELS, fees)
    ]


def next_fee(fees: MaintenanceFees, today, months: Optional[int] = None) -> Optional[FeeWindow]:
    """First window that has not lapsed on *today*, or None."""
    for window in fee_schedule(fees, months):
        if window.status(today) is not FeeStatus.LAPSED:
            return window
    return None
