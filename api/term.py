"""
api.term
========

FastAPI router exposing the term calculator.

Request and response bodies use the camelCase keys of the public
interface; snake_case request keys are accepted too.
"""

import logging
from datetime import date, datetime
from typing import Callable, List, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from patentterm.dates import DateOutOfRange
from patentterm.engine import MissingRequiredField, compute_term
from patentterm.maintenance import fee_schedule
from patentterm.models import PatentType, TermInput
from patentterm.settings import Settings
from .deps import get_clock, get_settings

# Create router
router = APIRouter(tags=["term"])

# Configure logging
logger = logging.getLogger(__name__)


class _CamelModel(BaseModel):
    class Config:
        populate_by_name = True


class TermRequest(_CamelModel):
    patent_type: str = Field("utility", alias="patentType")
    filing_date: Optional[str] = Field(None, alias="filingDate")
    grant_date: Optional[str] = Field(None, alias="grantDate")
    has_domestic_benefit: bool = Field(False, alias="hasDomesticBenefit")
    eefd: Optional[str] = None
    has_terminal_disclaimer: bool = Field(False, alias="hasTerminalDisclaimer")
    td_expiration_date: Optional[str] = Field(None, alias="tdExpirationDate")


class MaintenanceFeesOut(_CamelModel):
    first: date
    second: date
    third: date


class FeeWindowOut(_CamelModel):
    label: str
    due: date
    window_opens: date = Field(alias="windowOpens")
    grace_ends: date = Field(alias="graceEnds")
    status: str


class TermResponse(_CamelModel):
    expiration_date: date = Field(alias="expirationDate")
    term_basis: str = Field(alias="termBasis")
    maintenance_fees: Optional[MaintenanceFeesOut] = Field(None, alias="maintenanceFees")
    days_until_expiration: int = Field(alias="daysUntilExpiration")
    years_until_expiration: float = Field(alias="yearsUntilExpiration")
    is_expired: bool = Field(alias="isExpired")
    fee_schedule: List[FeeWindowOut] = Field(default_factory=list, alias="feeSchedule")


@router.post("/term", response_model=TermResponse)
def calculate_term(
    req: TermRequest,
    clock: Callable[[], datetime] = Depends(get_clock),
    cfg: Settings = Depends(get_settings),
):
    """
    Compute a patent's expiration date and maintenance-fee deadlines.

    - 422 when `filingDate` or `grantDate` is missing or not YYYY-MM-DD
    - 422 when a date is so late its term or fee windows pass year 9999
    - 422 when `patentType` is not utility, design or plant
    """
    logger.info(f"Term request for {req.patent_type} patent filed {req.filing_date}")
    now = clock()

    try:
        inp = TermInput(
            patent_type=req.patent_type,
            filing_date=req.filing_date,
            grant_date=req.grant_date,
            has_domestic_benefit=req.has_domestic_benefit,
            eefd=req.eefd,
            has_terminal_disclaimer=req.has_terminal_disclaimer,
            td_expiration_date=req.td_expiration_date,
        )
    except ValueError as e:
        logger.warning(f"Rejected term request: {e}")
        allowed = ", ".join(t.value for t in PatentType)
        raise HTTPException(status_code=422, detail=f"patentType must be one of {allowed}")

    try:
        res = compute_term(inp, now)
        fees = res.maintenance_fees
        windows = [] if fees is None else [
            FeeWindowOut(
                label=w.label,
                due=w.due,
                window_opens=w.window_opens,
                grace_ends=w.grace_ends,
                status=w.status(now).name,
            )
            for w in fee_schedule(fees, cfg.fee_window_months)
        ]
    except (MissingRequiredField, DateOutOfRange) as e:
        logger.warning(f"Rejected term request: {e}")
        raise HTTPException(status_code=422, detail=str(e))

    return TermResponse(
        expiration_date=res.expiration_date,
        term_basis=res.term_basis,
        maintenance_fees=None if fees is None else MaintenanceFeesOut(
            first=fees.first, second=fees.second, third=fees.third
        ),
        days_until_expiration=res.days_until_expiration,
        years_until_expiration=res.years_until_expiration,
        is_expired=res.is_expired,
        fee_schedule=windows,
    )
