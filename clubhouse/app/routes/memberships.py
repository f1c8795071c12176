"""API routes exposing membership pricing, credit previews, and scheduled jobs."""
from __future__ import annotations

import secrets
from datetime import date, datetime
from typing import Optional

from fastapi import APIRouter, Header, HTTPException, Query, status

from ..credits import calculate_cycle_dates, get_tier_credits, resolve_tier
from ..pricing import BillingType, describe_membership_offer
from ..schemas.memberships import (
    CreditPreviewResponse,
    FreezeExpirationResponse,
    MembershipOfferResponse,
    MonthlyCreditRunResponse,
)
from ..services.credits import (
    get_club_config,
    get_freeze_expiration_service,
    get_monthly_credit_service,
)


router = APIRouter(prefix="/api/memberships", tags=["memberships"])


def _require_job_secret(provided: Optional[str]) -> None:
    expected = get_club_config().job_secret
    if not expected or not provided:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
    if not secrets.compare_digest(provided.encode("utf-8"), expected.encode("utf-8")):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")


def _club_today() -> date:
    return datetime.now(get_club_config().tzinfo).date()


@router.get("/pricing", response_model=MembershipOfferResponse)
def get_pricing(
    tier: str = Query(),
    billing_type: BillingType = Query(alias="billingType"),
    gender: Optional[str] = Query(default=None),
) -> MembershipOfferResponse:
    offer = describe_membership_offer(tier, billing_type, gender)
    if offer is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Membership not offered")
    return MembershipOfferResponse.from_offer(offer)


@router.get("/credits/preview", response_model=CreditPreviewResponse)
def preview_credits(
    membership_type: str = Query(alias="membershipType"),
    start_date: Optional[date] = Query(alias="startDate", default=None),
) -> CreditPreviewResponse:
    anchor = start_date or _club_today()
    return CreditPreviewResponse.build(
        tier=resolve_tier(membership_type),
        allocation=get_tier_credits(membership_type),
        cycle=calculate_cycle_dates(anchor),
    )


@router.post("/jobs/monthly-credits", response_model=MonthlyCreditRunResponse)
def run_monthly_credits(
    run_date: Optional[date] = Query(alias="date", default=None),
    *,
    job_secret: Optional[str] = Header(default=None, alias="X-Job-Secret"),
) -> MonthlyCreditRunResponse:
    _require_job_secret(job_secret)
    service = get_monthly_credit_service()
    result = service.run(run_date or _club_today())
    return MonthlyCreditRunResponse.from_result(result)


@router.post("/jobs/freeze-expirations", response_model=FreezeExpirationResponse)
def run_freeze_expirations(
    run_date: Optional[date] = Query(alias="date", default=None),
    *,
    job_secret: Optional[str] = Header(default=None, alias="X-Job-Secret"),
) -> FreezeExpirationResponse:
    _require_job_secret(job_secret)
    service = get_freeze_expiration_service()
    result = service.run(run_date or _club_today())
    return FreezeExpirationResponse.from_result(result)
