"""API schemas for membership pricing and credit endpoints."""
from __future__ import annotations

from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..credits import (
    CREDIT_TYPE_DESCRIPTIONS,
    CREDIT_TYPE_LABELS,
    CreditType,
    CycleDates,
    MembershipTier,
    MonthlyCreditRunResult,
    TierCreditAllocation,
)
from ..memberships import FreezeExpirationResult
from ..pricing import BillingType, Gender, MembershipOffer


class MembershipOfferResponse(BaseModel):
    tier: MembershipTier
    billing_type: BillingType = Field(alias="billingType")
    gender: Gender
    price_id: str = Field(alias="priceId")
    amount: int
    interval: str
    annual_fee_price_id: Optional[str] = Field(alias="annualFeePriceId", default=None)
    annual_fee_amount: Optional[int] = Field(alias="annualFeeAmount", default=None)

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_offer(cls, offer: MembershipOffer) -> "MembershipOfferResponse":
        return cls(
            tier=offer.tier,
            billing_type=offer.billing_type,
            gender=offer.gender,
            price_id=offer.price_id,
            amount=offer.amount,
            interval=offer.interval,
            annual_fee_price_id=offer.annual_fee_price_id,
            annual_fee_amount=offer.annual_fee_amount,
        )


class CreditPreviewItem(BaseModel):
    credit_type: CreditType = Field(alias="creditType")
    label: str
    description: str
    credits_total: int = Field(alias="creditsTotal")

    model_config = ConfigDict(populate_by_name=True)


class CreditPreviewResponse(BaseModel):
    tier: MembershipTier
    cycle_start: date = Field(alias="cycleStart")
    cycle_end: date = Field(alias="cycleEnd")
    expires_at: datetime = Field(alias="expiresAt")
    credits: List[CreditPreviewItem]

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def build(
        cls,
        tier: MembershipTier,
        allocation: TierCreditAllocation,
        cycle: CycleDates,
    ) -> "CreditPreviewResponse":
        items = [
            CreditPreviewItem(
                credit_type=credit_type,
                label=CREDIT_TYPE_LABELS[credit_type],
                description=CREDIT_TYPE_DESCRIPTIONS[credit_type],
                credits_total=allocation.amount_for(credit_type),
            )
            for credit_type in CreditType
            if allocation.amount_for(credit_type) > 0
        ]
        return cls(
            tier=tier,
            cycle_start=cycle.cycle_start,
            cycle_end=cycle.cycle_end,
            expires_at=cycle.expires_at,
            credits=items,
        )


class MonthlyCreditRunResponse(BaseModel):
    credits_created: int = Field(alias="creditsCreated")
    skipped: int
    failed: int
    processed_at: datetime = Field(alias="processedAt")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_result(cls, result: MonthlyCreditRunResult) -> "MonthlyCreditRunResponse":
        return cls(
            credits_created=result.credits_created,
            skipped=result.skipped,
            failed=result.failed,
            processed_at=result.processed_at,
        )


class FreezeExpirationResponse(BaseModel):
    processed: int
    total: int
    errors: List[str] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_result(cls, result: FreezeExpirationResult) -> "FreezeExpirationResponse":
        return cls(processed=result.processed, total=result.total, errors=list(result.errors))
