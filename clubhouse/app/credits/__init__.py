"""Membership tier credit allocation and monthly credit cycles."""

from .catalog import (
    CREDIT_TYPE_DESCRIPTIONS,
    CREDIT_TYPE_LABELS,
    TIER_CREDIT_ALLOCATIONS,
    get_tier_credits,
    resolve_tier,
)
from .cycles import add_months, calculate_cycle_dates, is_billing_anniversary
from .models import (
    CreditGrant,
    CreditType,
    CycleDates,
    MemberRecord,
    MembershipTier,
    MonthlyCreditRunResult,
    TierCreditAllocation,
)
from .service import (
    CreditRepository,
    CreditRunNotifier,
    MonthlyCreditService,
    get_credits_to_create,
    summarize_active_credits,
)

__all__ = [
    "CREDIT_TYPE_DESCRIPTIONS",
    "CREDIT_TYPE_LABELS",
    "TIER_CREDIT_ALLOCATIONS",
    "get_tier_credits",
    "resolve_tier",
    "add_months",
    "calculate_cycle_dates",
    "is_billing_anniversary",
    "CreditGrant",
    "CreditType",
    "CycleDates",
    "MemberRecord",
    "MembershipTier",
    "MonthlyCreditRunResult",
    "TierCreditAllocation",
    "CreditRepository",
    "CreditRunNotifier",
    "MonthlyCreditService",
    "get_credits_to_create",
    "summarize_active_credits",
]
