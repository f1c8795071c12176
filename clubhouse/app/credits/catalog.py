"""Static catalog of per-tier credit allocations."""
from __future__ import annotations

from typing import Dict, Optional, Tuple

from .models import CreditType, MembershipTier, TierCreditAllocation

TIER_CREDIT_ALLOCATIONS: Dict[MembershipTier, TierCreditAllocation] = {
    MembershipTier.SILVER: TierCreditAllocation(class_credits=0, red_light=0, dry_cryo=0),
    MembershipTier.GOLD: TierCreditAllocation(class_credits=0, red_light=4, dry_cryo=2),
    MembershipTier.PLATINUM: TierCreditAllocation(class_credits=0, red_light=6, dry_cryo=4),
    MembershipTier.DIAMOND: TierCreditAllocation(class_credits=10, red_light=10, dry_cryo=6),
}

CREDIT_TYPE_LABELS: Dict[CreditType, str] = {
    CreditType.CLASS: "Class Credits",
    CreditType.RED_LIGHT: "Red Light Therapy",
    CreditType.DRY_CRYO: "Dry Cryo",
}

CREDIT_TYPE_DESCRIPTIONS: Dict[CreditType, str] = {
    CreditType.CLASS: "Use for any class at the club",
    CreditType.RED_LIGHT: "Red light therapy sessions",
    CreditType.DRY_CRYO: "Dry cryotherapy sessions",
}

# Checked in order; the first tier name contained in the label wins.
_TIER_PRIORITY: Tuple[MembershipTier, ...] = (
    MembershipTier.DIAMOND,
    MembershipTier.PLATINUM,
    MembershipTier.GOLD,
)


def resolve_tier(membership_type: Optional[str]) -> MembershipTier:
    """Map a free-text membership label such as ``"Gold Membership"`` to a tier.

    Unrecognized or empty labels resolve to :attr:`MembershipTier.SILVER`.
    """

    normalized = (membership_type or "").strip().lower()
    for tier in _TIER_PRIORITY:
        if tier.value in normalized:
            return tier
    return MembershipTier.SILVER


def get_tier_credits(membership_type: Optional[str]) -> TierCreditAllocation:
    """Return the credit allocation for a free-text membership label."""

    return TIER_CREDIT_ALLOCATIONS[resolve_tier(membership_type)]
