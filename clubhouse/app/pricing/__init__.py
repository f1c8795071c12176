"""Membership, annual fee, and class pass pricing catalog."""

from .catalog import (
    ANNUAL_FEE_AMOUNTS,
    ANNUAL_FEE_PRICE_IDS,
    CLASS_PASS_PRICE_IDS,
    MEMBERSHIP_PRICE_AMOUNTS,
    MEMBERSHIP_PRICE_IDS,
)
from .models import (
    BillingType,
    ClassPassCategory,
    ClassPassType,
    Gender,
    MemberStatus,
    MembershipOffer,
    MembershipPrice,
)
from .service import (
    describe_membership_offer,
    get_annual_fee_amount,
    get_annual_fee_price_id,
    get_class_pass_price_id,
    get_membership_price,
    get_membership_price_id,
    normalize_gender,
    normalize_tier_name,
)

__all__ = [
    "ANNUAL_FEE_AMOUNTS",
    "ANNUAL_FEE_PRICE_IDS",
    "CLASS_PASS_PRICE_IDS",
    "MEMBERSHIP_PRICE_AMOUNTS",
    "MEMBERSHIP_PRICE_IDS",
    "BillingType",
    "ClassPassCategory",
    "ClassPassType",
    "Gender",
    "MemberStatus",
    "MembershipOffer",
    "MembershipPrice",
    "describe_membership_offer",
    "get_annual_fee_amount",
    "get_annual_fee_price_id",
    "get_class_pass_price_id",
    "get_membership_price",
    "get_membership_price_id",
    "normalize_gender",
    "normalize_tier_name",
]
