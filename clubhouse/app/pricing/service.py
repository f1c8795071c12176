"""Lookup helpers over the static price catalog.

Every function here is total: unsupported combinations and unrecognized
values produce ``None`` (offering unavailable) instead of raising.
"""
from __future__ import annotations

from enum import Enum
from typing import Dict, Optional, Type, TypeVar, Union

from ..credits.models import MembershipTier
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

_E = TypeVar("_E", bound=Enum)

_TIER_NAMES: Dict[str, MembershipTier] = {}
for _tier in MembershipTier:
    _TIER_NAMES[_tier.value] = _tier
    _TIER_NAMES[f"{_tier.value} membership"] = _tier

_MEN_ALIASES = {"male", "men", "m"}


def _coerce(enum_type: Type[_E], value: Union[_E, str, None]) -> Optional[_E]:
    if isinstance(value, enum_type):
        return value
    try:
        return enum_type(value)
    except ValueError:
        return None


def normalize_tier_name(db_tier: Optional[str]) -> MembershipTier:
    """Map a stored tier label (``"Gold"``, ``"gold membership"``) to a tier.

    Only exact names, optionally suffixed with ``membership``, are recognized;
    anything else is treated as silver.
    """

    if not db_tier:
        return MembershipTier.SILVER
    return _TIER_NAMES.get(db_tier.strip().lower(), MembershipTier.SILVER)


def normalize_gender(db_gender: Optional[str]) -> Gender:
    """Map a stored gender value to a pricing variant, defaulting to women's pricing."""

    if not db_gender:
        return Gender.WOMEN
    if db_gender.strip().lower() in _MEN_ALIASES:
        return Gender.MEN
    return Gender.WOMEN


def get_membership_price_id(
    tier: Union[MembershipTier, str],
    billing_type: Union[BillingType, str],
    gender: Union[Gender, str],
) -> Optional[str]:
    resolved_tier = _coerce(MembershipTier, tier)
    resolved_billing = _coerce(BillingType, billing_type)
    resolved_gender = _coerce(Gender, gender)
    if resolved_tier is None or resolved_billing is None or resolved_gender is None:
        return None
    return MEMBERSHIP_PRICE_IDS[resolved_tier][resolved_billing][resolved_gender]


def get_membership_price(
    tier: Union[MembershipTier, str],
    billing_type: Union[BillingType, str],
    gender: Union[Gender, str],
) -> Optional[MembershipPrice]:
    """Return the amount and interval for a membership, or ``None`` if not offered."""

    resolved_tier = _coerce(MembershipTier, tier)
    resolved_billing = _coerce(BillingType, billing_type)
    resolved_gender = _coerce(Gender, gender)
    if resolved_tier is None or resolved_billing is None or resolved_gender is None:
        return None
    amount = MEMBERSHIP_PRICE_AMOUNTS[resolved_tier][resolved_billing][resolved_gender]
    if amount is None:
        return None
    return MembershipPrice(amount=amount, interval=resolved_billing.interval)


def get_annual_fee_price_id(gender: Union[Gender, str]) -> Optional[str]:
    resolved_gender = _coerce(Gender, gender)
    if resolved_gender is None:
        return None
    return ANNUAL_FEE_PRICE_IDS[resolved_gender]


def get_annual_fee_amount(gender: Union[Gender, str]) -> Optional[int]:
    resolved_gender = _coerce(Gender, gender)
    if resolved_gender is None:
        return None
    return ANNUAL_FEE_AMOUNTS[resolved_gender]


def get_class_pass_price_id(
    category: Union[ClassPassCategory, str],
    pass_type: Union[ClassPassType, str],
    member_status: Union[MemberStatus, str],
) -> Optional[str]:
    resolved_category = _coerce(ClassPassCategory, category)
    resolved_pass = _coerce(ClassPassType, pass_type)
    resolved_status = _coerce(MemberStatus, member_status)
    if resolved_category is None or resolved_pass is None or resolved_status is None:
        return None
    return CLASS_PASS_PRICE_IDS[resolved_category][resolved_pass][resolved_status]


def describe_membership_offer(
    tier_label: Optional[str],
    billing_type: Union[BillingType, str],
    gender_label: Optional[str],
) -> Optional[MembershipOffer]:
    """Resolve free-text tier and gender labels into a purchasable offer.

    The yearly club fee is charged on top of every membership.
    """

    tier = normalize_tier_name(tier_label)
    gender = normalize_gender(gender_label)
    resolved_billing = _coerce(BillingType, billing_type)
    if resolved_billing is None:
        return None

    price_id = get_membership_price_id(tier, resolved_billing, gender)
    price = get_membership_price(tier, resolved_billing, gender)
    if price_id is None or price is None:
        return None

    return MembershipOffer(
        tier=tier,
        billing_type=resolved_billing,
        gender=gender,
        price_id=price_id,
        amount=price.amount,
        interval=price.interval,
        annual_fee_price_id=get_annual_fee_price_id(gender),
        annual_fee_amount=get_annual_fee_amount(gender),
    )
