"""Domain models for the membership price catalog."""
from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ..credits.models import MembershipTier


class BillingType(str, Enum):
    """Membership payment frequency."""

    MONTHLY = "monthly"
    ANNUAL = "annual"

    @property
    def interval(self) -> str:
        return "year" if self is BillingType.ANNUAL else "month"


class Gender(str, Enum):
    """Gender variant used to select a price."""

    WOMEN = "women"
    MEN = "men"


class ClassPassCategory(str, Enum):
    """Class families sold as drop-in passes."""

    PILATES_CYCLING = "pilatesCycling"
    OTHER_CLASSES = "otherClasses"


class ClassPassType(str, Enum):
    SINGLE = "single"
    TEN_PACK = "tenPack"


class MemberStatus(str, Enum):
    MEMBER = "member"
    NON_MEMBER = "nonMember"


class MembershipPrice(BaseModel):
    """Price amount for a membership, in whole dollars."""

    amount: int = Field(ge=0)
    interval: str

    model_config = ConfigDict(frozen=True)


class MembershipOffer(BaseModel):
    """A purchasable membership: the resolved catalog price id and amount."""

    tier: MembershipTier
    billing_type: BillingType
    gender: Gender
    price_id: str
    amount: int = Field(ge=0)
    interval: str
    annual_fee_price_id: Optional[str] = None
    annual_fee_amount: Optional[int] = None

    model_config = ConfigDict(frozen=True)
