"""Domain models for membership tiers and monthly service credits."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timezone
from enum import Enum
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class MembershipTier(str, Enum):
    """Canonical membership tiers."""

    SILVER = "silver"
    GOLD = "gold"
    PLATINUM = "platinum"
    DIAMOND = "diamond"


class CreditType(str, Enum):
    """Credit categories issued each cycle, in issuing order."""

    CLASS = "class"
    RED_LIGHT = "red_light"
    DRY_CRYO = "dry_cryo"


@dataclass(frozen=True)
class TierCreditAllocation:
    """Number of credits a tier receives per cycle for each credit type."""

    class_credits: int = 0
    red_light: int = 0
    dry_cryo: int = 0

    def amount_for(self, credit_type: CreditType) -> int:
        if credit_type == CreditType.CLASS:
            return self.class_credits
        if credit_type == CreditType.RED_LIGHT:
            return self.red_light
        return self.dry_cryo

    @property
    def is_empty(self) -> bool:
        return not (self.class_credits or self.red_light or self.dry_cryo)

    def to_dict(self) -> Dict[str, int]:
        return {credit_type.value: self.amount_for(credit_type) for credit_type in CreditType}


@dataclass(frozen=True)
class CycleDates:
    """One monthly credit window anchored to a billing start date."""

    cycle_start: date
    cycle_end: date
    expires_at: datetime


class CreditGrant(BaseModel):
    """Credits of a single type issued to a member for one cycle."""

    user_id: str
    member_id: str
    credit_type: CreditType
    credits_total: int = Field(gt=0)
    credits_remaining: int = Field(ge=0)
    cycle_start: date
    cycle_end: date
    expires_at: datetime

    model_config = ConfigDict(frozen=True)

    def is_expired(self, now: datetime) -> bool:
        expires_at = self.expires_at
        if expires_at.tzinfo is None and now.tzinfo is not None:
            expires_at = expires_at.replace(tzinfo=now.tzinfo)
        elif expires_at.tzinfo is not None and now.tzinfo is None:
            now = now.replace(tzinfo=expires_at.tzinfo)
        return now >= expires_at

    def to_record(self) -> Dict[str, object]:
        """Row shape for the ``member_credits`` table."""

        return {
            "user_id": self.user_id,
            "member_id": self.member_id,
            "credit_type": self.credit_type.value,
            "credits_total": self.credits_total,
            "credits_remaining": self.credits_remaining,
            "cycle_start": self.cycle_start.isoformat(),
            "cycle_end": self.cycle_end.isoformat(),
            "expires_at": self.expires_at.isoformat(),
        }


class MemberRecord(BaseModel):
    """Subset of a member row needed to issue monthly credits."""

    member_id: str
    user_id: Optional[str] = None
    membership_type: str = ""
    membership_start_date: date

    model_config = ConfigDict(frozen=True)

    @field_validator("membership_type", mode="before")
    @classmethod
    def _coerce_membership_type(cls, value: Optional[str]) -> str:
        return value or ""


class MonthlyCreditRunResult(BaseModel):
    """Summary of one monthly credit issuing run."""

    credits_created: int = 0
    skipped: int = 0
    failed: int = 0
    processed_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    model_config = ConfigDict(frozen=True)
