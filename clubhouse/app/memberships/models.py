"""Domain models for membership freezes."""
from __future__ import annotations

from datetime import date
from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class FreezeStatus(str, Enum):
    """Lifecycle state of a membership freeze."""

    PENDING = "pending"
    ACTIVE = "active"
    COMPLETED = "completed"
    CANCELED = "canceled"


class FreezeRecord(BaseModel):
    """An active freeze awaiting expiration."""

    freeze_id: str
    member_id: str
    actual_end_date: date

    model_config = ConfigDict(frozen=True)


class FreezeExpirationResult(BaseModel):
    """Summary of one freeze expiration run."""

    processed: int = 0
    total: int = 0
    errors: List[str] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)
