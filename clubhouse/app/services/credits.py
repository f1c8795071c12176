"""Application wiring for the credit and membership jobs."""
from __future__ import annotations

import logging
from functools import lru_cache
from typing import Sequence

from ..config import ClubConfig, load_club_config
from ..credits import CreditGrant, CreditRunNotifier, MemberRecord, MonthlyCreditService
from ..credits.repository import PostgresCreditRepository
from ..memberships import FreezeExpirationService
from ..memberships.repository import PostgresFreezeRepository


logger = logging.getLogger("credits")


class LoggingCreditRunNotifier(CreditRunNotifier):
    """Notifier that records credit run outcomes to the application logger."""

    def credits_issued(self, member: MemberRecord, grants: Sequence[CreditGrant]) -> None:
        logger.info(
            "Issued %s credit grants member=%s tier=%s cycle_start=%s",
            len(grants),
            member.member_id,
            member.membership_type,
            grants[0].cycle_start.isoformat() if grants else None,
        )

    def member_skipped(self, member: MemberRecord, reason: str) -> None:
        logger.info("Skipped member %s: %s", member.member_id, reason)

    def member_failed(self, member: MemberRecord, error: Exception) -> None:
        logger.error("Credit issuing failed member=%s error=%s", member.member_id, error)


@lru_cache(maxsize=1)
def get_club_config() -> ClubConfig:
    return load_club_config()


@lru_cache(maxsize=1)
def get_monthly_credit_service() -> MonthlyCreditService:
    repository = PostgresCreditRepository()
    notifier = LoggingCreditRunNotifier()
    return MonthlyCreditService(repository=repository, notifier=notifier)


@lru_cache(maxsize=1)
def get_freeze_expiration_service() -> FreezeExpirationService:
    return FreezeExpirationService(repository=PostgresFreezeRepository())


__all__ = [
    "LoggingCreditRunNotifier",
    "get_club_config",
    "get_freeze_expiration_service",
    "get_monthly_credit_service",
]
