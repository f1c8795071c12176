"""Ends membership freezes whose end date has passed."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import List, Protocol, Sequence

from .models import FreezeExpirationResult, FreezeRecord

logger = logging.getLogger(__name__)


class FreezeRepository(Protocol):
    """Persistence operations required by the freeze expiration job."""

    def list_expired_freezes(self, today: date) -> Sequence[FreezeRecord]:
        ...

    def expire_freeze(self, freeze_id: str, member_id: str) -> None:
        """Complete the freeze and reactivate the member atomically."""
        ...


@dataclass
class FreezeExpirationService:
    repository: FreezeRepository

    def run(self, today: date) -> FreezeExpirationResult:
        """Complete every active freeze ending on or before ``today`` and reactivate its member."""

        freezes = self.repository.list_expired_freezes(today)
        if not freezes:
            logger.info("No expired freezes to process for %s", today.isoformat())
            return FreezeExpirationResult()

        logger.info("Found %s expired freezes to process", len(freezes))
        processed = 0
        errors: List[str] = []

        for freeze in freezes:
            try:
                self.repository.expire_freeze(freeze.freeze_id, freeze.member_id)
            except Exception as exc:
                logger.exception("Failed to expire freeze %s for member %s", freeze.freeze_id, freeze.member_id)
                errors.append(f"Failed to expire freeze {freeze.freeze_id}: {exc}")
                continue

            logger.info("Freeze %s expired, member %s reactivated", freeze.freeze_id, freeze.member_id)
            processed += 1

        logger.info("Freeze expiration run complete processed=%s errors=%s", processed, len(errors))
        return FreezeExpirationResult(processed=processed, total=len(freezes), errors=errors)
