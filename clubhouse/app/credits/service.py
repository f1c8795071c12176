"""Credit grant generation and the monthly credit issuing job."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Callable, Dict, Iterable, List, Optional, Protocol, Sequence, Set

from .catalog import get_tier_credits
from .cycles import DateLike, calculate_cycle_dates, is_billing_anniversary
from .models import CreditGrant, CreditType, MemberRecord, MonthlyCreditRunResult

logger = logging.getLogger(__name__)


def get_credits_to_create(
    membership_type: Optional[str],
    user_id: str,
    member_id: str,
    start_date: DateLike,
    *,
    anchor_date: Optional[DateLike] = None,
) -> List[CreditGrant]:
    """Build the credit grants a member receives for the cycle starting on ``start_date``.

    Renewals pass the membership start as ``anchor_date`` so the cycle ends the
    day before the next billing anniversary. Credit types the tier allocates
    nothing for are omitted. Grants come back in :class:`CreditType` order.
    """

    allocation = get_tier_credits(membership_type)
    cycle = calculate_cycle_dates(start_date, anchor_date)

    grants: List[CreditGrant] = []
    for credit_type in CreditType:
        amount = allocation.amount_for(credit_type)
        if amount <= 0:
            continue
        grants.append(
            CreditGrant(
                user_id=user_id,
                member_id=member_id,
                credit_type=credit_type,
                credits_total=amount,
                credits_remaining=amount,
                cycle_start=cycle.cycle_start,
                cycle_end=cycle.cycle_end,
                expires_at=cycle.expires_at,
            )
        )
    return grants


def summarize_active_credits(
    grants: Iterable[CreditGrant],
    now: datetime,
) -> Dict[CreditType, CreditGrant]:
    """Pick the unexpired grant expiring soonest for each credit type."""

    active: Dict[CreditType, CreditGrant] = {}
    for grant in grants:
        if grant.is_expired(now):
            continue
        current = active.get(grant.credit_type)
        if current is None or grant.expires_at < current.expires_at:
            active[grant.credit_type] = grant
    return active


class CreditRepository(Protocol):
    """Persistence operations required by the monthly credit job."""

    def list_active_members(self) -> Sequence[MemberRecord]:
        ...

    def get_existing_credit_types(self, user_id: str, cycle_start: date) -> Set[CreditType]:
        ...

    def insert_credits(self, grants: Sequence[CreditGrant]) -> None:
        ...


class CreditRunNotifier(Protocol):
    """Receives per-member outcomes of a monthly credit run."""

    def credits_issued(self, member: MemberRecord, grants: Sequence[CreditGrant]) -> None:
        ...

    def member_skipped(self, member: MemberRecord, reason: str) -> None:
        ...

    def member_failed(self, member: MemberRecord, error: Exception) -> None:
        ...


@dataclass
class MonthlyCreditService:
    """Issues each active member's credits on their monthly billing anniversary."""

    repository: CreditRepository
    notifier: CreditRunNotifier
    clock: Callable[[], datetime] = field(default=lambda: datetime.now(timezone.utc))

    def run(self, today: date) -> MonthlyCreditRunResult:
        members = self.repository.list_active_members()
        logger.info("Monthly credit run for %s: %s active members", today.isoformat(), len(members))

        credits_created = 0
        skipped = 0
        failed = 0

        for member in members:
            if not member.user_id:
                continue
            if not is_billing_anniversary(member.membership_start_date, today):
                continue

            try:
                created = self._issue_for_member(member, member.user_id, today)
            except Exception as exc:
                logger.exception("Failed to issue credits for member %s", member.member_id)
                self.notifier.member_failed(member, exc)
                failed += 1
                continue

            if created:
                credits_created += created
            else:
                skipped += 1

        result = MonthlyCreditRunResult(
            credits_created=credits_created,
            skipped=skipped,
            failed=failed,
            processed_at=self.clock(),
        )
        logger.info(
            "Monthly credit run complete created=%s skipped=%s failed=%s",
            result.credits_created,
            result.skipped,
            result.failed,
        )
        return result

    def _issue_for_member(self, member: MemberRecord, user_id: str, today: date) -> int:
        grants = get_credits_to_create(
            member.membership_type,
            user_id,
            member.member_id,
            today,
            anchor_date=member.membership_start_date,
        )
        if not grants:
            self.notifier.member_skipped(member, "tier has no credits")
            return 0

        existing = self.repository.get_existing_credit_types(user_id, grants[0].cycle_start)
        pending = [grant for grant in grants if grant.credit_type not in existing]
        if not pending:
            self.notifier.member_skipped(member, "credits already issued for this cycle")
            return 0

        self.repository.insert_credits(pending)
        self.notifier.credits_issued(member, pending)
        return len(pending)
