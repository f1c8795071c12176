from __future__ import annotations

import logging
from datetime import date
from typing import Any, List, Optional, Tuple

import pytest

from clubhouse import app_context
from clubhouse.app.credits import CreditType, MemberRecord, MonthlyCreditService, get_credits_to_create
from clubhouse.app.credits.repository import PostgresCreditRepository
from clubhouse.app.memberships.repository import PostgresFreezeRepository
from clubhouse.app.services import credits as credit_services


class FakeCursor:
    def __init__(self, rows: List[dict], rowcount: int = 1) -> None:
        self.rows = rows
        self.rowcount = rowcount
        self.executed: List[Tuple[str, Optional[tuple]]] = []
        self.closed = False

    def execute(self, query: str, params: Optional[tuple] = None) -> None:
        self.executed.append((query, params))

    def fetchall(self) -> List[dict]:
        return self.rows

    def close(self) -> None:
        self.closed = True


class FakeConnection:
    def __init__(self, cursor: FakeCursor) -> None:
        self._cursor = cursor

    def cursor(self, cursor_factory: Any = None) -> FakeCursor:
        return self._cursor


def test_logging_notifier_reports_outcomes(caplog):
    notifier = credit_services.LoggingCreditRunNotifier()
    member = MemberRecord(member_id="m1", user_id="u1", membership_type="Gold", membership_start_date=date(2024, 1, 15))
    grants = get_credits_to_create("Gold", "u1", "m1", date(2024, 3, 15))

    with caplog.at_level(logging.INFO, logger="credits"):
        notifier.credits_issued(member, grants)
        notifier.member_skipped(member, "tier has no credits")
        notifier.member_failed(member, RuntimeError("boom"))

    messages = [record.getMessage() for record in caplog.records]
    assert "Issued 2 credit grants member=m1 tier=Gold cycle_start=2024-03-15" in messages
    assert "Skipped member m1: tier has no credits" in messages
    assert any("boom" in message for message in messages)


def test_service_factory_wires_postgres_repository():
    credit_services.get_monthly_credit_service.cache_clear()
    service = credit_services.get_monthly_credit_service()

    assert isinstance(service, MonthlyCreditService)
    assert isinstance(service.repository, PostgresCreditRepository)
    assert isinstance(service.notifier, credit_services.LoggingCreditRunNotifier)
    credit_services.get_monthly_credit_service.cache_clear()


def test_repository_lists_active_members():
    cursor = FakeCursor(
        [
            {"id": 7, "user_id": "u7", "membership_type": None, "membership_start_date": date(2024, 1, 2)},
            {"id": 8, "user_id": None, "membership_type": "Gold", "membership_start_date": date(2024, 1, 3)},
        ]
    )
    repository = PostgresCreditRepository(conn=FakeConnection(cursor))

    members = repository.list_active_members()

    assert members[0] == MemberRecord(
        member_id="7", user_id="u7", membership_type="", membership_start_date=date(2024, 1, 2)
    )
    assert members[1].user_id is None
    assert cursor.closed


def test_repository_reads_existing_credit_types():
    cursor = FakeCursor([{"credit_type": "class"}, {"credit_type": "dry_cryo"}, {"credit_type": "legacy"}])
    repository = PostgresCreditRepository(conn=FakeConnection(cursor))

    existing = repository.get_existing_credit_types("u1", date(2024, 3, 15))

    assert existing == {CreditType.CLASS, CreditType.DRY_CRYO}
    assert cursor.executed[0][1] == ("u1", date(2024, 3, 15))


class SequencedCursor(FakeCursor):
    def __init__(self, rowcounts: List[int]) -> None:
        super().__init__([])
        self._rowcounts = list(rowcounts)

    def execute(self, query: str, params: Optional[tuple] = None) -> None:
        super().execute(query, params)
        self.rowcount = self._rowcounts.pop(0)


class TransactionalConnection(FakeConnection):
    def __init__(self, cursor: FakeCursor) -> None:
        super().__init__(cursor)
        self.cursors_opened = 0
        self.commits = 0
        self.rollbacks = 0
        self.closed = False

    def cursor(self, cursor_factory: Any = None) -> FakeCursor:
        self.cursors_opened += 1
        return super().cursor(cursor_factory)

    def commit(self) -> None:
        self.commits += 1

    def rollback(self) -> None:
        self.rollbacks += 1

    def close(self) -> None:
        self.closed = True


def test_freeze_repository_raises_when_freeze_missing():
    cursor = SequencedCursor([0])
    repository = PostgresFreezeRepository(conn=FakeConnection(cursor))

    with pytest.raises(LookupError):
        repository.expire_freeze("missing", "m1")
    assert len(cursor.executed) == 1


def test_freeze_expiry_commits_both_updates_together(monkeypatch):
    cursor = SequencedCursor([1, 1])
    connection = TransactionalConnection(cursor)
    monkeypatch.setattr(app_context, "_get_conn", lambda: connection)

    PostgresFreezeRepository().expire_freeze("f1", "m1")

    assert [params for _, params in cursor.executed] == [("completed", "f1"), ("m1",)]
    assert connection.cursors_opened == 1
    assert connection.commits >= 1
    assert connection.rollbacks == 0
    assert connection.closed


def test_freeze_expiry_rolls_back_when_member_update_fails(monkeypatch):
    cursor = SequencedCursor([1, 0])
    connection = TransactionalConnection(cursor)
    monkeypatch.setattr(app_context, "_get_conn", lambda: connection)

    with pytest.raises(LookupError, match="Member m1 not found"):
        PostgresFreezeRepository().expire_freeze("f1", "m1")

    assert len(cursor.executed) == 2
    assert connection.commits == 0
    assert connection.rollbacks >= 1
    assert connection.closed
