"""Persistence layer for member credits."""
from __future__ import annotations

from contextlib import contextmanager
from datetime import date
from typing import Iterable, List, Optional, Sequence, Set

import psycopg2.extras
from psycopg2.extensions import connection as PgConnection
from psycopg2.extensions import cursor as PgCursor

from ...app_context import get_conn
from .models import CreditGrant, CreditType, MemberRecord


@contextmanager
def managed_connection(conn: Optional[PgConnection] = None):
    """Context manager that manages transaction boundaries for optional connections."""

    if conn is not None:
        yield conn, False
        return

    connection = get_conn()
    try:
        yield connection, True
        connection.commit()
    except Exception:
        connection.rollback()
        raise
    finally:
        connection.close()


@contextmanager
def dict_cursor(conn: Optional[PgConnection] = None) -> Iterable[PgCursor]:
    with managed_connection(conn) as (connection, managed):
        cursor = connection.cursor(cursor_factory=psycopg2.extras.RealDictCursor)
        try:
            yield cursor
            if managed:
                connection.commit()
        except Exception:
            if managed:
                connection.rollback()
            raise
        finally:
            cursor.close()


def _row_to_member(row: dict) -> MemberRecord:
    return MemberRecord(
        member_id=str(row["id"]),
        user_id=str(row["user_id"]) if row.get("user_id") else None,
        membership_type=row.get("membership_type") or "",
        membership_start_date=row["membership_start_date"],
    )


class PostgresCreditRepository:
    """Reads active members and writes ``member_credits`` rows in PostgreSQL."""

    def __init__(self, *, conn: Optional[PgConnection] = None) -> None:
        self._conn = conn

    def list_active_members(self) -> Sequence[MemberRecord]:
        with dict_cursor(self._conn) as cursor:
            cursor.execute(
                """
                SELECT id, user_id, membership_type, membership_start_date
                FROM members
                WHERE status = 'active'
                  AND user_id IS NOT NULL
                  AND membership_start_date IS NOT NULL
                """
            )
            rows = cursor.fetchall()
        return [_row_to_member(row) for row in rows]

    def get_existing_credit_types(self, user_id: str, cycle_start: date) -> Set[CreditType]:
        with dict_cursor(self._conn) as cursor:
            cursor.execute(
                """
                SELECT credit_type
                FROM member_credits
                WHERE user_id = %s AND cycle_start = %s
                """,
                (user_id, cycle_start),
            )
            rows = cursor.fetchall()

        existing: Set[CreditType] = set()
        for row in rows:
            try:
                existing.add(CreditType(row["credit_type"]))
            except ValueError:
                continue
        return existing

    def insert_credits(self, grants: Sequence[CreditGrant]) -> None:
        if not grants:
            return
        params: List[tuple] = [
            (
                grant.user_id,
                grant.member_id,
                grant.credit_type.value,
                grant.credits_total,
                grant.credits_remaining,
                grant.cycle_start,
                grant.cycle_end,
                grant.expires_at,
            )
            for grant in grants
        ]
        with dict_cursor(self._conn) as cursor:
            psycopg2.extras.execute_values(
                cursor,
                """
                INSERT INTO member_credits (
                    user_id,
                    member_id,
                    credit_type,
                    credits_total,
                    credits_remaining,
                    cycle_start,
                    cycle_end,
                    expires_at
                ) VALUES %s
                """,
                params,
            )
