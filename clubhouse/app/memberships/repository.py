"""Persistence layer for membership freezes."""
from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from psycopg2.extensions import connection as PgConnection

from ..credits.repository import dict_cursor
from .models import FreezeRecord, FreezeStatus


class PostgresFreezeRepository:
    """Reads and updates ``member_freezes`` and ``members`` rows in PostgreSQL."""

    def __init__(self, *, conn: Optional[PgConnection] = None) -> None:
        self._conn = conn

    def list_expired_freezes(self, today: date) -> Sequence[FreezeRecord]:
        with dict_cursor(self._conn) as cursor:
            cursor.execute(
                """
                SELECT id, member_id, actual_end_date
                FROM member_freezes
                WHERE status = %s AND actual_end_date <= %s
                ORDER BY actual_end_date
                """,
                (FreezeStatus.ACTIVE.value, today),
            )
            rows = cursor.fetchall()
        return [
            FreezeRecord(
                freeze_id=str(row["id"]),
                member_id=str(row["member_id"]),
                actual_end_date=row["actual_end_date"],
            )
            for row in rows
        ]

    def expire_freeze(self, freeze_id: str, member_id: str) -> None:
        """Complete the freeze and reactivate its member in a single transaction."""

        with dict_cursor(self._conn) as cursor:
            cursor.execute(
                """
                UPDATE member_freezes
                SET status = %s, updated_at = NOW()
                WHERE id = %s
                """,
                (FreezeStatus.COMPLETED.value, freeze_id),
            )
            if cursor.rowcount == 0:
                raise LookupError(f"Freeze {freeze_id} not found")
            cursor.execute(
                """
                UPDATE members
                SET status = 'active', updated_at = NOW()
                WHERE id = %s
                """,
                (member_id,),
            )
            if cursor.rowcount == 0:
                raise LookupError(f"Member {member_id} not found")
