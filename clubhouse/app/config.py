"""Runtime configuration for the clubhouse backend."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


@dataclass(frozen=True)
class ClubConfig:
    """Settings read from the environment."""

    timezone: str
    job_secret: Optional[str]
    db_host: str
    db_port: int
    db_name: str
    db_user: str
    db_password: str

    @property
    def tzinfo(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)

    def db_settings(self) -> Dict[str, Any]:
        return {
            "host": self.db_host,
            "port": self.db_port,
            "dbname": self.db_name,
            "user": self.db_user,
            "password": self.db_password,
        }


def _to_int(value: Optional[str], *, default: int) -> int:
    if value is None or value == "":
        return default
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Expected integer value, got {value!r}") from exc


def _to_timezone(value: Optional[str], *, default: str) -> str:
    name = (value or "").strip() or default
    try:
        ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ValueError(f"Unknown timezone {name!r}") from exc
    return name


def load_club_config(env: Optional[Mapping[str, str]] = None) -> ClubConfig:
    """Load :class:`ClubConfig` from environment variables."""

    env_mapping = os.environ if env is None else env

    return ClubConfig(
        timezone=_to_timezone(env_mapping.get("CLUB_TIMEZONE"), default="America/New_York"),
        job_secret=env_mapping.get("CREDIT_JOB_SECRET") or None,
        db_host=env_mapping.get("DB_HOST", "127.0.0.1"),
        db_port=_to_int(env_mapping.get("DB_PORT"), default=5432),
        db_name=env_mapping.get("DB_NAME", "clubhouse"),
        db_user=env_mapping.get("DB_USER", "clubhouse"),
        db_password=env_mapping.get("DB_PASSWORD", ""),
    )
