"""Membership lifecycle jobs."""

from .models import FreezeExpirationResult, FreezeRecord, FreezeStatus
from .service import FreezeExpirationService, FreezeRepository

__all__ = [
    "FreezeExpirationResult",
    "FreezeRecord",
    "FreezeStatus",
    "FreezeExpirationService",
    "FreezeRepository",
]
