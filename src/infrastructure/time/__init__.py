"""Clock implementations."""

from src.infrastructure.time.system_date_provider import SystemDateProvider

__all__ = ["SystemDateProvider"]
