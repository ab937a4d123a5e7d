"""Wall-clock implementation of the date provider port."""

from datetime import UTC, datetime


class SystemDateProvider:
    """Reads the current UTC time. Injected wherever use cases need a clock."""

    def now(self) -> datetime:
        return datetime.now(UTC)
