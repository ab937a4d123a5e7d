"""
Service interfaces (ports) for the application layer.

These protocols define the contracts for application services.
Following Dependency Inversion Principle (DIP).
"""

from datetime import datetime
from typing import Protocol


class IDateProvider(Protocol):
    """Protocol for the clock used by use cases (DIP)"""

    def now(self) -> datetime:
        """Current point in time"""
        ...
