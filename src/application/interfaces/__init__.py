"""
Application layer interfaces (ports).

These protocols define the contracts between the application layer
and the infrastructure layer, following the Dependency Inversion Principle.
"""

from src.application.interfaces.repositories import IMessageRepository
from src.application.interfaces.services import IDateProvider

__all__ = [
    # Repository interfaces
    "IMessageRepository",
    # Service interfaces
    "IDateProvider",
]
